"""Token stream produced by one lexing call."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from muilpy.diagnostics import Diagnostic
from muilpy.lexer.tokens import Token, TokenKind
from muilpy.text import slice_text_range


@dataclass(frozen=True, slots=True)
class TokenStream:
    """Ordered tokens of one source, always terminated by a single EOF token.

    Lexical errors appear twice: as ERROR tokens in `tokens` and as structured
    entries in `diagnostics`.
    """

    source: str
    tokens: list[Token]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    @property
    def eof(self) -> Token:
        return self.tokens[-1]

    @property
    def has_errors(self) -> bool:
        return any(token.kind == TokenKind.ERROR for token in self.tokens)

    def error_tokens(self) -> list[Token]:
        return [token for token in self.tokens if token.kind == TokenKind.ERROR]

    def text(self, token: Token) -> str:
        return token_text(self.source, token)


def token_text(source: str, token: Token) -> str:
    """Get the text of a token: its source span, or the message of an ERROR token."""
    if token.kind == TokenKind.EOF:
        return ""
    if token.kind == TokenKind.ERROR and token.message is not None:
        return token.message
    return slice_text_range(source, token.range)
