"""Cursor-based parser core."""

import logging
from dataclasses import dataclass

from muilpy.diagnostics import Diagnostic, format_diagnostic
from muilpy.diagnostics.codes import PARSER_EXPECTED_TOKEN
from muilpy.lexer import Token, TokenKind, TokenStream, token_kind_name
from muilpy.parser.options import ParserOptions

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            token = parser.peek()
            raise RuntimeError(
                f"Parser stopped making progress at {token.kind.name} line {token.line}, column {token.column}"
            )


class Parser:
    """Single-cursor parser over a finished token stream.

    Lookahead is one token. `match` skips any run of delimiters before testing
    the current token, `eat` and `expect` do not (unless asked to).
    """

    def __init__(self, tokens: TokenStream, options: ParserOptions | None = None) -> None:
        self._tokens = tokens
        self._options = options or ParserOptions()
        self._cursor = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def tokens(self) -> TokenStream:
        return self._tokens

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def is_exhausted(self) -> bool:
        return self._cursor >= len(self._tokens)

    @property
    def current(self) -> TokenKind:
        return self.peek().kind

    def peek(self) -> Token:
        if self._cursor < len(self._tokens):
            return self._tokens[self._cursor]
        return self._tokens.eof

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def text(self, token: Token) -> str:
        return self._tokens.text(token)

    def bump(self) -> Token:
        token = self.peek()
        if self._cursor < len(self._tokens):
            self._cursor += 1
        return token

    def skip_delimiters(self) -> None:
        while self.at(TokenKind.DELIMITER):
            self._cursor += 1

    def eat(self, kind: TokenKind) -> Token | None:
        if self.at(kind):
            return self.bump()
        return None

    def match(self, kind: TokenKind) -> Token | None:
        self.skip_delimiters()
        return self.eat(kind)

    def expect(self, kind: TokenKind, *, skip_delimiters: bool = False) -> Token | None:
        token = self.match(kind) if skip_delimiters else self.eat(kind)
        if token is None:
            self.error(self._expected_token(kind))
        return token

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.code == diagnostic.code and previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)
        level = logging.WARNING if diagnostic.severity == "error" else logging.DEBUG
        logger.log(level, format_diagnostic(diagnostic))

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics

    def _expected_token(self, kind: TokenKind) -> Diagnostic:
        token = self.peek()
        return Diagnostic(
            code=PARSER_EXPECTED_TOKEN.code,
            message=(
                f"Expected token {token_kind_name(kind)} but got {token_kind_name(token.kind)} "
                f"at line {token.line}, column {token.column}"
            ),
            range=token.range,
            severity=PARSER_EXPECTED_TOKEN.severity,
            category=PARSER_EXPECTED_TOKEN.category,
            line=token.line,
            column=token.column,
        )
