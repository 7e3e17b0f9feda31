"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from muilpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1
    ERROR = 2
    DELIMITER = 3  # newline or ;, runs collapse to one token

    # -------------------------
    # Keywords
    # -------------------------
    USE = 10
    COMPONENT = 11

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21
    NUMBER = 22

    # -------------------------
    # Punctuation
    # -------------------------
    LPAREN = 30  # (
    RPAREN = 31  # )
    LBRACE = 32  # {
    RBRACE = 33  # }
    LBRACKET = 34  # [
    RBRACKET = 35  # ]
    COMMA = 36  # ,
    COLON = 37  # :
    EQUALS = 38  # =
    PIPE = 39  # |
    QUESTION = 40  # ?
    DOT = 41  # .

    # -------------------------
    # Operators (reserved, never consumed by the grammar)
    # -------------------------
    PLUS = 50  # +
    MINUS = 51  # -
    STAR = 52  # *
    SLASH = 53  # /
    PERCENT = 54  # %
    AMPERSAND = 55  # &
    BANG = 56  # !
    LT = 57  # <
    GT = 58  # >
    LE = 59  # <=
    GE = 60  # >=
    EQ = 61  # ==
    NEQ = 62  # !=
    AND = 63  # &&
    OR = 64  # ||
    ARROW = 65  # ->

    @property
    def is_keyword(self) -> bool:
        return self in (TokenKind.USE, TokenKind.COMPONENT)


_TOKEN_KIND_NAMES: Final[dict[TokenKind, str]] = {
    TokenKind.EOF: "EOF",
    TokenKind.ERROR: "Error",
    TokenKind.DELIMITER: "Delimiter",
    TokenKind.USE: "Use",
    TokenKind.COMPONENT: "Component",
    TokenKind.IDENTIFIER: "Identifier",
    TokenKind.STRING: "String",
    TokenKind.NUMBER: "Number",
    TokenKind.LPAREN: "Left Parenthesis",
    TokenKind.RPAREN: "Right Parenthesis",
    TokenKind.LBRACE: "Left Brace",
    TokenKind.RBRACE: "Right Brace",
    TokenKind.LBRACKET: "Left Bracket",
    TokenKind.RBRACKET: "Right Bracket",
    TokenKind.COMMA: "Comma",
    TokenKind.COLON: "Colon",
    TokenKind.EQUALS: "Equals",
    TokenKind.PIPE: "Pipe",
    TokenKind.QUESTION: "Question",
    TokenKind.DOT: "Dot",
    TokenKind.PLUS: "Plus",
    TokenKind.MINUS: "Minus",
    TokenKind.STAR: "Star",
    TokenKind.SLASH: "Slash",
    TokenKind.PERCENT: "Percent",
    TokenKind.AMPERSAND: "Ampersand",
    TokenKind.BANG: "Bang",
    TokenKind.LT: "Less Than",
    TokenKind.GT: "Greater Than",
    TokenKind.LE: "Less Equal",
    TokenKind.GE: "Greater Equal",
    TokenKind.EQ: "Equal Equal",
    TokenKind.NEQ: "Not Equal",
    TokenKind.AND: "And",
    TokenKind.OR: "Or",
    TokenKind.ARROW: "Arrow",
}


def token_kind_name(kind: TokenKind) -> str:
    """Fixed human-readable name of a token kind, used in diagnostics and dumps."""
    return _TOKEN_KIND_NAMES.get(kind, "Unknown")


KEYWORDS: Final[dict[str, TokenKind]] = {
    "use": TokenKind.USE,
    "component": TokenKind.COMPONENT,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `range` points into the lexed source. ERROR tokens carry their own
    `message` instead of source text.
    """

    kind: TokenKind
    range: TextRange
    line: int
    column: int
    message: str | None = None

    @property
    def is_error(self) -> bool:
        return self.kind == TokenKind.ERROR
