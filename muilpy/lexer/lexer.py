"""Lexer."""

from typing import Final

from muilpy.diagnostics import Diagnostic, DiagnosticSpec
from muilpy.diagnostics.codes import LEXER_UNEXPECTED_CHARACTER, LEXER_UNTERMINATED_STRING
from muilpy.lexer.stream import TokenStream, token_text
from muilpy.lexer.tokens import KEYWORDS, Token, TokenKind, token_kind_name
from muilpy.text import TextRange, TextSize

_SINGLE_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "=": TokenKind.EQUALS,
    "|": TokenKind.PIPE,
    "?": TokenKind.QUESTION,
    ".": TokenKind.DOT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "&": TokenKind.AMPERSAND,
    "!": TokenKind.BANG,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
}


class Lexer:
    """Single forward pass over a source text.

    All scanning state, including the kind of the most recently emitted token
    used to collapse delimiter runs, belongs to one `lex()` call.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._reset()

    def _reset(self) -> None:
        self._position = 0
        self._line = 1
        self._line_start = 0
        self._token_start = 0
        self._token_line = 1
        self._token_column = 1
        self._last_kind: TokenKind | None = None
        self._tokens: list[Token] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> TokenStream:
        self._reset()
        while not self.is_eof:
            self._begin_token()
            self._lex_token()

        self._begin_token()
        self._push(TokenKind.EOF, TextRange.empty(TextSize(self._position)))
        return TokenStream(source=self._source, tokens=self._tokens, diagnostics=self._diagnostics)

    def _begin_token(self) -> None:
        self._token_start = self._position
        self._token_line = self._line
        self._token_column = self._position - self._line_start + 1

    def _lex_token(self) -> None:
        ch = self._current_char()

        if ch == "\n" or ch == ";":
            self._lex_delimiter()
            return

        if ch == '"':
            self._lex_string()
            return

        if ch == "/" and self._peek_char() in ("/", "*"):
            self._skip_comment()
            return

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._advance(1)
            self._push(kind)
            return

        if _is_digit(ch):
            self._lex_number()
            return

        if _is_alpha(ch):
            self._lex_identifier()
            return

        if ch in " \t\r\v\f":
            self._advance(1)
            return

        self._advance(1)
        self._push_error(LEXER_UNEXPECTED_CHARACTER)

    def _lex_delimiter(self) -> None:
        ch = self._current_char()
        self._advance(1)
        if self._last_kind != TokenKind.DELIMITER:
            self._push(TokenKind.DELIMITER)
        if ch == "\n":
            self._newline()

    def _lex_string(self) -> None:
        # Opening quote
        self._advance(1)
        content_start = self._position

        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                break
            self._advance(1)
            if ch == "\n":
                self._newline()

        if self.is_eof:
            self._push_error(LEXER_UNTERMINATED_STRING)
            return

        self._push(TokenKind.STRING, TextRange.from_offsets(content_start, self._position))
        # Closing quote
        self._advance(1)

    def _lex_number(self) -> None:
        while _is_digit(self._current_char()):
            self._advance(1)

        if self._current_char() == "." and _is_digit(self._peek_char()):
            self._advance(1)
            while _is_digit(self._current_char()):
                self._advance(1)

        self._push(TokenKind.NUMBER)

    def _lex_identifier(self) -> None:
        self._advance(1)
        while True:
            ch = self._current_char()
            if _is_alpha(ch) or _is_digit(ch):
                self._advance(1)
                continue
            break

        text = self._source[self._token_start : self._position]
        self._push(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _skip_comment(self) -> None:
        if self._peek_char() == "/":
            # Line comment; the newline is left for the delimiter rule.
            self._advance(2)
            while not self.is_eof and self._current_char() != "\n":
                self._advance(1)
            return

        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "*" and self._peek_char() == "/":
                self._advance(2)
                return
            self._advance(1)
            if ch == "\n":
                self._newline()

    def _push(self, kind: TokenKind, token_range: TextRange | None = None) -> None:
        if token_range is None:
            token_range = TextRange.from_offsets(self._token_start, self._position)
        self._tokens.append(Token(kind, token_range, self._token_line, self._token_column))
        self._last_kind = kind

    def _push_error(self, spec: DiagnosticSpec) -> None:
        token_range = TextRange.from_offsets(self._token_start, self._position)
        message = f"Error at line {self._token_line}, column {self._token_column}: {spec.message}"
        self._tokens.append(
            Token(TokenKind.ERROR, token_range, self._token_line, self._token_column, message=message)
        )
        self._last_kind = TokenKind.ERROR
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=spec.message,
                range=token_range,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
                line=self._token_line,
                column=self._token_column,
            )
        )

    def _newline(self) -> None:
        self._line += 1
        self._line_start = self._position

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def tokenize(source: str | bytes, length: int | None = None) -> TokenStream:
    """Lex `source` (text or UTF-8 bytes), reading at most `length` characters/bytes."""
    if length is not None:
        if length < 0:
            raise ValueError("length cannot be negative")
        source = source[:length]

    if isinstance(source, (bytes, bytearray, memoryview)):
        source = bytes(source).decode("utf-8", errors="replace")

    return Lexer(source).lex()


def dump_tokens(stream: TokenStream) -> str:
    """Raw token dump, one line per token, delimiter values omitted."""
    lines: list[str] = []
    for token in stream:
        kind = token_kind_name(token.kind)
        if token.kind == TokenKind.DELIMITER:
            lines.append(f"Token: {kind}, Line: {token.line}, Column: {token.column}")
            continue
        text = token_text(stream.source, token)
        lines.append(f"Token: {kind}, Value: '{text}', Line: {token.line}, Column: {token.column}")
    return "".join(f"{line}\n" for line in lines)
