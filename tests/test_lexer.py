import textwrap

import pytest

from muilpy.diagnostics.codes import LEXER_UNEXPECTED_CHARACTER, LEXER_UNTERMINATED_STRING
from muilpy.lexer import Lexer, TokenKind, TokenStream, dump_tokens, token_kind_name, tokenize
from tests._debug import debug_dump_tokens


def kinds(stream: TokenStream) -> list[TokenKind]:
    return [token.kind for token in stream]


def texts(stream: TokenStream) -> list[str]:
    return [stream.text(token) for token in stream]


def test_component_declaration_tokens_and_positions():
    src = textwrap.dedent(
        """
        Button {
          label: String
        }
        """
    ).lstrip()

    stream = tokenize(src)
    debug_dump_tokens("test_component_declaration_tokens_and_positions", stream)

    assert kinds(stream) == [
        TokenKind.IDENTIFIER,
        TokenKind.LBRACE,
        TokenKind.DELIMITER,
        TokenKind.IDENTIFIER,
        TokenKind.COLON,
        TokenKind.IDENTIFIER,
        TokenKind.DELIMITER,
        TokenKind.RBRACE,
        TokenKind.DELIMITER,
        TokenKind.EOF,
    ]
    assert [(token.line, token.column) for token in stream] == [
        (1, 1),
        (1, 8),
        (1, 9),
        (2, 3),
        (2, 8),
        (2, 10),
        (2, 16),
        (3, 1),
        (3, 2),
        (4, 1),
    ]
    assert texts(stream)[3] == "label"
    assert stream[5].range.as_tuple() == (18, 24)


def test_stream_always_ends_with_single_eof():
    for src in ("", "a", "a\n", "\"unterminated", "@"):
        stream = tokenize(src)
        assert stream.eof.kind == TokenKind.EOF
        assert kinds(stream).count(TokenKind.EOF) == 1


def test_empty_source_is_only_eof():
    stream = tokenize("")

    assert kinds(stream) == [TokenKind.EOF]
    assert (stream.eof.line, stream.eof.column) == (1, 1)
    assert stream.text(stream.eof) == ""


def test_delimiter_runs_collapse_to_one_token():
    stream = tokenize("a\n\n;\nb;;c")

    assert kinds(stream) == [
        TokenKind.IDENTIFIER,
        TokenKind.DELIMITER,
        TokenKind.IDENTIFIER,
        TokenKind.DELIMITER,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]
    assert (stream[2].line, stream[2].column) == (4, 1)


def test_line_comment_keeps_newline_delimiter():
    stream = tokenize("a // trailing words\nb")

    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.DELIMITER, TokenKind.IDENTIFIER, TokenKind.EOF]
    assert stream[2].line == 2


def test_comment_between_delimiters_does_not_split_the_run():
    stream = tokenize("a\n// only a comment\nb")

    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.DELIMITER, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_block_comment_is_skipped_and_counts_lines():
    stream = tokenize("a /* one\ntwo */ b")

    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOF]
    assert (stream[1].line, stream[1].column) == (2, 8)


def test_unterminated_block_comment_runs_to_eof():
    stream = tokenize("a /* never closed")

    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.EOF]
    assert stream.diagnostics == []


def test_keywords_are_case_sensitive_and_whole_word():
    stream = tokenize("use component Component components")

    assert kinds(stream) == [
        TokenKind.USE,
        TokenKind.COMPONENT,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_identifiers_allow_underscores_and_digits():
    stream = tokenize("_private1 x2y 9lives")

    assert kinds(stream) == [
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.NUMBER,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]
    assert texts(stream)[:4] == ["_private1", "x2y", "9", "lives"]


def test_numbers_with_optional_fraction():
    stream = tokenize("12 3.5 4.")

    assert kinds(stream) == [
        TokenKind.NUMBER,
        TokenKind.NUMBER,
        TokenKind.NUMBER,
        TokenKind.DOT,
        TokenKind.EOF,
    ]
    assert texts(stream)[:3] == ["12", "3.5", "4"]


def test_string_range_covers_content_without_quotes():
    stream = tokenize('title "hello world"')

    token = stream[1]
    assert token.kind == TokenKind.STRING
    assert stream.text(token) == "hello world"
    assert token.range.as_tuple() == (7, 18)
    assert token.column == 7


def test_string_may_span_lines():
    stream = tokenize('"a\nb" c')

    assert kinds(stream) == [TokenKind.STRING, TokenKind.IDENTIFIER, TokenKind.EOF]
    assert stream.text(stream[0]) == "a\nb"
    assert stream[1].line == 2


def test_unterminated_string_becomes_error_token_and_diagnostic():
    stream = tokenize('"abc')

    assert kinds(stream) == [TokenKind.ERROR, TokenKind.EOF]
    error = stream[0]
    assert error.is_error
    assert error.message == "Error at line 1, column 1: Unterminated string."
    assert stream.text(error) == error.message
    assert [d.code for d in stream.diagnostics] == [LEXER_UNTERMINATED_STRING.code]
    assert stream.diagnostics[0].hint is not None


def test_unexpected_character_is_reported_and_lexing_continues():
    stream = tokenize("a @ b")

    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.ERROR, TokenKind.IDENTIFIER, TokenKind.EOF]
    assert stream.has_errors
    assert stream.error_tokens() == [stream[1]]
    assert stream[1].message == "Error at line 1, column 3: Unexpected character."
    diagnostic = stream.diagnostics[0]
    assert diagnostic.code == LEXER_UNEXPECTED_CHARACTER.code
    assert (diagnostic.line, diagnostic.column) == (1, 3)
    assert diagnostic.range.as_tuple() == (2, 3)


def test_punctuation_and_reserved_operators():
    stream = tokenize("( ) { } [ ] , : = | ? . + - * / % & ! < >")

    assert kinds(stream)[:-1] == [
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.COMMA,
        TokenKind.COLON,
        TokenKind.EQUALS,
        TokenKind.PIPE,
        TokenKind.QUESTION,
        TokenKind.DOT,
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.PERCENT,
        TokenKind.AMPERSAND,
        TokenKind.BANG,
        TokenKind.LT,
        TokenKind.GT,
    ]


def test_bytes_input_respects_length():
    stream = tokenize(b"ab cd", 2)

    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.EOF]
    assert texts(stream)[0] == "ab"


def test_negative_length_is_rejected():
    with pytest.raises(ValueError):
        tokenize(b"abc", -1)


def test_invalid_utf8_is_replaced_and_reported():
    stream = tokenize(b"a \xff b")

    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.ERROR, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_lexer_can_be_rerun_with_fresh_state():
    lexer = Lexer("a\nb")

    first = lexer.lex()
    second = lexer.lex()

    assert kinds(first) == kinds(second)
    assert [(t.line, t.column) for t in first] == [(t.line, t.column) for t in second]


def test_delimiter_collapse_does_not_leak_between_calls():
    tokenize("a\n")
    stream = tokenize("\nb")

    assert stream[0].kind == TokenKind.DELIMITER

    lexer = Lexer("\na")
    for _ in range(2):
        assert kinds(lexer.lex()) == [TokenKind.DELIMITER, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_eof_token_has_empty_range_at_end_of_source():
    stream = tokenize("ab ")

    assert stream.eof.range.as_tuple() == (3, 3)
    assert (stream.eof.line, stream.eof.column) == (1, 4)


def test_only_ascii_whitespace_is_skipped():
    stream = tokenize("a\t\v\f\r b")
    assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOF]

    for ch in ("\x1c", "\x85", "\u00a0", "\u2003"):
        stream = tokenize(f"a{ch}b")
        assert kinds(stream) == [TokenKind.IDENTIFIER, TokenKind.ERROR, TokenKind.IDENTIFIER, TokenKind.EOF]
        assert stream.diagnostics[0].code == LEXER_UNEXPECTED_CHARACTER.code


def test_token_kind_names():
    assert token_kind_name(TokenKind.IDENTIFIER) == "Identifier"
    assert token_kind_name(TokenKind.LPAREN) == "Left Parenthesis"
    assert token_kind_name(TokenKind.DELIMITER) == "Delimiter"
    assert token_kind_name(TokenKind.EOF) == "EOF"
    assert TokenKind.COMPONENT.is_keyword
    assert not TokenKind.IDENTIFIER.is_keyword


def test_dump_tokens_format():
    stream = tokenize("a: B\n")

    assert dump_tokens(stream) == (
        "Token: Identifier, Value: 'a', Line: 1, Column: 1\n"
        "Token: Colon, Value: ':', Line: 1, Column: 2\n"
        "Token: Identifier, Value: 'B', Line: 1, Column: 4\n"
        "Token: Delimiter, Line: 1, Column: 5\n"
        "Token: EOF, Value: '', Line: 2, Column: 1\n"
    )
