"""Lexer."""

from muilpy.lexer.lexer import Lexer, dump_tokens, tokenize
from muilpy.lexer.stream import TokenStream, token_text
from muilpy.lexer.tokens import KEYWORDS, Token, TokenKind, token_kind_name

__all__ = [
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenKind",
    "TokenStream",
    "dump_tokens",
    "token_kind_name",
    "token_text",
    "tokenize",
]
