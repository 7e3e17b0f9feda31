"""High-level parse entrypoints for muil source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from muilpy.diagnostics import collect_diagnostics
from muilpy.lexer import TokenStream, tokenize
from muilpy.parser.grammar import parse_program
from muilpy.parser.options import ParseMode, ParserOptions
from muilpy.parser.parsed_program import ParsedProgram
from muilpy.parser.parser import Parser

if TYPE_CHECKING:
    from muilpy.pipeline import MuilParseResult


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    tokens: TokenStream,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedProgram:
    resolved_options = _resolve_options(options=options, mode=mode)

    parser = Parser(tokens, options=resolved_options)
    program = parse_program(parser)
    diagnostics = collect_diagnostics(tokens.diagnostics, parser.finish())

    return ParsedProgram(program=program, diagnostics=diagnostics)


def parse_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedProgram:
    return parse(tokenize(text), options=options, mode=mode)


def parse_from_bytes(
    data: bytes,
    length: int | None = None,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedProgram:
    """Lex and parse a raw buffer; only the first `length` bytes are read."""
    return parse(tokenize(data, length), options=options, mode=mode)


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> MuilParseResult:
    from muilpy.pipeline import MuilParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    tokens = tokenize(text)
    parsed = parse(tokens, options=resolved_options)
    return MuilParseResult(
        source_text=text,
        tokens=tokens,
        parsed=parsed,
        options=resolved_options,
    )
