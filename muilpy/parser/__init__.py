"""Parser infrastructure (cursor parser + grammar + entrypoints)."""

from muilpy.parser.grammar import (
    parse_array_type,
    parse_component,
    parse_program,
    parse_property,
    parse_simple_or_composite_type,
    parse_type,
)
from muilpy.parser.muil import parse, parse_from_bytes, parse_result, parse_text
from muilpy.parser.options import ParseMode, ParserOptions
from muilpy.parser.parsed_program import ParsedProgram
from muilpy.parser.parser import Parser, ParserProgress

__all__ = [
    "ParseMode",
    "ParsedProgram",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "parse",
    "parse_array_type",
    "parse_component",
    "parse_from_bytes",
    "parse_program",
    "parse_property",
    "parse_result",
    "parse_simple_or_composite_type",
    "parse_text",
    "parse_type",
]
