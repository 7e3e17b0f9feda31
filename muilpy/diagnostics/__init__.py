"""Diagnostics."""

from muilpy.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
    PARSER_RECOVERED,
    PARSER_STOPPED,
    DiagnosticSpec,
)
from muilpy.diagnostics.diagnostic import Diagnostic, Severity
from muilpy.diagnostics.report import collect_diagnostics, format_diagnostic, has_errors

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_RECOVERED",
    "PARSER_STOPPED",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostic",
    "has_errors",
]
