"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string.",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_RECOVERED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_RECOVERED",
    message="Skipped token while recovering",
    hint="The top-level parser skips one token after a malformed component and retries.",
    severity="warning",
    category="parser",
)

PARSER_STOPPED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_STOPPED",
    message="Stopped parsing at malformed component",
    hint="Use the permissive parse mode to keep parsing after errors.",
    severity="error",
    category="parser",
)
