"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from muilpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser.

    `line` and `column` are 1-based and describe where `range` starts.
    """

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    line: int = 0
    column: int = 0
