"""Parse output carrier."""

from dataclasses import dataclass

from muilpy.ast import AstProgram
from muilpy.diagnostics import Diagnostic, has_errors
from muilpy.diagnostics.codes import PARSER_RECOVERED


@dataclass(frozen=True, slots=True)
class ParsedProgram:
    """Program tree plus every lexer and parser diagnostic of one parse."""

    program: AstProgram
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def recovered_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.code == PARSER_RECOVERED.code)
