"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from muilpy.lexer import TokenStream, dump_tokens
from muilpy.parser.options import ParserOptions
from muilpy.parser.parsed_program import ParsedProgram

if TYPE_CHECKING:
    from muilpy.ast import AstProgram
    from muilpy.diagnostics import Diagnostic


@dataclass(slots=True)
class MuilParseResult:
    """Muil parse result with cached debug renderings."""

    source_text: str
    tokens: TokenStream
    parsed: ParsedProgram
    options: ParserOptions
    _dump: str | None = field(default=None, init=False, repr=False)
    _token_dump: str | None = field(default=None, init=False, repr=False)
    _json_dump: str | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return self.parsed.has_errors

    @property
    def recovered_count(self) -> int:
        return self.parsed.recovered_count

    def program(self) -> AstProgram:
        return self.parsed.program

    def dump(self) -> str:
        if self._dump is None:
            from muilpy.ast import print_program

            self._dump = print_program(self.parsed.program)
        return self._dump

    def token_dump(self) -> str:
        if self._token_dump is None:
            self._token_dump = dump_tokens(self.tokens)
        return self._token_dump

    def json_dump(self) -> str:
        if self._json_dump is None:
            from muilpy.ast import dump_json

            self._json_dump = dump_json(self.parsed.program)
        return self._json_dump
