"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar compatibility and recovery behavior."""

    mode: ParseMode = ParseMode.PERMISSIVE
    recover_on_error: bool = True
    allow_component_keyword: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(
                mode=mode,
                recover_on_error=False,
                allow_component_keyword=True,
            )

        return ParserOptions(
            mode=mode,
            recover_on_error=True,
            allow_component_keyword=True,
        )
