"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits and compatibility flags for the recognizer."""

    mode: ParseMode = ParseMode.STRICT
    allow_missing_rbrace_at_eof: bool = False
    max_nesting_depth: int = 64

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.LENIENT:
            return ParserOptions(mode=mode, allow_missing_rbrace_at_eof=True)

        return ParserOptions(mode=mode, allow_missing_rbrace_at_eof=False)
