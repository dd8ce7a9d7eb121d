"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from golanpy.text import Position, TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser and evaluator."""

    code: str
    message: str
    position: Position
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    range: TextRange | None = None

    def __str__(self) -> str:
        return f"{self.position}: {self.message}"
