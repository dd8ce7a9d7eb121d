"""Helpers to build the AST from parser events."""

from dataclasses import dataclass

from golanpy.ast.builder import ASTBuilder
from golanpy.ast.model import Block
from golanpy.diagnostics import Diagnostic, has_errors
from golanpy.parser.event import Event, process_events
from golanpy.text import LineIndex


@dataclass(frozen=True, slots=True)
class ParsedProgram:
    """Source text, its tree (absent when any error was reported) and diagnostics."""

    source_text: str
    root: Block | None
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def build_tree(text: str, events: list[Event], line_index: LineIndex | None = None) -> Block:
    """Replay `events` into a fresh builder. `BuilderError` propagates to the caller."""
    builder = ASTBuilder(text, line_index=line_index)
    return process_events(builder, events)
