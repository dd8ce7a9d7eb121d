"""Line/column spans derived from source offsets."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
import re
from typing import Final

# Same line breaks the lexer emits as NEWLINE tokens.
_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Source span with zero-based lines and columns.

    `last_line`/`last_column` point at the last character of the span (inclusive).
    """

    first_line: int
    first_column: int
    last_line: int
    last_column: int

    @staticmethod
    def cover(start: Position, end: Position) -> Position:
        """Span from the first character of `start` to the last character of `end`."""
        return Position(start.first_line, start.first_column, end.last_line, end.last_column)

    @property
    def first(self) -> tuple[int, int]:
        return (self.first_line, self.first_column)

    @property
    def last(self) -> tuple[int, int]:
        return (self.last_line, self.last_column)

    def contains(self, other: Position) -> bool:
        return self.first <= other.first and other.last <= self.last

    def __str__(self) -> str:
        return f"({self.first_line}:{self.first_column},{self.last_line}:{self.last_column})"


class LineIndex:
    """Translate offsets into (line, column) by counting preceding line breaks."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_starts = [0] + [found.end() for found in _LINE_BREAK_RE.finditer(text)]

    @property
    def text(self) -> str:
        return self._text

    def line_col(self, offset: int) -> tuple[int, int]:
        if offset < 0 or offset > len(self._text):
            raise ValueError(f"Offset {offset} is outside the source text")
        line = bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def span(self, begin: int, end: int) -> Position:
        """Position of the half-open offset range [begin, end)."""
        first_line, first_column = self.line_col(begin)
        last_line, last_column = self.line_col(max(begin, end - 1))
        return Position(first_line, first_column, last_line, last_column)

    def point(self, offset: int) -> Position:
        line, column = self.line_col(offset)
        return Position(line, column, line, column)
