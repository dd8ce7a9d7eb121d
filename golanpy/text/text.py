"""Character offset ranges into source text."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open offset range [start, end) into the source string.

    Offsets index the Python string directly, so `source[start:end]` is the
    covered text.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"Invalid text range {self.start}..{self.end}")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        return TextRange(offset, offset)

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Smallest range containing both ranges."""
        return TextRange(min(self.start, other.start), max(self.end, other.end))

    def slice(self, source: str) -> str:
        return source[self.start : self.end]

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"
