"""Source text coordinates."""

from golanpy.text.position import LineIndex, Position
from golanpy.text.text import TextRange

__all__ = [
    "LineIndex",
    "Position",
    "TextRange",
]
