"""Engine configuration."""

from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True, slots=True)
class EngineOptions:
    """Limits and host hooks for one Engine.

    `output` is where `print` writes; `None` means the current `sys.stdout`.
    """

    max_depth: int = 256
    output: TextIO | None = None
