"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from golanpy.diagnostics import Diagnostic, InternalError, has_errors, sort_diagnostics
from golanpy.parser.parse import ParsedProgram

if TYPE_CHECKING:
    from golanpy.runtime import EvaluationError, Value


@dataclass(frozen=True, slots=True)
class RunResult:
    """Result of parsing and evaluating one source text.

    `value` is None when evaluation never started (parse errors or an internal
    error); `error` holds the evaluation error that aborted the run, if any.
    """

    parse: ParsedProgram
    value: Value | None = None
    error: EvaluationError | None = None
    internal_error: InternalError | None = None

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Parse diagnostics followed by the evaluation error, if any."""
        diagnostics = list(self.parse.diagnostics)
        if self.error is not None:
            diagnostics.append(self.error.to_diagnostic())
        return sort_diagnostics(diagnostics)

    @property
    def has_errors(self) -> bool:
        return self.internal_error is not None or has_errors(self.diagnostics)
