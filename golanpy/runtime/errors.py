"""Evaluation errors raised by the engine.

Each error names the offending value and carries the `Position` of the node
responsible, so hosts can report it the same way as a parse diagnostic.
"""

from golanpy.diagnostics import Diagnostic, DiagnosticSpec
from golanpy.diagnostics.codes import (
    EVAL_DIVIDE_BY_ZERO,
    EVAL_NOT_CALLABLE,
    EVAL_OPERAND_TYPE,
    EVAL_RECURSION_LIMIT,
    EVAL_UNDEFINED_VARIABLE,
)
from golanpy.runtime.values import Value, describe
from golanpy.text import Position


class EvaluationError(Exception):
    spec: DiagnosticSpec = EVAL_OPERAND_TYPE

    def __init__(self, message: str, position: Position) -> None:
        super().__init__(f"{position}: {message}")
        self.message = message
        self.position = position

    @property
    def code(self) -> str:
        return self.spec.code

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=self.spec.code,
            message=self.message,
            position=self.position,
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )


class UndefinedVariableError(EvaluationError):
    spec = EVAL_UNDEFINED_VARIABLE

    def __init__(self, name: str, position: Position) -> None:
        super().__init__(f"undefined variable - {name}", position)
        self.name = name


class OperandTypeError(EvaluationError):
    """An operand lacks the capability an operator needs, or the kinds disagree."""

    spec = EVAL_OPERAND_TYPE

    def __init__(self, message: str, value: Value, position: Position) -> None:
        super().__init__(f"{message} - {describe(value)}", position)
        self.value = value


class NotCallableError(EvaluationError):
    spec = EVAL_NOT_CALLABLE

    def __init__(self, value: Value, position: Position) -> None:
        super().__init__(f"not a function - {describe(value)}", position)
        self.value = value


class DivideByZeroError(EvaluationError):
    spec = EVAL_DIVIDE_BY_ZERO

    def __init__(self, position: Position) -> None:
        super().__init__("divided by zero", position)


class RecursionLimitError(EvaluationError):
    spec = EVAL_RECURSION_LIMIT

    def __init__(self, limit: int, position: Position) -> None:
        super().__init__(f"evaluation nested deeper than {limit} levels", position)
        self.limit = limit


__all__ = [
    "DivideByZeroError",
    "EvaluationError",
    "NotCallableError",
    "OperandTypeError",
    "RecursionLimitError",
    "UndefinedVariableError",
]
