"""Value model and tree-walking evaluator."""

from golanpy.runtime.builtins import default_builtins, native_print
from golanpy.runtime.engine import Engine, ExecutionResult, NativeCallable
from golanpy.runtime.errors import (
    DivideByZeroError,
    EvaluationError,
    NotCallableError,
    OperandTypeError,
    RecursionLimitError,
    UndefinedVariableError,
)
from golanpy.runtime.options import EngineOptions
from golanpy.runtime.values import (
    FALSE,
    TRUE,
    UNDEFINED,
    Addable,
    Arithmetic,
    Boolean,
    Comparable,
    Float,
    Integer,
    IntegerOps,
    NativeFunction,
    Signable,
    String,
    Undefined,
    Value,
    ValueKind,
    describe,
    is_truthy,
    is_undefined,
    values_equal,
)

__all__ = [
    "FALSE",
    "TRUE",
    "UNDEFINED",
    "Addable",
    "Arithmetic",
    "Boolean",
    "Comparable",
    "DivideByZeroError",
    "Engine",
    "EngineOptions",
    "EvaluationError",
    "ExecutionResult",
    "Float",
    "Integer",
    "IntegerOps",
    "NativeCallable",
    "NativeFunction",
    "NotCallableError",
    "OperandTypeError",
    "RecursionLimitError",
    "Signable",
    "String",
    "Undefined",
    "UndefinedVariableError",
    "Value",
    "ValueKind",
    "default_builtins",
    "describe",
    "is_truthy",
    "is_undefined",
    "native_print",
    "values_equal",
]
