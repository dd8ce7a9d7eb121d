"""Dynamically typed runtime values.

Values are frozen and compared by value. Operator support is expressed with
capability mixins; callers check the capability and the operand kind before
calling an operation, so an operation method may assume both operands share
its kind.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
import math
import operator
from typing import TYPE_CHECKING, ClassVar, Final

from golanpy.ast.dump import quote_string
from golanpy.ast.model import BinaryOperator

if TYPE_CHECKING:
    from golanpy.runtime.engine import Engine

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
_INT64_SPAN: Final[int] = 2**64


class ValueKind(StrEnum):
    UNDEFINED = "Undefined"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String"
    NATIVE_FUNCTION = "NativeFunction"


_ORDERINGS: Final[dict[BinaryOperator, Callable[[object, object], bool]]] = {
    BinaryOperator.GREATER_EQUAL: operator.ge,
    BinaryOperator.LESS_EQUAL: operator.le,
    BinaryOperator.GREATER: operator.gt,
    BinaryOperator.LESS: operator.lt,
}


def wrap_int64(value: int) -> int:
    """Reduce an arbitrary integer to signed 64-bit two's complement."""
    return (value - INT64_MIN) % _INT64_SPAN + INT64_MIN


# ----------------------------------------------------------------------
# Capabilities
# ----------------------------------------------------------------------


class Comparable:
    __slots__ = ()

    def ordered(self, operation: BinaryOperator, other: Value) -> Boolean:
        """Evaluate an ordering operator (`>= <= > <`) against a same-kind value."""
        return Boolean.of(_ORDERINGS[operation](self.value, other.value))  # type: ignore[attr-defined]


class Addable:
    __slots__ = ()

    def add(self, other: Value) -> Value:
        raise NotImplementedError


class Arithmetic(Addable):
    __slots__ = ()

    def subtract(self, other: Value) -> Value:
        raise NotImplementedError

    def multiply(self, other: Value) -> Value:
        raise NotImplementedError

    def divide(self, other: Value) -> Value:
        raise NotImplementedError


class IntegerOps(Arithmetic):
    __slots__ = ()

    def modulo(self, other: Value) -> Value:
        raise NotImplementedError


class Signable:
    __slots__ = ()

    def plus(self) -> Value:
        raise NotImplementedError

    def minus(self) -> Value:
        raise NotImplementedError


# ----------------------------------------------------------------------
# Value kinds
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Undefined:
    kind: ClassVar[ValueKind] = ValueKind.UNDEFINED

    def display(self) -> str:
        return "#<undefined>"

    def literal_text(self) -> str:
        return self.display()

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    @staticmethod
    def of(value: bool) -> Boolean:
        return TRUE if value else FALSE

    def display(self) -> str:
        return "true" if self.value else "false"

    def literal_text(self) -> str:
        return self.display()

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Integer(Comparable, IntegerOps, Signable):
    """Signed 64-bit integer. Arithmetic wraps on overflow."""

    value: int
    kind: ClassVar[ValueKind] = ValueKind.INTEGER

    def __post_init__(self) -> None:
        if type(self.value) is not int or not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Integer value out of 64-bit range: {self.value!r}")

    @classmethod
    def wrap(cls, value: int) -> Integer:
        return cls(wrap_int64(value))

    def add(self, other: Value) -> Integer:
        return Integer.wrap(self.value + other.value)  # type: ignore[union-attr]

    def subtract(self, other: Value) -> Integer:
        return Integer.wrap(self.value - other.value)  # type: ignore[union-attr]

    def multiply(self, other: Value) -> Integer:
        return Integer.wrap(self.value * other.value)  # type: ignore[union-attr]

    def divide(self, other: Value) -> Integer:
        """Quotient truncated toward zero. The divisor must be non-zero."""
        return Integer.wrap(_truncated_quotient(self.value, other.value))  # type: ignore[union-attr]

    def modulo(self, other: Value) -> Integer:
        """Remainder with the sign of the dividend. The divisor must be non-zero."""
        divisor: int = other.value  # type: ignore[union-attr]
        return Integer.wrap(self.value - divisor * _truncated_quotient(self.value, divisor))

    def plus(self) -> Integer:
        return self

    def minus(self) -> Integer:
        return Integer.wrap(-self.value)

    def display(self) -> str:
        return str(self.value)

    def literal_text(self) -> str:
        return self.display()

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Float(Comparable, Arithmetic, Signable):
    """IEEE 754 double."""

    value: float
    kind: ClassVar[ValueKind] = ValueKind.FLOAT

    def add(self, other: Value) -> Float:
        return Float(self.value + other.value)  # type: ignore[union-attr]

    def subtract(self, other: Value) -> Float:
        return Float(self.value - other.value)  # type: ignore[union-attr]

    def multiply(self, other: Value) -> Float:
        return Float(self.value * other.value)  # type: ignore[union-attr]

    def divide(self, other: Value) -> Float:
        divisor: float = other.value  # type: ignore[union-attr]
        if divisor == 0.0:
            if self.value == 0.0 or math.isnan(self.value):
                return Float(math.nan)
            return Float(math.copysign(math.inf, self.value) * math.copysign(1.0, divisor))
        return Float(self.value / divisor)

    def plus(self) -> Float:
        return self

    def minus(self) -> Float:
        return Float(-self.value)

    def display(self) -> str:
        return repr(self.value)

    def literal_text(self) -> str:
        return self.display()

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class String(Addable):
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING

    def add(self, other: Value) -> String:
        return String(self.value + other.value)  # type: ignore[union-attr]

    def display(self) -> str:
        return self.value

    def literal_text(self) -> str:
        return quote_string(self.value)

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class NativeFunction:
    """Host callable exposed to scripts. Receives the calling engine and the evaluated arguments."""

    name: str
    function: Callable[[Engine, list[Value]], Value]
    kind: ClassVar[ValueKind] = ValueKind.NATIVE_FUNCTION

    def call(self, engine: Engine, arguments: list[Value]) -> Value:
        return self.function(engine, arguments)

    def display(self) -> str:
        return f"#<native {self.name}>"

    def literal_text(self) -> str:
        return self.display()

    def __str__(self) -> str:
        return self.display()


type Value = Undefined | Boolean | Integer | Float | String | NativeFunction

UNDEFINED: Final[Undefined] = Undefined()
TRUE: Final[Boolean] = Boolean(True)
FALSE: Final[Boolean] = Boolean(False)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _truncated_quotient(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def is_truthy(value: Value) -> bool:
    """Everything is truthy except `false`."""
    return not (isinstance(value, Boolean) and not value.value)


def is_undefined(value: Value) -> bool:
    return isinstance(value, Undefined)


def same_kind(left: Value, right: Value) -> bool:
    return left.kind == right.kind


def values_equal(left: Value, right: Value) -> bool:
    """Structural equality; values of different kinds are never equal."""
    if not same_kind(left, right):
        return False
    match left:
        case Undefined():
            return True
        case NativeFunction(name=name, function=function):
            return name == right.name and function is right.function  # type: ignore[union-attr]
        case _:
            return left.value == right.value  # type: ignore[union-attr]


def describe(value: Value) -> str:
    """`value(Kind)` text used in error messages."""
    return f"{value.literal_text()}({value.kind})"


__all__ = [
    "FALSE",
    "INT64_MAX",
    "INT64_MIN",
    "TRUE",
    "UNDEFINED",
    "Addable",
    "Arithmetic",
    "Boolean",
    "Comparable",
    "Float",
    "Integer",
    "IntegerOps",
    "NativeFunction",
    "Signable",
    "String",
    "Undefined",
    "Value",
    "ValueKind",
    "describe",
    "is_truthy",
    "is_undefined",
    "same_kind",
    "values_equal",
    "wrap_int64",
]
