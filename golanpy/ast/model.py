"""AST data model.

Every node is a frozen dataclass carrying its source `Position`. Children are
owned exclusively by their parent, so a tree never shares or cycles.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from golanpy.text import Position


class BinaryOperator(StrEnum):
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="
    GREATER = ">"
    LESS = "<"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"


class UnaryOperator(StrEnum):
    PLUS = "+"
    MINUS = "-"
    NOT = "!"


@dataclass(frozen=True, slots=True)
class Block:
    """Ordered statement sequence."""

    position: Position
    statements: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class While:
    position: Position
    condition: Node
    body: Block


@dataclass(frozen=True, slots=True)
class If:
    """Conditional; `alt` is another If for `elsif`, a Block for `else`, or None."""

    position: Position
    test: Node
    then: Block
    alt: If | Block | None


@dataclass(frozen=True, slots=True)
class Assign:
    position: Position
    destination: Node
    expression: Node


@dataclass(frozen=True, slots=True)
class BinaryOperation:
    position: Position
    left: Node
    right: Node

    operator: ClassVar[BinaryOperator]


@dataclass(frozen=True, slots=True)
class Equal(BinaryOperation):
    operator = BinaryOperator.EQUAL


@dataclass(frozen=True, slots=True)
class NotEqual(BinaryOperation):
    operator = BinaryOperator.NOT_EQUAL


@dataclass(frozen=True, slots=True)
class GreaterEqual(BinaryOperation):
    operator = BinaryOperator.GREATER_EQUAL


@dataclass(frozen=True, slots=True)
class LessEqual(BinaryOperation):
    operator = BinaryOperator.LESS_EQUAL


@dataclass(frozen=True, slots=True)
class Greater(BinaryOperation):
    operator = BinaryOperator.GREATER


@dataclass(frozen=True, slots=True)
class Less(BinaryOperation):
    operator = BinaryOperator.LESS


@dataclass(frozen=True, slots=True)
class Add(BinaryOperation):
    operator = BinaryOperator.ADD


@dataclass(frozen=True, slots=True)
class Subtract(BinaryOperation):
    operator = BinaryOperator.SUBTRACT


@dataclass(frozen=True, slots=True)
class Multiply(BinaryOperation):
    operator = BinaryOperator.MULTIPLY


@dataclass(frozen=True, slots=True)
class Divide(BinaryOperation):
    operator = BinaryOperator.DIVIDE


@dataclass(frozen=True, slots=True)
class Modulo(BinaryOperation):
    operator = BinaryOperator.MODULO


@dataclass(frozen=True, slots=True)
class UnaryOperation:
    position: Position
    operand: Node

    operator: ClassVar[UnaryOperator]


@dataclass(frozen=True, slots=True)
class Plus(UnaryOperation):
    operator = UnaryOperator.PLUS


@dataclass(frozen=True, slots=True)
class Minus(UnaryOperation):
    operator = UnaryOperator.MINUS


@dataclass(frozen=True, slots=True)
class Not(UnaryOperation):
    operator = UnaryOperator.NOT


@dataclass(frozen=True, slots=True)
class IntLiteral:
    position: Position
    value: int


@dataclass(frozen=True, slots=True)
class FloatLiteral:
    position: Position
    value: float


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    position: Position
    value: bool


@dataclass(frozen=True, slots=True)
class StringLiteral:
    position: Position
    value: str


@dataclass(frozen=True, slots=True)
class Identifier:
    position: Position
    name: str


@dataclass(frozen=True, slots=True)
class Apply:
    position: Position
    callee: Node
    arguments: tuple[Node, ...]


BINARY_OPERATIONS: dict[BinaryOperator, type[BinaryOperation]] = {
    cls.operator: cls
    for cls in (
        Equal,
        NotEqual,
        GreaterEqual,
        LessEqual,
        Greater,
        Less,
        Add,
        Subtract,
        Multiply,
        Divide,
        Modulo,
    )
}

UNARY_OPERATIONS: dict[UnaryOperator, type[UnaryOperation]] = {
    cls.operator: cls for cls in (Plus, Minus, Not)
}


type Literal = IntLiteral | FloatLiteral | BooleanLiteral | StringLiteral
type Node = (
    Block
    | While
    | If
    | Assign
    | BinaryOperation
    | UnaryOperation
    | Literal
    | Identifier
    | Apply
)


def children(node: Node) -> tuple[Node, ...]:
    """Direct children of `node` in source order."""
    match node:
        case Block(statements=statements):
            return statements
        case While(condition=condition, body=body):
            return (condition, body)
        case If(test=test, then=then, alt=alt):
            return (test, then) if alt is None else (test, then, alt)
        case Assign(destination=destination, expression=expression):
            return (destination, expression)
        case BinaryOperation(left=left, right=right):
            return (left, right)
        case UnaryOperation(operand=operand):
            return (operand,)
        case Apply(callee=callee, arguments=arguments):
            return (callee, *arguments)
        case _:
            return ()


def walk(node: Node) -> Iterator[Node]:
    """Yield `node` and all of its descendants, depth first in source order."""
    pending = [node]
    while pending:
        current = pending.pop()
        yield current
        pending.extend(reversed(children(current)))


__all__ = [
    "BINARY_OPERATIONS",
    "UNARY_OPERATIONS",
    "Add",
    "Apply",
    "Assign",
    "BinaryOperation",
    "BinaryOperator",
    "Block",
    "BooleanLiteral",
    "Divide",
    "Equal",
    "FloatLiteral",
    "Greater",
    "GreaterEqual",
    "Identifier",
    "If",
    "IntLiteral",
    "Less",
    "LessEqual",
    "Literal",
    "Minus",
    "Modulo",
    "Multiply",
    "Node",
    "Not",
    "NotEqual",
    "Plus",
    "StringLiteral",
    "Subtract",
    "UnaryOperation",
    "UnaryOperator",
    "While",
    "children",
    "walk",
]
