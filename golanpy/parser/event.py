"""Construction events emitted by the grammar and replayed into a sink."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from golanpy.ast.model import BinaryOperator, Block, UnaryOperator
from golanpy.diagnostics import InternalError


class LeafKind(StrEnum):
    INT = "int"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    IDENTIFIER = "identifier"


@dataclass(frozen=True, slots=True)
class LeafEvent:
    kind: LeafKind
    begin: int
    end: int
    lexeme: str


@dataclass(frozen=True, slots=True)
class OpenBlockEvent:
    offset: int


@dataclass(frozen=True, slots=True)
class CloseBlockEvent:
    end: int


@dataclass(frozen=True, slots=True)
class CloseBodyEvent:
    end: int


@dataclass(frozen=True, slots=True)
class ExpressionStatementEvent:
    pass


@dataclass(frozen=True, slots=True)
class AssignEvent:
    pass


@dataclass(frozen=True, slots=True)
class BinaryOperationEvent:
    operator: BinaryOperator


@dataclass(frozen=True, slots=True)
class OpenUnaryEvent:
    operator: UnaryOperator
    offset: int


@dataclass(frozen=True, slots=True)
class CloseUnaryEvent:
    pass


@dataclass(frozen=True, slots=True)
class OpenWhileEvent:
    offset: int


@dataclass(frozen=True, slots=True)
class CloseWhileEvent:
    pass


@dataclass(frozen=True, slots=True)
class IfPartEvent:
    pass


@dataclass(frozen=True, slots=True)
class ElsifPartEvent:
    pass


@dataclass(frozen=True, slots=True)
class ElsePartEvent:
    pass


@dataclass(frozen=True, slots=True)
class CloseIfEvent:
    pass


@dataclass(frozen=True, slots=True)
class OpenCallEvent:
    pass


@dataclass(frozen=True, slots=True)
class CloseCallEvent:
    end: int


Event = (
    LeafEvent
    | OpenBlockEvent
    | CloseBlockEvent
    | CloseBodyEvent
    | ExpressionStatementEvent
    | AssignEvent
    | BinaryOperationEvent
    | OpenUnaryEvent
    | CloseUnaryEvent
    | OpenWhileEvent
    | CloseWhileEvent
    | IfPartEvent
    | ElsifPartEvent
    | ElsePartEvent
    | CloseIfEvent
    | OpenCallEvent
    | CloseCallEvent
)


class ConstructionSink(Protocol):
    def open_block(self, offset: int) -> None: ...

    def close_block(self, end: int) -> None: ...

    def close_body(self, end: int) -> None: ...

    def expression_statement(self) -> None: ...

    def assign(self) -> None: ...

    def binary_operation(self, operator: BinaryOperator) -> None: ...

    def open_unary(self, operator: UnaryOperator, offset: int) -> None: ...

    def close_unary(self) -> None: ...

    def open_while(self, offset: int) -> None: ...

    def close_while(self) -> None: ...

    def if_part(self) -> None: ...

    def elsif_part(self) -> None: ...

    def else_part(self) -> None: ...

    def close_if(self) -> None: ...

    def open_call(self) -> None: ...

    def close_call(self, end: int) -> None: ...

    def int_literal(self, begin: int, end: int, lexeme: str) -> None: ...

    def float_literal(self, begin: int, end: int, lexeme: str) -> None: ...

    def boolean_literal(self, begin: int, end: int, lexeme: str) -> None: ...

    def string_literal(self, begin: int, end: int, lexeme: str) -> None: ...

    def identifier(self, begin: int, end: int, lexeme: str) -> None: ...

    def finish(self) -> Block: ...


def process_events(sink: ConstructionSink, events: Iterable[Event]) -> Block:
    """Replay `events` in order into `sink` and return the finished root."""
    for event in events:
        match event:
            case LeafEvent(kind=LeafKind.INT, begin=begin, end=end, lexeme=lexeme):
                sink.int_literal(begin, end, lexeme)
            case LeafEvent(kind=LeafKind.FLOAT, begin=begin, end=end, lexeme=lexeme):
                sink.float_literal(begin, end, lexeme)
            case LeafEvent(kind=LeafKind.BOOLEAN, begin=begin, end=end, lexeme=lexeme):
                sink.boolean_literal(begin, end, lexeme)
            case LeafEvent(kind=LeafKind.STRING, begin=begin, end=end, lexeme=lexeme):
                sink.string_literal(begin, end, lexeme)
            case LeafEvent(kind=LeafKind.IDENTIFIER, begin=begin, end=end, lexeme=lexeme):
                sink.identifier(begin, end, lexeme)
            case OpenBlockEvent(offset=offset):
                sink.open_block(offset)
            case CloseBlockEvent(end=end):
                sink.close_block(end)
            case CloseBodyEvent(end=end):
                sink.close_body(end)
            case ExpressionStatementEvent():
                sink.expression_statement()
            case AssignEvent():
                sink.assign()
            case BinaryOperationEvent(operator=operator):
                sink.binary_operation(operator)
            case OpenUnaryEvent(operator=operator, offset=offset):
                sink.open_unary(operator, offset)
            case CloseUnaryEvent():
                sink.close_unary()
            case OpenWhileEvent(offset=offset):
                sink.open_while(offset)
            case CloseWhileEvent():
                sink.close_while()
            case IfPartEvent():
                sink.if_part()
            case ElsifPartEvent():
                sink.elsif_part()
            case ElsePartEvent():
                sink.else_part()
            case CloseIfEvent():
                sink.close_if()
            case OpenCallEvent():
                sink.open_call()
            case CloseCallEvent(end=end):
                sink.close_call(end)
            case _:
                raise InternalError(f"Unknown construction event {event!r}")
    return sink.finish()
