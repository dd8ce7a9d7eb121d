"""Stack machine that assembles the AST from construction events.

The recognizer reports what it has just reduced; the builder keeps one working
stack of finished nodes and builder-private open items. Open items never leave
the builder, so a finished tree cannot contain one.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import wraps
import logging
import math
import re
from typing import Concatenate

from golanpy.ast.model import (
    BINARY_OPERATIONS,
    UNARY_OPERATIONS,
    Apply,
    Assign,
    BinaryOperator,
    Block,
    BooleanLiteral,
    FloatLiteral,
    Identifier,
    If,
    IntLiteral,
    Node,
    StringLiteral,
    UnaryOperator,
    While,
)
from golanpy.diagnostics import BuilderError
from golanpy.lexer import unescape_string
from golanpy.text import LineIndex, Position

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_LEXEME = re.compile(r"[0-9]+")
_FLOAT_LEXEME = re.compile(r"[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


class _StackItem:
    """Builder-private stack entry that is not (yet) a Node."""

    __slots__ = ()


@dataclass(slots=True)
class _OpenBlock(_StackItem):
    start: Position
    statements: list[Node] = field(default_factory=list)


@dataclass(slots=True)
class _OpenUnary(_StackItem):
    operator: UnaryOperator
    start: Position


@dataclass(slots=True)
class _OpenWhile(_StackItem):
    start: Position


@dataclass(slots=True)
class _IfPart(_StackItem):
    test: Node
    then: Block


@dataclass(slots=True)
class _ElsifPart(_StackItem):
    test: Node
    then: Block


@dataclass(slots=True)
class _ElsePart(_StackItem):
    body: Block


@dataclass(slots=True)
class _CallMarker(_StackItem):
    callee: Node


type StackItem = Node | _StackItem


def _operation[**P, R](
    method: Callable[Concatenate[ASTBuilder, P], R],
) -> Callable[Concatenate[ASTBuilder, P], R]:
    """Refuse work on a failed/finished builder and poison it on failure."""

    @wraps(method)
    def wrapper(self: ASTBuilder, *args: P.args, **kwargs: P.kwargs) -> R:
        if self._failed:
            raise BuilderError(f"{method.__name__}: builder already failed")
        if self._finished:
            raise BuilderError(f"{method.__name__}: builder already finished")
        try:
            return method(self, *args, **kwargs)
        except BuilderError:
            self._failed = True
            self._stack.clear()
            raise

    return wrapper


class ASTBuilder:
    """Single-stack AST assembler driven by recognizer events.

    Offsets are character offsets into `text`; an `end` offset is exclusive.
    The outermost Block is pre-seeded and becomes the root on `finish()`.
    """

    def __init__(self, text: str, *, line_index: LineIndex | None = None) -> None:
        self._line_index = line_index if line_index is not None else LineIndex(text)
        self._text = text
        self._stack: list[StackItem] = [_OpenBlock(start=self._line_index.point(0))]
        self._failed = False
        self._finished = False

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def failed(self) -> bool:
        return self._failed

    # ------------------------------------------------------------------
    # Blocks and statements
    # ------------------------------------------------------------------

    @_operation
    def open_block(self, offset: int) -> None:
        self._push(_OpenBlock(start=self._point(offset)))

    @_operation
    def close_block(self, end: int) -> None:
        """Seal a nested `{ ... }` statement and append it to the enclosing block."""
        self._append_statement(self._seal_block(end))

    @_operation
    def close_body(self, end: int) -> None:
        """Seal a while/if body and leave it on the stack for its owner."""
        self._push(self._seal_block(end))

    @_operation
    def expression_statement(self) -> None:
        self._append_statement(self._pop_node())

    @_operation
    def assign(self) -> None:
        expression = self._pop_node()
        destination = self._pop_node()
        self._push(
            Assign(
                position=Position.cover(destination.position, expression.position),
                destination=destination,
                expression=expression,
            )
        )

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    @_operation
    def binary_operation(self, operator: BinaryOperator | str) -> None:
        right = self._pop_node()
        left = self._pop_node()
        try:
            node_type = BINARY_OPERATIONS[BinaryOperator(operator)]
        except ValueError:
            raise BuilderError(f"unknown binary operator {operator!r}") from None
        self._push(
            node_type(
                position=Position.cover(left.position, right.position),
                left=left,
                right=right,
            )
        )

    @_operation
    def open_unary(self, operator: UnaryOperator | str, offset: int) -> None:
        try:
            resolved = UnaryOperator(operator)
        except ValueError:
            raise BuilderError(f"unknown unary operator {operator!r}") from None
        self._push(_OpenUnary(operator=resolved, start=self._point(offset)))

    @_operation
    def close_unary(self) -> None:
        operand = self._pop_node()
        marker = self._pop(_OpenUnary)
        node_type = UNARY_OPERATIONS[marker.operator]
        self._push(node_type(position=Position.cover(marker.start, operand.position), operand=operand))

    # ------------------------------------------------------------------
    # Control flow
    # ------------------------------------------------------------------

    @_operation
    def open_while(self, offset: int) -> None:
        self._push(_OpenWhile(start=self._point(offset)))

    @_operation
    def close_while(self) -> None:
        body = self._pop(Block)
        condition = self._pop_node()
        marker = self._pop(_OpenWhile)
        self._append_statement(
            While(
                position=Position.cover(marker.start, body.position),
                condition=condition,
                body=body,
            )
        )

    @_operation
    def if_part(self) -> None:
        then = self._pop(Block)
        test = self._pop_node()
        self._push(_IfPart(test=test, then=then))

    @_operation
    def elsif_part(self) -> None:
        then = self._pop(Block)
        test = self._pop_node()
        self._push(_ElsifPart(test=test, then=then))

    @_operation
    def else_part(self) -> None:
        self._push(_ElsePart(body=self._pop(Block)))

    @_operation
    def close_if(self) -> None:
        """Fold `if`/`elsif`/`else` parts into right-nested Ifs."""
        alt: If | Block | None = None
        if isinstance(self._peek(), _ElsePart):
            alt = self._pop(_ElsePart).body

        while isinstance(self._peek(), _ElsifPart):
            part = self._pop(_ElsifPart)
            alt = self._make_if(part.test, part.then, alt)

        head = self._pop(_IfPart)
        self._append_statement(self._make_if(head.test, head.then, alt))

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    @_operation
    def open_call(self) -> None:
        self._push(_CallMarker(callee=self._pop_node()))

    @_operation
    def close_call(self, end: int) -> None:
        arguments: list[Node] = []
        while True:
            item = self._pop_any()
            if isinstance(item, _CallMarker):
                break
            if isinstance(item, _StackItem):
                raise BuilderError(f"{type(item).__name__} found among call arguments")
            arguments.append(item)
        arguments.reverse()

        last = self._span(end - 1, end)
        self._push(
            Apply(
                position=Position.cover(item.callee.position, last),
                callee=item.callee,
                arguments=tuple(arguments),
            )
        )

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    @_operation
    def int_literal(self, begin: int, end: int, lexeme: str) -> None:
        if not _INTEGER_LEXEME.fullmatch(lexeme):
            raise BuilderError(f"malformed integer lexeme {lexeme!r}")
        value = int(lexeme, 10)
        if not INT64_MIN <= value <= INT64_MAX:
            raise BuilderError(f"integer lexeme {lexeme!r} is outside the 64-bit range")
        self._push(IntLiteral(position=self._span(begin, end), value=value))

    @_operation
    def float_literal(self, begin: int, end: int, lexeme: str) -> None:
        if not _FLOAT_LEXEME.fullmatch(lexeme):
            raise BuilderError(f"malformed float lexeme {lexeme!r}")
        value = float(lexeme)
        if math.isinf(value):
            raise BuilderError(f"float lexeme {lexeme!r} overflows to infinity")
        self._push(FloatLiteral(position=self._span(begin, end), value=value))

    @_operation
    def boolean_literal(self, begin: int, end: int, lexeme: str) -> None:
        if lexeme not in ("true", "false"):
            raise BuilderError(f"malformed boolean lexeme {lexeme!r}")
        self._push(BooleanLiteral(position=self._span(begin, end), value=lexeme == "true"))

    @_operation
    def string_literal(self, begin: int, end: int, lexeme: str) -> None:
        if not lexeme.startswith('"'):
            raise BuilderError(f"malformed string lexeme {lexeme!r}")
        self._push(StringLiteral(position=self._span(begin, end), value=unescape_string(lexeme)))

    @_operation
    def identifier(self, begin: int, end: int, lexeme: str) -> None:
        self._push(Identifier(position=self._span(begin, end), name=lexeme))

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    @_operation
    def finish(self) -> Block:
        if len(self._stack) != 1:
            kinds = ", ".join(type(item).__name__ for item in self._stack)
            raise BuilderError(f"expected only the root block on the stack at finish, found [{kinds}]")
        root_block = self._pop(_OpenBlock)
        root = Block(
            position=Position.cover(root_block.start, self._span(0, len(self._text))),
            statements=tuple(root_block.statements),
        )
        self._finished = True
        logger.debug("built tree with %d top-level statements", len(root.statements))
        return root

    # ------------------------------------------------------------------
    # Stack helpers
    # ------------------------------------------------------------------

    def _make_if(self, test: Node, then: Block, alt: If | Block | None) -> If:
        end = alt.position if alt is not None else then.position
        return If(position=Position.cover(test.position, end), test=test, then=then, alt=alt)

    def _seal_block(self, end: int) -> Block:
        block = self._pop(_OpenBlock)
        last = self._span(end - 1, end) if end > 0 else block.start
        return Block(position=Position.cover(block.start, last), statements=tuple(block.statements))

    def _append_statement(self, statement: Node) -> None:
        block = self._pop(_OpenBlock)
        block.statements.append(statement)
        self._push(block)

    def _span(self, begin: int, end: int) -> Position:
        try:
            return self._line_index.span(begin, end)
        except ValueError as exc:
            raise BuilderError(str(exc)) from exc

    def _point(self, offset: int) -> Position:
        return self._span(offset, offset + 1)

    def _push(self, item: StackItem) -> None:
        self._stack.append(item)

    def _peek(self) -> StackItem | None:
        return self._stack[-1] if self._stack else None

    def _pop_any(self) -> StackItem:
        if not self._stack:
            raise BuilderError("cannot pop from empty stack")
        return self._stack.pop()

    def _pop_node(self) -> Node:
        item = self._pop_any()
        if isinstance(item, _StackItem):
            raise BuilderError(f"expected a finished node on the stack, found {type(item).__name__}")
        return item

    def _pop[T](self, kind: type[T]) -> T:
        item = self._pop_any()
        if not isinstance(item, kind):
            raise BuilderError(f"expected {kind.__name__.lstrip('_')} on the stack, found {type(item).__name__}")
        return item


__all__ = ["INT64_MAX", "INT64_MIN", "ASTBuilder"]
