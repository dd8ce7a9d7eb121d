"""Tree-walking evaluator."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from types import MappingProxyType

from golanpy.ast.model import (
    Add,
    Apply,
    Assign,
    BinaryOperation,
    Block,
    BooleanLiteral,
    Divide,
    Equal,
    FloatLiteral,
    Identifier,
    If,
    IntLiteral,
    Minus,
    Modulo,
    Multiply,
    Node,
    Not,
    NotEqual,
    Plus,
    StringLiteral,
    Subtract,
    UnaryOperation,
    While,
)
from golanpy.diagnostics import InternalError
from golanpy.runtime.builtins import default_builtins
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
    is_truthy,
    is_undefined,
    same_kind,
    values_equal,
)

logger = logging.getLogger(__name__)

type NativeCallable = Callable[[Engine, list[Value]], Value]

_VALUE_TYPES = (Undefined, Boolean, Integer, Float, String, NativeFunction)


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Outcome of `Engine.execute`: exactly one of `value`/`error` is meaningful."""

    value: Value
    error: EvaluationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Engine:
    """Evaluates a sealed tree against one flat, mutable environment.

    The environment starts with the builtins (`print`) and lives as long as the
    engine, so successive `evaluate` calls observe earlier assignments.
    """

    def __init__(self, options: EngineOptions | None = None) -> None:
        self._options = options or EngineOptions()
        self._environment: dict[str, Value] = dict(default_builtins())
        self._depth = 0

    @property
    def options(self) -> EngineOptions:
        return self._options

    @property
    def environment(self) -> Mapping[str, Value]:
        return MappingProxyType(self._environment)

    def define(self, name: str, value: Value | NativeCallable) -> None:
        """Bind `name`; a plain host callable is wrapped as a NativeFunction."""
        if isinstance(value, _VALUE_TYPES):
            self._environment[name] = value
        elif callable(value):
            self._environment[name] = NativeFunction(name, value)
        else:
            raise TypeError(f"cannot bind {name!r} to {value!r}: not a Value or callable")

    def lookup(self, name: str) -> Value | None:
        return self._environment.get(name)

    def evaluate(self, root: Node) -> Value:
        """Evaluate `root` and return its value; the first error propagates."""
        return self._eval(root)

    def execute(self, root: Node) -> ExecutionResult:
        try:
            return ExecutionResult(value=self.evaluate(root))
        except EvaluationError as exc:
            logger.debug("evaluation failed: %s", exc)
            return ExecutionResult(value=UNDEFINED, error=exc)

    @staticmethod
    def is_undefined(value: Value) -> bool:
        return is_undefined(value)

    def _eval(self, node: Node) -> Value:
        self._depth += 1
        try:
            if self._depth > self._options.max_depth:
                raise RecursionLimitError(self._options.max_depth, node.position)

            match node:
                case Block(statements=statements):
                    result: Value = UNDEFINED
                    for statement in statements:
                        result = self._eval(statement)
                    return result
                case While(condition=condition, body=body):
                    result = UNDEFINED
                    while is_truthy(self._eval(condition)):
                        result = self._eval(body)
                    return result
                case If(test=test, then=then, alt=alt):
                    if is_truthy(self._eval(test)):
                        return self._eval(then)
                    if alt is not None:
                        return self._eval(alt)
                    return UNDEFINED
                case Assign(destination=Identifier(name=name), expression=expression):
                    value = self._eval(expression)
                    self._environment[name] = value
                    return value
                case Assign(destination=destination):
                    raise InternalError(
                        f"{destination.position}: assignment to {type(destination).__name__}"
                    )
                case BinaryOperation():
                    return self._binary(node)
                case UnaryOperation():
                    return self._unary(node)
                case IntLiteral(value=value):
                    return Integer(value)
                case FloatLiteral(value=value):
                    return Float(value)
                case BooleanLiteral(value=value):
                    return TRUE if value else FALSE
                case StringLiteral(value=value):
                    return String(value)
                case Identifier(name=name, position=position):
                    try:
                        return self._environment[name]
                    except KeyError:
                        raise UndefinedVariableError(name, position) from None
                case Apply(callee=callee, arguments=arguments):
                    function = self._eval(callee)
                    if not isinstance(function, NativeFunction):
                        raise NotCallableError(function, callee.position)
                    values = [self._eval(argument) for argument in arguments]
                    result = function.call(self, values)
                    if not isinstance(result, _VALUE_TYPES):
                        returned = type(result).__name__
                        raise InternalError(f"{callee.position}: native {function.name} returned {returned}")
                    return result
                case _:
                    raise InternalError(f"cannot evaluate {type(node).__name__}")
        finally:
            self._depth -= 1

    def _binary(self, node: BinaryOperation) -> Value:
        """Fold a left-nested operator chain without descending its spine.

        `a + b + c` nests to the left, so only the right operands are evaluated
        one level down; a long flat chain does not count against `max_depth`.
        """
        spine = [node]
        while isinstance(spine[-1].left, BinaryOperation):
            spine.append(spine[-1].left)

        left = self._eval(spine[-1].left)
        for operation in reversed(spine):
            left = self._apply_binary(operation, left, self._eval(operation.right))
        return left

    def _apply_binary(self, node: BinaryOperation, left: Value, right: Value) -> Value:
        match node:
            case Equal():
                return Boolean.of(values_equal(left, right))
            case NotEqual():
                return Boolean.of(not values_equal(left, right))
            case Divide() | Modulo() if isinstance(left, Integer) and right == Integer(0):
                raise DivideByZeroError(node.position)
            case Add():
                self._check_operands(node, left, right, Addable, "not an addable value")
                return left.add(right)
            case Subtract():
                self._check_operands(node, left, right, Arithmetic, "not a subtractable value")
                return left.subtract(right)
            case Multiply():
                self._check_operands(node, left, right, Arithmetic, "not a multipliable value")
                return left.multiply(right)
            case Divide():
                self._check_operands(node, left, right, Arithmetic, "not a dividable value")
                return left.divide(right)
            case Modulo():
                self._check_operands(node, left, right, IntegerOps, "not a modulo-operatable value")
                return left.modulo(right)
            case _:
                self._check_operands(node, left, right, Comparable, "incomparable type")
                return left.ordered(node.operator, right)

    def _check_operands(
        self,
        node: BinaryOperation,
        left: Value,
        right: Value,
        capability: type,
        message: str,
    ) -> None:
        """Left must provide `capability`; right must be the same kind as left."""
        if not isinstance(left, capability):
            raise OperandTypeError(message, left, node.left.position)
        if not same_kind(left, right):
            raise OperandTypeError(f"expected {left.kind}", right, node.right.position)

    def _unary(self, node: UnaryOperation) -> Value:
        operand = self._eval(node.operand)

        match node:
            case Not():
                return Boolean.of(not is_truthy(operand))
            case Plus() if isinstance(operand, Signable):
                return operand.plus()
            case Minus() if isinstance(operand, Signable):
                return operand.minus()
            case Plus():
                raise OperandTypeError("cannot apply unary plus to", operand, node.position)
            case Minus():
                raise OperandTypeError("cannot apply unary minus to", operand, node.position)
            case _:
                raise InternalError(f"unknown unary operation {type(node).__name__}")


__all__ = ["Engine", "ExecutionResult", "NativeCallable"]
