"""Native functions every engine starts with."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from golanpy.runtime.values import UNDEFINED, NativeFunction, Value

if TYPE_CHECKING:
    from golanpy.runtime.engine import Engine


def native_print(engine: Engine, arguments: list[Value]) -> Value:
    """Write each argument's display form on its own line."""
    output = engine.options.output or sys.stdout
    for argument in arguments:
        output.write(argument.display() + "\n")
    return UNDEFINED


def default_builtins() -> dict[str, NativeFunction]:
    return {
        "print": NativeFunction("print", native_print),
    }


__all__ = ["default_builtins", "native_print"]
