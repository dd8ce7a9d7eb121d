"""Indented text rendering of AST subtrees."""

from __future__ import annotations

import io
from typing import TextIO

from golanpy.ast.model import (
    BooleanLiteral,
    FloatLiteral,
    Identifier,
    IntLiteral,
    Node,
    StringLiteral,
    children,
)


def dump_tree(tree: Node | None, output: TextIO) -> None:
    """Write `tree` to `output`, one node per line. `None` writes nothing."""
    if tree is None:
        return
    _dump(tree, output)


def format_tree(tree: Node | None) -> str:
    buffer = io.StringIO()
    dump_tree(tree, buffer)
    return buffer.getvalue()


def _dump(tree: Node, output: TextIO) -> None:
    pending: list[tuple[Node, int]] = [(tree, 0)]
    while pending:
        node, depth = pending.pop()
        line = f"{'  ' * depth}{type(node).__name__}:{node.position}"
        payload = _payload(node)
        if payload is not None:
            line = f"{line}: {payload}"
        output.write(line + "\n")
        pending.extend((child, depth + 1) for child in reversed(children(node)))


def _payload(node: Node) -> str | None:
    match node:
        case IntLiteral(value=value):
            return str(value)
        case FloatLiteral(value=value):
            return repr(value)
        case BooleanLiteral(value=value):
            return "true" if value else "false"
        case StringLiteral(value=value):
            return quote_string(value)
        case Identifier(name=name):
            return name
        case _:
            return None


def quote_string(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


__all__ = ["dump_tree", "format_tree", "quote_string"]
