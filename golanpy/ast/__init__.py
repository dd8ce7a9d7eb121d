"""AST node model, tree dump and the event-driven builder."""

from golanpy.ast.builder import INT64_MAX, INT64_MIN, ASTBuilder
from golanpy.ast.dump import dump_tree, format_tree, quote_string
from golanpy.ast.model import (
    BINARY_OPERATIONS,
    UNARY_OPERATIONS,
    Add,
    Apply,
    Assign,
    BinaryOperation,
    BinaryOperator,
    Block,
    BooleanLiteral,
    Divide,
    Equal,
    FloatLiteral,
    Greater,
    GreaterEqual,
    Identifier,
    If,
    IntLiteral,
    Less,
    LessEqual,
    Literal,
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
    UnaryOperator,
    While,
    children,
    walk,
)

__all__ = [
    "BINARY_OPERATIONS",
    "INT64_MAX",
    "INT64_MIN",
    "UNARY_OPERATIONS",
    "ASTBuilder",
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
    "dump_tree",
    "format_tree",
    "quote_string",
    "walk",
]
