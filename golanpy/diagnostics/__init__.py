"""Diagnostics."""

from golanpy.diagnostics.codes import (
    EVAL_DIVIDE_BY_ZERO,
    EVAL_NOT_CALLABLE,
    EVAL_OPERAND_TYPE,
    EVAL_RECURSION_LIMIT,
    EVAL_UNDEFINED_VARIABLE,
    LEXER_INVALID_ESCAPE,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_EXPRESSION,
    PARSER_EXPECTED_STATEMENT_END,
    PARSER_EXPECTED_TOKEN,
    PARSER_FLOAT_OUT_OF_RANGE,
    PARSER_INTEGER_OUT_OF_RANGE,
    PARSER_INVALID_ASSIGNMENT_TARGET,
    PARSER_LENIENT_MISSING_RBRACE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from golanpy.diagnostics.diagnostic import Diagnostic, Severity
from golanpy.diagnostics.errors import BuilderError, InternalError
from golanpy.diagnostics.report import collect_diagnostics, has_errors, sort_diagnostics

__all__ = [
    "EVAL_DIVIDE_BY_ZERO",
    "EVAL_NOT_CALLABLE",
    "EVAL_OPERAND_TYPE",
    "EVAL_RECURSION_LIMIT",
    "EVAL_UNDEFINED_VARIABLE",
    "LEXER_INVALID_ESCAPE",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_EXPRESSION",
    "PARSER_EXPECTED_STATEMENT_END",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_FLOAT_OUT_OF_RANGE",
    "PARSER_INTEGER_OUT_OF_RANGE",
    "PARSER_INVALID_ASSIGNMENT_TARGET",
    "PARSER_LENIENT_MISSING_RBRACE",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_TOKEN",
    "BuilderError",
    "Diagnostic",
    "DiagnosticSpec",
    "InternalError",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
