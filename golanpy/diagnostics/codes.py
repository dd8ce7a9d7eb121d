"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote on the same line.",
    category="lexer",
)

LEXER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ESCAPE",
    message="Invalid escape sequence in string literal.",
    hint='Supported escapes are \\n, \\t, \\r, \\" and \\\\.',
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    category="parser",
)

PARSER_EXPECTED_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_EXPRESSION",
    message="Expected an expression",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="parser",
)

PARSER_EXPECTED_STATEMENT_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_STATEMENT_END",
    message="Expected end of statement",
    hint="Separate statements with a line break or `;`.",
    category="parser",
)

PARSER_INVALID_ASSIGNMENT_TARGET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_ASSIGNMENT_TARGET",
    message="Invalid assignment target",
    hint="Only identifiers can be assigned to.",
    category="parser",
)

PARSER_INTEGER_OUT_OF_RANGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INTEGER_OUT_OF_RANGE",
    message="Integer literal does not fit in 64 bits",
    category="parser",
)

PARSER_FLOAT_OUT_OF_RANGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_FLOAT_OUT_OF_RANGE",
    message="Float literal overflows a 64-bit float",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Nesting is too deep",
    category="parser",
)

PARSER_LENIENT_MISSING_RBRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_LENIENT_MISSING_RBRACE",
    message="Missing closing brace tolerated in lenient mode",
    severity="warning",
    category="parser",
)

EVAL_UNDEFINED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_UNDEFINED_VARIABLE",
    message="undefined variable",
    category="eval",
)

EVAL_OPERAND_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_OPERAND_TYPE",
    message="operand does not support the operation",
    category="eval",
)

EVAL_NOT_CALLABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_NOT_CALLABLE",
    message="not a function",
    category="eval",
)

EVAL_DIVIDE_BY_ZERO: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_DIVIDE_BY_ZERO",
    message="divided by zero",
    category="eval",
)

EVAL_RECURSION_LIMIT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EVAL_RECURSION_LIMIT",
    message="evaluation nested too deeply",
    hint="Raise EngineOptions.max_depth if the program is legitimately deep.",
    category="eval",
)
