"""Centralized golan source cases used across lexer/parser/engine tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, cast


@dataclass(frozen=True, slots=True)
class GolanCase:
    name: str
    source: str
    strict_should_parse_cleanly: bool = True
    expected_display: str | None = None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


PROGRAM_CASES: tuple[GolanCase, ...] = (
    GolanCase(
        name="assignment_chain",
        source="hoge = piyo = 123 + 456 * 789",
        expected_display="359907",
    ),
    GolanCase(
        name="if_elsif_else_chain",
        source="if 1 > 2 { 10 } elsif 2 > 1 { 20 } else { 30 }",
        expected_display="20",
    ),
    GolanCase(
        name="while_counts_up",
        source=_dedent(
            """
            i = 0
            while i < 5 {
              i = i + 1
            }
            i
            """
        ),
        expected_display="5",
    ),
    GolanCase(
        name="while_never_runs",
        source=_dedent(
            """
            x = false
            while x {
              1
            }
            """
        ),
        expected_display="#<undefined>",
    ),
    GolanCase(
        name="string_concatenation",
        source='greeting = "hello, " + "world"\ngreeting\n',
        expected_display="hello, world",
    ),
    GolanCase(name="float_arithmetic", source="1.5 * 2.0 + 0.25\n", expected_display="3.25"),
    GolanCase(name="integer_truncating_division", source="-7 / 2\n", expected_display="-3"),
    GolanCase(name="modulo_takes_dividend_sign", source="-7 % 3\n", expected_display="-1"),
    GolanCase(name="equality_without_coercion", source="1 == 1.0\n", expected_display="false"),
    GolanCase(name="zero_is_truthy", source="!0\n", expected_display="false"),
    GolanCase(
        name="semicolon_separated_statements",
        source="a = 1; b = 2; a + b\n",
        expected_display="3",
    ),
    GolanCase(
        name="comments_are_ignored",
        source=_dedent(
            """
            # leading comment
            x = 2 # trailing comment
            x * 21
            """
        ),
        expected_display="42",
    ),
    GolanCase(
        name="nested_block_statement",
        source=_dedent(
            """
            {
              y = 4
            }
            y
            """
        ),
        expected_display="4",
    ),
    GolanCase(
        name="operator_on_next_line_starts_new_statement",
        source="1\n+ 2\n",
        expected_display="2",
    ),
    GolanCase(name="parenthesized_grouping", source="(1 + 2) * 3\n", expected_display="9"),
    GolanCase(name="ordering_binds_tighter_than_equality", source="1 < 2 == true\n", expected_display="true"),
    GolanCase(name="escaped_string", source='"a\\tb"\n', expected_display="a\tb"),
    GolanCase(name="empty_program", source="", expected_display="#<undefined>"),
    GolanCase(
        name="integer_overflow_wraps",
        source="9223372036854775807 + 1\n",
        expected_display="-9223372036854775808",
    ),
    GolanCase(name="float_division_by_zero", source="1.0 / 0.0\n", expected_display="inf"),
    GolanCase(name="no_trailing_newline", source="40 + 2", expected_display="42"),
)

INVALID_CASES: tuple[GolanCase, ...] = (
    GolanCase(
        name="edge_case_missing_closing_brace_fails_in_strict_mode",
        source="if true {\n  1\n",
        strict_should_parse_cleanly=False,
    ),
    GolanCase(name="edge_case_stray_closing_brace", source="}\n", strict_should_parse_cleanly=False),
    GolanCase(name="edge_case_invalid_assignment_target", source="1 = 2\n", strict_should_parse_cleanly=False),
    GolanCase(name="edge_case_missing_statement_separator", source="1 2\n", strict_should_parse_cleanly=False),
    GolanCase(name="edge_case_dangling_operator", source="1 +\n", strict_should_parse_cleanly=False),
    GolanCase(name="edge_case_unterminated_string", source='"abc\n', strict_should_parse_cleanly=False),
    GolanCase(name="edge_case_unexpected_character", source="a = @\n", strict_should_parse_cleanly=False),
    GolanCase(
        name="edge_case_integer_literal_too_large",
        source="9223372036854775808\n",
        strict_should_parse_cleanly=False,
    ),
    GolanCase(name="edge_case_float_literal_too_large", source="1e400\n", strict_should_parse_cleanly=False),
)

ALL_GOLAN_CASES: tuple[GolanCase, ...] = PROGRAM_CASES + INVALID_CASES

type CaseName = Literal[
    "assignment_chain",
    "if_elsif_else_chain",
    "while_counts_up",
    "while_never_runs",
    "string_concatenation",
    "float_arithmetic",
    "integer_truncating_division",
    "modulo_takes_dividend_sign",
    "equality_without_coercion",
    "zero_is_truthy",
    "semicolon_separated_statements",
    "comments_are_ignored",
    "nested_block_statement",
    "operator_on_next_line_starts_new_statement",
    "parenthesized_grouping",
    "ordering_binds_tighter_than_equality",
    "escaped_string",
    "empty_program",
    "integer_overflow_wraps",
    "float_division_by_zero",
    "no_trailing_newline",
    "edge_case_missing_closing_brace_fails_in_strict_mode",
    "edge_case_stray_closing_brace",
    "edge_case_invalid_assignment_target",
    "edge_case_missing_statement_separator",
    "edge_case_dangling_operator",
    "edge_case_unterminated_string",
    "edge_case_unexpected_character",
    "edge_case_integer_literal_too_large",
    "edge_case_float_literal_too_large",
]

CASE_BY_NAME: dict[CaseName, GolanCase] = cast(
    dict[CaseName, GolanCase],
    {case.name: case for case in ALL_GOLAN_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: GolanCase) -> str:
    return case.name
