import pytest

from golanpy.ast import (
    Add,
    Apply,
    Assign,
    BinaryOperator,
    Block,
    Equal,
    Identifier,
    If,
    IntLiteral,
    Minus,
    Multiply,
    Plus,
    StringLiteral,
    Subtract,
    While,
)
from golanpy.diagnostics import (
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
    Diagnostic,
)
from golanpy.lexer import Lexer
from golanpy.parser import (
    ParsedProgram,
    ParseMode,
    Parser,
    ParserOptions,
    TokenSource,
    parse,
    parse_program,
)
from golanpy.parser.event import (
    AssignEvent,
    BinaryOperationEvent,
    ExpressionStatementEvent,
    LeafEvent,
    LeafKind,
)
from golanpy.text import LineIndex, Position
from tests._debug import debug_dump_ast, debug_dump_diagnostics
from tests._shared_cases import (
    ALL_GOLAN_CASES,
    GolanCase,
    case_id,
    case_source,
)


def _parse_ok(source: str, **kwargs) -> Block:
    parsed = parse(source, **kwargs)
    assert parsed.diagnostics == []
    assert parsed.root is not None
    return parsed.root


def _single_expression(source: str):
    root = _parse_ok(source)
    assert len(root.statements) == 1
    return root.statements[0]


def _codes(diagnostics: list[Diagnostic]) -> list[str]:
    return [diagnostic.code for diagnostic in diagnostics]


@pytest.mark.parametrize("case", ALL_GOLAN_CASES, ids=case_id)
def test_shared_cases_parse_cleanly_or_report_errors(case: GolanCase) -> None:
    parsed = parse(case.source)
    debug_dump_diagnostics(case.name, parsed.diagnostics, case.source)
    debug_dump_ast(case.name, parsed.root, case.source)

    if case.strict_should_parse_cleanly:
        assert parsed.diagnostics == []
        assert parsed.root is not None
    else:
        assert parsed.has_errors
        assert parsed.root is None


@pytest.mark.parametrize(
    ("name", "expected_codes"),
    [
        ("edge_case_missing_closing_brace_fails_in_strict_mode", [PARSER_EXPECTED_TOKEN.code]),
        ("edge_case_stray_closing_brace", [PARSER_UNEXPECTED_TOKEN.code]),
        ("edge_case_invalid_assignment_target", [PARSER_INVALID_ASSIGNMENT_TARGET.code]),
        ("edge_case_missing_statement_separator", [PARSER_EXPECTED_STATEMENT_END.code]),
        ("edge_case_dangling_operator", [PARSER_EXPECTED_EXPRESSION.code]),
        ("edge_case_unterminated_string", [LEXER_UNTERMINATED_STRING.code]),
        (
            "edge_case_unexpected_character",
            [LEXER_UNEXPECTED_CHARACTER.code, PARSER_EXPECTED_EXPRESSION.code],
        ),
        ("edge_case_integer_literal_too_large", [PARSER_INTEGER_OUT_OF_RANGE.code]),
        ("edge_case_float_literal_too_large", [PARSER_FLOAT_OUT_OF_RANGE.code]),
    ],
)
def test_invalid_cases_report_expected_codes(name, expected_codes: list[str]) -> None:
    assert _codes(parse(case_source(name)).diagnostics) == expected_codes


def test_diagnostic_positions() -> None:
    assert parse("1 2\n").diagnostics[0].position == Position(0, 2, 0, 2)
    assert parse("1 = 2\n").diagnostics[0].position == Position(0, 0, 0, 2)
    assert parse("1 +\n").diagnostics[0].position == Position(1, 0, 1, 0)
    assert parse("}\n").diagnostics[0].message == "Unexpected token `}`"


def test_carriage_returns_start_new_lines() -> None:
    line_index = LineIndex("a\rb\r\nc\n")

    assert line_index.line_col(2) == (1, 0)
    assert line_index.line_col(5) == (2, 0)
    assert parse("x = 1\r1 2\r").diagnostics[0].position == Position(1, 2, 1, 2)


def test_trailing_newline_is_appended() -> None:
    assert parse("1").source_text == "1\n"
    assert parse("1\n").source_text == "1\n"


def test_passing_options_and_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        parse("1", options=ParserOptions(), mode=ParseMode.STRICT)


def test_lenient_mode_tolerates_missing_closing_brace_at_eof() -> None:
    parsed = parse(case_source("edge_case_missing_closing_brace_fails_in_strict_mode"), mode=ParseMode.LENIENT)

    assert _codes(parsed.diagnostics) == [PARSER_LENIENT_MISSING_RBRACE.code]
    assert parsed.diagnostics[0].severity == "warning"
    assert not parsed.has_errors
    assert isinstance(parsed.root, Block)
    statement = parsed.root.statements[0]
    assert isinstance(statement, If)
    assert statement.then.position == Position(0, 8, 1, 3)


def test_lenient_mode_still_rejects_stray_closing_brace() -> None:
    parsed = parse("}\n", mode=ParseMode.LENIENT)

    assert parsed.has_errors
    assert parsed.root is None


def test_precedence_and_associativity() -> None:
    expression = _single_expression("1 + 2 * 3 == 7")

    assert isinstance(expression, Equal)
    assert isinstance(expression.left, Add)
    assert isinstance(expression.left.right, Multiply)
    assert expression.right == IntLiteral(position=Position(0, 13, 0, 13), value=7)

    expression = _single_expression("1 - 2 - 3")
    assert isinstance(expression, Subtract)
    assert isinstance(expression.left, Subtract)
    assert isinstance(expression.right, IntLiteral)


def test_assignment_is_right_associative() -> None:
    expression = _single_expression("a = b = 1")

    assert isinstance(expression, Assign)
    assert expression.destination == Identifier(position=Position(0, 0, 0, 0), name="a")
    assert isinstance(expression.expression, Assign)
    assert expression.expression.destination.name == "b"
    assert expression.position == Position(0, 0, 0, 8)


def test_unary_operators_nest() -> None:
    expression = _single_expression("- -1")

    assert isinstance(expression, Minus)
    assert isinstance(expression.operand, Minus)
    assert expression.position == Position(0, 0, 0, 3)
    assert isinstance(_single_expression("+x"), Plus)


def test_calls_chain_and_nest() -> None:
    expression = _single_expression("f(1, g(2))(3)")

    assert isinstance(expression, Apply)
    assert [argument.value for argument in expression.arguments] == [3]
    inner = expression.callee
    assert isinstance(inner, Apply)
    assert inner.callee == Identifier(position=Position(0, 0, 0, 0), name="f")
    assert isinstance(inner.arguments[1], Apply)
    assert inner.position == Position(0, 0, 0, 9)
    assert expression.position == Position(0, 0, 0, 12)


def test_empty_argument_list() -> None:
    expression = _single_expression('print()')

    assert isinstance(expression, Apply)
    assert expression.arguments == ()


def test_line_break_ends_expression_before_binary_operator() -> None:
    root = _parse_ok("a = 1\n- 2\n")

    assert len(root.statements) == 2
    assert isinstance(root.statements[0], Assign)
    assert isinstance(root.statements[1], Minus)


def test_trailing_operator_continues_on_next_line() -> None:
    expression = _single_expression("1 +\n  2")

    assert isinstance(expression, Add)
    assert expression.position == Position(0, 0, 1, 2)


def test_line_break_ends_expression_before_call_parenthesis() -> None:
    root = _parse_ok("f\n(1)\n")

    assert isinstance(root.statements[0], Identifier)
    assert isinstance(root.statements[1], IntLiteral)


def test_if_elsif_else_chain_is_right_nested() -> None:
    statement = _single_expression("if a { 1 } elsif b { 2 } elsif c { 3 } else { 4 }")

    assert isinstance(statement, If)
    assert statement.test.name == "a"
    second = statement.alt
    assert isinstance(second, If)
    third = second.alt
    assert isinstance(third, If)
    assert isinstance(third.alt, Block)
    assert third.alt.statements[0].value == 4
    assert statement.position.last == third.alt.position.last


def test_if_without_else_has_no_alternative() -> None:
    statement = _single_expression("if a { 1 }")

    assert isinstance(statement, If)
    assert statement.alt is None
    assert statement.position == Position(0, 3, 0, 9)


def test_while_statement_spans_keyword_to_closing_brace() -> None:
    statement = _single_expression("while x < 3 {\n  x = x + 1\n}")

    assert isinstance(statement, While)
    assert statement.position == Position(0, 0, 2, 0)
    assert statement.body.position == Position(0, 12, 2, 0)
    assert isinstance(statement.body.statements[0], Assign)


def test_empty_nested_block_statement() -> None:
    statement = _single_expression("{}")

    assert statement == Block(position=Position(0, 0, 0, 1), statements=())


def test_string_literal_is_unescaped() -> None:
    statement = _single_expression(r'"line\nbreak \"q\""')

    assert statement == StringLiteral(position=Position(0, 0, 0, 18), value='line\nbreak "q"')


def test_semicolons_separate_statements_on_one_line() -> None:
    root = _parse_ok(";;a = 1;; b = 2;")

    assert [statement.destination.name for statement in root.statements] == ["a", "b"]


def test_parenthesized_target_is_not_assignable() -> None:
    parsed = parse("(a) = 1\n")

    assert _codes(parsed.diagnostics) == [PARSER_INVALID_ASSIGNMENT_TARGET.code]


def test_recovery_continues_after_bad_statement() -> None:
    parsed = parse("1 2\n3 + ;\n4\n")

    assert _codes(parsed.diagnostics) == [
        PARSER_EXPECTED_STATEMENT_END.code,
        PARSER_EXPECTED_EXPRESSION.code,
    ]


def test_nesting_limit_is_a_diagnostic() -> None:
    source = "(" * 20 + "1" + ")" * 20
    parsed = parse(source, options=ParserOptions(max_nesting_depth=8))

    assert _codes(parsed.diagnostics) == [PARSER_NESTING_TOO_DEEP.code]
    assert parsed.root is None


def test_default_nesting_limit_stops_pathological_blocks() -> None:
    parsed = parse("{" * 200 + "}" * 200)

    assert PARSER_NESTING_TOO_DEEP.code in _codes(parsed.diagnostics)
    assert parsed.root is None


def test_nesting_within_limit_parses() -> None:
    root = _parse_ok("(" * 30 + "1" + ")" * 30)

    assert root.statements[0] == IntLiteral(position=Position(0, 30, 0, 30), value=1)


def test_parser_emits_construction_events_in_postfix_order() -> None:
    text = "x = 1 + 2\n"
    line_index = LineIndex(text)
    parser = Parser(TokenSource(Lexer(text, line_index=line_index)), line_index)

    parse_program(parser)
    events, diagnostics = parser.finish()

    assert diagnostics == []
    assert events == [
        LeafEvent(kind=LeafKind.IDENTIFIER, begin=0, end=1, lexeme="x"),
        LeafEvent(kind=LeafKind.INT, begin=4, end=5, lexeme="1"),
        LeafEvent(kind=LeafKind.INT, begin=8, end=9, lexeme="2"),
        BinaryOperationEvent(operator=BinaryOperator.ADD),
        AssignEvent(),
        ExpressionStatementEvent(),
    ]


def test_parsing_is_deterministic() -> None:
    source = case_source("while_counts_up")

    first = parse(source)
    second = parse(source)

    assert first == second
    assert isinstance(first, ParsedProgram)
