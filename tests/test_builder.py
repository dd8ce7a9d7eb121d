import pytest

from golanpy.ast import (
    ASTBuilder,
    Apply,
    Assign,
    Block,
    BooleanLiteral,
    FloatLiteral,
    Identifier,
    If,
    IntLiteral,
    Not,
    StringLiteral,
    While,
    children,
    walk,
)
from golanpy.diagnostics import BuilderError, InternalError
from golanpy.lexer import Lexer
from golanpy.parser import Parser, TokenSource, build_tree, parse, parse_program
from golanpy.text import LineIndex, Position
from tests._shared_cases import PROGRAM_CASES, GolanCase, case_id


def test_call_application_restores_argument_order() -> None:
    builder = ASTBuilder("f(1, 2)\n")
    builder.identifier(0, 1, "f")
    builder.open_call()
    builder.int_literal(2, 3, "1")
    builder.int_literal(5, 6, "2")
    builder.close_call(7)
    builder.expression_statement()
    root = builder.finish()

    assert root == Block(
        position=Position(0, 0, 0, 7),
        statements=(
            Apply(
                position=Position(0, 0, 0, 6),
                callee=Identifier(position=Position(0, 0, 0, 0), name="f"),
                arguments=(
                    IntLiteral(position=Position(0, 2, 0, 2), value=1),
                    IntLiteral(position=Position(0, 5, 0, 5), value=2),
                ),
            ),
        ),
    )


def test_leaf_operations_decode_lexemes() -> None:
    text = 'x = 1.5e2; y = "a\\"b"; z = true\n'
    builder = ASTBuilder(text)
    builder.identifier(0, 1, "x")
    builder.float_literal(4, 9, "1.5e2")
    builder.assign()
    builder.expression_statement()
    builder.identifier(11, 12, "y")
    builder.string_literal(15, 21, '"a\\"b"')
    builder.assign()
    builder.expression_statement()
    builder.identifier(23, 24, "z")
    builder.boolean_literal(27, 31, "true")
    builder.assign()
    builder.expression_statement()
    root = builder.finish()

    values = [statement.expression for statement in root.statements]
    assert values == [
        FloatLiteral(position=Position(0, 4, 0, 8), value=150.0),
        StringLiteral(position=Position(0, 15, 0, 20), value='a"b'),
        BooleanLiteral(position=Position(0, 27, 0, 30), value=True),
    ]


def test_unary_open_and_close() -> None:
    builder = ASTBuilder("!x\n")
    builder.open_unary("!", 0)
    builder.identifier(1, 2, "x")
    builder.close_unary()
    builder.expression_statement()
    root = builder.finish()

    assert root.statements == (
        Not(position=Position(0, 0, 0, 1), operand=Identifier(position=Position(0, 1, 0, 1), name="x")),
    )


def test_while_is_appended_to_enclosing_block() -> None:
    text = "while c { }\n"
    builder = ASTBuilder(text)
    builder.open_while(0)
    builder.identifier(6, 7, "c")
    builder.open_block(8)
    builder.close_body(11)
    builder.close_while()
    root = builder.finish()

    assert root.statements == (
        While(
            position=Position(0, 0, 0, 10),
            condition=Identifier(position=Position(0, 6, 0, 6), name="c"),
            body=Block(position=Position(0, 8, 0, 10), statements=()),
        ),
    )


def test_if_chain_markers_fold_into_nested_ifs() -> None:
    text = "if a { } elsif b { } else { }\n"
    builder = ASTBuilder(text)
    builder.identifier(3, 4, "a")
    builder.open_block(5)
    builder.close_body(8)
    builder.if_part()
    builder.identifier(15, 16, "b")
    builder.open_block(17)
    builder.close_body(20)
    builder.elsif_part()
    builder.open_block(26)
    builder.close_body(29)
    builder.else_part()
    builder.close_if()
    root = builder.finish()

    (statement,) = root.statements
    assert isinstance(statement, If)
    assert statement.position == Position(0, 3, 0, 28)
    assert isinstance(statement.alt, If)
    assert statement.alt.position == Position(0, 15, 0, 28)
    assert statement.alt.alt == Block(position=Position(0, 26, 0, 28), statements=())


def test_builder_depth_tracks_stack() -> None:
    builder = ASTBuilder("a = 1\n")
    assert builder.depth == 1
    builder.identifier(0, 1, "a")
    builder.int_literal(4, 5, "1")
    assert builder.depth == 3
    builder.assign()
    assert builder.depth == 2


def test_popping_empty_stack_is_builder_error() -> None:
    builder = ASTBuilder("{}\n")

    with pytest.raises(BuilderError, match="empty stack"):
        builder.close_block(2)


def test_wrong_kind_pop_is_builder_error() -> None:
    builder = ASTBuilder("x\n")

    with pytest.raises(BuilderError, match="expected a finished node"):
        builder.expression_statement()


def test_finish_requires_single_root_block() -> None:
    builder = ASTBuilder("1\n")
    builder.int_literal(0, 1, "1")

    with pytest.raises(BuilderError, match="only the root block"):
        builder.finish()


def test_transient_marker_cannot_reach_finish() -> None:
    builder = ASTBuilder("if a { }\n")
    builder.identifier(3, 4, "a")
    builder.open_block(5)
    builder.close_body(8)
    builder.if_part()

    with pytest.raises(BuilderError):
        builder.finish()


def test_marker_among_call_arguments_is_builder_error() -> None:
    builder = ASTBuilder("f(-)\n")
    builder.identifier(0, 1, "f")
    builder.open_call()
    builder.open_unary("-", 2)

    with pytest.raises(BuilderError, match="among call arguments"):
        builder.close_call(4)


def test_integer_lexeme_outside_int64_is_builder_error() -> None:
    builder = ASTBuilder("9223372036854775808\n")

    with pytest.raises(BuilderError, match="64-bit"):
        builder.int_literal(0, 19, "9223372036854775808")


def test_float_lexeme_overflowing_to_infinity_is_builder_error() -> None:
    builder = ASTBuilder("1e400\n")

    with pytest.raises(BuilderError, match="overflows"):
        builder.float_literal(0, 5, "1e400")


def test_unknown_operator_is_builder_error() -> None:
    builder = ASTBuilder("1 ** 2\n")
    builder.int_literal(0, 1, "1")
    builder.int_literal(5, 6, "2")

    with pytest.raises(BuilderError, match="unknown binary operator"):
        builder.binary_operation("**")


def test_failed_builder_is_poisoned() -> None:
    builder = ASTBuilder("x\n")
    with pytest.raises(BuilderError):
        builder.expression_statement()

    assert builder.failed
    assert builder.depth == 0
    with pytest.raises(BuilderError, match="already failed"):
        builder.identifier(0, 1, "x")
    with pytest.raises(BuilderError, match="already failed"):
        builder.finish()


def test_finished_builder_refuses_more_events() -> None:
    builder = ASTBuilder("\n")
    builder.finish()

    with pytest.raises(BuilderError, match="already finished"):
        builder.finish()


def test_builder_error_is_internal_error() -> None:
    assert issubclass(BuilderError, InternalError)
    assert issubclass(InternalError, RuntimeError)


def test_build_tree_propagates_builder_error_for_inconsistent_events() -> None:
    text = "1 +\n"
    line_index = LineIndex(text)
    parser = Parser(TokenSource(Lexer(text, line_index=line_index)), line_index)
    parse_program(parser)
    events, diagnostics = parser.finish()

    assert diagnostics
    with pytest.raises(BuilderError):
        build_tree(text, events, line_index)


@pytest.mark.parametrize("case", PROGRAM_CASES, ids=case_id)
def test_composite_spans_contain_child_spans(case: GolanCase) -> None:
    root = parse(case.source).root
    assert root is not None

    for node in walk(root):
        for child in children(node):
            assert node.position.contains(child.position), (node, child)


@pytest.mark.parametrize("case", PROGRAM_CASES, ids=case_id)
def test_assign_spans_destination_to_expression(case: GolanCase) -> None:
    root = parse(case.source).root
    assert root is not None

    for node in walk(root):
        if isinstance(node, Assign):
            assert node.position.first == node.destination.position.first
            assert node.position.last == node.expression.position.last
