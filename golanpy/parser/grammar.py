"""Grammar routines that emit AST construction events.

Precedence, loosest first: assignment (right associative), equality,
ordering, additive, multiplicative, unary, call, primary. A binary operator or
call parenthesis must sit on the same line as its left operand, so a line break
always ends an expression statement.
"""

from collections.abc import Callable
import math
from typing import Final

from golanpy.ast.builder import INT64_MAX
from golanpy.ast.model import BinaryOperator, UnaryOperator
from golanpy.diagnostics import Diagnostic
from golanpy.diagnostics.codes import (
    PARSER_EXPECTED_EXPRESSION,
    PARSER_EXPECTED_STATEMENT_END,
    PARSER_EXPECTED_TOKEN,
    PARSER_FLOAT_OUT_OF_RANGE,
    PARSER_INTEGER_OUT_OF_RANGE,
    PARSER_INVALID_ASSIGNMENT_TARGET,
    PARSER_LENIENT_MISSING_RBRACE,
    PARSER_UNEXPECTED_TOKEN,
)
from golanpy.lexer import TokenKind
from golanpy.parser.event import (
    AssignEvent,
    BinaryOperationEvent,
    CloseBlockEvent,
    CloseBodyEvent,
    CloseCallEvent,
    CloseIfEvent,
    CloseUnaryEvent,
    CloseWhileEvent,
    ElsePartEvent,
    ElsifPartEvent,
    ExpressionStatementEvent,
    IfPartEvent,
    LeafEvent,
    LeafKind,
    OpenBlockEvent,
    OpenCallEvent,
    OpenUnaryEvent,
    OpenWhileEvent,
)
from golanpy.parser.parsed_syntax import ParsedExpression
from golanpy.parser.parser import NestingLimitExceeded, Parser, ParserProgress

EQUALITY_OPERATORS: Final[dict[TokenKind, BinaryOperator]] = {
    TokenKind.EQUAL_EQUAL: BinaryOperator.EQUAL,
    TokenKind.NOT_EQUAL: BinaryOperator.NOT_EQUAL,
}

ORDERING_OPERATORS: Final[dict[TokenKind, BinaryOperator]] = {
    TokenKind.GREATER_THAN_OR_EQUAL: BinaryOperator.GREATER_EQUAL,
    TokenKind.LESS_THAN_OR_EQUAL: BinaryOperator.LESS_EQUAL,
    TokenKind.GREATER_THAN: BinaryOperator.GREATER,
    TokenKind.LESS_THAN: BinaryOperator.LESS,
}

ADDITIVE_OPERATORS: Final[dict[TokenKind, BinaryOperator]] = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUBTRACT,
}

MULTIPLICATIVE_OPERATORS: Final[dict[TokenKind, BinaryOperator]] = {
    TokenKind.STAR: BinaryOperator.MULTIPLY,
    TokenKind.SLASH: BinaryOperator.DIVIDE,
    TokenKind.PERCENT: BinaryOperator.MODULO,
}

UNARY_OPERATORS: Final[dict[TokenKind, UnaryOperator]] = {
    TokenKind.PLUS: UnaryOperator.PLUS,
    TokenKind.MINUS: UnaryOperator.MINUS,
    TokenKind.BANG: UnaryOperator.NOT,
}

_LEAF_KINDS: Final[dict[TokenKind, LeafKind]] = {
    TokenKind.INT: LeafKind.INT,
    TokenKind.FLOAT: LeafKind.FLOAT,
    TokenKind.TRUE_KW: LeafKind.BOOLEAN,
    TokenKind.FALSE_KW: LeafKind.BOOLEAN,
    TokenKind.STRING: LeafKind.STRING,
    TokenKind.IDENTIFIER: LeafKind.IDENTIFIER,
}

_STATEMENT_RECOVERY: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.SEMICOLON, TokenKind.RBRACE, TokenKind.EOF}
)

_STATEMENT_TERMINATORS: Final[frozenset[TokenKind]] = frozenset({TokenKind.RBRACE, TokenKind.EOF})


def parse_program(parser: Parser) -> None:
    try:
        parse_statement_list(parser, stop_at=frozenset({TokenKind.EOF}))
    except NestingLimitExceeded as exc:
        parser.error(exc.diagnostic)


def parse_statement_list(parser: Parser, stop_at: frozenset[TokenKind]) -> None:
    progress = ParserProgress()

    while not parser.at(TokenKind.EOF) and not parser.at_any(stop_at):
        progress.assert_progressing(parser)
        if parser.eat(TokenKind.SEMICOLON):
            continue

        start = parser.position
        if not parse_statement(parser):
            _recover_statement(parser, stalled=parser.position == start)


def parse_statement(parser: Parser) -> bool:
    if parser.at(TokenKind.WHILE_KW):
        return parse_while(parser)

    if parser.at(TokenKind.IF_KW):
        return parse_if(parser)

    if parser.at(TokenKind.LBRACE):
        return parse_block(parser, body=False)

    start = parser.position
    if parse_expression(parser).is_absent():
        if parser.position == start:
            parser.error(_unexpected_token(parser))
        return False

    parser.emit(ExpressionStatementEvent())

    if parser.eat(TokenKind.SEMICOLON):
        return True
    if parser.at_any(_STATEMENT_TERMINATORS) or parser.has_preceding_line_break:
        return True

    parser.error(parser.diagnostic(PARSER_EXPECTED_STATEMENT_END))
    return False


def parse_while(parser: Parser) -> bool:
    parser.emit(OpenWhileEvent(offset=parser.position))
    parser.bump()

    if not _parse_condition(parser):
        return False
    if not parse_block(parser, body=True):
        return False

    parser.emit(CloseWhileEvent())
    return True


def parse_if(parser: Parser) -> bool:
    parser.bump()
    if not _parse_condition(parser) or not parse_block(parser, body=True):
        return False
    parser.emit(IfPartEvent())

    while parser.at(TokenKind.ELSIF_KW):
        parser.bump()
        if not _parse_condition(parser) or not parse_block(parser, body=True):
            return False
        parser.emit(ElsifPartEvent())

    if parser.eat(TokenKind.ELSE_KW):
        if not parse_block(parser, body=True):
            return False
        parser.emit(ElsePartEvent())

    parser.emit(CloseIfEvent())
    return True


def parse_block(parser: Parser, *, body: bool) -> bool:
    """Parse `{ statements }`; a body stays with its owner, otherwise it is a statement."""
    if not parser.at(TokenKind.LBRACE):
        parser.error(_expected_token(parser, "{"))
        return False

    parser.emit(OpenBlockEvent(offset=parser.position))
    parser.bump()

    with parser.nested():
        parse_statement_list(parser, stop_at=frozenset({TokenKind.RBRACE}))

    if parser.at(TokenKind.RBRACE):
        end = parser.current_range.end
        parser.bump()
    elif parser.at(TokenKind.EOF) and parser.options.allow_missing_rbrace_at_eof:
        parser.error(parser.diagnostic(PARSER_LENIENT_MISSING_RBRACE))
        end = parser.current_range.start
    else:
        parser.error(_expected_token(parser, "}"))
        return False

    parser.emit(CloseBodyEvent(end=end) if body else CloseBlockEvent(end=end))
    return True


def parse_expression(parser: Parser) -> ParsedExpression:
    target_range = parser.current_range
    left = _parse_binary(parser, EQUALITY_OPERATORS, _parse_ordering)
    if left.is_absent() or not parser.at(TokenKind.EQUAL) or parser.has_preceding_line_break:
        return left

    if not left.is_identifier:
        parser.error(
            parser.diagnostic(
                PARSER_INVALID_ASSIGNMENT_TARGET,
                rng=target_range.cover(parser.current_range),
            )
        )
        return ParsedExpression.absent()

    parser.bump()
    with parser.nested():
        if not _require_expression(parser, parse_expression(parser)):
            return ParsedExpression.absent()

    parser.emit(AssignEvent())
    return ParsedExpression.present()


def _parse_ordering(parser: Parser) -> ParsedExpression:
    return _parse_binary(parser, ORDERING_OPERATORS, _parse_additive)


def _parse_additive(parser: Parser) -> ParsedExpression:
    return _parse_binary(parser, ADDITIVE_OPERATORS, _parse_multiplicative)


def _parse_multiplicative(parser: Parser) -> ParsedExpression:
    return _parse_binary(parser, MULTIPLICATIVE_OPERATORS, parse_unary)


def _parse_binary(
    parser: Parser,
    operators: dict[TokenKind, BinaryOperator],
    parse_operand: Callable[[Parser], ParsedExpression],
) -> ParsedExpression:
    left = parse_operand(parser)
    if left.is_absent():
        return left

    while parser.at_any(operators.keys()) and not parser.has_preceding_line_break:
        operator = operators[parser.current]
        parser.bump()
        if not _require_expression(parser, parse_operand(parser)):
            return ParsedExpression.absent()
        parser.emit(BinaryOperationEvent(operator=operator))
        left = ParsedExpression.present()

    return left


def parse_unary(parser: Parser) -> ParsedExpression:
    if not parser.at_any(UNARY_OPERATORS.keys()):
        return parse_call(parser)

    parser.emit(OpenUnaryEvent(operator=UNARY_OPERATORS[parser.current], offset=parser.position))
    parser.bump()
    with parser.nested():
        if not _require_expression(parser, parse_unary(parser)):
            return ParsedExpression.absent()

    parser.emit(CloseUnaryEvent())
    return ParsedExpression.present()


def parse_call(parser: Parser) -> ParsedExpression:
    callee = parse_primary(parser)
    if callee.is_absent():
        return callee

    while parser.at(TokenKind.LPAREN) and not parser.has_preceding_line_break:
        parser.emit(OpenCallEvent())
        parser.bump()
        with parser.nested():
            if not _parse_arguments(parser):
                return ParsedExpression.absent()

        if not parser.at(TokenKind.RPAREN):
            parser.error(_expected_token(parser, ")"))
            return ParsedExpression.absent()
        parser.emit(CloseCallEvent(end=parser.current_range.end))
        parser.bump()
        callee = ParsedExpression.present()

    return callee


def _parse_arguments(parser: Parser) -> bool:
    if parser.at(TokenKind.RPAREN):
        return True

    while True:
        if not _require_expression(parser, parse_expression(parser)):
            return False
        if not parser.eat(TokenKind.COMMA):
            return True


def parse_primary(parser: Parser) -> ParsedExpression:
    kind = parser.current

    if kind in _LEAF_KINDS:
        begin, end = parser.current_range.as_tuple()
        lexeme = parser.current_text
        if kind == TokenKind.INT and int(lexeme) > INT64_MAX:
            parser.error(parser.diagnostic(PARSER_INTEGER_OUT_OF_RANGE))
            parser.bump()
            return ParsedExpression.absent()
        if kind == TokenKind.FLOAT and math.isinf(float(lexeme)):
            parser.error(parser.diagnostic(PARSER_FLOAT_OUT_OF_RANGE))
            parser.bump()
            return ParsedExpression.absent()
        parser.emit(LeafEvent(kind=_LEAF_KINDS[kind], begin=begin, end=end, lexeme=lexeme))
        parser.bump()
        return ParsedExpression.present(is_identifier=kind == TokenKind.IDENTIFIER)

    if kind == TokenKind.LPAREN:
        parser.bump()
        with parser.nested():
            if not _require_expression(parser, parse_expression(parser)):
                return ParsedExpression.absent()
        if not parser.eat(TokenKind.RPAREN):
            parser.error(_expected_token(parser, ")"))
            return ParsedExpression.absent()
        return ParsedExpression.present()

    return ParsedExpression.absent()


def _parse_condition(parser: Parser) -> bool:
    return _require_expression(parser, parse_expression(parser))


def _require_expression(parser: Parser, parsed: ParsedExpression) -> bool:
    if parsed.is_absent():
        parser.error(parser.diagnostic(PARSER_EXPECTED_EXPRESSION))
        return False
    return True


def _recover_statement(parser: Parser, *, stalled: bool) -> None:
    """Skip to the next statement boundary: `;`, `}`, end of input or a new line."""
    if stalled and not parser.at(TokenKind.EOF):
        parser.bump()

    while not parser.at_any(_STATEMENT_RECOVERY) and not parser.has_preceding_line_break:
        parser.bump()


def _expected_token(parser: Parser, text: str) -> Diagnostic:
    return parser.diagnostic(PARSER_EXPECTED_TOKEN, message=f"Expected `{text}`")


def _unexpected_token(parser: Parser) -> Diagnostic:
    if parser.at(TokenKind.EOF):
        message = "Unexpected end of input"
    else:
        message = f"Unexpected token `{parser.current_text}`"
    return parser.diagnostic(PARSER_UNEXPECTED_TOKEN, message=message)
