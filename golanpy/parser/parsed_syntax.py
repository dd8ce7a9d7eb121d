"""Outcome markers returned by expression routines."""

from enum import Enum, auto


class ParsedExpression(Enum):
    """What an expression routine managed to parse.

    Routines never return nodes (the builder creates those from events); they
    only report whether an expression was produced and whether it was a bare
    identifier, the one valid assignment target.
    """

    ABSENT = auto()
    EXPRESSION = auto()
    IDENTIFIER = auto()

    @staticmethod
    def present(*, is_identifier: bool = False) -> "ParsedExpression":
        return ParsedExpression.IDENTIFIER if is_identifier else ParsedExpression.EXPRESSION

    @staticmethod
    def absent() -> "ParsedExpression":
        return ParsedExpression.ABSENT

    @property
    def is_identifier(self) -> bool:
        return self is ParsedExpression.IDENTIFIER

    def is_present(self) -> bool:
        return self is not ParsedExpression.ABSENT

    def is_absent(self) -> bool:
        return self is ParsedExpression.ABSENT
