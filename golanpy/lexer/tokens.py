"""Token kinds and the token record."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from golanpy.text import TextRange


class TokenKind(IntEnum):
    EOF = 0

    # trivia
    WHITESPACE = 1
    NEWLINE = 2
    COMMENT = 3
    SKIPPED = 4  # characters the lexer could not classify

    # atoms
    IDENTIFIER = 10
    INT = 11
    FLOAT = 12
    STRING = 13

    # keywords
    WHILE_KW = 20
    IF_KW = 21
    ELSIF_KW = 22
    ELSE_KW = 23
    TRUE_KW = 24
    FALSE_KW = 25

    # operators
    EQUAL = 30
    EQUAL_EQUAL = 31
    NOT_EQUAL = 32
    LESS_THAN = 33
    LESS_THAN_OR_EQUAL = 34
    GREATER_THAN = 35
    GREATER_THAN_OR_EQUAL = 36
    PLUS = 37
    MINUS = 38
    STAR = 39
    SLASH = 40
    PERCENT = 41
    BANG = 42

    # punctuation
    LPAREN = 50
    RPAREN = 51
    LBRACE = 52
    RBRACE = 53
    COMMA = 54
    SEMICOLON = 55

    @property
    def is_trivia(self) -> bool:
        return self in TRIVIA


TRIVIA: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT, TokenKind.SKIPPED}
)

KEYWORDS: Final[dict[str, TokenKind]] = {
    "while": TokenKind.WHILE_KW,
    "if": TokenKind.IF_KW,
    "elsif": TokenKind.ELSIF_KW,
    "else": TokenKind.ELSE_KW,
    "true": TokenKind.TRUE_KW,
    "false": TokenKind.FALSE_KW,
}

# Two-character spellings must be tried before their one-character prefixes.
SYMBOLS: Final[dict[str, TokenKind]] = {
    "==": TokenKind.EQUAL_EQUAL,
    "!=": TokenKind.NOT_EQUAL,
    "<=": TokenKind.LESS_THAN_OR_EQUAL,
    ">=": TokenKind.GREATER_THAN_OR_EQUAL,
    "=": TokenKind.EQUAL,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "!": TokenKind.BANG,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}


class TokenFlags(IntFlag):
    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0
    HAS_ESCAPE = 1 << 1


@dataclass(frozen=True, slots=True)
class Token:
    """One lexed token; trivia tokens included, so tokens cover the source losslessly."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def text(self, source: str) -> str:
        return self.range.slice(source)
