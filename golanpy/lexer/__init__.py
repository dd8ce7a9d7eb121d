"""Lexer."""

from golanpy.lexer.lexer import Lexer, dump_tokens, token_text, unescape_string
from golanpy.lexer.tokens import KEYWORDS, Token, TokenFlags, TokenKind

__all__ = [
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "token_text",
    "unescape_string",
]
