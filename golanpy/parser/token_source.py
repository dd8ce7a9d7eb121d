"""Significant-token view over the lexer."""

from golanpy.diagnostics import Diagnostic
from golanpy.lexer import Lexer, Token, TokenKind
from golanpy.text import TextRange


class TokenSource:
    """Pulls tokens from the lexer on demand and hides trivia.

    Line breaks stay visible through the PRECEDING_LINE_BREAK flag the lexer
    puts on the first significant token after a newline.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current: Token = self._next_significant()

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def token(self) -> Token:
        return self._current

    @property
    def current(self) -> TokenKind:
        return self._current.kind

    @property
    def current_range(self) -> TextRange:
        return self._current.range

    @property
    def position(self) -> int:
        return self._current.range.start

    @property
    def has_preceding_line_break(self) -> bool:
        return self._current.has_preceding_line_break()

    def current_text(self) -> str:
        return self._current.text(self._lexer.source)

    def bump(self) -> None:
        """Advance to the next significant token; EOF is sticky."""
        if self._current.kind is not TokenKind.EOF:
            self._current = self._next_significant()

    def finish(self) -> list[Diagnostic]:
        return self._lexer.finish()

    def _next_significant(self) -> Token:
        token = self._lexer.next_token()
        while token.kind.is_trivia:
            token = self._lexer.next_token()
        return token
