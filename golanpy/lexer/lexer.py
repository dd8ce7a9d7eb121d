"""Regex-driven, lossless lexer."""

import re
from typing import Final

from golanpy.diagnostics import Diagnostic, DiagnosticSpec
from golanpy.diagnostics.codes import (
    LEXER_INVALID_ESCAPE,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
)
from golanpy.lexer.tokens import KEYWORDS, SYMBOLS, Token, TokenFlags, TokenKind
from golanpy.text import LineIndex, TextRange

_ESCAPES: Final[dict[str, str]] = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}

# Alternatives are tried in order; SYMBOLS lists two-character spellings first.
_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    rf"""
      (?P<NEWLINE>\r\n|\r|\n)
    | (?P<WHITESPACE>[ \t]+)
    | (?P<COMMENT>\#[^\r\n]*)
    | (?P<STRING>"(?:[^"\\\r\n]|\\[^\r\n]?)*(?P<closed>")?)
    | (?P<NUMBER>[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?)
    | (?P<WORD>[^\W\d]\w*)
    | (?P<SYMBOL>{"|".join(re.escape(symbol) for symbol in SYMBOLS)})
    """,
    re.VERBOSE,
)

_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"\\(.?)", re.DOTALL)


class Lexer:
    """Splits source into tokens, trivia included, one token per `next_token` call.

    Every character ends up in exactly one token. Characters no rule accepts
    become single-character SKIPPED tokens and an error diagnostic.
    """

    def __init__(self, source: str, *, line_index: LineIndex | None = None) -> None:
        self._source = source
        self._line_index = line_index if line_index is not None else LineIndex(source)
        self._offset = 0
        self._after_line_break = False
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def line_index(self) -> LineIndex:
        return self._line_index

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def is_eof(self) -> bool:
        return self._offset >= len(self._source)

    def next_token(self) -> Token:
        start = self._offset
        if self.is_eof:
            flags = TokenFlags.PRECEDING_LINE_BREAK if self._after_line_break else TokenFlags.NONE
            return Token(TokenKind.EOF, TextRange.empty(start), flags)

        found = _TOKEN_RE.match(self._source, start)
        if found is None:
            self._offset = start + 1
            self._report(
                LEXER_UNEXPECTED_CHARACTER,
                TextRange(start, self._offset),
                message=f"Unexpected character {self._source[start]!r}",
            )
            kind, flags = TokenKind.SKIPPED, TokenFlags.NONE
        else:
            self._offset = found.end()
            kind, flags = self._classify(found)

        if kind == TokenKind.NEWLINE:
            self._after_line_break = True
        if self._after_line_break:
            flags |= TokenFlags.PRECEDING_LINE_BREAK
        if not kind.is_trivia:
            self._after_line_break = False

        return Token(kind, TextRange(start, self._offset), flags)

    def lex(self) -> list[Token]:
        tokens = [self.next_token()]
        while tokens[-1].kind != TokenKind.EOF:
            tokens.append(self.next_token())
        return tokens

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics

    def _classify(self, found: re.Match[str]) -> tuple[TokenKind, TokenFlags]:
        text = found.group()
        match found.lastgroup:
            case "NUMBER":
                is_float = any(ch in text for ch in ".eE")
                return (TokenKind.FLOAT if is_float else TokenKind.INT), TokenFlags.NONE
            case "WORD":
                return KEYWORDS.get(text, TokenKind.IDENTIFIER), TokenFlags.NONE
            case "SYMBOL":
                return SYMBOLS[text], TokenFlags.NONE
            case "STRING":
                return TokenKind.STRING, self._check_string(found)
            case group:
                return TokenKind[group], TokenFlags.NONE

    def _check_string(self, found: re.Match[str]) -> TokenFlags:
        start = found.start()
        flags = TokenFlags.NONE
        for escape in _ESCAPE_RE.finditer(found.group()):
            flags |= TokenFlags.HAS_ESCAPE
            # A lone trailing backslash is covered by the unterminated-string error.
            if escape.group(1) and escape.group(1) not in _ESCAPES:
                self._report(LEXER_INVALID_ESCAPE, TextRange(start + escape.start(), start + escape.end()))
        if found.group("closed") is None:
            self._report(LEXER_UNTERMINATED_STRING, TextRange(start, found.end()))
        return flags

    def _report(self, spec: DiagnosticSpec, rng: TextRange, *, message: str | None = None) -> None:
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=message if message is not None else spec.message,
                position=self._line_index.span(rng.start, rng.end),
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
                range=rng,
            )
        )


def token_text(source: str, token: Token) -> str:
    return token.text(source)


def unescape_string(lexeme: str) -> str:
    """Decode a quoted string lexeme (quotes included) into its text."""
    body = lexeme[1:-1] if len(lexeme) >= 2 and lexeme.endswith('"') else lexeme[1:]
    return _ESCAPE_RE.sub(_decode_escape, body)


def _decode_escape(escape: re.Match[str]) -> str:
    ch = escape.group(1)
    return _ESCAPES.get(ch, ch) if ch else "\\"


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print one line per token, then the diagnostics if given."""
    for index, token in enumerate(tokens):
        flags = token.flags.name if token.flags else "-"
        print(f"{index:04d} {token.range!s:>12} {token.kind.name:<22} {flags:<22} {token.text(source)!r}")

    if diagnostics:
        print()
        for diagnostic in diagnostics:
            print(f"{diagnostic.severity}: {diagnostic.code} {diagnostic}")
