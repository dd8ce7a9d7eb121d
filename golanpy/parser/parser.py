"""Recursive-descent driver: token cursor, event sink and diagnostics."""

from collections.abc import Collection, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from golanpy.diagnostics import Diagnostic, DiagnosticSpec, InternalError
from golanpy.diagnostics.codes import PARSER_NESTING_TOO_DEEP
from golanpy.lexer import TokenKind
from golanpy.parser.event import Event
from golanpy.parser.options import ParserOptions
from golanpy.parser.token_source import TokenSource
from golanpy.text import LineIndex, TextRange


class NestingLimitExceeded(Exception):
    """Unwinds the whole descent once `max_nesting_depth` is reached."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


@dataclass(slots=True)
class ParserProgress:
    """Guard for list-style loops: every iteration must start past the previous one."""

    _last_offset: int = -1

    def assert_progressing(self, parser: "Parser") -> None:
        offset = parser.position
        if offset <= self._last_offset:
            raise InternalError(f"parser stalled on {parser.current.name} at {parser.current_range}")
        self._last_offset = offset


class Parser:
    """Cursor over significant tokens that records construction events and errors.

    Grammar routines in `golanpy.parser.grammar` drive it; the parser itself
    knows nothing about golan syntax.
    """

    def __init__(
        self,
        tokens: TokenSource,
        line_index: LineIndex,
        options: ParserOptions | None = None,
    ) -> None:
        self.tokens = tokens
        self.line_index = line_index
        self.options = options if options is not None else ParserOptions()
        self._events: list[Event] = []
        self._errors: list[Diagnostic] = []
        self._depth = 0

    @property
    def current(self) -> TokenKind:
        return self.tokens.current

    @property
    def current_range(self) -> TextRange:
        return self.tokens.current_range

    @property
    def current_text(self) -> str:
        return self.tokens.current_text()

    @property
    def position(self) -> int:
        """Start offset of the current token."""
        return self.tokens.position

    @property
    def has_preceding_line_break(self) -> bool:
        return self.tokens.has_preceding_line_break

    def at(self, kind: TokenKind) -> bool:
        return self.tokens.current == kind

    def at_any(self, kinds: Collection[TokenKind]) -> bool:
        return self.tokens.current in kinds

    def bump(self) -> None:
        self.tokens.bump()

    def eat(self, kind: TokenKind) -> bool:
        found = self.at(kind)
        if found:
            self.bump()
        return found

    def emit(self, event: Event) -> None:
        self._events.append(event)

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Count one level of syntactic nesting for the duration of the block."""
        limit = self.options.max_nesting_depth
        self._depth += 1
        try:
            if self._depth > limit:
                message = f"{PARSER_NESTING_TOO_DEEP.message} (limit {limit})"
                raise NestingLimitExceeded(self.diagnostic(PARSER_NESTING_TOO_DEEP, message=message))
            yield
        finally:
            self._depth -= 1

    def diagnostic(
        self,
        spec: DiagnosticSpec,
        *,
        message: str | None = None,
        rng: TextRange | None = None,
    ) -> Diagnostic:
        """Build a diagnostic for `rng`, defaulting to the current token."""
        if rng is None:
            rng = self.current_range
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            position=self.line_index.span(rng.start, rng.end),
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
            range=rng,
        )

    def error(self, diagnostic: Diagnostic) -> None:
        # Keep only the first report at a given offset.
        if self._errors and diagnostic.range is not None:
            previous = self._errors[-1].range
            if previous is not None and previous.start == diagnostic.range.start:
                return
        self._errors.append(diagnostic)

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._errors
