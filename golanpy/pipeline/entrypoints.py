"""Entrypoints that parse and evaluate in one call."""

from __future__ import annotations

import logging

from golanpy.diagnostics import InternalError
from golanpy.parser import ParsedProgram, ParseMode, ParserOptions
from golanpy.parser import parse as parse_text
from golanpy.pipeline.result import RunResult
from golanpy.runtime import Engine

logger = logging.getLogger(__name__)


def run_source(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: ParsedProgram | None = None,
    engine: Engine | None = None,
) -> RunResult:
    """Parse `text` and evaluate it with `engine` (a fresh Engine by default).

    Evaluation is skipped when parsing reported errors. Internal errors are
    logged and returned in `RunResult.internal_error` rather than raised.
    """
    try:
        resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    except InternalError as exc:
        logger.error("internal error while building the tree: %s", exc)
        return RunResult(
            parse=ParsedProgram(source_text=text, root=None, diagnostics=[]),
            internal_error=exc,
        )

    if resolved_parse.root is None:
        return RunResult(parse=resolved_parse)

    resolved_engine = engine if engine is not None else Engine()
    try:
        outcome = resolved_engine.execute(resolved_parse.root)
    except InternalError as exc:
        logger.error("internal error during evaluation: %s", exc)
        return RunResult(parse=resolved_parse, internal_error=exc)

    return RunResult(parse=resolved_parse, value=outcome.value, error=outcome.error)


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: ParsedProgram | None,
) -> ParsedProgram:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_text(text, options=options, mode=mode)
