"""High-level parse entrypoint for golan source text."""

import logging

from golanpy.diagnostics import collect_diagnostics, has_errors, sort_diagnostics
from golanpy.lexer import Lexer
from golanpy.parser.grammar import parse_program
from golanpy.parser.options import ParseMode, ParserOptions
from golanpy.parser.parse import ParsedProgram, build_tree
from golanpy.parser.parser import Parser
from golanpy.parser.token_source import TokenSource
from golanpy.text import LineIndex

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedProgram:
    """Parse `text` into a ParsedProgram.

    A trailing newline is appended when missing so that the final statement is
    always terminated. The builder is driven only when no error diagnostic was
    reported; warnings alone still produce a tree.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    if not text.endswith("\n"):
        text += "\n"

    line_index = LineIndex(text)
    lexer = Lexer(text, line_index=line_index)
    source = TokenSource(lexer)
    parser = Parser(source, line_index, options=resolved_options)

    parse_program(parser)
    events, parser_diagnostics = parser.finish()
    lexer_diagnostics = source.finish()
    diagnostics = sort_diagnostics(collect_diagnostics(lexer_diagnostics, parser_diagnostics))

    if has_errors(diagnostics):
        logger.debug("parse reported %d diagnostics; no tree built", len(diagnostics))
        return ParsedProgram(source_text=text, root=None, diagnostics=diagnostics)

    logger.debug("replaying %d construction events", len(events))
    root = build_tree(text, events, line_index)
    return ParsedProgram(source_text=text, root=root, diagnostics=diagnostics)
