"""Parser infrastructure (token source + event-emitting parser + AST replay)."""

from golanpy.parser.event import (
    ConstructionSink,
    Event,
    LeafEvent,
    LeafKind,
    process_events,
)
from golanpy.parser.golan import parse
from golanpy.parser.grammar import parse_expression, parse_program, parse_statement_list
from golanpy.parser.options import ParseMode, ParserOptions
from golanpy.parser.parse import ParsedProgram, build_tree
from golanpy.parser.parsed_syntax import ParsedExpression
from golanpy.parser.parser import NestingLimitExceeded, Parser, ParserProgress
from golanpy.parser.token_source import TokenSource

__all__ = [
    "ConstructionSink",
    "Event",
    "LeafEvent",
    "LeafKind",
    "NestingLimitExceeded",
    "ParseMode",
    "ParsedExpression",
    "ParsedProgram",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "TokenSource",
    "build_tree",
    "parse",
    "parse_expression",
    "parse_program",
    "parse_statement_list",
    "process_events",
]
