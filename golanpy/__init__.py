"""golanpy: a small imperative scripting language with an event-built AST and a tree-walking evaluator."""

from golanpy.ast import ASTBuilder, dump_tree, format_tree
from golanpy.parser import ParsedProgram, ParseMode, ParserOptions, parse
from golanpy.pipeline import RunResult, run_source
from golanpy.runtime import Engine, EngineOptions, ExecutionResult

__all__ = [
    "ASTBuilder",
    "Engine",
    "EngineOptions",
    "ExecutionResult",
    "ParseMode",
    "ParsedProgram",
    "ParserOptions",
    "RunResult",
    "dump_tree",
    "format_tree",
    "parse",
    "run_source",
]
