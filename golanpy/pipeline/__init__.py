"""Parse/run carriers and the one-call entrypoint."""

from golanpy.parser.parse import ParsedProgram
from golanpy.pipeline.entrypoints import run_source
from golanpy.pipeline.result import RunResult

__all__ = ["ParsedProgram", "RunResult", "run_source"]
