#!/usr/bin/env python3
"""Dump the tokens, AST and (optionally) the evaluation result for a golan source file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from golanpy.ast import dump_tree
from golanpy.lexer import Lexer, dump_tokens
from golanpy.parser import ParseMode, parse
from golanpy.pipeline import run_source


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the golan AST for a source file")
    parser.add_argument("path", type=Path, nargs="?", help="Source file (default: read stdin)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.STRICT.value,
        help="Parser mode (default: strict)",
    )
    parser.add_argument("--tokens", action="store_true", help="Also print the token stream")
    parser.add_argument("--run", action="store_true", help="Evaluate the program after dumping it")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.path.read_text(encoding="utf-8") if args.path is not None else sys.stdin.read()
    mode = ParseMode(args.mode)

    if args.tokens:
        lexer = Lexer(text)
        dump_tokens(lexer.lex(), text, lexer.finish())
        print()

    parsed = parse(text, mode=mode)
    for diagnostic in parsed.diagnostics:
        print(f"{diagnostic.severity}: {diagnostic.code} {diagnostic}", file=sys.stderr)
    if parsed.root is None:
        return 1

    dump_tree(parsed.root, sys.stdout)

    if args.run:
        result = run_source(text, parse=parsed)
        if result.internal_error is not None:
            print(f"internal error: {result.internal_error}", file=sys.stderr)
            return 2
        if result.error is not None:
            print(f"error: {result.error}", file=sys.stderr)
            return 1
        print(f"=> {result.value.literal_text()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
