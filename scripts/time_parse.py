#!/usr/bin/env python3
"""Measure golan parse (and optionally evaluation) throughput.

Without `--root` a synthetic loop-heavy program is repeated `--copies` times.
`--profile` wraps every pass in cProfile and prints the hottest functions.
"""

from __future__ import annotations

import argparse
import cProfile
from collections.abc import Iterable
from dataclasses import dataclass
import io
import logging
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from golanpy.parser import parse
from golanpy.runtime import Engine, EngineOptions

logger = logging.getLogger("golanpy.scripts.time_parse")

SYNTHETIC_PROGRAM = """\
i = 0
total = 0
while i < 200 {
  if i % 3 == 0 { total = total + i } elsif i % 5 == 0 { total = total - 1 } else { total = total * 1 }
  i = i + 1
}
total
"""


@dataclass(frozen=True, slots=True)
class PassStats:
    seconds: float
    statements: int
    diagnostics: int
    failed_runs: int


def load_workload(root: Path | None, copies: int) -> list[str]:
    if root is None:
        return [SYNTHETIC_PROGRAM] * max(copies, 1)
    return [path.read_text(encoding="utf-8") for path in sorted(root.rglob("*.golan")) if path.is_file()]


def run_pass(sources: Iterable[str], *, evaluate: bool) -> PassStats:
    statements = diagnostics = failed_runs = 0
    started = time.perf_counter()
    for text in sources:
        parsed = parse(text)
        diagnostics += len(parsed.diagnostics)
        if parsed.root is None:
            continue
        statements += len(parsed.root.statements)
        if evaluate and not Engine(EngineOptions(output=io.StringIO())).execute(parsed.root).ok:
            failed_runs += 1
    return PassStats(time.perf_counter() - started, statements, diagnostics, failed_runs)


def benchmark(sources: list[str], *, warmups: int, runs: int, evaluate: bool, progress: bool) -> list[PassStats]:
    passes = [("warmup", index) for index in range(warmups)] + [("run", index) for index in range(runs)]
    measured: list[PassStats] = []
    for kind, index in passes:
        label = f"{kind} {index + 1}/{warmups if kind == 'warmup' else runs}"
        stats = run_pass(tqdm(sources, desc=label, unit="src", disable=not progress), evaluate=evaluate)
        logger.debug("%s took %.4fs", label, stats.seconds)
        if kind == "run":
            measured.append(stats)
    return measured


def report(sources: list[str], measured: list[PassStats], warmups: int) -> None:
    seconds = [stats.seconds for stats in measured]
    last = measured[-1]
    mean = statistics.mean(seconds)
    print(f"sources            {len(sources)}")
    print(f"statements         {last.statements}")
    print(f"diagnostics        {last.diagnostics}")
    print(f"failed runs        {last.failed_runs}")
    print(f"passes             {len(measured)} measured, {warmups} warmup")
    print(f"best / median      {min(seconds):.4f}s / {statistics.median(seconds):.4f}s")
    print(f"mean / worst       {mean:.4f}s / {max(seconds):.4f}s")
    print(f"sources per second {len(sources) / mean:.1f}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--root", type=Path, help="Directory searched recursively for *.golan files")
    parser.add_argument("--copies", type=int, default=200, help="Copies of the synthetic program per pass")
    parser.add_argument("--runs", type=int, default=5, help="Measured passes")
    parser.add_argument("--warmups", type=int, default=1, help="Unmeasured passes run first")
    parser.add_argument("--evaluate", action="store_true", help="Execute every program that parsed")
    parser.add_argument("--no-progress", action="store_true", help="Hide tqdm bars")
    parser.add_argument("--profile", action="store_true", help="Profile all passes with cProfile")
    parser.add_argument("--profile-top", type=int, default=30, help="Rows of profile output")
    parser.add_argument("--profile-sort", default="tottime", help="pstats sort key")
    parser.add_argument("--verbose", action="store_true", help="Log per-pass timings")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.root is not None and not args.root.is_dir():
        parser.error(f"--root is not a directory: {args.root}")
    sources = load_workload(args.root, args.copies)
    if not sources:
        parser.error(f"no .golan files under {args.root}")

    warmups = max(args.warmups, 0)
    options = dict(warmups=warmups, runs=max(args.runs, 1), evaluate=args.evaluate, progress=not args.no_progress)

    if not args.profile:
        report(sources, benchmark(sources, **options), warmups)
        return 0

    profiler = cProfile.Profile()
    measured = profiler.runcall(benchmark, sources, **options)
    report(sources, measured, warmups)
    stream = io.StringIO()
    pstats.Stats(profiler, stream=stream).sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
    print("\nprofile:")
    print(stream.getvalue())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
