"""Combining and ordering diagnostics from several producers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

from golanpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    return list(chain.from_iterable(groups))


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(diagnostic.severity == "error" for diagnostic in diagnostics)


def _source_order(diagnostic: Diagnostic) -> tuple[tuple[int, int], tuple[int, int], str, str]:
    return (diagnostic.position.first, diagnostic.position.last, diagnostic.code, diagnostic.message)


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Source order; ties broken by code then message so output is stable."""
    return sorted(diagnostics, key=_source_order)
