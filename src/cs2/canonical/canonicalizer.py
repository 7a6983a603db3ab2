"""Deterministic ordering and deduplication of diagnostics.

Diagnostics are ordered by file name (case-insensitive), then column,
then line.  This is the order historically produced by three stable
sorts applied by line, then column, then file; it is kept as-is because
the report groups files by contiguity and the merge step relies on
equal diagnostics being neighbours.

After sorting, neighbouring equal diagnostics are folded into one
record whose ``occurrences`` counts how many raw lines it stands for.
"""
from __future__ import annotations

from collections.abc import Iterable

from cs2.core.diagnostics import Diagnostic

SortKey = tuple[str, tuple[bool, int], tuple[bool, int]]


def _absent_first(value: int | None) -> tuple[bool, int]:
    return (value is not None, value or 0)


def sort_key(diagnostic: Diagnostic) -> SortKey:
    """Return the canonical ordering key of ``diagnostic``.

    A missing line or column sorts before any present value.
    """
    return (
        diagnostic.file.lower(),
        _absent_first(diagnostic.column),
        _absent_first(diagnostic.line),
    )


def sort_diagnostics(diagnostics: list[Diagnostic]) -> None:
    """Sort ``diagnostics`` in place into canonical order (stable)."""
    diagnostics.sort(key=sort_key)


def merge_adjacent(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Fold runs of equal neighbouring diagnostics into single records.

    The first diagnostic of a run is kept, along with its description,
    and its ``occurrences`` absorbs those of the others.  Equal
    diagnostics that are not neighbours are left separate.

    Parameters
    ----------
    diagnostics:
        Diagnostics, normally already in canonical order.

    Returns
    -------
    list[Diagnostic]
        A new list; the kept records are the original objects.
    """
    merged: list[Diagnostic] = []
    for diagnostic in diagnostics:
        if merged and merged[-1] == diagnostic:
            merged[-1].occurrences += diagnostic.occurrences
        else:
            merged.append(diagnostic)
    return merged


def canonicalize(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    """Sort ``diagnostics`` and merge neighbouring duplicates, in place.

    Returns the same list object for convenience.
    """
    sort_diagnostics(diagnostics)
    diagnostics[:] = merge_adjacent(diagnostics)
    return diagnostics
