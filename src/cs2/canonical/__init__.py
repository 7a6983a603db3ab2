"""Canonical ordering and deduplication module."""
from __future__ import annotations

from cs2.canonical.canonicalizer import (
    canonicalize,
    merge_adjacent,
    sort_diagnostics,
    sort_key,
)

__all__ = ["canonicalize", "merge_adjacent", "sort_diagnostics", "sort_key"]
