"""Git ignore filter module.

Exports ``apply_ignore``, the ``GitIgnoreProvider`` collaborator and the
``IgnoredPathsProvider`` protocol it satisfies.
"""
from __future__ import annotations

from cs2.ignore.git import (
    GitIgnoreProvider,
    IgnoredPathsProvider,
    apply_ignore,
    is_ignored,
    parse_clean_output,
)

__all__ = [
    "GitIgnoreProvider",
    "IgnoredPathsProvider",
    "apply_ignore",
    "is_ignored",
    "parse_clean_output",
]
