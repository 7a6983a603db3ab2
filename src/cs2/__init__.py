"""cs2 — coding-style report: parse, deduplicate and summarize checker output.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import cs2

    diagnostics = cs2.parse([
        "./a.c:5:1: x Minor] trailing space (C-S1) y",
        "./a.c:5:1: x Minor] trailing space (C-S1) y",
        "./b.c: Fatal] missing header (C-H1)",
    ])
    diagnostics = cs2.canonicalize(diagnostics)
    failing = cs2.report(diagnostics)

    cs2.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from rich.console import Console

    from cs2.core.diagnostics import Diagnostic


def parse(lines: Iterable[str]) -> list["Diagnostic"]:
    """Parse raw checker output into diagnostics, dropping unrelated lines.

    Raises
    ------
    cs2.core.SeverityParseError
        If a matched line carries an unknown severity keyword.
    """
    from cs2.parser import parse_lines

    return parse_lines(lines)


def canonicalize(diagnostics: list["Diagnostic"]) -> list["Diagnostic"]:
    """Sort ``diagnostics`` and merge neighbouring duplicates, in place."""
    from cs2.canonical import canonicalize as _canonicalize

    return _canonicalize(diagnostics)


def report(diagnostics: Sequence["Diagnostic"], console: "Console | None" = None) -> bool:
    """Print ``diagnostics`` and their summary.

    Returns
    -------
    bool
        True if at least one diagnostic is not suppressed.
    """
    from cs2.reporter import report as _report

    return _report(diagnostics, console=console)


__all__ = [
    "__version__",
    "parse",
    "canonicalize",
    "report",
]
