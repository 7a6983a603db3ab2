"""End-to-end report pipeline.

``run_pipeline`` chains the stages in their only valid order::

    raw lines -> parse -> ignore filter -> canonicalize -> report (-> CI adapter)

Example
-------
::

    from cs2.pipeline import ReportOptions, read_lines, run_pipeline

    lines = read_lines("style.log")
    failing = run_pipeline(lines, ReportOptions(no_ignore=True))
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from cs2.canonical import canonicalize
from cs2.core.errors import InputUnavailableError
from cs2.ignore import GitIgnoreProvider, IgnoredPathsProvider, apply_ignore
from cs2.parser import parse_lines
from cs2.reporter import Reporter

if TYPE_CHECKING:
    from rich.console import Console

    from cs2.ci.base import CiAdapter

logger = logging.getLogger(__name__)

STDIN = "-"


@dataclass(frozen=True)
class ReportOptions:
    """Run configuration collected from the command line.

    Parameters
    ----------
    no_ignore:
        Skip the git ignore filter and report every diagnostic.
    """

    no_ignore: bool = False


def read_lines(source: str = STDIN) -> list[str]:
    """Read raw checker output from a file, or from stdin when ``source`` is ``"-"``.

    Bytes in a file that are not valid UTF-8 are replaced, so one bad byte
    does not lose the rest of the report.

    Raises
    ------
    InputUnavailableError
        If the file cannot be read, or stdin is an interactive terminal
        with nothing piped into it.
    """
    if source == STDIN:
        if sys.stdin is None or sys.stdin.isatty():
            raise InputUnavailableError(
                "stdin", "nothing was piped in; pass the checker output or a file"
            )
        return sys.stdin.read().splitlines()

    try:
        return Path(source).read_text(encoding="utf-8", errors="replace").splitlines()
    except FileNotFoundError:
        raise InputUnavailableError(source, "file not found") from None
    except OSError as exc:
        raise InputUnavailableError(source, str(exc)) from exc


def run_pipeline(
    lines: Iterable[str],
    options: ReportOptions | None = None,
    *,
    ignore_provider: IgnoredPathsProvider | None = None,
    adapter: "CiAdapter | None" = None,
    console: "Console | None" = None,
) -> bool:
    """Parse, filter, canonicalize and report checker output.

    Parameters
    ----------
    lines:
        Raw checker output, one line per item.
    options:
        Run configuration.  Defaults to ``ReportOptions()``.
    ignore_provider:
        Source of git-ignored paths.  Defaults to ``GitIgnoreProvider()``.
    adapter:
        CI adapter that receives the finalized list, if any.
    console:
        Destination of the terminal report.

    Returns
    -------
    bool
        True if at least one diagnostic was not suppressed, meaning the
        run should be treated as failing.
    """
    options = options if options is not None else ReportOptions()
    diagnostics = parse_lines(lines)

    if options.no_ignore:
        logger.debug("Ignore filter disabled")
    else:
        provider = ignore_provider if ignore_provider is not None else GitIgnoreProvider()
        apply_ignore(diagnostics, provider)

    canonicalize(diagnostics)
    has_findings = Reporter(console).report(diagnostics)

    if adapter is not None:
        adapter.emit(diagnostics)

    return has_findings
