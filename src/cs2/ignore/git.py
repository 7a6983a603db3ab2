"""Suppression of diagnostics in files ignored by git.

``git clean -ndX`` lists, without deleting anything, every path that a
clean of ignored files would remove.  Diagnostics whose file is one of
those paths, or lies inside one of the listed directories, are flagged
as suppressed.  They stay in the list so the report can count them.

Usage
-----
::

    from cs2.ignore import GitIgnoreProvider, apply_ignore

    apply_ignore(diagnostics, GitIgnoreProvider())
"""
from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from cs2.core.diagnostics import Diagnostic

logger = logging.getLogger(__name__)

_GIT_CLEAN_ARGS: tuple[str, ...] = ("git", "clean", "-ndX")
_REMOVE_PREFIX = "Would remove "


@runtime_checkable
class IgnoredPathsProvider(Protocol):
    """Anything that can list the paths git would treat as ignored.

    Returns ``None`` when the listing cannot be obtained, which callers
    treat as "nothing is ignored".
    """

    def __call__(self) -> list[str] | None: ...


class GitIgnoreProvider:
    """List ignored paths by running ``git clean -ndX``.

    Parameters
    ----------
    cwd:
        Directory to run git in.  Defaults to the current directory.
    git:
        Name or path of the git executable.
    """

    def __init__(self, cwd: str | Path | None = None, git: str = "git") -> None:
        self._cwd = cwd
        self._args = (git, *_GIT_CLEAN_ARGS[1:])

    def __call__(self) -> list[str] | None:
        try:
            completed = subprocess.run(
                self._args,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("Could not run %s: %s", " ".join(self._args), exc)
            return None

        if completed.returncode != 0:
            # Most likely not inside a git repository
            logger.debug(
                "%s exited with %d: %s",
                " ".join(self._args),
                completed.returncode,
                completed.stderr.strip(),
            )
            return None

        return parse_clean_output(completed.stdout)


def parse_clean_output(output: str) -> list[str]:
    """Turn ``git clean -n`` output into a list of paths."""
    return output.replace(_REMOVE_PREFIX, "").split("\n")


def is_ignored(path: str, candidate: str) -> bool:
    """Return True if ``path`` is ``candidate`` or lies inside the directory ``candidate``.

    Only candidates ending with ``/`` are treated as directories.
    """
    if not candidate:
        return False
    return path == candidate or (candidate.endswith("/") and path.startswith(candidate))


def apply_ignore(
    diagnostics: Sequence[Diagnostic],
    provider: IgnoredPathsProvider,
) -> int:
    """Flag every diagnostic whose file is ignored by git.

    Parameters
    ----------
    diagnostics:
        The diagnostics to flag.  Modified in place; nothing is removed
        and no flag is ever cleared.
    provider:
        Source of the ignored-path listing.

    Returns
    -------
    int
        Number of diagnostics that became suppressed during this call.
    """
    candidates = provider()
    if candidates is None:
        logger.debug("No ignore listing available; skipping ignore filter")
        return 0

    candidates = [c for c in candidates if c]
    newly_suppressed = 0
    for diagnostic in diagnostics:
        if diagnostic.suppressed:
            continue
        if any(is_ignored(diagnostic.file, candidate) for candidate in candidates):
            diagnostic.suppressed = True
            newly_suppressed += 1

    logger.debug(
        "Suppressed %d diagnostic(s) using %d ignored path(s)",
        newly_suppressed,
        len(candidates),
    )
    return newly_suppressed
