"""Line parser for coding-style checker output.

Each line of checker output either describes one finding or is noise
(banners, blank lines, progress messages).  ``parse_line`` extracts a
``Diagnostic`` from the former and returns ``None`` for the latter.

Usage
-----
::

    from cs2.parser import parse_line

    diagnostic = parse_line("./foo.c:12:3: something Major] Bad indentation (C-O1) extra")
    assert diagnostic.file == "foo.c"
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from cs2.core.diagnostics import Diagnostic, Severity

logger = logging.getLogger(__name__)

#: file, optional line, optional column, severity keyword, description, rule
LINE_PATTERN: re.Pattern[str] = re.compile(
    r"^([^:]+):?([0-9]*):?([0-9]*):.*(Minor|Major|Info|Fatal)] (.*?) \(([A-Z]-[A-Z][0-9]).*$"
)


def _optional_int(text: str) -> int | None:
    return int(text) if text else None


def _strip_leading_dot(path: str) -> str:
    return path[2:] if path.startswith("./") else path


def parse_line(line: str) -> Diagnostic | None:
    """Parse one line of checker output.

    Parameters
    ----------
    line:
        A single line, without its trailing newline.

    Returns
    -------
    Diagnostic | None
        The extracted diagnostic, or ``None`` if the line does not
        describe a finding.

    Raises
    ------
    SeverityParseError
        If the matched severity keyword is not a known level.
    """
    match = LINE_PATTERN.match(line)
    if match is None:
        return None

    file, line_nb, col_nb, keyword, description, rule = match.groups()
    return Diagnostic(
        file=_strip_leading_dot(file),
        line=_optional_int(line_nb),
        column=_optional_int(col_nb),
        severity=Severity.from_keyword(keyword),
        rule=rule,
        description=description,
    )


def parse_lines(lines: Iterable[str]) -> list[Diagnostic]:
    """Parse every line, keeping only those that describe a finding.

    Trailing ``\\r`` and ``\\n`` characters are removed before matching,
    so the output of ``file.readlines()`` can be passed directly.
    """
    diagnostics: list[Diagnostic] = []
    skipped = 0
    for raw in lines:
        diagnostic = parse_line(raw.rstrip("\r\n"))
        if diagnostic is None:
            skipped += 1
            continue
        diagnostics.append(diagnostic)

    logger.debug("Parsed %d diagnostic(s), skipped %d line(s)", len(diagnostics), skipped)
    return diagnostics
