"""Diagnostic types produced from coding-style checker output.

A ``Diagnostic`` is one finding extracted from a single line of checker
output.  It is created by the line parser, flagged by the ignore filter,
and folded together with its equals by the canonicalizer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cs2.core.errors import SeverityParseError


class Severity(Enum):
    """Closed set of severity levels, most serious first.

    Declaration order is the order used by the summary line.
    """

    FATAL = "Fatal"
    MAJOR = "Major"
    MINOR = "Minor"
    INFO = "Info"

    @classmethod
    def from_keyword(cls, keyword: str) -> "Severity":
        """Return the severity matching a checker keyword such as ``"Major"``.

        Raises
        ------
        SeverityParseError
            If ``keyword`` is not exactly one of the four known keywords.
        """
        try:
            return cls(keyword)
        except ValueError:
            raise SeverityParseError(keyword) from None

    @property
    def label(self) -> str:
        """Upper-case label shown in the report, e.g. ``"FATAL"``."""
        return _LABELS[self]

    @property
    def style(self) -> str:
        """Rich style used to colour this severity."""
        return _STYLES[self]


_LABELS: dict[Severity, str] = {
    Severity.FATAL: "FATAL",
    Severity.MAJOR: "MAJOR",
    Severity.MINOR: "MINOR",
    Severity.INFO: "INFO",
}

_STYLES: dict[Severity, str] = {
    Severity.FATAL: "red",
    Severity.MAJOR: "red",
    Severity.MINOR: "bright_yellow",
    Severity.INFO: "cyan",
}


@dataclass(eq=False)
class Diagnostic:
    """A single coding-style finding.

    Parameters
    ----------
    file:
        Path of the offending file, without a leading ``./``.
    line:
        1-based line number, or ``None`` when the checker omitted it.
    column:
        1-based column number, or ``None`` when the checker omitted it.
    severity:
        How serious this finding is.
    rule:
        Short rule code, e.g. ``"C-O1"``.
    description:
        Human-readable explanation.  Not part of the identity.
    suppressed:
        Set by the ignore filter when the file is ignored by git.
    occurrences:
        Number of raw lines folded into this diagnostic.
    """

    file: str
    line: int | None
    column: int | None
    severity: Severity
    rule: str
    description: str = ""
    suppressed: bool = field(default=False)
    occurrences: int = field(default=1)

    @property
    def identity(self) -> tuple[str, int | None, int | None, Severity, str]:
        """The fields that decide whether two diagnostics are the same finding."""
        return (self.file, self.line, self.column, self.severity, self.rule)

    @property
    def location(self) -> str:
        """``file[:line][:column]``, omitting absent parts."""
        loc = self.file
        if self.line is not None:
            loc += f":{self.line}"
        if self.column is not None:
            loc += f":{self.column}"
        return loc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return self.identity == other.identity

    # Mutable records compared by a subset of fields must not be hashed
    __hash__ = None  # type: ignore[assignment]
