"""Terminal report for canonical diagnostics.

The ``Reporter`` prints every visible diagnostic, grouped under a file
header, followed by a one-line summary:

- suppressed diagnostics are skipped but counted
- a file header is printed once per run of consecutive diagnostics for
  the same file, so the input must be in canonical order
- each line reads ``LABEL [RULE]: description (file:line:col) (xN)``

Usage
-----
::

    from cs2.reporter import Reporter

    has_findings = Reporter().report(diagnostics)
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

from cs2.core.diagnostics import Diagnostic, Severity

_LOCATION_STYLE = "bright_black"
_HEADER_STYLE = "bold"


@dataclass(frozen=True)
class Summary:
    """Counts derived from a list of diagnostics.

    Parameters
    ----------
    suppressed:
        Number of diagnostics flagged by the ignore filter.
    by_severity:
        Number of visible diagnostics per severity, in severity order.
    """

    suppressed: int
    by_severity: dict[Severity, int] = field(default_factory=dict)

    @property
    def visible(self) -> int:
        """Number of diagnostics that were not suppressed."""
        return sum(self.by_severity.values())

    @property
    def has_findings(self) -> bool:
        """Return True if at least one diagnostic was not suppressed."""
        return self.visible > 0


def summarize(diagnostics: Sequence[Diagnostic]) -> Summary:
    """Count suppressed diagnostics and visible ones per severity.

    Each record counts once regardless of ``occurrences``.
    """
    by_severity = {severity: 0 for severity in Severity}
    suppressed = 0
    for diagnostic in diagnostics:
        if diagnostic.suppressed:
            suppressed += 1
        else:
            by_severity[diagnostic.severity] += 1
    return Summary(suppressed=suppressed, by_severity=by_severity)


class Reporter:
    """Renders diagnostics to a rich ``Console``.

    Parameters
    ----------
    console:
        Destination console.  Defaults to a new stdout console.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    def report(self, diagnostics: Sequence[Diagnostic]) -> bool:
        """Print the body and summary for ``diagnostics``.

        Returns
        -------
        bool
            True if at least one diagnostic is not suppressed.
        """
        previous_file: str | None = None
        for diagnostic in diagnostics:
            if diagnostic.suppressed:
                continue
            if diagnostic.file != previous_file:
                self._print(Text(f"{diagnostic.file}:", style=_HEADER_STYLE))
                previous_file = diagnostic.file
            self._print(self.render(diagnostic))

        summary = summarize(diagnostics)
        self.print_summary(summary)
        return summary.has_findings

    def render(self, diagnostic: Diagnostic) -> Text:
        """Return the styled body line for a single diagnostic."""
        severity = diagnostic.severity
        text = Text()
        text.append(f"{severity.label} [{diagnostic.rule}]:", style=severity.style)
        text.append(f" {diagnostic.description} ")
        location = f"({diagnostic.location})"
        if diagnostic.occurrences > 1:
            location += f" (x{diagnostic.occurrences})"
        text.append(location, style=_LOCATION_STYLE)
        return text

    def print_summary(self, summary: Summary) -> None:
        """Print the trailing summary block."""
        if summary.suppressed > 0:
            text = Text()
            text.append(f"{summary.suppressed} ignored errors", style=_HEADER_STYLE)
            text.append(" (use --no-ignore to see them)")
            self._print(text)

        if not summary.has_findings:
            self._print(Text("There are no coding style errors!", style=_HEADER_STYLE))
            return

        text = Text()
        text.append(f"{summary.visible} error(s)", style=_HEADER_STYLE)
        text.append(": ")
        parts = []
        for severity in Severity:
            style = severity.style
            if severity is Severity.FATAL:
                style = f"bold {style}"
            parts.append(
                Text(f"{summary.by_severity.get(severity, 0)} {severity.label.lower()}", style=style)
            )
        text.append_text(Text(", ").join(parts))
        self._print(text)

    def _print(self, text: Text) -> None:
        self._console.print(text, soft_wrap=True)


def report(diagnostics: Sequence[Diagnostic], console: Console | None = None) -> bool:
    """Convenience function: report ``diagnostics`` to ``console``.

    Returns True if at least one diagnostic is not suppressed.
    """
    return Reporter(console).report(diagnostics)
