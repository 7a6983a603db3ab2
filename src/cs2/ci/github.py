"""GitHub Actions adapter: workflow-command annotations.

Each visible diagnostic becomes one line such as::

    ::error file=src/main.c,line=12,col=3,title=MAJOR [C-O1]::Bad indentation

which the Actions runner turns into an inline annotation on the diff.
"""
from __future__ import annotations

from collections.abc import Sequence

from cs2.ci.base import CiAdapter
from cs2.ci.registry import adapters
from cs2.core.diagnostics import Diagnostic, Severity

_COMMANDS: dict[Severity, str] = {
    Severity.FATAL: "error",
    Severity.MAJOR: "error",
    Severity.MINOR: "warning",
    Severity.INFO: "notice",
}


def escape_data(value: str) -> str:
    """Escape the message part of a workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a ``key=value`` property of a workflow command."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


@adapters.register("github")
class GithubAdapter(CiAdapter):
    """Emits GitHub Actions ``::error``/``::warning``/``::notice`` commands."""

    def format(self, diagnostic: Diagnostic) -> str:
        """Return the workflow command for a single diagnostic."""
        properties = [f"file={escape_property(diagnostic.file)}"]
        if diagnostic.line is not None:
            properties.append(f"line={diagnostic.line}")
        if diagnostic.column is not None:
            properties.append(f"col={diagnostic.column}")
        title = f"{diagnostic.severity.label} [{diagnostic.rule}]"
        properties.append(f"title={escape_property(title)}")

        message = diagnostic.description
        if diagnostic.occurrences > 1:
            message += f" (x{diagnostic.occurrences})"

        command = _COMMANDS[diagnostic.severity]
        return f"::{command} {','.join(properties)}::{escape_data(message)}"

    def emit(self, diagnostics: Sequence[Diagnostic]) -> None:
        for diagnostic in self.visible(diagnostics):
            self.stream.write(self.format(diagnostic) + "\n")
