"""GitLab adapter: Code Quality report.

Writes a JSON array in the Code Climate subset understood by GitLab's
``artifacts:reports:codequality``.  Redirect the output to a file and
declare it as the job's code quality artifact.
"""
from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence
from typing import Any

from cs2.ci.base import CiAdapter
from cs2.ci.registry import adapters
from cs2.core.diagnostics import Diagnostic, Severity

_SEVERITIES: dict[Severity, str] = {
    Severity.FATAL: "blocker",
    Severity.MAJOR: "major",
    Severity.MINOR: "minor",
    Severity.INFO: "info",
}


def fingerprint(diagnostic: Diagnostic) -> str:
    """Stable identifier GitLab uses to track an issue across pipelines."""
    file, line, column, severity, rule = diagnostic.identity
    raw = f"{file}:{line or ''}:{column or ''}:{severity.value}:{rule}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


@adapters.register("gitlab")
class GitlabAdapter(CiAdapter):
    """Emits a GitLab Code Quality JSON report."""

    def to_issue(self, diagnostic: Diagnostic) -> dict[str, Any]:
        """Return the Code Quality issue object for one diagnostic."""
        return {
            "description": f"[{diagnostic.rule}] {diagnostic.description}",
            "check_name": diagnostic.rule,
            "fingerprint": fingerprint(diagnostic),
            "severity": _SEVERITIES[diagnostic.severity],
            "location": {
                "path": diagnostic.file,
                "lines": {"begin": diagnostic.line if diagnostic.line is not None else 1},
            },
        }

    def emit(self, diagnostics: Sequence[Diagnostic]) -> None:
        issues = [self.to_issue(d) for d in self.visible(diagnostics)]
        json.dump(issues, self.stream, indent=2)
        self.stream.write("\n")
