"""Core domain types.

Foundational models and errors live here.  Submodules in core/ should
not import from ci/ or cli/.
"""
from __future__ import annotations

from cs2.core.diagnostics import Diagnostic, Severity
from cs2.core.errors import (
    Cs2Error,
    InputUnavailableError,
    SeverityParseError,
    UnknownPlatformError,
)

__all__ = [
    "Diagnostic",
    "Severity",
    "Cs2Error",
    "InputUnavailableError",
    "SeverityParseError",
    "UnknownPlatformError",
]
