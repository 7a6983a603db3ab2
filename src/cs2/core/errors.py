"""Error types shared across the cs2 pipeline.

Every error raised on purpose by cs2 derives from ``Cs2Error`` so the CLI
can report it as a single line and exit non-zero without a traceback.
Each subclass also inherits from the closest built-in exception so callers
that do not know about cs2 can still catch it sensibly.
"""
from __future__ import annotations


class Cs2Error(Exception):
    """Base class for all errors raised by cs2."""


class SeverityParseError(Cs2Error, ValueError):
    """Raised when a severity keyword is not one of the four known levels.

    The line pattern only accepts ``Fatal``, ``Major``, ``Minor`` and
    ``Info``, so this signals an internal inconsistency rather than bad
    checker output. It is never replaced by a default severity.
    """

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"Unknown severity keyword {keyword!r}")


class InputUnavailableError(Cs2Error, OSError):
    """Raised when no raw checker output can be obtained at all."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read checker output from {source}: {reason}")

    def __str__(self) -> str:
        return f"Cannot read checker output from {self.source}: {self.reason}"


class UnknownPlatformError(Cs2Error, KeyError):
    """Raised when a CI platform name is not in the adapter registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.platform = name
        self.available = available
        super().__init__(
            f"Unknown CI platform {name!r}. Available: {', '.join(available) or 'none'}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
