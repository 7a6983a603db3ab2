"""Abstract base for CI annotation adapters.

An adapter receives the finalized diagnostic list (sorted, merged and
with suppression flags set) and writes it in a form a CI platform can
turn into annotations.  Adapters only read the diagnostics.
"""
from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import TextIO

from cs2.core.diagnostics import Diagnostic


class CiAdapter(ABC):
    """Writes diagnostics to ``stream`` in a platform-specific format.

    Parameters
    ----------
    stream:
        Text stream to write to.  Defaults to ``sys.stdout`` at emit time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @abstractmethod
    def emit(self, diagnostics: Sequence[Diagnostic]) -> None:
        """Write annotations for every visible diagnostic."""

    @staticmethod
    def visible(diagnostics: Sequence[Diagnostic]) -> Iterator[Diagnostic]:
        """Yield the diagnostics that were not suppressed."""
        return (d for d in diagnostics if not d.suppressed)
