"""Terminal reporter module.

Exports the ``Reporter`` class, the ``report`` convenience function and
the ``summarize`` counting helper.
"""
from __future__ import annotations

from cs2.reporter.reporter import Reporter, Summary, report, summarize

__all__ = ["Reporter", "Summary", "report", "summarize"]
