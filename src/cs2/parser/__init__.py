"""Checker output parser module.

Exports ``parse_line``, ``parse_lines`` and the ``LINE_PATTERN`` they use.
"""
from __future__ import annotations

from cs2.parser.parser import LINE_PATTERN, parse_line, parse_lines

__all__ = ["LINE_PATTERN", "parse_line", "parse_lines"]
