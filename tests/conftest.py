"""Shared test fixtures for cs2.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
component-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import io

import pytest
from rich.console import Console


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "cs2"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def plain_console() -> Console:
    """A colourless console writing to an in-memory buffer.

    Read what was printed with ``plain_console.file.getvalue()``.
    """
    return Console(file=io.StringIO(), no_color=True, width=200, highlight=False)
