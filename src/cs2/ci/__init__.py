"""CI annotation adapters.

Exports the ``CiAdapter`` base class, the ``adapters`` registry and
``select_adapter``.  Importing this package registers every supported
platform: ``github`` and ``gitlab``.
"""
from __future__ import annotations

from cs2.ci.base import CiAdapter
from cs2.ci.registry import AdapterRegistry, adapters, select_adapter
from cs2.ci.github import GithubAdapter
from cs2.ci.gitlab import GitlabAdapter

__all__ = [
    "CiAdapter",
    "AdapterRegistry",
    "adapters",
    "select_adapter",
    "GithubAdapter",
    "GitlabAdapter",
]
