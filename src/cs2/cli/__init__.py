"""CLI package.

The ``cli`` sub-package contains the Click application and all
command implementations. It should import only from the public
sub-packages of cs2, never from their internal helpers.
"""
from __future__ import annotations
