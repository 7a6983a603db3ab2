"""Registry of CI annotation adapters.

Adapters register themselves by platform name with a class decorator at
import time.  The set of platforms is closed: only adapters shipped in
``cs2.ci`` are registered.

Example
-------
::

    from cs2.ci.base import CiAdapter
    from cs2.ci.registry import adapters

    @adapters.register("my-ci")
    class MyCiAdapter(CiAdapter):
        def emit(self, diagnostics):
            ...

    cls = adapters.get("my-ci")
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TextIO, TypeVar

from cs2.ci.base import CiAdapter
from cs2.core.errors import UnknownPlatformError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AdapterRegistry(Generic[T]):
    """Type-safe mapping from platform name to adapter class.

    Parameters
    ----------
    base_class:
        The abstract base class all adapters must subclass.
    name:
        A human-readable name for this registry (used in log messages).
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._adapters: dict[str, type[T]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator that registers the decorated class.

        Raises
        ------
        ValueError
            If ``name`` is already in use in this registry.
        TypeError
            If the decorated class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            key = name.lower()
            if key in self._adapters:
                raise ValueError(
                    f"Adapter {name!r} is already registered in the {self._name!r} registry."
                )
            if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
                raise TypeError(
                    f"Cannot register {cls!r} under {name!r}: "
                    f"it must be a subclass of {self._base_class.__name__}."
                )
            self._adapters[key] = cls
            logger.debug(
                "Registered adapter %r -> %s in registry %r",
                name,
                cls.__qualname__,
                self._name,
            )
            return cls

        return decorator

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Platform names are matched case-insensitively.

        Raises
        ------
        UnknownPlatformError
            If no adapter is registered under ``name``.
        """
        try:
            return self._adapters[name.lower()]
        except KeyError:
            raise UnknownPlatformError(name, self.list_platforms()) from None

    def list_platforms(self) -> list[str]:
        """Return a sorted list of all registered platform names."""
        return sorted(self._adapters)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)

    def __repr__(self) -> str:
        return (
            f"AdapterRegistry(name={self._name!r}, "
            f"base_class={self._base_class.__name__}, "
            f"platforms={self.list_platforms()})"
        )


adapters: AdapterRegistry[CiAdapter] = AdapterRegistry(CiAdapter, "ci")


def select_adapter(name: str, stream: TextIO | None = None) -> CiAdapter | None:
    """Instantiate the adapter for platform ``name``.

    An unknown platform is not fatal: ``None`` is returned so the
    report can still be produced.
    """
    try:
        cls = adapters.get(name)
    except UnknownPlatformError as exc:
        logger.debug("%s; continuing without CI output", exc)
        return None
    logger.debug("Selected CI adapter %s for %r", cls.__qualname__, name)
    return cls(stream)
