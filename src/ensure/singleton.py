# src/ensure/singleton.py
"""Construction-time guard against building a type more than once.

    class Engine:
        def __init__(self) -> None:
            singleton(self)

The second ``Engine()`` raises InvalidStateError.

Registration is keyed by ``type(instance)``, so a subclass is registered
separately from its base class.

Thread Safety:
    SingletonRegistry performs check-and-insert under a threading.Lock, so
    concurrent constructors of the same type see exactly one success.

Lifetime:
    default_registry lives for the whole process and only grows. An
    application that wants isolated registries (tests, multiple embedded
    apps) creates its own SingletonRegistry in its composition root and
    passes it to singleton(). clear() is a teardown hook for that root and
    for tests; production code does not call it.
"""

from __future__ import annotations

import threading

from ensure.errors import InvalidStateError
from ensure.logging import get_logger

__all__ = [
    "SingletonRegistry",
    "default_registry",
    "singleton",
]

logger = get_logger(__name__)


class SingletonRegistry:
    """Thread-safe set of types that have been constructed."""

    def __init__(self) -> None:
        self._types: set[type] = set()
        self._lock = threading.Lock()

    def register(self, instance: object) -> None:
        """Record the runtime type of instance.

        Raises:
            InvalidStateError: If the type was already registered
        """
        cls = type(instance)
        with self._lock:
            duplicate = cls in self._types
            if not duplicate:
                self._types.add(cls)

        if duplicate:
            error = InvalidStateError(f"Expected {cls.__name__} to be singleton", type_name=cls.__qualname__)
            logger.debug("contract_violation", **error.to_error_reason())
            raise error

        logger.debug("singleton_registered", type_name=cls.__qualname__, module=cls.__module__)

    def registered(self) -> frozenset[type]:
        """Snapshot of registered types."""
        with self._lock:
            return frozenset(self._types)

    def clear(self) -> None:
        """Forget all registrations (teardown only)."""
        with self._lock:
            self._types.clear()

    def __contains__(self, cls: object) -> bool:
        with self._lock:
            return cls in self._types

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


default_registry = SingletonRegistry()


def singleton(instance: object, registry: SingletonRegistry | None = None) -> None:
    """Register instance's type, failing if that type was registered before.

    Args:
        instance: Object under construction (usually ``self``)
        registry: Registry to use (default: the process-wide default_registry)

    Raises:
        InvalidStateError: If the type was already registered
    """
    (default_registry if registry is None else registry).register(instance)
