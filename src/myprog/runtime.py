"""Process-wide, compute-once access to the resolved configuration.

Purpose
    Give code that cannot receive the configuration explicitly a way to reach
    the same immutable instance from anywhere in the process.

Contents
    - ``ConfigurationHolder``: lazily runs a factory exactly once, thread-safe.
    - ``get_configuration``: module-level accessor backed by :func:`myprog.core.initialize`.

System Integration
    The console entry point does not use this module: it builds the
    configuration itself and passes it down. Failures raised by the factory
    (usage errors, :class:`~myprog.domain.errors.FatalConfigError`) propagate
    to the first caller and nothing is cached, so a later call retries.
"""

from __future__ import annotations

import threading
from typing import Callable

from .core import initialize
from .domain.config import Configuration


class ConfigurationHolder:
    """Compute a :class:`Configuration` on first access and cache it for the process lifetime.

    Concurrent first accesses block on a lock while the factory runs once; every
    caller receives the same instance. Subsequent accesses do not lock.

    Examples
    --------
    >>> calls = []
    >>> holder = ConfigurationHolder(lambda: calls.append(1) or Configuration(verbose=True))
    >>> holder.get() is holder.get(), len(calls)
    (True, 1)
    """

    def __init__(self, factory: Callable[[], Configuration]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: Configuration | None = None

    @property
    def initialized(self) -> bool:
        return self._value is not None

    def get(self) -> Configuration:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = self._factory()
            return self._value


_HOLDER = ConfigurationHolder(initialize)


def get_configuration() -> Configuration:
    """Return the process-wide configuration, resolving it from ``sys.argv`` on first use."""

    return _HOLDER.get()
