"""Process-scoped log registry.

Holds the keyed collection of built logs, the primary (default) log, the
"next log is primary" flag and the counter behind generated log names.

A default registry is created when this module is imported and is what
``Log`` and ``LogBuilder`` use unless another instance is injected. Tests
substitute an isolated ``LogRegistry`` or call ``_reset_registry()``.

Example:
    from logwright import LogBuilder, get_log

    LogBuilder().with_global_key("audit").build()
    audit = get_log("audit")
"""

from __future__ import annotations

import itertools
import threading
from typing import TYPE_CHECKING, Hashable, Iterator

from .errors import DuplicateLogKeyError, LogNotFoundError
from .settings import LogwrightSettings

if TYPE_CHECKING:
    from .log import Log


class LogRegistry:
    """Thread-safe keyed collection of logs plus primary-log bookkeeping."""

    def __init__(self, *, name_prefix: str | None = None) -> None:
        if name_prefix is None:
            name_prefix = LogwrightSettings().default_log_name_prefix
        self._lock = threading.RLock()
        self._logs: dict[Hashable, Log] = {}
        self._primary: Log | None = None
        self._next_is_primary = False
        self._name_prefix = name_prefix
        self._counter = itertools.count(1)

    # Primary log -------------------------------------------------------

    def mark_next_primary(self) -> None:
        """Request that the next constructed Log becomes the primary log."""
        with self._lock:
            self._next_is_primary = True

    def consume_primary_flag(self) -> bool:
        """Return and clear the "next log is primary" flag.

        Used by ``claim_primary`` during ``Log`` construction.
        """
        with self._lock:
            flag = self._next_is_primary
            self._next_is_primary = False
            return flag

    @property
    def primary(self) -> Log | None:
        return self._primary

    def set_primary(self, log: Log) -> None:
        with self._lock:
            self._primary = log

    def claim_primary(self, log: Log) -> bool:
        """Make ``log`` primary if the "next log is primary" flag is set.

        Consuming the flag and assigning the primary happen under one lock
        acquisition, so concurrent builds cannot take each other's flag.
        """
        with self._lock:
            if not self.consume_primary_flag():
                return False
            self.set_primary(log)
            return True

    # Keyed logs --------------------------------------------------------

    def register(self, key: Hashable, log: Log) -> None:
        """Bind ``log`` to ``key``.

        Raises:
            DuplicateLogKeyError: If ``key`` is already bound.
        """
        with self._lock:
            if key in self._logs:
                raise DuplicateLogKeyError(key)
            self._logs[key] = log

    def get(self, key: Hashable) -> Log:
        """Return the log bound to ``key``.

        Raises:
            LogNotFoundError: If nothing is registered under ``key``.
        """
        with self._lock:
            try:
                return self._logs[key]
            except KeyError:
                raise LogNotFoundError(key) from None

    def keys(self) -> list[Hashable]:
        with self._lock:
            return list(self._logs)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._logs

    def __len__(self) -> int:
        with self._lock:
            return len(self._logs)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    # Naming ------------------------------------------------------------

    def next_default_name(self) -> str:
        """Return the next generated log name, e.g. ``Log1``, ``Log2``."""
        with self._lock:
            return f"{self._name_prefix}{next(self._counter)}"


_registry = LogRegistry()


def get_registry() -> LogRegistry:
    """Return the process default registry."""
    return _registry


def get_log(key: Hashable) -> Log:
    """Return the log registered under ``key`` in the default registry."""
    return _registry.get(key)


def get_primary_log() -> Log | None:
    """Return the primary log of the default registry, if one was built."""
    return _registry.primary


def _reset_registry(registry: LogRegistry | None = None) -> LogRegistry:
    """Replace the default registry (for testing only).

    Warning:
        This function is for testing purposes only. Do not use in production code.
    """
    global _registry
    _registry = registry if registry is not None else LogRegistry()
    return _registry
