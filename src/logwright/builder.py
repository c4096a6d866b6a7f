"""Fluent builder API for assembling Log pipelines.

The builder keeps a context cursor that decides where scoped directives
(``with_name``, ``with_filter``, ``with_templated_filter``) land:

- ``BuilderContext.LOG``: the log being built (initial context)
- ``BuilderContext.LISTENER``: the most recently added listener
- ``BuilderContext.SINK``: the most recently added sink

Example:
    >>> log = (
    ...     LogBuilder()
    ...     .with_format_string("[{log}] {message}")
    ...     .with_listener(MemoryListener(), "console")
    ...     .with_filter(lambda message, tag: tag != "debug")
    ...     .with_sink(MemorySink(), "store")
    ...     .log("app")
    ...     .with_global_key("app")
    ...     .build()
    ... )
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Hashable, Union

from .core import diagnostics
from .core.formatter import Formatter
from .core.log import Log
from .core.settings import LogwrightSettings
from .core.state import LogRegistry, get_registry
from .plugins.filters import (
    Filter,
    FilterManager,
    FilterPredicate,
    TemplatedFilter,
    TemplatedFilterPredicate,
    as_filter,
    as_templated_filter,
)
from .plugins.listeners import Listener
from .plugins.sinks import TemplatedMessageSink


class BuilderContext(enum.Enum):
    """Target of scoped builder directives."""

    LOG = "log"
    LISTENER = "listener"
    SINK = "sink"


class LogBuilder:
    """Fluent builder for Log pipelines.

    Directives accumulate listeners, sinks, filters and formatter settings;
    ``build()`` wires them into a new ``Log``. Every directive returns the
    builder for chaining.

    A builder is meant to be built once. Calling ``build()`` again returns a
    new Log that shares this builder's Formatter and log-scope FilterManager
    and re-attaches the same listeners and sinks.
    """

    def __init__(
        self,
        *,
        settings: LogwrightSettings | None = None,
        registry: LogRegistry | None = None,
    ) -> None:
        self._settings = settings if settings is not None else LogwrightSettings()
        self._registry = registry
        self._context = BuilderContext.LOG
        self._log_name = ""
        self._listeners: list[Listener] = []
        self._sinks: list[TemplatedMessageSink] = []
        self._last_listener: Listener | None = None
        self._last_sink: TemplatedMessageSink | None = None
        self._log_filter = FilterManager()
        self._formatter = Formatter(self._settings.default_format)
        self._global_key: Hashable | None = None
        self._global_primary = False
        self._build_count = 0

    # Inspection ----------------------------------------------------------

    @property
    def context(self) -> BuilderContext:
        return self._context

    @property
    def last_listener(self) -> Listener | None:
        return self._last_listener

    @property
    def last_sink(self) -> TemplatedMessageSink | None:
        return self._last_sink

    @property
    def log_filter(self) -> FilterManager:
        return self._log_filter

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    # Staging and context -------------------------------------------------

    def with_listener(self, listener: Listener, name: str | None = None) -> LogBuilder:
        """Stage a listener and make it the target of scoped directives.

        Args:
            listener: Listener to attach at build time
            name: Display name to assign (leaves the current name when None)
        """
        if name is not None:
            listener.name = name
        self._listeners.append(listener)
        self._last_listener = listener
        self._context = BuilderContext.LISTENER
        return self

    def with_sink(
        self, sink: TemplatedMessageSink, name: str | None = None
    ) -> LogBuilder:
        """Stage a sink and make it the target of scoped directives.

        Args:
            sink: Templated message sink to attach at build time
            name: Display name to assign (leaves the current name when None)
        """
        if name is not None:
            sink.name = name
        self._sinks.append(sink)
        self._last_sink = sink
        self._context = BuilderContext.SINK
        return self

    def log(self, name: str = "") -> LogBuilder:
        """Return scoped directives to the log itself.

        Args:
            name: New log name; blank keeps the current one
        """
        if name.strip():
            self._log_name = name
        self._context = BuilderContext.LOG
        return self

    # Formatter -----------------------------------------------------------

    def with_format_string(self, format: str) -> LogBuilder:
        """Replace the formatter template (validated only when rendering)."""
        self._formatter.format = format
        return self

    def with_format_variable(self, key: str, value: str) -> LogBuilder:
        """Set a named template variable. Later values replace earlier ones."""
        self._formatter.variables[key] = value
        return self

    def with_format_func(self, name: str, func: Callable[[], Any]) -> LogBuilder:
        """Set a named template function, called at render time."""
        self._formatter.context.functions[name] = func
        return self

    # Scoped directives ---------------------------------------------------

    def with_name(self, name: str) -> LogBuilder:
        """Name the log, the last listener or the last sink, per context."""
        if self._context is BuilderContext.LISTENER:
            assert self._last_listener is not None
            self._last_listener.name = name
        elif self._context is BuilderContext.SINK:
            assert self._last_sink is not None
            self._last_sink.name = name
        else:
            self._log_name = name
        return self

    def with_filter(self, filter: Union[Filter, FilterPredicate]) -> LogBuilder:
        """Append a filter to the current scope.

        Args:
            filter: A ``Filter`` or a predicate ``(message, tag) -> bool``,
                which is wrapped in a ``DelegatedFilter``
        """
        self._scope_filter().filters.append(as_filter(filter))
        return self

    def with_templated_filter(
        self, filter: Union[TemplatedFilter, TemplatedFilterPredicate]
    ) -> LogBuilder:
        """Append a templated-message filter to the current scope.

        Args:
            filter: A ``TemplatedFilter`` or a predicate ``(message) -> bool``,
                which is wrapped in a ``DelegatedFilter``
        """
        self._scope_filter().templated_filters.append(as_templated_filter(filter))
        return self

    def _scope_filter(self) -> FilterManager:
        if self._context is BuilderContext.LISTENER:
            assert self._last_listener is not None
            return self._last_listener.filter
        if self._context is BuilderContext.SINK:
            assert self._last_sink is not None
            return self._last_sink.filter
        return self._log_filter

    # Global registration -------------------------------------------------

    def with_global_key(self, key: Hashable) -> LogBuilder:
        """Register the built log in the registry under ``key``."""
        self._global_key = key
        return self

    def as_global_primary(self) -> LogBuilder:
        """Make the built log the registry's primary log."""
        self._global_primary = True
        return self

    # Assembly ------------------------------------------------------------

    def build(self) -> Log:
        """Build and return the log.

        Returns:
            Log wired with the staged filters, formatter, listeners and sinks

        Raises:
            DuplicateLogKeyError: If the global key is already registered
        """
        registry = self._registry if self._registry is not None else get_registry()
        self._build_count += 1
        if self._build_count > 1 and self._settings.warn_on_rebuild:
            diagnostics.warn(
                "builder",
                "builder reused; formatter and filters are shared between logs",
                builds=self._build_count,
            )

        if self._global_primary:
            registry.mark_next_primary()

        name = self._log_name if self._log_name.strip() else None
        log = Log(name, registry=registry)
        log.filter = self._log_filter
        log.formatter = self._formatter

        for listener in self._listeners:
            log.add_listener(listener)
        for sink in self._sinks:
            log.add_sink(sink)

        if self._global_key is not None:
            registry.register(self._global_key, log)

        diagnostics.debug(
            "builder",
            "log built",
            log=log.name,
            listeners=len(self._listeners),
            sinks=len(self._sinks),
            primary=log.is_primary,
            key=self._global_key,
        )
        return log
