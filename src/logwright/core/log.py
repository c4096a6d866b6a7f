"""
The Log pipeline object.

A Log owns a log-scope ``FilterManager``, one ``Formatter`` and ordered
collections of listeners and sinks. ``LogBuilder.build()`` is the usual way
to create one; direct construction is supported for simple cases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..plugins.filters import FilterManager
from . import diagnostics
from .formatter import Formatter
from .messages import TemplatedMessage
from .state import LogRegistry, get_registry

if TYPE_CHECKING:
    from ..plugins.listeners import Listener
    from ..plugins.sinks import TemplatedMessageSink


class Log:
    """Dispatches messages through filters and formatter to listeners and sinks."""

    def __init__(
        self, name: str | None = None, *, registry: LogRegistry | None = None
    ) -> None:
        self._registry = registry if registry is not None else get_registry()
        if name is None or not name.strip():
            name = self._registry.next_default_name()
        self._name = name

        self.filter = FilterManager()
        self.formatter = Formatter()
        self._listeners: list[Listener] = []
        self._sinks: list[TemplatedMessageSink] = []

        if self._registry.claim_primary(self):
            diagnostics.debug("log", "primary log set", log=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def registry(self) -> LogRegistry:
        return self._registry

    @property
    def is_primary(self) -> bool:
        return self._registry.primary is self

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    @property
    def sinks(self) -> tuple[TemplatedMessageSink, ...]:
        return tuple(self._sinks)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def add_sink(self, sink: TemplatedMessageSink) -> None:
        self._sinks.append(sink)

    def write(self, message: str, tag: str = "") -> None:
        """Send a plain message to every listener whose filters accept it.

        A listener that raises is reported through diagnostics; the remaining
        listeners still receive the message.

        Raises:
            FormatError: If the formatter template cannot be rendered.
        """
        if not self.filter.validate(message, tag):
            return
        text = self.formatter.transform(self, message, tag)
        for listener in self._listeners:
            if listener.filter.validate(text, tag):
                try:
                    listener.write(text, tag)
                except Exception as exc:
                    diagnostics.warn(
                        "listener",
                        "listener exception",
                        log=self._name,
                        listener=listener.name,
                        reason=str(exc),
                    )

    def write_templated(self, template: str, *args: Any, tag: str = "") -> None:
        """Send a templated message to sinks, then its rendering to listeners."""
        message = TemplatedMessage(template, args, tag)
        if not self.filter.validate_templated(message):
            return
        for sink in self._sinks:
            if sink.filter.validate_templated(message):
                try:
                    sink.process_message(message)
                except Exception as exc:
                    diagnostics.warn(
                        "sink",
                        "sink exception",
                        log=self._name,
                        sink=sink.name,
                        reason=str(exc),
                    )
        self.write(message.render(), tag)

    def __repr__(self) -> str:
        return (
            f"Log(name={self._name!r}, listeners={len(self._listeners)}, "
            f"sinks={len(self._sinks)})"
        )
