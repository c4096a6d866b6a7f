from __future__ import annotations

import abc

from ...core.messages import TemplatedMessage
from ..filters import FilterManager


class TemplatedMessageSink(abc.ABC):
    """Base sink receiving structured templated messages.

    Sinks see the template and its arguments before rendering, which makes
    them suitable for structured stores. Each sink owns a ``filter`` scope
    whose templated filters are checked after the owning log's.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.filter = FilterManager()

    @abc.abstractmethod
    def process_message(self, message: TemplatedMessage) -> None:
        """Handle one templated message."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
