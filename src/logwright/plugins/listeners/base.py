from __future__ import annotations

import abc

from ..filters import FilterManager


class Listener(abc.ABC):
    """Base listener receiving rendered log records.

    Every listener has a display ``name`` and its own ``filter`` scope that is
    checked after the owning log's filters. ``write`` is called synchronously
    by ``Log.write`` in attachment order.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.filter = FilterManager()

    @abc.abstractmethod
    def write(self, message: str, tag: str) -> None:
        """Deliver one rendered record."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
