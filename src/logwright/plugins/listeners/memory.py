from __future__ import annotations

from .base import Listener


class MemoryListener(Listener):
    """Listener that keeps every delivered ``(message, tag)`` pair in order."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.records: list[tuple[str, str]] = []

    def write(self, message: str, tag: str) -> None:
        self.records.append((message, tag))

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.records]

    def clear(self) -> None:
        self.records.clear()
