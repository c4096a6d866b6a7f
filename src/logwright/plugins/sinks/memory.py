from __future__ import annotations

from ...core.messages import TemplatedMessage
from .base import TemplatedMessageSink


class MemorySink(TemplatedMessageSink):
    """Sink that keeps every processed message in order."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.messages: list[TemplatedMessage] = []

    def process_message(self, message: TemplatedMessage) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()
