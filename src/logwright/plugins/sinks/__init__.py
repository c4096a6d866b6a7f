from __future__ import annotations

from .base import TemplatedMessageSink
from .memory import MemorySink

__all__ = [
    "MemorySink",
    "TemplatedMessageSink",
]
