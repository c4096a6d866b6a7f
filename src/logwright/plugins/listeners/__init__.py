from __future__ import annotations

from .base import Listener
from .memory import MemoryListener
from .stdlib import StdlibListener, StdlibListenerConfig

__all__ = [
    "Listener",
    "MemoryListener",
    "StdlibListener",
    "StdlibListenerConfig",
]
