"""
Error types for logwright.

The builder itself never raises; these are raised by the collaborators it
wires together (registry, formatter, plugin configuration).
"""

from __future__ import annotations

from typing import Hashable


class LogwrightError(Exception):
    """Base exception for all logwright errors."""

    pass


class RegistryError(LogwrightError):
    """Raised by the process-wide log registry."""

    pass


class DuplicateLogKeyError(RegistryError):
    """Raised when a key is already bound to a log in the registry."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(f"A log is already registered under key {key!r}")
        self.key = key


class LogNotFoundError(RegistryError, KeyError):
    """Raised when no log is registered under the requested key."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(f"No log registered under key {key!r}")
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class FormatError(LogwrightError):
    """Raised when a formatter template cannot be rendered."""

    pass


class PluginConfigError(LogwrightError):
    """Raised when a plugin receives an invalid configuration."""

    pass
