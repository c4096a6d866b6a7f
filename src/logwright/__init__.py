"""
Public entrypoints for logwright.

Logs are assembled with the fluent ``LogBuilder`` and can be published in the
process-wide registry for lookup with ``get_log()`` / ``get_primary_log()``.
"""

from __future__ import annotations

import logging as _logging

from ._version import __version__
from .builder import BuilderContext, LogBuilder
from .core.errors import (
    DuplicateLogKeyError,
    FormatError,
    LogNotFoundError,
    LogwrightError,
    PluginConfigError,
    RegistryError,
)
from .core.formatter import Formatter
from .core.log import Log
from .core.messages import TemplatedMessage
from .core.settings import LogwrightSettings
from .core.state import LogRegistry, get_log, get_primary_log, get_registry
from .plugins.filters import DelegatedFilter, FilterManager, TagFilter
from .plugins.listeners import Listener, MemoryListener, StdlibListener
from .plugins.sinks import MemorySink, TemplatedMessageSink

# Library convention: no output unless the application configures logging
_logging.getLogger("logwright").addHandler(_logging.NullHandler())

__all__ = [
    "BuilderContext",
    "DelegatedFilter",
    "DuplicateLogKeyError",
    "FilterManager",
    "FormatError",
    "Formatter",
    "Listener",
    "Log",
    "LogBuilder",
    "LogNotFoundError",
    "LogRegistry",
    "LogwrightError",
    "LogwrightSettings",
    "MemoryListener",
    "MemorySink",
    "PluginConfigError",
    "RegistryError",
    "StdlibListener",
    "TagFilter",
    "TemplatedMessage",
    "TemplatedMessageSink",
    "__version__",
    "get_log",
    "get_primary_log",
    "get_registry",
]

VERSION = __version__
