"""
Internal diagnostics for logwright.

Library-internal events (builds, rebuild warnings, listener failures) are
emitted through the stdlib ``logging`` module under the ``logwright``
namespace. Applications opt in by configuring that logger; the package
installs a ``NullHandler`` so nothing is printed by default.
"""

from __future__ import annotations

import logging
from typing import Any

_ROOT = "logwright"


def get_logger(component: str) -> logging.Logger:
    """Return the stdlib logger for an internal component."""
    return logging.getLogger(f"{_ROOT}.{component}")


def _render(message: str, fields: dict[str, Any]) -> str:
    if not fields:
        return message
    extras = " ".join(f"{k}={v!r}" for k, v in sorted(fields.items()))
    return f"{message} ({extras})"


def warn(component: str, message: str, **fields: Any) -> None:
    """Emit a WARNING diagnostic for ``component`` with structured fields."""
    get_logger(component).warning(
        _render(message, fields), extra={"logwright_fields": fields}
    )


def debug(component: str, message: str, **fields: Any) -> None:
    """Emit a DEBUG diagnostic for ``component`` with structured fields."""
    logger = get_logger(component)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(_render(message, fields), extra={"logwright_fields": fields})
