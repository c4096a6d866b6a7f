"""Templated message type delivered to sinks and templated filters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import FormatError


@dataclass(frozen=True)
class TemplatedMessage:
    """A message template with its positional arguments and tag.

    Sinks receive the structured form; listeners receive ``render()``.
    """

    template: str
    args: tuple[Any, ...] = field(default_factory=tuple)
    tag: str = ""

    def render(self) -> str:
        """Substitute ``args`` into ``template`` with ``str.format``."""
        try:
            return self.template.format(*self.args)
        except (IndexError, KeyError, ValueError) as e:
            raise FormatError(
                f"Cannot render message template {self.template!r}: {e}"
            ) from e
