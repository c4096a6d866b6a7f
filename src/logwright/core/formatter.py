"""
Message formatter owned by every Log.

The formatter holds a ``str.format`` template, named string variables and
named functions. Placeholders resolve in this order: built-ins (``message``,
``tag``, ``log``), variables, then functions, which are called without
arguments each time a message is rendered.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Iterator

from .errors import FormatError

if TYPE_CHECKING:
    from .log import Log

DEFAULT_FORMAT = "{message}"


class FormatContext:
    """Named functions available to a formatter's template."""

    def __init__(self) -> None:
        self.functions: dict[str, Callable[[], Any]] = {}


class _RenderScope(Mapping[str, Any]):
    def __init__(self, builtins: dict[str, Any], formatter: Formatter) -> None:
        self._builtins = builtins
        self._formatter = formatter

    def __getitem__(self, key: str) -> Any:
        if key in self._builtins:
            return self._builtins[key]
        if key in self._formatter.variables:
            return self._formatter.variables[key]
        functions = self._formatter.context.functions
        if key in functions:
            try:
                return functions[key]()
            except Exception as e:
                raise FormatError(f"Template function {key!r} raised: {e}") from e
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        seen = dict.fromkeys(self._builtins)
        seen.update(dict.fromkeys(self._formatter.variables))
        seen.update(dict.fromkeys(self._formatter.context.functions))
        return iter(seen)

    def __len__(self) -> int:
        return sum(1 for _ in self)


class Formatter:
    """Template, variables and functions used to render log records."""

    def __init__(self, format: str = DEFAULT_FORMAT) -> None:
        self.format = format
        self.variables: dict[str, str] = {}
        self.context = FormatContext()

    def transform(self, log: Log | None, message: str, tag: str = "") -> str:
        """Render ``message`` through the template.

        Raises:
            FormatError: If the template references an unknown name, is
                malformed, or a template function raises.
        """
        scope = _RenderScope(
            {
                "message": message,
                "tag": tag,
                "log": log.name if log is not None else "",
            },
            self,
        )
        try:
            return self.format.format_map(scope)
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise FormatError(f"Cannot render template {self.format!r}: {e}") from e
