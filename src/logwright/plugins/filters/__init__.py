from __future__ import annotations

from typing import Any, Callable, Protocol, Union, runtime_checkable

from ...core import diagnostics
from ...core.messages import TemplatedMessage
from .tag import TagFilter, TagFilterConfig

FilterPredicate = Callable[[str, str], bool]
TemplatedFilterPredicate = Callable[[TemplatedMessage], bool]


@runtime_checkable
class Filter(Protocol):
    """Contract for filters applied to rendered messages."""

    def validate(self, message: str, tag: str) -> bool:
        """Return True to let the message through."""
        ...


@runtime_checkable
class TemplatedFilter(Protocol):
    """Contract for filters applied to templated messages before rendering."""

    def validate_templated(self, message: TemplatedMessage) -> bool:
        """Return True to let the message through."""
        ...


class DelegatedFilter:
    """Adapts a predicate function to the filter protocols.

    The same adapter serves plain predicates ``(message, tag) -> bool`` and
    templated predicates ``(message) -> bool``; the collection it is stored in
    decides which method is called.
    """

    __slots__ = ("predicate",)

    def __init__(self, predicate: Callable[..., Any]) -> None:
        self.predicate = predicate

    def validate(self, message: str, tag: str) -> bool:
        return bool(self.predicate(message, tag))

    def validate_templated(self, message: TemplatedMessage) -> bool:
        return bool(self.predicate(message))

    def __repr__(self) -> str:
        name = getattr(self.predicate, "__qualname__", repr(self.predicate))
        return f"DelegatedFilter({name})"


def as_filter(obj: Union[Filter, FilterPredicate]) -> Filter:
    """Return ``obj`` when it is a filter, else wrap the predicate."""
    if isinstance(obj, Filter):
        return obj
    if callable(obj):
        return DelegatedFilter(obj)
    raise TypeError(f"Expected a Filter or predicate, got {type(obj).__name__}")


def as_templated_filter(
    obj: Union[TemplatedFilter, TemplatedFilterPredicate],
) -> TemplatedFilter:
    """Return ``obj`` when it is a templated filter, else wrap the predicate."""
    if isinstance(obj, TemplatedFilter):
        return obj
    if callable(obj):
        return DelegatedFilter(obj)
    raise TypeError(
        f"Expected a TemplatedFilter or predicate, got {type(obj).__name__}"
    )


def _warn_filter_failure(f: object, exc: Exception) -> None:
    diagnostics.warn(
        "filter",
        "filter exception",
        filter=getattr(f, "name", type(f).__name__),
        reason=str(exc),
    )


class FilterManager:
    """Ordered filters owned by a log, a listener or a sink.

    A message passes a scope only if every filter accepts it. Filters run in
    insertion order and evaluation stops at the first rejection. A filter that
    raises is reported through diagnostics and skipped.
    """

    def __init__(self) -> None:
        self.filters: list[Filter] = []
        self.templated_filters: list[TemplatedFilter] = []

    def validate(self, message: str, tag: str = "") -> bool:
        for f in self.filters:
            try:
                accepted = f.validate(message, tag)
            except Exception as exc:
                _warn_filter_failure(f, exc)
                continue
            if not accepted:
                return False
        return True

    def validate_templated(self, message: TemplatedMessage) -> bool:
        for f in self.templated_filters:
            try:
                accepted = f.validate_templated(message)
            except Exception as exc:
                _warn_filter_failure(f, exc)
                continue
            if not accepted:
                return False
        return True

    def __len__(self) -> int:
        return len(self.filters) + len(self.templated_filters)

    def __repr__(self) -> str:
        return (
            f"FilterManager(filters={self.filters!r}, "
            f"templated_filters={self.templated_filters!r})"
        )


__all__ = [
    "DelegatedFilter",
    "Filter",
    "FilterManager",
    "FilterPredicate",
    "TagFilter",
    "TagFilterConfig",
    "TemplatedFilter",
    "TemplatedFilterPredicate",
    "as_filter",
    "as_templated_filter",
]
