from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ...core.messages import TemplatedMessage
from ..utils import parse_plugin_config


class TagFilterConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    allow: tuple[str, ...] = ()
    deny: tuple[str, ...] = ()
    case_sensitive: bool = False

    @field_validator("allow", "deny", mode="before")
    @classmethod
    def _coerce_single(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        return value


class TagFilter:
    """Filter messages by tag.

    A message passes when its tag is not denied and, if an allow list is
    configured, appears in it. Works for plain and templated messages.
    """

    name = "tag"

    def __init__(
        self, *, config: TagFilterConfig | dict | None = None, **kwargs: Any
    ) -> None:
        cfg = parse_plugin_config(TagFilterConfig, config, **kwargs)
        self._case_sensitive = cfg.case_sensitive
        self._allow = frozenset(self._norm(t) for t in cfg.allow)
        self._deny = frozenset(self._norm(t) for t in cfg.deny)

    def _norm(self, tag: str) -> str:
        return tag if self._case_sensitive else tag.casefold()

    def validate(self, message: str, tag: str) -> bool:
        key = self._norm(tag)
        if key in self._deny:
            return False
        if self._allow:
            return key in self._allow
        return True

    def validate_templated(self, message: TemplatedMessage) -> bool:
        return self.validate(message.template, message.tag)
