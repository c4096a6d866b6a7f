"""Listener that forwards rendered records to the stdlib ``logging`` module."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils import parse_plugin_config
from .base import Listener


def _resolve_level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {value!r}")
    return level


class StdlibListenerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    logger_name: str = "logwright.records"
    level: int = logging.INFO
    # Tag -> level overrides, e.g. {"error": "ERROR"}
    tag_levels: dict[str, int] = Field(default_factory=dict)

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Any:
        if isinstance(value, (str, int)):
            return _resolve_level(value)
        return value

    @field_validator("tag_levels", mode="before")
    @classmethod
    def _coerce_tag_levels(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): _resolve_level(v) for k, v in value.items()}
        return value


class StdlibListener(Listener):
    """Bridge into an existing stdlib logging configuration.

    The record level is looked up from ``tag_levels`` by tag, falling back to
    ``level``. The tag and listener name travel in ``extra``.
    """

    def __init__(
        self,
        name: str = "",
        *,
        config: StdlibListenerConfig | dict | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name)
        cfg = parse_plugin_config(StdlibListenerConfig, config, **kwargs)
        self._logger = logging.getLogger(cfg.logger_name)
        self._level = cfg.level
        self._tag_levels = dict(cfg.tag_levels)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def write(self, message: str, tag: str) -> None:
        level = self._tag_levels.get(tag, self._level)
        self._logger.log(
            level,
            message,
            extra={"logwright_tag": tag, "logwright_listener": self.name},
        )
