"""
Configuration for logwright using Pydantic v2 Settings.

Settings only influence construction-time defaults (naming, default template,
rebuild diagnostics). They are read from ``LOGWRIGHT_*`` environment variables
unless passed explicitly.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogwrightSettings(BaseSettings):
    """Top-level configuration for builders and registries."""

    default_log_name_prefix: str = Field(
        default="Log",
        description="Prefix for generated names of logs built without a name",
    )
    default_format: str = Field(
        default="{message}",
        description="Format template a new builder's formatter starts with",
    )
    warn_on_rebuild: bool = Field(
        default=True,
        description=(
            "Emit a diagnostics warning when build() is called more than once "
            "on the same builder"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="LOGWRIGHT_",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("default_log_name_prefix")
    @classmethod
    def _ensure_prefix_non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_log_name_prefix must not be empty")
        return value
