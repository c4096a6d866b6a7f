"""
Plugin utilities for configuration parsing.

Provides helpers shared by filters, listeners and sinks.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import PluginConfigError

ConfigT = TypeVar("ConfigT", bound=BaseModel)


def parse_plugin_config(
    model: type[ConfigT],
    config: ConfigT | dict[str, Any] | None = None,
    **kwargs: Any,
) -> ConfigT:
    """Coerce a plugin configuration into ``model``.

    Accepted forms:
    1. An instance of ``model`` (returned unchanged when no kwargs are given)
    2. A mapping of field values
    3. A mapping wrapped as ``{"config": {...}}`` (loader style)
    4. Keyword arguments only

    Keyword arguments override values from ``config``.

    Raises:
        PluginConfigError: If the values do not validate against ``model``.
    """
    if isinstance(config, model) and not kwargs:
        return config

    data: dict[str, Any]
    if config is None:
        data = {}
    elif isinstance(config, BaseModel):
        data = config.model_dump()
    else:
        data = dict(config)
        nested = data.get("config")
        if len(data) == 1 and isinstance(nested, dict):
            data = dict(nested)
    data.update(kwargs)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise PluginConfigError(
            f"Invalid configuration for {model.__name__}: {e}"
        ) from e

