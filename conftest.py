"""
Root pytest configuration.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from logwright.core.state import LogRegistry, _reset_registry


@pytest.fixture(autouse=True)
def registry() -> Generator[LogRegistry, None, None]:
    """Give every test a fresh default registry (keys, primary, name counter)."""
    fresh = _reset_registry(LogRegistry(name_prefix="Log"))
    yield fresh
    _reset_registry()
