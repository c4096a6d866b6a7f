"""
Testing utilities for logwright plugins.

Example:
    from logwright.testing import validate_listener

    def test_my_listener():
        result = validate_listener(MyListener())
        assert result.valid
"""

from .validators import (
    ProtocolViolationError,
    ValidationResult,
    validate_filter,
    validate_listener,
    validate_sink,
    validate_templated_filter,
)

__all__ = [
    "ProtocolViolationError",
    "ValidationResult",
    "validate_filter",
    "validate_listener",
    "validate_sink",
    "validate_templated_filter",
]
