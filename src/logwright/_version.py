"""
Version module for logwright.

Bumped by hand on release; pyproject.toml carries the same value.
"""

__version__ = "0.1.0"
