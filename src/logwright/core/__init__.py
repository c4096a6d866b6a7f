"""Core pipeline types: log, formatter, messages, registry, settings."""
