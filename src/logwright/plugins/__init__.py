"""
logwright plugin packages.

- filters: filter protocols, the per-scope FilterManager and built-in filters
- listeners: receivers of rendered records
- sinks: receivers of templated messages
"""
