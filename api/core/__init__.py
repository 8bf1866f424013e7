"""
Core utilities shared across the entity access API.

This package hosts:
- configuration helpers (env vars, batch size, database url)
- logging setup

Services and repositories depend on these primitives instead of reading
the environment themselves.
"""
