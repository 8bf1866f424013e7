"""
Persistence adapters.

`sql_repository` is the high-level, repository-style access path. Session-style
access (explicit SQL and flush control) lives in the services that need it.
"""
