"""Database helpers (engine/session export)."""

from .session import Base, get_engine, get_session, write_session

__all__ = ["Base", "get_engine", "get_session", "write_session"]
