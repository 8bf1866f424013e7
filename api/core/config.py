"""
Configuration helpers for the entity access service.

Routers/services read a Settings object instead of fetching os.environ
directly, so tests can swap values with monkeypatch + cache_clear().
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_BATCH_SIZE = 50


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    bulk_batch_size: int
    sql_echo: bool
    log_level: str
    auto_create_schema: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    batch_size = _int(os.getenv("BULK_INSERT_BATCH_SIZE", str(DEFAULT_BATCH_SIZE)), DEFAULT_BATCH_SIZE)
    if batch_size < 1:
        batch_size = DEFAULT_BATCH_SIZE

    return Settings(
        app_env=app_env,
        database_url=os.getenv("DATABASE_URL", "").strip(),
        bulk_batch_size=batch_size,
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        auto_create_schema=_bool(os.getenv("AUTO_CREATE_SCHEMA"), app_env != "prod"),
    )
