"""Logging setup for the API process and the helper scripts."""

import logging
import sys

from .config import get_settings

DEFAULT_LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
APP_LOGGER = "api"


def setup_logging(level: int | str | None = None) -> None:
    """
    Configure the application logger.

    `level` may be an int (logging.INFO), a level name ("DEBUG") or None, in
    which case LOG_LEVEL from Settings is used. Unknown names fall back to
    DEFAULT_LOG_LEVEL with a warning on stderr.
    """
    if level is None:
        level = get_settings().log_level

    if isinstance(level, str):
        level_name = level.upper()
        if isinstance(getattr(logging, level_name, None), int):
            log_level = getattr(logging, level_name)
        else:
            log_level = DEFAULT_LOG_LEVEL
            print(
                f"Warning: Invalid log level '{level}'. Defaulting to {logging.getLevelName(log_level)}.",
                file=sys.stderr,
            )
    else:
        log_level = level

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(log_level)

    # Rebuild the handler so it writes to the current sys.stderr.
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)
