"""Rotating file log for focusrest.

The terminal belongs to the live display while the tracker runs, so records
only ever go to ``focusrest.log`` under the platform log directory. The level
starts at INFO and is raised or lowered from the ``logging.level`` setting.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "INFO"

_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir("focusrest")) / "focusrest.log"


def get_logger() -> logging.Logger:
    """Return the ``focusrest`` logger, attaching the file handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)-7s %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    logger = logging.getLogger("focusrest")
    logger.setLevel(DEFAULT_LOG_LEVEL)
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger


def set_log_level(level: str) -> None:
    """Apply a level name from the configuration, e.g. ``"DEBUG"``."""
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}'")
    get_logger().setLevel(level)
