"""Shared test fixtures and configuration.

Keeps log and config files inside *tmp_path* and provides a manually
advanced clock so tracker tests never sleep.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest


class FakeClock:
    """Clock whose time only moves when a test advances it."""

    def __init__(self, start: float = 1000.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point the logger and config manager at temporary directories."""
    import focusrest.utils.logger as logger_mod
    from focusrest.config import get_config_manager

    logger_mod._logger = None
    logging.getLogger("focusrest").handlers.clear()
    get_config_manager.cache_clear()

    with patch("focusrest.utils.logger.user_log_dir", return_value=str(tmp_path / "log")):
        with patch(
            "focusrest.config.user_config_dir", return_value=str(tmp_path / "config")
        ):
            yield tmp_path

    for handler in logging.getLogger("focusrest").handlers:
        handler.close()
    logging.getLogger("focusrest").handlers.clear()
    logger_mod._logger = None
    get_config_manager.cache_clear()
