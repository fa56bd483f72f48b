"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers

import pytest

from focusrest.utils.logger import get_logger, log_file_path, set_log_level


def _flush():
    for handler in logging.getLogger("focusrest").handlers:
        handler.flush()


def test_get_logger_creates_log_file(isolated_dirs):
    logger = get_logger()
    assert (isolated_dirs / "log" / "focusrest.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_dirs):
    get_logger().info("hello from test")
    _flush()
    assert "hello from test" in (isolated_dirs / "log" / "focusrest.log").read_text()


def test_default_level_filters_debug(isolated_dirs):
    get_logger().debug("tracker detail")
    _flush()
    assert "tracker detail" not in (isolated_dirs / "log" / "focusrest.log").read_text()


def test_set_log_level_enables_debug(isolated_dirs):
    set_log_level("debug")
    get_logger().debug("tracker detail")
    _flush()
    assert get_logger().level == logging.DEBUG
    assert "tracker detail" in (isolated_dirs / "log" / "focusrest.log").read_text()


def test_set_log_level_rejects_unknown_name():
    with pytest.raises(ValueError):
        set_log_level("LOUD")


def test_log_file_path(isolated_dirs):
    assert log_file_path() == isolated_dirs / "log" / "focusrest.log"


def test_single_rotating_handler():
    logger = get_logger()
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.handlers.RotatingFileHandler)


def test_does_not_propagate():
    assert get_logger().propagate is False


def test_tracker_transitions_are_logged(isolated_dirs, clock):
    from focusrest.models.focus.state import Mode, SessionTracker

    set_log_level("DEBUG")
    tracker = SessionTracker(clock=clock)
    tracker.start()
    tracker.change_mode(Mode.REST)
    tracker.pause()
    _flush()

    text = (isolated_dirs / "log" / "focusrest.log").read_text()
    assert "tracker started in focus" in text
    assert "mode changed: focus -> rest" in text
    assert "tracker paused in rest" in text
