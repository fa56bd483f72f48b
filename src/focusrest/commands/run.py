"""Interactive Focus/Rest tracker command."""

import sys

import typer

from focusrest.config import get_config_manager
from focusrest.models.focus import (
    CommandDecoder,
    KeyboardHandler,
    SessionTracker,
    TrackerDisplay,
    show_summary,
)
from focusrest.utils.exit_codes import ERROR_NOT_A_TERMINAL
from focusrest.utils.logger import get_logger, set_log_level
from focusrest.utils.ui.formatters import console

from .decorators import AppError, command_wrapper


@command_wrapper
def run_tracker(
    profile: str = typer.Option("default", "--profile", help="Configuration profile"),
    no_help: bool = typer.Option(False, "--no-help", help="Hide the key help panel"),
    poll_ms: int | None = typer.Option(
        None, "--poll-ms", min=1, help="Keyboard poll interval in milliseconds"
    ),
) -> None:
    """Start tracking Focus and Rest time (begins in Focus)."""
    if not sys.stdin.isatty():
        raise AppError(
            "focusrest run needs an interactive terminal", ERROR_NOT_A_TERMINAL
        )

    config = get_config_manager(profile).config
    set_log_level(config.logging.level)
    keys = config.keys
    decoder = CommandDecoder(
        focus_key=keys.focus,
        rest_key=keys.rest,
        pause_key=keys.pause,
        quit_word=keys.quit_word,
    )
    interval_ms = poll_ms if poll_ms is not None else config.timer.poll_interval_ms

    display = TrackerDisplay(
        console=console,
        decoder=decoder,
        poll_interval=interval_ms / 1000,
        refresh_per_second=config.timer.refresh_per_second,
        show_help=config.display.show_help and not no_help,
    )
    tracker = SessionTracker()

    reason = display.run(tracker, KeyboardHandler())
    tracker.pause()
    get_logger().info("tracker stopped: %s", reason)

    if config.display.show_summary:
        show_summary(tracker, console=console)
