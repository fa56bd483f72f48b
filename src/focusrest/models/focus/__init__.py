"""Focus/Rest tracker models."""

from .clock import Clock, MonotonicClock
from .commands import CommandDecoder, TrackerCommand, apply_command
from .interval import Interval
from .keyboard import KeyboardHandler
from .state import Mode, ModeBuckets, SessionTracker
from .ui import TrackerDisplay, format_duration, show_summary

__all__ = [
    "Clock",
    "MonotonicClock",
    "Interval",
    "Mode",
    "ModeBuckets",
    "SessionTracker",
    "CommandDecoder",
    "TrackerCommand",
    "apply_command",
    "KeyboardHandler",
    "TrackerDisplay",
    "format_duration",
    "show_summary",
]
