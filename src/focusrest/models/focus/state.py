"""Focus/Rest session tracking state machine."""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

from focusrest.utils.logger import get_logger

from .clock import Clock, MonotonicClock
from .interval import Interval


class Mode(str, Enum):
    """The two mutually exclusive activity modes."""

    FOCUS = "focus"
    REST = "rest"

    @property
    def label(self) -> str:
        return self.value.title()

    def __str__(self) -> str:
        return self.label


@dataclass
class ModeBuckets:
    """Fixed per-mode interval storage; every mode always has a list."""

    focus: list[Interval] = field(default_factory=list)
    rest: list[Interval] = field(default_factory=list)

    def __getitem__(self, mode: Mode) -> list[Interval]:
        if mode is Mode.FOCUS:
            return self.focus
        if mode is Mode.REST:
            return self.rest
        raise ValueError(f"Unknown mode: {mode!r}")


class SessionTracker:
    """Tracks time spent in Focus and Rest across pauses and mode switches.

    The tracker starts paused in Focus mode with no intervals. While running
    there is exactly one open interval and it is the last one of the current
    mode; while paused every interval is closed.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or MonotonicClock()
        self.intervals_by_mode = ModeBuckets()
        self._current_mode = Mode.FOCUS
        self._paused = True
        self._logger = get_logger()

    @property
    def current_mode(self) -> Mode:
        return self._current_mode

    @property
    def is_paused(self) -> bool:
        return self._paused

    # Commands

    def start(self) -> None:
        """Begin timing the current mode. No-op if already running."""
        if not self._paused:
            return
        self._paused = False
        self._open_interval(self._current_mode)
        self._logger.debug("tracker started in %s", self._current_mode.value)

    def pause(self) -> None:
        """Stop timing. No-op if already paused."""
        if self._paused:
            return
        self._paused = True
        self._close_current_interval()
        self._logger.debug("tracker paused in %s", self._current_mode.value)

    def toggle_pause(self) -> None:
        if self._paused:
            self.start()
        else:
            self.pause()

    def change_mode(self, new_mode: Mode) -> None:
        """Switch to *new_mode*, always leaving the tracker running.

        Switching while paused resumes first. Switching to the mode that is
        already current does nothing else.
        """
        new_mode = Mode(new_mode)
        if self._paused:
            self.start()

        if new_mode is self._current_mode:
            return

        self._close_current_interval()
        previous = self._current_mode
        self._current_mode = new_mode
        self._open_interval(new_mode)
        self._logger.debug("mode changed: %s -> %s", previous.value, new_mode.value)

    # Queries

    def current_elapsed(self) -> timedelta | None:
        """Duration of the latest interval in the current mode.

        Returns None if the current mode has never run.
        """
        interval = self._current_interval()
        if interval is None:
            return None
        return interval.duration(self.clock.now())

    def total_elapsed(self, mode: Mode) -> timedelta | None:
        """Sum of every interval recorded for *mode*, open ones measured to now."""
        intervals = self.intervals_by_mode[Mode(mode)]
        now = self.clock.now()
        return sum(
            (interval.duration(now) for interval in intervals),
            timedelta(0),
        )

    # Internals

    def _current_interval(self) -> Interval | None:
        intervals = self.intervals_by_mode[self._current_mode]
        return intervals[-1] if intervals else None

    def _open_interval(self, mode: Mode) -> None:
        self.intervals_by_mode[mode].append(Interval(start=self.clock.now()))

    def _close_current_interval(self) -> None:
        interval = self._current_interval()
        if interval is not None:
            interval.close(self.clock.now())
