"""Time sources for the session tracker."""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current instant in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    """Clock backed by ``time.monotonic``, immune to wall-clock adjustments."""

    def now(self) -> float:
        return time.monotonic()
