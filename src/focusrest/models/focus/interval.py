"""A single span of time attributed to one mode."""

from dataclasses import dataclass, field
from datetime import timedelta

from focusrest.utils.logger import get_logger


@dataclass
class Interval:
    """Time span with a fixed start and an end that is set at most once.

    ``end`` is ``None`` while the interval is still running.
    """

    start: float
    end: float | None = field(default=None)

    @property
    def is_open(self) -> bool:
        return self.end is None

    def close(self, now: float) -> None:
        """Set the end instant. Closing an already-closed interval is a no-op."""
        if self.end is None:
            self.end = now

    def duration(self, now: float) -> timedelta:
        """Length of the interval, measured up to *now* while it is open."""
        end = self.end if self.end is not None else now
        seconds = end - self.start
        if seconds < 0:
            # Clock went backwards between start and the reading
            get_logger().warning(
                "negative interval duration clamped to zero: start=%.6f end=%.6f",
                self.start,
                end,
            )
            return timedelta(0)
        return timedelta(seconds=seconds)
