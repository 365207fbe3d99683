"""
Domain models for wall-clock windows, time ranges and meeting slots.
"""

import re
from dataclasses import dataclass
from enum import IntEnum

from pendulum import DateTime

from .exceptions import InvalidWallClockError

_WALL_CLOCK_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")


@dataclass(frozen=True, order=True)
class WallClock:
    """
    A time-of-day label with no date or timezone attached.

    Ordering is lexicographic on (hour, minute).
    """
    hour: int
    minute: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise InvalidWallClockError(f"Hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidWallClockError(f"Minute must be between 0 and 59, got {self.minute}")

    @classmethod
    def parse(cls, value: str) -> "WallClock":
        """
        Parse a "HH:MM" string.

        Raises:
            InvalidWallClockError: If the string is malformed or out of range
        """
        match = _WALL_CLOCK_PATTERN.match(value.strip())
        if not match:
            raise InvalidWallClockError(f"Expected a time in HH:MM format, got '{value}'")

        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class WorkWindow:
    """
    One person's daily availability in their own timezone.

    If ``end`` is earlier than ``start`` the window ends on the following day.
    """
    timezone: str
    start: WallClock
    end: WallClock

    @property
    def crosses_midnight(self) -> bool:
        return self.end < self.start

    def __str__(self) -> str:
        return f"{self.start} - {self.end} ({self.timezone})"


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable range between two instants.

    Invariant: start must be before end.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time {self.start} must be before end time {self.end}")

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        return int((self.end - self.start).total_seconds() / 60)

    def overlaps(self, other: "TimeRange") -> bool:
        """Check if this range overlaps with another."""
        return self.start < other.end and self.end > other.start

    def contains(self, other: "TimeRange") -> bool:
        """Check if another range lies completely inside this one."""
        return self.start <= other.start and other.end <= self.end

    def intersect(self, other: "TimeRange") -> "TimeRange | None":
        """
        Calculate the intersection of two time ranges.
        Returns None if there is no overlap.
        """
        if not self.overlaps(other):
            return None

        start = max(self.start, other.start)
        end = min(self.end, other.end)

        return TimeRange(start=start, end=end)

    def __str__(self) -> str:
        return f"{self.start.to_iso8601_string()} - {self.end.to_iso8601_string()}"


class SlotDuration(IntEnum):
    """Supported meeting lengths in minutes."""
    THIRTY_MINUTES = 30
    SIXTY_MINUTES = 60

    @property
    def title(self) -> str:
        if self is SlotDuration.SIXTY_MINUTES:
            return "1-Hour Slots"
        return f"{self.value}-Minute Slots"


@dataclass(frozen=True)
class TimeSlot:
    """
    A candidate meeting time inside an overlap.
    """
    time_range: TimeRange
    duration: SlotDuration

    @property
    def start(self) -> DateTime:
        return self.time_range.start

    @property
    def end(self) -> DateTime:
        return self.time_range.end
