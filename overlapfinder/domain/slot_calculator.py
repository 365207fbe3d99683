"""
Core business logic for intersecting two work windows and offering slots.

Pure domain logic: all arithmetic happens on UTC instants, never on
wall-clock strings.
"""

from typing import Iterator

from .models import SlotDuration, TimeRange, TimeSlot, WorkWindow
from .zoned_time import ZonedTimeResolver

# Distance between consecutive slot starts, whatever the slot length.
SLOT_STEP_MINUTES = 30


class SlotSequence:
    """
    Restartable, lazily generated sequence of slots covering a time range.

    Consecutive slots start ``SLOT_STEP_MINUTES`` apart, so 60-minute slots
    form a sliding window that overlaps by 30 minutes.
    """

    def __init__(self, time_range: TimeRange, duration: SlotDuration):
        self.time_range = time_range
        self.duration = duration

    def __iter__(self) -> Iterator[TimeSlot]:
        current = self.time_range.start

        while current.add(minutes=self.duration) <= self.time_range.end:
            yield TimeSlot(
                time_range=TimeRange(start=current, end=current.add(minutes=self.duration)),
                duration=self.duration,
            )
            current = current.add(minutes=SLOT_STEP_MINUTES)

    def __len__(self) -> int:
        spare = self.time_range.duration_minutes() - self.duration
        if spare < 0:
            return 0
        return spare // SLOT_STEP_MINUTES + 1

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"SlotSequence({self.time_range}, {int(self.duration)} min)"


class OverlapCalculator:
    """
    Calculates the shared availability of two work windows.

    Algorithm:
    1. Resolve each window's start (today) and end (today, or tomorrow if
       the window crosses midnight) to UTC instants
    2. Intersect the two resulting ranges
    3. Enumerate fixed-length slots over the intersection on demand
    """

    def __init__(self, resolver: ZonedTimeResolver):
        self.resolver = resolver

    def resolve_window(self, window: WorkWindow) -> TimeRange | None:
        """
        Resolve a work window to a UTC time range.
        Returns None for a zero-length window.
        """
        start = self.resolver.resolve(window.timezone, window.start, day_offset=0)
        end = self.resolver.resolve(
            window.timezone,
            window.end,
            day_offset=1 if window.crosses_midnight else 0,
        )

        if start >= end:
            return None

        return TimeRange(start=start, end=end)

    def overlap(self, first: WorkWindow, second: WorkWindow) -> TimeRange | None:
        """
        Calculate the overlap of two work windows.

        Returns None when the windows do not share any time; that is a
        normal outcome, not an error.
        """
        first_range = self.resolve_window(first)
        second_range = self.resolve_window(second)

        if first_range is None or second_range is None:
            return None

        return first_range.intersect(second_range)

    @staticmethod
    def enumerate_slots(time_range: TimeRange, duration: SlotDuration) -> SlotSequence:
        """Offer slots of ``duration`` inside ``time_range``."""
        return SlotSequence(time_range=time_range, duration=SlotDuration(duration))
