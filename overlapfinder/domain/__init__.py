"""
Domain layer - Pure business logic without I/O.
"""

from .exceptions import (
    InvalidWallClockError,
    InvalidZoneError,
    MissingInputError,
    OverlapFinderError,
)
from .models import SlotDuration, TimeRange, TimeSlot, WallClock, WorkWindow
from .slot_calculator import SLOT_STEP_MINUTES, OverlapCalculator, SlotSequence
from .zoned_time import TimezoneOracleProtocol, ZonedTimeResolver

__all__ = [
    "InvalidWallClockError",
    "InvalidZoneError",
    "MissingInputError",
    "OverlapFinderError",
    "SlotDuration",
    "TimeRange",
    "TimeSlot",
    "WallClock",
    "WorkWindow",
    "SLOT_STEP_MINUTES",
    "OverlapCalculator",
    "SlotSequence",
    "TimezoneOracleProtocol",
    "ZonedTimeResolver",
]
