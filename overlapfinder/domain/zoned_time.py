"""
Conversion of zone-local wall-clock times into absolute instants.

A zone's UTC offset is a function of the instant, while the instant we are
looking for depends on the offset. The resolver breaks that cycle by guessing
an instant (the wall-clock read as if it were UTC), reading the offset in
effect there, and correcting the guess until the offset is consistent.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Protocol

import pendulum
from pendulum import Date, DateTime

from .models import WallClock

logger = logging.getLogger(__name__)


class TimezoneOracleProtocol(Protocol):
    """Timezone database capabilities needed by the resolver."""

    def current_date(self, zone: str) -> Date:
        """Return today's calendar date as observed in ``zone``."""

    def utc_offset(self, zone: str, instant: DateTime) -> timedelta:
        """Return the UTC offset of ``zone`` in effect at ``instant``."""


class ZonedTimeResolver:
    """
    Resolves (zone, wall-clock, day offset) to a UTC instant.

    Algorithm:
    1. Take today's date as observed in the zone (not the caller's today)
    2. Build a provisional instant from that date, the day offset and the
       wall-clock, read as UTC
    3. Read the zone's offset at the provisional instant and subtract it
    4. Re-read the offset at the corrected instant; if it changed (a DST
       transition lies between guess and answer) correct once more
    """

    def __init__(self, oracle: TimezoneOracleProtocol):
        self.oracle = oracle

    def resolve(self, zone: str, wall: WallClock, day_offset: int = 0) -> DateTime:
        """
        Resolve a wall-clock time in ``zone`` to an absolute UTC instant.

        Args:
            zone: Timezone identifier understood by the oracle
            wall: Wall-clock time in that zone
            day_offset: 0 for today in the zone, 1 for tomorrow

        Returns:
            Pendulum DateTime in UTC
        """
        if day_offset not in (0, 1):
            raise ValueError(f"day_offset must be 0 or 1, got {day_offset}")

        today = self.oracle.current_date(zone)
        provisional = pendulum.datetime(
            today.year,
            today.month,
            today.day,
            wall.hour,
            wall.minute,
            0,
            tz="UTC",
        ).add(days=day_offset)

        guess = self.oracle.utc_offset(zone, provisional)
        instant = provisional - guess

        corrected = self.oracle.utc_offset(zone, instant)
        if corrected == guess:
            return instant

        candidate = provisional - corrected
        if self.oracle.utc_offset(zone, candidate) == corrected:
            return candidate

        # Wall-clock time skipped by a forward transition: keep the
        # pre-transition offset so the result lands just after the gap.
        logger.debug("%s %s falls into a DST gap in %s", today, wall, zone)
        return provisional - min(guess, corrected)
