"""
Timezone database access backed by pendulum.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import List

import pendulum
from pendulum import Date, DateTime

from ..domain.exceptions import InvalidZoneError

logger = logging.getLogger(__name__)


class PendulumTimezoneOracle:
    """
    Answers "what is today" and "what is the offset" questions for a zone.

    The oracle treats the timezone database as a static lookup table, so a
    failed lookup is final and never retried.
    """

    def __init__(self, reference: DateTime | None = None):
        """
        Initialize the oracle.

        Args:
            reference: Optional instant to treat as "now". Defaults to the
                current time at every call.
        """
        self.reference = reference

    def now(self) -> DateTime:
        """Return the instant considered "now" in UTC."""
        if self.reference is not None:
            return self.reference.in_timezone("UTC")
        return pendulum.now("UTC")

    def pinned(self) -> "PendulumTimezoneOracle":
        """Return an oracle whose "now" is fixed to this oracle's current instant."""
        return PendulumTimezoneOracle(reference=self.now())

    def ensure_zone(self, zone: str):
        """
        Look up a timezone by identifier.

        Raises:
            InvalidZoneError: If the identifier is unknown
        """
        if not zone or not zone.strip():
            raise InvalidZoneError(zone)

        try:
            return pendulum.timezone(zone)
        except (ValueError, KeyError, OSError) as exc:
            logger.debug("Timezone lookup failed for %r: %s", zone, exc)
            raise InvalidZoneError(zone) from exc

    def current_date(self, zone: str) -> Date:
        return self.now().in_timezone(self.ensure_zone(zone)).date()

    def utc_offset(self, zone: str, instant: DateTime) -> timedelta:
        return instant.in_timezone(self.ensure_zone(zone)).utcoffset()

    def to_local(self, instant: DateTime, zone: str) -> DateTime:
        """Project an instant onto the wall clock of ``zone``."""
        return instant.in_timezone(self.ensure_zone(zone))

    @staticmethod
    def available_timezones() -> List[str]:
        """Return all selectable timezone identifiers, sorted."""
        return sorted(pendulum.timezones())


def zone_label(zone: str) -> str:
    """
    Short human readable label for a zone.

    Example: "America/New_York" -> "New York"
    """
    return zone.rsplit("/", 1)[-1].replace("_", " ")
