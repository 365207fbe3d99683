"""
Application service for finding shared working hours of two people.

The service turns raw user input into domain objects and runs the full
resolve -> intersect -> enumerate pipeline. Timezone access goes through the
oracle protocol, so tests can pin "today" with a fixed reference instant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..adapters.timezone_oracle import PendulumTimezoneOracle
from ..domain.exceptions import MissingInputError
from ..domain.models import SlotDuration, TimeRange, WallClock, WorkWindow
from ..domain.slot_calculator import OverlapCalculator, SlotSequence
from ..domain.zoned_time import ZonedTimeResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowInput:
    """Raw, possibly incomplete form input for one person."""
    timezone: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None


@dataclass(frozen=True)
class OverlapResult:
    """Outcome of one evaluation."""
    first: WorkWindow
    second: WorkWindow
    time_range: TimeRange | None
    slots: Dict[SlotDuration, SlotSequence] = field(default_factory=dict)

    @property
    def has_overlap(self) -> bool:
        return self.time_range is not None

    @property
    def has_slots(self) -> bool:
        return any(self.slots.values())

    def slots_for(self, duration: SlotDuration) -> SlotSequence | None:
        return self.slots.get(SlotDuration(duration))


class OverlapFinderService:
    """
    Orchestrates input parsing, timezone resolution and slot calculation.
    """

    def __init__(
        self,
        oracle: PendulumTimezoneOracle,
        durations: Sequence[int] = (SlotDuration.THIRTY_MINUTES, SlotDuration.SIXTY_MINUTES),
    ) -> None:
        self._oracle = oracle
        self._durations = [SlotDuration(duration) for duration in durations]

    def build_window(self, window_input: WindowInput, label: str = "") -> WorkWindow:
        """
        Validate raw input and build a work window.

        Raises:
            MissingInputError: If any field is absent or blank
            InvalidWallClockError: If a time is not HH:MM
            InvalidZoneError: If the timezone cannot be resolved
        """
        prefix = f"{label} " if label else ""
        missing: List[str] = [
            f"{prefix}{name}"
            for name in ("timezone", "start", "end")
            if not (getattr(window_input, name) or "").strip()
        ]
        if missing:
            raise MissingInputError(missing)

        timezone = window_input.timezone.strip()
        self._oracle.ensure_zone(timezone)

        return WorkWindow(
            timezone=timezone,
            start=WallClock.parse(window_input.start),
            end=WallClock.parse(window_input.end),
        )

    def evaluate(self, first: WindowInput, second: WindowInput) -> OverlapResult:
        """
        Run a full evaluation for two people.

        Missing fields of both people are reported together.
        """
        missing: List[str] = []
        windows: List[WorkWindow] = []

        for label, window_input in (("person 1", first), ("person 2", second)):
            try:
                windows.append(self.build_window(window_input, label=label))
            except MissingInputError as exc:
                missing.extend(exc.fields)

        if missing:
            raise MissingInputError(missing)

        return self.evaluate_windows(windows[0], windows[1])

    def evaluate_windows(self, first: WorkWindow, second: WorkWindow) -> OverlapResult:
        """Compute overlap and slots for two already validated windows."""
        # Every window of one evaluation is anchored on the same "now".
        calculator = OverlapCalculator(resolver=ZonedTimeResolver(self._oracle.pinned()))
        time_range = calculator.overlap(first, second)

        if time_range is None:
            logger.debug("No overlap between %s and %s", first, second)
            return OverlapResult(first=first, second=second, time_range=None)

        logger.debug(
            "Overlap between %s and %s: %s (%d min)",
            first,
            second,
            time_range,
            time_range.duration_minutes(),
        )

        slots = {
            duration: calculator.enumerate_slots(time_range, duration)
            for duration in self._durations
        }

        return OverlapResult(first=first, second=second, time_range=time_range, slots=slots)
