"""
Tests for the OverlapFinderService orchestration layer.
"""

import pendulum
import pytest

from overlapfinder.domain.exceptions import InvalidWallClockError, InvalidZoneError, MissingInputError
from overlapfinder.adapters.timezone_oracle import PendulumTimezoneOracle
from overlapfinder.domain.models import SlotDuration
from overlapfinder.services.overlap_finder import OverlapFinderService, WindowInput


@pytest.fixture
def service(oracle):
    return OverlapFinderService(oracle=oracle)


def test_evaluate_office_hours(service):
    """Full pipeline for Stockholm and Chicago office hours."""
    result = service.evaluate(
        WindowInput("Europe/Stockholm", "09:00", "17:00"),
        WindowInput("America/Chicago", "09:00", "17:00"),
    )

    assert result.has_overlap
    assert result.has_slots
    assert result.time_range.start == pendulum.datetime(2026, 7, 15, 14, 0, tz="UTC")
    assert len(result.slots_for(SlotDuration.THIRTY_MINUTES)) == 2
    assert len(result.slots_for(SlotDuration.SIXTY_MINUTES)) == 1


def test_evaluate_without_overlap(service):
    result = service.evaluate(
        WindowInput("UTC", "09:00", "11:00"),
        WindowInput("UTC", "12:00", "14:00"),
    )

    assert not result.has_overlap
    assert not result.has_slots
    assert result.slots == {}


def test_short_overlap_has_no_slots(service):
    result = service.evaluate(
        WindowInput("UTC", "09:00", "11:00"),
        WindowInput("UTC", "10:40", "14:00"),
    )

    assert result.has_overlap
    assert not result.has_slots


def test_missing_fields_of_both_people_are_reported(service):
    """All absent or blank fields should be listed at once."""
    with pytest.raises(MissingInputError) as exc_info:
        service.evaluate(
            WindowInput("UTC", "", "17:00"),
            WindowInput(None, "09:00", None),
        )

    assert exc_info.value.fields == [
        "person 1 start",
        "person 2 timezone",
        "person 2 end",
    ]


def test_unknown_zone_is_fatal(service):
    with pytest.raises(InvalidZoneError):
        service.evaluate(
            WindowInput("Europe/Atlantis", "09:00", "17:00"),
            WindowInput("UTC", "09:00", "17:00"),
        )


def test_malformed_time_is_rejected(service):
    with pytest.raises(InvalidWallClockError):
        service.build_window(WindowInput("UTC", "9am", "17:00"))


def test_configured_durations_limit_slot_tables(oracle):
    service = OverlapFinderService(oracle=oracle, durations=[60])

    result = service.evaluate(
        WindowInput("UTC", "09:00", "12:00"),
        WindowInput("UTC", "10:00", "17:00"),
    )

    assert list(result.slots) == [SlotDuration.SIXTY_MINUTES]
    assert result.slots_for(SlotDuration.THIRTY_MINUTES) is None
    assert len(result.slots_for(60)) == 3


class AdvancingOracle(PendulumTimezoneOracle):
    """Oracle whose clock moves forward one hour on every reading."""

    def __init__(self, start):
        super().__init__()
        self._current = start

    def now(self):
        current = self._current
        self._current = current.add(hours=1)
        return current


def test_evaluation_reads_the_clock_once():
    """Both ends of a window stay on the same day when midnight passes mid-evaluation."""
    oracle = AdvancingOracle(pendulum.datetime(2026, 7, 15, 23, 30, tz="UTC"))
    service = OverlapFinderService(oracle=oracle)

    result = service.evaluate(
        WindowInput("UTC", "09:00", "17:00"),
        WindowInput("UTC", "09:00", "17:00"),
    )

    assert result.time_range.start == pendulum.datetime(2026, 7, 15, 9, 0, tz="UTC")
    assert result.time_range.end == pendulum.datetime(2026, 7, 15, 17, 0, tz="UTC")
    assert result.time_range.duration_minutes() == 480
