"""
Shared fixtures.
"""

import pendulum
import pytest

from overlapfinder.adapters.timezone_oracle import PendulumTimezoneOracle
from overlapfinder.domain.slot_calculator import OverlapCalculator
from overlapfinder.domain.zoned_time import ZonedTimeResolver


@pytest.fixture
def summer_reference():
    """Mid-July: Stockholm is UTC+2, Chicago is UTC-5."""
    return pendulum.datetime(2026, 7, 15, 12, 0, tz="UTC")


@pytest.fixture
def oracle(summer_reference):
    return PendulumTimezoneOracle(reference=summer_reference)


@pytest.fixture
def resolver(oracle):
    return ZonedTimeResolver(oracle)


@pytest.fixture
def calculator(resolver):
    return OverlapCalculator(resolver=resolver)
