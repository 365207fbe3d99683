"""
Domain-specific exception hierarchy for the overlap finder application.
"""

from typing import Sequence


class OverlapFinderError(Exception):
    """Base class for all application-level errors."""


class InvalidZoneError(OverlapFinderError):
    """Raised when a timezone identifier cannot be resolved."""

    def __init__(self, zone: str):
        super().__init__(f"Unknown timezone: '{zone}'")
        self.zone = zone


class InvalidWallClockError(OverlapFinderError, ValueError):
    """Raised when a wall-clock string is not a valid HH:MM time."""


class MissingInputError(OverlapFinderError):
    """Raised when required input fields are absent."""

    def __init__(self, fields: Sequence[str]):
        super().__init__(f"Missing required input(s): {', '.join(fields)}")
        self.fields = list(fields)
