"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .overlap_finder import OverlapFinderService, OverlapResult, WindowInput

__all__ = ["OverlapFinderService", "OverlapResult", "WindowInput"]
