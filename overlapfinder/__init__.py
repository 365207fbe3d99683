"""
overlapfinder - find shared working hours across two timezones.
"""

__version__ = "0.1.0"
