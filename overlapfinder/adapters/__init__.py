"""
Adapters layer - Host platform integrations (timezone database).
"""

from .timezone_oracle import PendulumTimezoneOracle, zone_label

__all__ = ["PendulumTimezoneOracle", "zone_label"]
