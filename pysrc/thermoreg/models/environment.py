"""Ambient condition model."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class EnvironmentalConditions:
    """
    Ambient conditions for one integration run.

    Attributes:
        dry_temp: Dry-bulb air temperature (°C). Default 30.
        wet_temp: Wet-bulb temperature (°C), the humidity proxy. Default 22.
        wind_speed: Wind speed (m/s). Default 5.
    """

    dry_temp: float = 30.0
    wet_temp: float = 22.0
    wind_speed: float = 5.0

    def __post_init__(self):
        for name in ("dry_temp", "wet_temp", "wind_speed"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if self.wind_speed < 0:
            raise ValueError(f"wind_speed must be non-negative, got {self.wind_speed}")

    def with_wet_bulb(self, wet_temp: float) -> EnvironmentalConditions:
        """Return a copy with a different wet-bulb temperature."""
        return replace(self, wet_temp=float(wet_temp))
