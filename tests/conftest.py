"""Shared pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Make the package importable from a source checkout without installation.
_src_root = str(Path(__file__).resolve().parent.parent / "pysrc")
if _src_root not in sys.path:
    sys.path.insert(0, _src_root)

from thermoreg import BodyParameters, EnvironmentalConditions, IntegratorSettings  # noqa: E402

# Hot, humid, still air: the core crosses 42 °C within about an hour.
HOT_DRY_TEMP = 50.0
HOT_WET_TEMP = 45.0
HOT_WIND_SPEED = 0.5


@pytest.fixture
def body() -> BodyParameters:
    """Default 80 kg, 185 cm, 25 year old male."""
    return BodyParameters()


@pytest.fixture
def mild_environment() -> EnvironmentalConditions:
    """30 °C dry-bulb, 22 °C wet-bulb, 5 m/s wind: settles to equilibrium."""
    return EnvironmentalConditions(dry_temp=30.0, wet_temp=22.0, wind_speed=5.0)


@pytest.fixture
def hot_environment() -> EnvironmentalConditions:
    return EnvironmentalConditions(dry_temp=HOT_DRY_TEMP, wet_temp=HOT_WET_TEMP, wind_speed=HOT_WIND_SPEED)


def coarse_settings(**overrides) -> IntegratorSettings:
    """Integrator settings with a looser equilibrium tolerance for faster runs."""
    values = {"flux_tolerance": 1e-2}
    values.update(overrides)
    return IntegratorSettings(**values)
