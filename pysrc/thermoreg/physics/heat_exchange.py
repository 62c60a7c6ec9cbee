"""
Heat exchange between the body and its surroundings.

Pure functions for each heat flux term of the two-compartment (core/shell)
thermoregulation model, plus the physiological quantities they depend on.
All temperatures are in °C. Fluxes are in W with a positive sign meaning
heat flowing *into* the receiving compartment, except core_shell_flux where
positive means heat leaving the core for the shell.

References:
- Mosteller (1987) - body surface area
- Mifflin et al. (1990) - resting energy expenditure
- Kerslake (1972) - convective and evaporative coefficients
"""

from __future__ import annotations

import math

from ..constants import (
    ATMOSPHERIC_PRESSURE_KPA,
    BLOOD_DENSITY,
    BLOOD_FLOW_BASE,
    BLOOD_FLOW_CORE_OFFSET,
    BLOOD_FLOW_CORE_SLOPE,
    BLOOD_FLOW_GAIN,
    BLOOD_FLOW_SCALE,
    BLOOD_FLOW_SKIN_SET_POINT,
    BLOOD_FLOW_SKIN_SLOPE,
    BLOOD_SPECIFIC_HEAT,
    CONVECTIVE_COEFF,
    EVAPORATIVE_COEFF,
    KELVIN_OFFSET,
    MOSTELLER_DIVISOR,
    PI_APPROX,
    PSYCHROMETER_A,
    PSYCHROMETER_B,
    REE_OFFSET_FEMALE,
    REE_OFFSET_MALE,
    REE_WATTS_PER_KCAL_DAY,
    SBC,
    SHELL_FRACTION_BASE,
    SHELL_FRACTION_GAIN,
    SHELL_FRACTION_POLE,
    SOLAR_CROSS_SECTION,
    SOLAR_IRRADIANCE,
    SVP_A,
    SVP_B,
    SVP_C,
)
from ..errors import DegenerateThermalStateError
from ..models.body import Sex


# =============================================================================
# Body geometry and metabolism
# =============================================================================


def surface_area(mass: float, height: float) -> float:
    """
    Body surface area by the Mosteller formula.

    Args:
        mass: Body mass (kg).
        height: Body height (cm).

    Returns:
        Surface area (m²).
    """
    return math.sqrt(mass * height / MOSTELLER_DIVISOR)


def basal_metabolic_rate(mass: float, height: float, age: float, sex: Sex) -> float:
    """
    Resting energy expenditure (Mifflin-St Jeor) converted to watts.

    Args:
        mass: Body mass (kg).
        height: Body height (cm).
        age: Age (years).
        sex: Biological sex, selects the constant offset.

    Returns:
        Basal metabolic heat production (W).
    """
    offset = REE_OFFSET_MALE if sex is Sex.MALE else REE_OFFSET_FEMALE
    return REE_WATTS_PER_KCAL_DAY * (10.0 * mass + 6.2 * height - 5.0 * age + offset)


# =============================================================================
# Humidity
# =============================================================================


def saturation_vapor_pressure(temperature: float) -> float:
    """Saturation vapour pressure over water (hPa, Magnus form)."""
    return SVP_A * math.exp((SVP_B * temperature) / (SVP_C + temperature))


def vapor_pressure(dry_temp: float, wet_temp: float) -> float:
    """
    Ambient partial pressure of water vapour from a psychrometer reading.

    Args:
        dry_temp: Dry-bulb temperature (°C).
        wet_temp: Wet-bulb temperature (°C).

    Returns:
        Vapour pressure on the same scale as saturation_vapor_pressure().
    """
    depression = (
        PSYCHROMETER_A * (1 + PSYCHROMETER_B * wet_temp) * (dry_temp - wet_temp) * ATMOSPHERIC_PRESSURE_KPA
    )
    return saturation_vapor_pressure(wet_temp) - depression


# =============================================================================
# Skin interface fluxes
# =============================================================================


def convective_flux(wind_speed: float, dry_temp: float, skin_temp: float) -> float:
    """Sensible heat gained by the skin from the air (W, Kerslake)."""
    return CONVECTIVE_COEFF * math.sqrt(wind_speed) * (dry_temp - skin_temp)


def evaporative_flux(wind_speed: float, dry_temp: float, skin_temp: float, wet_temp: float) -> float:
    """
    Latent heat exchanged through sweat evaporation (W, Kerslake).

    Negative while the air is drier than saturated air at skin temperature,
    i.e. evaporation cools the skin.
    """
    gradient = vapor_pressure(dry_temp, wet_temp) - saturation_vapor_pressure(skin_temp)
    return EVAPORATIVE_COEFF * math.sqrt(wind_speed) * gradient


def solar_flux(area: float, reflectivity: float, irradiance: float = SOLAR_IRRADIANCE) -> float:
    """
    Absorbed solar radiation (W).

    The body presents a quarter of its surface to the beam. The model runs
    with zero irradiance, so the default call always returns 0.

    Args:
        area: Body surface area (m²).
        reflectivity: Skin reflectivity in [0, 1].
        irradiance: Solar irradiance (W/m²).
    """
    return SOLAR_CROSS_SECTION * area * irradiance * (1.0 - reflectivity)


def blackbody_flux(hot_temp: float, cold_temp: float) -> float:
    """
    Net blackbody exchange from a surface at hot_temp to one at cold_temp.

    Stefan-Boltzmann difference of absolute temperatures, per unit area.
    """
    return SBC * ((hot_temp + KELVIN_OFFSET) ** 4 - (cold_temp + KELVIN_OFFSET) ** 4)


# =============================================================================
# Core/shell exchange
# =============================================================================


def blood_flow(core_temp: float, skin_temp: float) -> float:
    """
    Skin blood flow (L/(h·m²)).

    Linear in core temperature, scaled by an arctangent that saturates
    with the skin temperature offset from its set point.
    """
    skin_drive = (100.0 / PI_APPROX) * math.atan(BLOOD_FLOW_SKIN_SLOPE * (skin_temp - BLOOD_FLOW_SKIN_SET_POINT))
    return BLOOD_FLOW_GAIN * (BLOOD_FLOW_CORE_SLOPE * core_temp - BLOOD_FLOW_CORE_OFFSET) * (skin_drive + BLOOD_FLOW_BASE)


def shell_fraction(flow: float) -> float:
    """
    Fraction of body volume belonging to the shell compartment.

    Args:
        flow: Skin blood flow (L/(h·m²)).

    Returns:
        Dimensionless shell fraction.

    Raises:
        DegenerateThermalStateError: If flow is at or below the pole of the
            fit (0.1386), where the fraction diverges or turns negative.
    """
    excess = flow - SHELL_FRACTION_POLE
    if not excess > 0.0:
        raise DegenerateThermalStateError(
            "blood_flow",
            flow,
            f"must stay above {SHELL_FRACTION_POLE} for the shell fraction to be defined",
        )
    return SHELL_FRACTION_BASE + SHELL_FRACTION_GAIN / excess


def core_surface_area(fraction: float, area: float) -> float:
    """
    Surface area of the core compartment (m²).

    Raises:
        DegenerateThermalStateError: If the shell fraction is outside [0, 1).
    """
    if not 0.0 <= fraction < 1.0:
        raise DegenerateThermalStateError("shell_fraction", fraction, "must be in [0, 1)")
    return (1.0 - fraction) ** (2.0 / 3.0) * area


def core_shell_flux(core_temp: float, skin_temp: float, area: float) -> float:
    """
    Heat carried from core to shell (W, positive core -> shell).

    Blood-borne transfer over the core surface plus blackbody exchange
    between the two compartments.

    Args:
        core_temp: Core temperature (°C).
        skin_temp: Skin (shell) temperature (°C).
        area: Total body surface area (m²).
    """
    flow = blood_flow(core_temp, skin_temp)
    core_area = core_surface_area(shell_fraction(flow), area)
    perfusion = core_area * flow * BLOOD_FLOW_SCALE * BLOOD_DENSITY * BLOOD_SPECIFIC_HEAT
    return perfusion * (core_temp - skin_temp) + blackbody_flux(core_temp, skin_temp)


__all__ = [
    "surface_area",
    "basal_metabolic_rate",
    "saturation_vapor_pressure",
    "vapor_pressure",
    "convective_flux",
    "evaporative_flux",
    "solar_flux",
    "blackbody_flux",
    "blood_flow",
    "shell_fraction",
    "core_surface_area",
    "core_shell_flux",
]
