"""
Physical constants and default parameters for thermoreg.

This module consolidates the physical constants and empirical coefficients
of the core/shell heat exchange model so that the physics layer and the
integrator reference names rather than bare numbers.
"""

# =============================================================================
# Physical Constants
# =============================================================================

# Stefan-Boltzmann constant (W/m²/K⁴)
# Used for blackbody radiation calculations: E = σ × T⁴
SBC = 5.67e-8

# Kelvin to Celsius conversion offset
KELVIN_OFFSET = 273.15

# Standard atmospheric pressure (kPa) used by the psychrometric correction
ATMOSPHERIC_PRESSURE_KPA = 101.3

# Latent heat of vaporization of sweat (J/L)
LATENT_HEAT_VAPORIZATION = 2_416_000.0

# Effective specific heat of body tissue (J/(kg·K))
TISSUE_HEAT_CAPACITY = 3874.0

# Blood density (kg/m³) and specific heat (J/(kg·K))
BLOOD_DENSITY = 1060.0
BLOOD_SPECIFIC_HEAT = 3860.0

# Unit scale applied to blood flow in the core/shell exchange term
BLOOD_FLOW_SCALE = 10e-7


# =============================================================================
# Empirical Coefficients
# =============================================================================
# Kerslake convection and evaporation coefficients, Mifflin-St Jeor resting
# energy expenditure, and the blood flow / shell fraction fit.
# =============================================================================

# Mosteller body surface area divisor
MOSTELLER_DIVISOR = 3600.0

# Resting energy expenditure: kcal/day -> W, and sex offsets (kcal/day)
REE_WATTS_PER_KCAL_DAY = 0.0484
REE_OFFSET_MALE = 5.0
REE_OFFSET_FEMALE = -161.0

# Magnus form of the saturation vapour pressure curve (hPa)
SVP_A = 6.108
SVP_B = 17.27
SVP_C = 237.3

# Psychrometer coefficients
PSYCHROMETER_A = 0.00066
PSYCHROMETER_B = 0.00115

# Kerslake coefficients (W per sqrt(m/s) per K or per hPa)
CONVECTIVE_COEFF = 8.3
EVAPORATIVE_COEFF = 12.4

# Solar irradiance seen by the body (W/m²). Held at zero: the model runs
# in the shade.
SOLAR_IRRADIANCE = 0.0

# Fraction of the body surface presented to the sun
SOLAR_CROSS_SECTION = 0.25

# Blood flow fit (L/(h·m²))
PI_APPROX = 3.14159
BLOOD_FLOW_GAIN = 0.7
BLOOD_FLOW_CORE_SLOPE = 2.07
BLOOD_FLOW_CORE_OFFSET = 75.44
BLOOD_FLOW_SKIN_SET_POINT = 34.7
BLOOD_FLOW_SKIN_SLOPE = 0.75
BLOOD_FLOW_BASE = 53.0

# Shell fraction fit: alpha = base + gain / (vb - pole)
SHELL_FRACTION_BASE = 0.044
SHELL_FRACTION_GAIN = 0.35
SHELL_FRACTION_POLE = 0.1386


# =============================================================================
# Simulation Defaults
# =============================================================================

# Fraction of a second advanced per integration step
STEP_FRACTION = 0.1

# Core temperature treated as unsafe (°C)
HYPERTHERMIA_THRESHOLD = 42.0

# Interface flux below which the body is at steady state (W·step)
FLUX_TOLERANCE = 1e-4

# Hard cap on integration steps per run
MAX_ITERATIONS = 10_000_000

# Output column width (characters)
COLUMN_WIDTH = 13


__all__ = [
    "SBC",
    "KELVIN_OFFSET",
    "ATMOSPHERIC_PRESSURE_KPA",
    "LATENT_HEAT_VAPORIZATION",
    "TISSUE_HEAT_CAPACITY",
    "BLOOD_DENSITY",
    "BLOOD_SPECIFIC_HEAT",
    "BLOOD_FLOW_SCALE",
    "MOSTELLER_DIVISOR",
    "REE_WATTS_PER_KCAL_DAY",
    "REE_OFFSET_MALE",
    "REE_OFFSET_FEMALE",
    "SVP_A",
    "SVP_B",
    "SVP_C",
    "PSYCHROMETER_A",
    "PSYCHROMETER_B",
    "CONVECTIVE_COEFF",
    "EVAPORATIVE_COEFF",
    "SOLAR_IRRADIANCE",
    "SOLAR_CROSS_SECTION",
    "PI_APPROX",
    "BLOOD_FLOW_GAIN",
    "BLOOD_FLOW_CORE_SLOPE",
    "BLOOD_FLOW_CORE_OFFSET",
    "BLOOD_FLOW_SKIN_SET_POINT",
    "BLOOD_FLOW_SKIN_SLOPE",
    "BLOOD_FLOW_BASE",
    "SHELL_FRACTION_BASE",
    "SHELL_FRACTION_GAIN",
    "SHELL_FRACTION_POLE",
    "STEP_FRACTION",
    "HYPERTHERMIA_THRESHOLD",
    "FLUX_TOLERANCE",
    "MAX_ITERATIONS",
    "COLUMN_WIDTH",
]
