"""Heat exchange physics of the core/shell model."""

from .heat_exchange import (
    basal_metabolic_rate,
    blackbody_flux,
    blood_flow,
    convective_flux,
    core_shell_flux,
    core_surface_area,
    evaporative_flux,
    saturation_vapor_pressure,
    shell_fraction,
    solar_flux,
    surface_area,
    vapor_pressure,
)

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
