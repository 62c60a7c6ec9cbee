"""thermoreg - Core/shell human thermoregulation under heat stress.

A two-compartment (core/shell) thermal model of the human body driven by
convective, evaporative, radiative and metabolic heat exchange, advanced
by a fixed-step explicit integrator until the body reaches equilibrium or
crosses the hyperthermia threshold.

Quick start::

    import thermoreg

    body = thermoreg.BodyParameters(mass=80, height=185, age=25, sex=thermoreg.Sex.MALE)
    summary = thermoreg.run_sweep(body, dry_temp=30, wind_speed=5, wet_bulb_low=22, wet_bulb_high=30)
    print(summary.terminal_core)

    series = thermoreg.run_timeseries(body, thermoreg.EnvironmentalConditions(30, 35, 5))
    print(f"{series.termination.value} after {series.minutes[-1]:.0f} min")

Command line::

    thermoreg sweep run.txt --config config.txt --data data.txt
    thermoreg timeseries run.txt --config config.txt
"""

import logging
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

# Version: single source of truth is pyproject.toml
try:
    __version__ = version("thermoreg")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"  # Fallback for editable/source installs without metadata

from . import io, physics, progress  # noqa: E402
from .config import (  # noqa: E402
    FieldFallback,
    SweepConfig,
    TimeseriesConfig,
    load_settings,
    read_sweep_config,
    read_timeseries_config,
)
from .errors import (  # noqa: E402
    ConfigurationError,
    DegenerateThermalStateError,
    NonTerminationError,
    OutputSinkError,
    ThermoregError,
)
from .integrator import ThermalIntegrator  # noqa: E402
from .models import (  # noqa: E402
    BodyParameters,
    ConditionResult,
    EnvironmentalConditions,
    FluxSnapshot,
    IntegratorSettings,
    RunResult,
    Settings,
    Sex,
    SimulationRecord,
    SweepResult,
    SweepSettings,
    Termination,
    ThermalState,
    TimeseriesResult,
    TimeseriesSettings,
)
from .sweep import run_sweep, wet_bulb_values  # noqa: E402
from .timeseries import run_timeseries  # noqa: E402

__all__ = [
    # Version
    "__version__",
    # Inputs
    "BodyParameters",
    "Sex",
    "EnvironmentalConditions",
    # State
    "ThermalState",
    "FluxSnapshot",
    "SimulationRecord",
    "Termination",
    # Settings
    "IntegratorSettings",
    "SweepSettings",
    "TimeseriesSettings",
    "Settings",
    "load_settings",
    # Run parameters
    "FieldFallback",
    "SweepConfig",
    "TimeseriesConfig",
    "read_sweep_config",
    "read_timeseries_config",
    # Core
    "ThermalIntegrator",
    "run_sweep",
    "wet_bulb_values",
    "run_timeseries",
    # Results
    "RunResult",
    "ConditionResult",
    "SweepResult",
    "TimeseriesResult",
    # Errors
    "ThermoregError",
    "ConfigurationError",
    "DegenerateThermalStateError",
    "NonTerminationError",
    "OutputSinkError",
    # Utility modules
    "io",
    "physics",
    "progress",
]
