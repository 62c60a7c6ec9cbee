"""Data models for thermoreg simulations.

Modules
-------
body
    ``BodyParameters`` and the ``Sex`` enumeration.
environment
    ``EnvironmentalConditions``: dry-bulb, wet-bulb and wind speed.
state
    ``ThermalState``, ``FluxSnapshot``, ``SimulationRecord`` and
    ``Termination``.
config
    ``IntegratorSettings``, ``SweepSettings``, ``TimeseriesSettings`` and
    the ``Settings`` bundle.
results
    ``RunResult``, ``ConditionResult``, ``SweepResult``, ``TimeseriesResult``.
"""

from .body import BodyParameters, Sex
from .config import IntegratorSettings, Settings, SweepSettings, TimeseriesSettings
from .environment import EnvironmentalConditions
from .results import ConditionResult, RunResult, SweepResult, TimeseriesResult
from .state import FluxSnapshot, SimulationRecord, Termination, ThermalState

__all__ = [
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
    # Results
    "RunResult",
    "ConditionResult",
    "SweepResult",
    "TimeseriesResult",
]
