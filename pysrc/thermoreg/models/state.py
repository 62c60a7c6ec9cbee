"""Thermal state and per-step flux models.

:class:`ThermalState` is the quantity advanced by the integrator.
:class:`FluxSnapshot` holds the heat flux terms computed for one step and
:class:`SimulationRecord` pairs both with the step index for output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Termination(Enum):
    """Why a run stopped."""

    HYPERTHERMIA = "hyperthermia"
    EQUILIBRIUM = "equilibrium"


@dataclass(frozen=True)
class ThermalState:
    """
    Core/shell thermal state.

    Attributes:
        core_temp: Core temperature (°C).
        skin_temp: Skin (shell) temperature (°C).
        water_balance: Cumulative water balance (L). Tracked as a diagnostic,
            not used by termination.

    Example:
        state = ThermalState(core_temp=37.0, skin_temp=35.0)
        flux, state = integrator.step(state)
    """

    core_temp: float
    skin_temp: float
    water_balance: float = 0.0

    @property
    def is_finite(self) -> bool:
        """True when every field is a finite number."""
        return math.isfinite(self.core_temp) and math.isfinite(self.skin_temp) and math.isfinite(self.water_balance)


@dataclass(frozen=True)
class FluxSnapshot:
    """
    Heat flux terms of a single step.

    All terms are in W. skin_flux and core_flux are the net interface
    fluxes already multiplied by the step fraction, i.e. energy per step.

    Attributes:
        convective: Sensible heat from air to skin.
        evaporative: Latent heat exchanged through sweat (negative cools).
        metabolic: Metabolic heat production of the core.
        solar: Absorbed solar radiation.
        blackbody: Blackbody exchange from surroundings to skin.
        core_shell: Heat carried from core to shell.
        skin_flux: Net skin interface flux for the step.
        core_flux: Net core interface flux for the step.
    """

    convective: float
    evaporative: float
    metabolic: float
    solar: float
    blackbody: float
    core_shell: float
    skin_flux: float
    core_flux: float


@dataclass(frozen=True)
class SimulationRecord:
    """
    One sampled step of a run.

    Attributes:
        iteration: Zero-based step index.
        elapsed_seconds: Simulated time at the start of the step (s),
            i.e. ``iteration * step_fraction``.
        flux: Fluxes computed at the start of the step.
        state: State at the end of the step, one step_fraction later than
            ``elapsed_seconds``.
    """

    iteration: int
    elapsed_seconds: float
    flux: FluxSnapshot
    state: ThermalState
