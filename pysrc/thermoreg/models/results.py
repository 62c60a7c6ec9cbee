"""Result containers returned by the integrator and the controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from .state import Termination

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from .environment import EnvironmentalConditions
    from .state import SimulationRecord, ThermalState


@dataclass
class RunResult:
    """
    Outcome of one integration run.

    Attributes:
        termination: Whether the run ended in hyperthermia or equilibrium.
        steps: Number of steps executed (at least 1).
        final: Record of the last step.
        samples: Records sampled during the run (empty unless requested).
    """

    termination: Termination
    steps: int
    final: SimulationRecord
    samples: list[SimulationRecord] = field(default_factory=list)

    @property
    def state(self) -> ThermalState:
        """Terminal thermal state."""
        return self.final.state


@dataclass
class ConditionResult:
    """One wet-bulb condition of a sweep, with its full run."""

    wet_bulb: float
    environment: EnvironmentalConditions
    run: RunResult


@dataclass
class SweepResult:
    """
    Terminal states across a wet-bulb sweep, one entry per condition.

    Attributes:
        wet_bulb: Wet-bulb temperatures, in sweep order (°C).
        terminal_core: Core temperature at termination (°C).
        terminal_skin: Skin temperature at termination (°C).
        steps: Steps executed per condition.
        terminations: Termination kind per condition.
    """

    wet_bulb: NDArray[np.floating]
    terminal_core: NDArray[np.floating]
    terminal_skin: NDArray[np.floating]
    steps: NDArray[np.integer]
    terminations: list[Termination]

    def __len__(self) -> int:
        return len(self.terminations)

    @property
    def critical_wet_bulb(self) -> float | None:
        """First wet-bulb temperature whose run ended in hyperthermia, if any."""
        for wet_bulb, termination in zip(self.wet_bulb, self.terminations):
            if termination is Termination.HYPERTHERMIA:
                return float(wet_bulb)
        return None


@dataclass
class TimeseriesResult:
    """
    Trajectory of a single run sampled once per simulated minute.

    Attributes:
        minutes: Elapsed simulated time per sample (min).
        core_temp: Core temperature per sample (°C).
        skin_temp: Skin temperature per sample (°C).
        termination: Whether the run ended in hyperthermia or equilibrium.
        final: Record of the last step.
    """

    minutes: NDArray[np.floating]
    core_temp: NDArray[np.floating]
    skin_temp: NDArray[np.floating]
    termination: Termination
    final: SimulationRecord

    def __len__(self) -> int:
        return len(self.minutes)
