"""Run-time settings for the integrator and the two controllers."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import (
    FLUX_TOLERANCE,
    HYPERTHERMIA_THRESHOLD,
    LATENT_HEAT_VAPORIZATION,
    MAX_ITERATIONS,
    STEP_FRACTION,
    TISSUE_HEAT_CAPACITY,
)


@dataclass(frozen=True)
class IntegratorSettings:
    """
    Numerical settings of the fixed-step integrator.

    Attributes:
        step_fraction: Seconds advanced per step. Default 0.1.
        thermal_capacity: Tissue specific heat (J/(kg·K)). Default 3874.
        latent_heat: Latent heat of vaporization (J/L). Default 2,416,000.
        hyperthermia_threshold: Core temperature that ends a run (°C). Default 42.
        flux_tolerance: Interface flux below which a run is at equilibrium. Default 1e-4.
        max_iterations: Steps after which a run is abandoned. Default 10,000,000.
        fixed_shell_fraction: If set, use this constant shell fraction for the
            heat capacity split instead of the blood-flow-dependent one.
    """

    step_fraction: float = STEP_FRACTION
    thermal_capacity: float = TISSUE_HEAT_CAPACITY
    latent_heat: float = LATENT_HEAT_VAPORIZATION
    hyperthermia_threshold: float = HYPERTHERMIA_THRESHOLD
    flux_tolerance: float = FLUX_TOLERANCE
    max_iterations: int = MAX_ITERATIONS
    fixed_shell_fraction: float | None = None

    def __post_init__(self):
        if not 0 < self.step_fraction <= 1:
            raise ValueError(f"step_fraction must be in (0, 1], got {self.step_fraction}")
        if not self.thermal_capacity > 0:
            raise ValueError(f"thermal_capacity must be positive, got {self.thermal_capacity}")
        if not self.latent_heat > 0:
            raise ValueError(f"latent_heat must be positive, got {self.latent_heat}")
        if not self.flux_tolerance > 0:
            raise ValueError(f"flux_tolerance must be positive, got {self.flux_tolerance}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be at least 1, got {self.max_iterations}")
        if self.fixed_shell_fraction is not None and not 0 < self.fixed_shell_fraction < 1:
            raise ValueError(f"fixed_shell_fraction must be in (0, 1), got {self.fixed_shell_fraction}")

    @property
    def steps_per_second(self) -> int:
        """Whole number of steps per simulated second."""
        return max(1, round(1.0 / self.step_fraction))

    @property
    def steps_per_minute(self) -> int:
        """Whole number of steps per simulated minute."""
        return max(1, round(60.0 / self.step_fraction))


@dataclass(frozen=True)
class SweepSettings:
    """
    Settings of the wet-bulb sweep.

    Attributes:
        wet_bulb_step: Increment between wet-bulb temperatures (°C). Default 0.02.
        inclusive_tolerance: Slack allowed past the upper bound so that it is
            still included despite floating point error (°C). Default 0.001.
        initial_core_temp: Core temperature at the start of every condition. Default 37.
        initial_skin_temp: Skin temperature at the start of every condition. Default 35.
        sample_interval: Steps between trajectory samples. Default 600 (one minute).
    """

    wet_bulb_step: float = 0.02
    inclusive_tolerance: float = 0.001
    initial_core_temp: float = 37.0
    initial_skin_temp: float = 35.0
    sample_interval: int = 600

    def __post_init__(self):
        if not self.wet_bulb_step > 0:
            raise ValueError(f"wet_bulb_step must be positive, got {self.wet_bulb_step}")
        if self.inclusive_tolerance < 0:
            raise ValueError(f"inclusive_tolerance must be non-negative, got {self.inclusive_tolerance}")
        if self.sample_interval < 1:
            raise ValueError(f"sample_interval must be at least 1, got {self.sample_interval}")


@dataclass(frozen=True)
class TimeseriesSettings:
    """
    Settings of the single-condition time series.

    Attributes:
        initial_core_temp: Core temperature at the start of the run. Default 36.5.
        initial_skin_temp: Skin temperature at the start of the run. Default 31.3.
    """

    initial_core_temp: float = 36.5
    initial_skin_temp: float = 31.3


@dataclass(frozen=True)
class Settings:
    """All run-time settings, as loaded by :func:`thermoreg.config.load_settings`."""

    integrator: IntegratorSettings = field(default_factory=IntegratorSettings)
    sweep: SweepSettings = field(default_factory=SweepSettings)
    timeseries: TimeseriesSettings = field(default_factory=TimeseriesSettings)
