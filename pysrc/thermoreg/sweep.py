"""Wet-bulb temperature sweep.

Provides :func:`run_sweep`, which runs the integrator once per wet-bulb
temperature between two bounds, from the same initial state each time,
and collects the terminal core temperature of every condition.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from .integrator import ThermalIntegrator
from .models import (
    ConditionResult,
    EnvironmentalConditions,
    IntegratorSettings,
    SweepResult,
    SweepSettings,
    Termination,
    ThermalState,
)
from .progress import ProgressReporter
from .thermoreg_logging import get_logger

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from .models import BodyParameters

logger = get_logger(__name__)


def wet_bulb_values(low: float, high: float, step: float, tolerance: float = 0.001) -> NDArray[np.floating]:
    """
    Wet-bulb temperatures visited by a sweep.

    Values are ``low + k * step`` for every k whose value is below
    ``high + tolerance``, so ``high`` itself is included even when the
    step does not divide the range exactly in floating point.

    Args:
        low: First wet-bulb temperature (°C).
        high: Upper bound (°C).
        step: Increment (°C), positive.
        tolerance: Slack past ``high`` (°C).

    Returns:
        1-D array of wet-bulb temperatures; empty if ``high < low``.
    """
    if not step > 0:
        raise ValueError(f"step must be positive, got {step}")
    if high + tolerance <= low:
        return np.empty(0, dtype=np.float64)
    count = math.floor((high + tolerance - low) / step) + 1
    values = low + np.arange(count, dtype=np.float64) * step
    return values[values < high + tolerance]


def run_sweep(
    body: BodyParameters,
    dry_temp: float,
    wind_speed: float,
    wet_bulb_low: float,
    wet_bulb_high: float,
    metabolic_override: float = 0.0,
    settings: SweepSettings | None = None,
    integrator_settings: IntegratorSettings | None = None,
    on_condition: Callable[[ConditionResult], None] | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
    show_progress: bool = True,
) -> SweepResult:
    """
    Run the integrator to termination for each wet-bulb temperature.

    Every condition starts from the configured initial core and skin
    temperatures; nothing carries over between conditions. The trajectory
    of each condition is sampled every ``settings.sample_interval`` steps.

    Args:
        body: Body parameters.
        dry_temp: Dry-bulb temperature (°C), fixed across the sweep.
        wind_speed: Wind speed (m/s), fixed across the sweep.
        wet_bulb_low: First wet-bulb temperature (°C).
        wet_bulb_high: Last wet-bulb temperature, inclusive (°C).
        metabolic_override: Metabolic rate (W), 0 for the basal rate.
        settings: Sweep settings. Defaults to SweepSettings().
        integrator_settings: Integrator settings. Defaults to IntegratorSettings().
        on_condition: Called with each finished condition, in sweep order,
            including its sampled trajectory.
        progress_callback: Optional callback(current, total) after each
            condition. If None, a tqdm progress bar is shown unless
            ``show_progress`` is False.
        show_progress: Show a progress bar when no callback is given.

    Returns:
        SweepResult with one entry per wet-bulb temperature.

    Raises:
        DegenerateThermalStateError: If a condition leaves the model's domain.
        NonTerminationError: If a condition does not terminate.
    """
    settings = settings if settings is not None else SweepSettings()
    values = wet_bulb_values(wet_bulb_low, wet_bulb_high, settings.wet_bulb_step, settings.inclusive_tolerance)
    n_conditions = len(values)
    if n_conditions == 0:
        logger.warning(f"Empty sweep: wet_bulb_high ({wet_bulb_high}) is below wet_bulb_low ({wet_bulb_low})")

    base = EnvironmentalConditions(dry_temp=dry_temp, wet_temp=wet_bulb_low, wind_speed=wind_speed)
    initial = ThermalState(core_temp=settings.initial_core_temp, skin_temp=settings.initial_skin_temp)

    terminal_core = np.empty(n_conditions, dtype=np.float64)
    terminal_skin = np.empty(n_conditions, dtype=np.float64)
    steps = np.empty(n_conditions, dtype=np.int64)
    terminations: list[Termination] = []

    reporter = None
    if progress_callback is None:
        reporter = ProgressReporter(total=n_conditions, desc="Wet-bulb sweep", disable=not show_progress)

    logger.info(
        f"Sweeping {n_conditions} wet-bulb temperatures from {wet_bulb_low} to {wet_bulb_high} °C "
        f"(dry-bulb {dry_temp} °C, wind {wind_speed} m/s)"
    )

    try:
        for i, wet_bulb in enumerate(values):
            wet_bulb = float(wet_bulb)
            if reporter is not None:
                reporter.set_description(f"Wet-bulb sweep (Tweb={wet_bulb:g})")
            environment = base.with_wet_bulb(wet_bulb)
            integrator = ThermalIntegrator(body, environment, integrator_settings, metabolic_override)

            run = integrator.run(initial, sample_every=settings.sample_interval)

            terminal_core[i] = run.state.core_temp
            terminal_skin[i] = run.state.skin_temp
            steps[i] = run.steps
            terminations.append(run.termination)
            logger.debug(f"Tweb={wet_bulb:g}: {run.termination.value}, Tcore={run.state.core_temp:.4f} °C")

            if on_condition is not None:
                on_condition(ConditionResult(wet_bulb=wet_bulb, environment=environment, run=run))

            if progress_callback is not None:
                progress_callback(i + 1, n_conditions)
            elif reporter is not None:
                reporter.update(1)
    finally:
        if reporter is not None:
            reporter.close()

    result = SweepResult(
        wet_bulb=values,
        terminal_core=terminal_core,
        terminal_skin=terminal_skin,
        steps=steps,
        terminations=terminations,
    )
    critical = result.critical_wet_bulb
    if critical is not None:
        logger.info(f"Hyperthermia first reached at wet-bulb {critical:g} °C")
    elif n_conditions:
        logger.info("All conditions reached equilibrium")
    return result
