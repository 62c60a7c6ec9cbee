"""Single-condition time series.

Provides :func:`run_timeseries`, which runs the integrator once at a fixed
environment and records core and skin temperature once per simulated
minute until the run terminates.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from .integrator import ThermalIntegrator
from .models import IntegratorSettings, ThermalState, TimeseriesResult, TimeseriesSettings
from .thermoreg_logging import get_logger

if TYPE_CHECKING:
    from .models import BodyParameters, EnvironmentalConditions, SimulationRecord

logger = get_logger(__name__)


def run_timeseries(
    body: BodyParameters,
    environment: EnvironmentalConditions,
    metabolic_override: float = 0.0,
    settings: TimeseriesSettings | None = None,
    integrator_settings: IntegratorSettings | None = None,
    on_sample: Callable[[float, ThermalState], None] | None = None,
) -> TimeseriesResult:
    """
    Record the trajectory of one run, one sample per simulated minute.

    Samples are taken after steps 0, N, 2N, ... where N is the number of
    steps in a minute. The terminal state is appended when the last step
    did not fall on a sample, so the final entry is always the state at
    termination.

    Args:
        body: Body parameters.
        environment: Ambient conditions, fixed for the run.
        metabolic_override: Metabolic rate (W), 0 for the basal rate.
        settings: Time-series settings (initial temperatures).
        integrator_settings: Integrator settings. Defaults to IntegratorSettings().
        on_sample: Optional callback(minutes, state) for each sample as it
            is taken, e.g. to stream rows to a file.

    Returns:
        TimeseriesResult with elapsed minutes, core and skin temperatures.

    Raises:
        DegenerateThermalStateError: If the run leaves the model's domain.
        NonTerminationError: If the run does not terminate.
    """
    settings = settings if settings is not None else TimeseriesSettings()
    integrator = ThermalIntegrator(body, environment, integrator_settings, metabolic_override)
    steps_per_minute = integrator.settings.steps_per_minute

    minutes: list[float] = []
    core: list[float] = []
    skin: list[float] = []

    def record(elapsed: float, state: ThermalState) -> None:
        minutes.append(elapsed)
        core.append(state.core_temp)
        skin.append(state.skin_temp)
        if on_sample is not None:
            on_sample(elapsed, state)

    def sample(rec: SimulationRecord) -> None:
        record(rec.iteration / steps_per_minute, rec.state)

    initial = ThermalState(core_temp=settings.initial_core_temp, skin_temp=settings.initial_skin_temp)
    logger.info(
        f"Time series at dry-bulb {environment.dry_temp} °C, wet-bulb {environment.wet_temp} °C, "
        f"wind {environment.wind_speed} m/s"
    )
    run = integrator.run(initial, sample_every=steps_per_minute, on_sample=sample)

    if run.final.iteration % steps_per_minute != 0:
        record(run.final.iteration / steps_per_minute, run.state)

    logger.info(
        f"{run.termination.value} after {minutes[-1]:.1f} min: "
        f"core={run.state.core_temp:.4f} °C, skin={run.state.skin_temp:.4f} °C"
    )
    return TimeseriesResult(
        minutes=np.asarray(minutes, dtype=np.float64),
        core_temp=np.asarray(core, dtype=np.float64),
        skin_temp=np.asarray(skin, dtype=np.float64),
        termination=run.termination,
        final=run.final,
    )
