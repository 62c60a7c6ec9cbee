"""Fixed-step explicit integration of the core/shell thermal state.

:class:`ThermalIntegrator` binds a body and an environment. Its
:meth:`~ThermalIntegrator.step` is a pure function of the thermal state,
and :meth:`~ThermalIntegrator.run` is the driver that holds the current
state and steps it until hyperthermia or equilibrium.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING

from .errors import DegenerateThermalStateError, NonTerminationError
from .models import FluxSnapshot, IntegratorSettings, RunResult, SimulationRecord, Termination, ThermalState
from .physics.heat_exchange import (
    blackbody_flux,
    blood_flow,
    convective_flux,
    core_shell_flux,
    evaporative_flux,
    shell_fraction,
    solar_flux,
)
from .thermoreg_logging import get_logger

if TYPE_CHECKING:
    from .models import BodyParameters, EnvironmentalConditions

logger = get_logger(__name__)


class ThermalIntegrator:
    """
    Advance a :class:`ThermalState` in fixed time increments.

    Surface area and metabolic rate are computed once at construction and
    held constant for every step.

    Args:
        body: Body parameters.
        environment: Ambient conditions, constant for the run.
        settings: Numerical settings. Defaults to IntegratorSettings().
        metabolic_override: Metabolic heat production in W, or 0 to use the
            basal rate derived from the body parameters.

    Example:
        integrator = ThermalIntegrator(BodyParameters(), EnvironmentalConditions(30, 22, 5))
        result = integrator.run(ThermalState(core_temp=37.0, skin_temp=35.0))
        print(result.termination, result.state.core_temp)
    """

    def __init__(
        self,
        body: BodyParameters,
        environment: EnvironmentalConditions,
        settings: IntegratorSettings | None = None,
        metabolic_override: float = 0.0,
    ):
        self.body = body
        self.environment = environment
        self.settings = settings if settings is not None else IntegratorSettings()
        self.area = body.surface_area
        self.metabolic_rate = body.metabolic_rate(metabolic_override)

    def fluxes(self, state: ThermalState) -> FluxSnapshot:
        """
        Heat flux terms at the given state.

        Returns:
            FluxSnapshot with the interface fluxes scaled by the step fraction.
        """
        env = self.environment
        dt = self.settings.step_fraction
        skin = state.skin_temp

        convective = convective_flux(env.wind_speed, env.dry_temp, skin)
        evaporative = evaporative_flux(env.wind_speed, env.dry_temp, skin, env.wet_temp)
        solar = solar_flux(self.area, self.body.reflectivity)
        blackbody = blackbody_flux(env.dry_temp, skin)
        core_shell = core_shell_flux(state.core_temp, skin, self.area)

        return FluxSnapshot(
            convective=convective,
            evaporative=evaporative,
            metabolic=self.metabolic_rate,
            solar=solar,
            blackbody=blackbody,
            core_shell=core_shell,
            skin_flux=dt * (convective + evaporative + solar + blackbody + core_shell),
            core_flux=dt * (self.metabolic_rate - core_shell),
        )

    def _shell_fraction(self, core_temp: float, skin_temp: float) -> float:
        fixed = self.settings.fixed_shell_fraction
        if fixed is not None:
            return fixed
        fraction = shell_fraction(blood_flow(core_temp, skin_temp))
        if not 0.0 < fraction < 1.0:
            raise DegenerateThermalStateError("shell_fraction", fraction, "must be in (0, 1) to split heat capacity")
        return fraction

    def step(self, state: ThermalState) -> tuple[FluxSnapshot, ThermalState]:
        """
        Advance the state by one step.

        The skin is updated first; the core update uses the shell fraction
        evaluated at the new skin temperature.

        Args:
            state: Current thermal state (not modified).

        Returns:
            Tuple of (fluxes computed at ``state``, new state).

        Raises:
            DegenerateThermalStateError: If the state leaves the model's
                domain (blood flow at the shell fraction pole, overflow,
                non-finite temperatures).
        """
        capacity = self.settings.thermal_capacity
        mass = self.body.mass
        try:
            flux = self.fluxes(state)
            skin_temp = state.skin_temp + flux.skin_flux / (
                capacity * self._shell_fraction(state.core_temp, state.skin_temp) * mass
            )
            core_temp = state.core_temp + flux.core_flux / (
                capacity * (1.0 - self._shell_fraction(state.core_temp, skin_temp)) * mass
            )
        except OverflowError as err:
            raise DegenerateThermalStateError("temperature", math.inf, str(err), state=state) from err
        except DegenerateThermalStateError as err:
            if err.state is not None:
                raise
            raise DegenerateThermalStateError(err.quantity, err.value, err.reason, state=state) from err

        new_state = ThermalState(
            core_temp=core_temp,
            skin_temp=skin_temp,
            water_balance=state.water_balance - flux.evaporative / self.settings.latent_heat,
        )
        if not new_state.is_finite:
            raise DegenerateThermalStateError("temperature", core_temp, "non-finite after update", state=state)
        return flux, new_state

    def _terminated(self, flux: FluxSnapshot, state: ThermalState) -> Termination | None:
        if state.core_temp >= self.settings.hyperthermia_threshold:
            return Termination.HYPERTHERMIA
        tolerance = self.settings.flux_tolerance
        if abs(flux.skin_flux) <= tolerance and abs(flux.core_flux) <= tolerance:
            return Termination.EQUILIBRIUM
        return None

    def run(
        self,
        initial_state: ThermalState,
        sample_every: int | None = None,
        on_sample: Callable[[SimulationRecord], None] | None = None,
    ) -> RunResult:
        """
        Step from ``initial_state`` until hyperthermia or equilibrium.

        At least one step is always executed. Before every further step the
        run stops if core temperature reached the hyperthermia threshold
        or both interface fluxes of the last step are within tolerance.

        Args:
            initial_state: Starting state.
            sample_every: Record a sample whenever the zero-based step index
                is a multiple of this value. None disables sampling.
            on_sample: Optional callback receiving each sample as it is taken.
                When given, samples are not kept in the result.

        Returns:
            RunResult with the termination kind and the final record.

        Raises:
            NonTerminationError: If max_iterations steps elapse first.
            DegenerateThermalStateError: If the state leaves the model's domain.
        """
        if sample_every is not None and sample_every < 1:
            raise ValueError(f"sample_every must be at least 1, got {sample_every}")

        dt = self.settings.step_fraction
        max_iterations = self.settings.max_iterations
        samples: list[SimulationRecord] = []

        state = initial_state
        iteration = 0
        while True:
            flux, state = self.step(state)

            if sample_every is not None and iteration % sample_every == 0:
                record = SimulationRecord(iteration, iteration * dt, flux, state)
                if on_sample is not None:
                    on_sample(record)
                else:
                    samples.append(record)

            termination = self._terminated(flux, state)
            if termination is not None:
                break

            iteration += 1
            if iteration >= max_iterations:
                raise NonTerminationError(iteration, state)

        logger.debug(
            f"{termination.value} after {iteration + 1} steps: core={state.core_temp:.4f} °C, skin={state.skin_temp:.4f} °C"
        )
        final = SimulationRecord(iteration, iteration * dt, flux, state)
        return RunResult(termination=termination, steps=iteration + 1, final=final, samples=samples)
