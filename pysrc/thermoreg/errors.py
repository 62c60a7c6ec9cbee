"""thermoreg error types for actionable error messages.

These exceptions provide structured information about what went wrong
and how to fix it, rather than generic error messages.

Example:
    try:
        result = thermoreg.run_sweep(body, dry_temp=30, wind_speed=5, wet_bulb_low=22, wet_bulb_high=35)
    except thermoreg.DegenerateThermalStateError as e:
        print(f"{e.quantity} left the model's domain: {e.value}")
    except thermoreg.NonTerminationError as e:
        print(f"No termination after {e.iterations} steps")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.state import ThermalState


class ThermoregError(Exception):
    """Base class for all thermoreg errors."""

    pass


class ConfigurationError(ThermoregError):
    """Raised when configuration is invalid or inconsistent.

    Attributes:
        parameter: The problematic parameter name.
        reason: Why the configuration is invalid.
    """

    def __init__(self, parameter: str, reason: str):
        self.parameter = parameter
        self.reason = reason
        message = f"Invalid configuration for '{parameter}': {reason}"
        super().__init__(message)


class DegenerateThermalStateError(ThermoregError):
    """Raised when the thermal state leaves the domain of the model.

    The shell fraction fit has a pole at a blood flow of 0.1386 L/(h·m²)
    and is only meaningful while the shell fraction stays inside [0, 1).
    Overflowing or non-finite temperatures are reported the same way.

    Attributes:
        quantity: Name of the offending quantity (e.g. "blood_flow").
        value: The value that was out of range.
        reason: Why the value is outside the model's domain.
        state: Thermal state at which the problem was detected (optional).
    """

    def __init__(
        self,
        quantity: str,
        value: float,
        reason: str,
        state: ThermalState | None = None,
    ):
        self.quantity = quantity
        self.value = value
        self.reason = reason
        self.state = state
        message = f"Degenerate thermal state: {quantity}={value!r} ({reason})"
        if state is not None:
            message += f"\n  at core={state.core_temp!r} °C, skin={state.skin_temp!r} °C"
        super().__init__(message)


class NonTerminationError(ThermoregError):
    """Raised when a run neither reaches equilibrium nor hyperthermia.

    Attributes:
        iterations: Number of steps executed before giving up.
        state: Thermal state after the last step.
    """

    def __init__(self, iterations: int, state: ThermalState):
        self.iterations = iterations
        self.state = state
        message = (
            f"Run did not terminate after {iterations} steps "
            f"(core={state.core_temp:.4f} °C, skin={state.skin_temp:.4f} °C).\n"
            "Raise max_iterations or loosen flux_tolerance if the run is converging slowly."
        )
        super().__init__(message)


class OutputSinkError(ThermoregError):
    """Raised when an output file cannot be opened or written.

    Attributes:
        path: The output path.
        reason: The underlying OS error message.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write output '{path}': {reason}")
