"""
Tests for structured error handling.

These tests verify that every error carries the attributes needed to act
on it and a message that names the offending value.
"""

import pytest
from thermoreg import (
    BodyParameters,
    ConfigurationError,
    DegenerateThermalStateError,
    EnvironmentalConditions,
    IntegratorSettings,
    NonTerminationError,
    OutputSinkError,
    ThermalState,
    ThermoregError,
)


class TestThermoregErrorHierarchy:
    """Tests for the error class hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("mass", "must be positive"),
            DegenerateThermalStateError("blood_flow", -0.5, "below pole"),
            NonTerminationError(100, ThermalState(37.0, 35.0)),
            OutputSinkError("run.txt", "Permission denied"),
        ],
    )
    def test_all_errors_are_thermoreg_errors(self, error):
        assert isinstance(error, ThermoregError)
        assert isinstance(error, Exception)

    def test_configuration_error_fields(self):
        error = ConfigurationError("integrator.step_fraction", "must be in (0, 1]")
        assert error.parameter == "integrator.step_fraction"
        assert error.reason == "must be in (0, 1]"
        assert "integrator.step_fraction" in str(error)

    def test_degenerate_state_without_state(self):
        error = DegenerateThermalStateError("shell_fraction", 1.2, "must be in [0, 1)")
        assert error.quantity == "shell_fraction"
        assert error.value == 1.2
        assert error.state is None
        assert "shell_fraction=1.2" in str(error)

    def test_degenerate_state_with_state(self):
        state = ThermalState(30.0, 35.0)
        error = DegenerateThermalStateError("blood_flow", -3.0, "below pole", state=state)
        assert error.state is state
        assert "core=30.0" in str(error)
        assert "skin=35.0" in str(error)

    def test_non_termination_fields(self):
        state = ThermalState(36.51, 33.2)
        error = NonTerminationError(10_000_000, state)
        assert error.iterations == 10_000_000
        assert error.state is state
        assert "10000000" in str(error)
        assert "max_iterations" in str(error)

    def test_output_sink_fields(self):
        error = OutputSinkError("out/run.txt", "No such file or directory")
        assert error.path == "out/run.txt"
        assert error.reason == "No such file or directory"
        assert "out/run.txt" in str(error)


class TestModelValidation:
    """Invalid model values are rejected at construction."""

    @pytest.mark.parametrize(
        "kwargs",
        [{"mass": 0}, {"height": -1}, {"age": -5}, {"reflectivity": 1.5}, {"sex": "m"}],
    )
    def test_invalid_body(self, kwargs):
        with pytest.raises(ValueError):
            BodyParameters(**kwargs)

    def test_invalid_environment(self):
        with pytest.raises(ValueError):
            EnvironmentalConditions(wind_speed=-1.0)
        with pytest.raises(ValueError):
            EnvironmentalConditions(dry_temp=float("nan"))

    @pytest.mark.parametrize(
        "kwargs",
        [{"step_fraction": 0}, {"flux_tolerance": 0}, {"max_iterations": 0}, {"fixed_shell_fraction": 1.0}],
    )
    def test_invalid_integrator_settings(self, kwargs):
        with pytest.raises(ValueError):
            IntegratorSettings(**kwargs)
