"""
Tests for the single-condition time series controller.
"""

import numpy as np
import pytest
from thermoreg import (
    EnvironmentalConditions,
    IntegratorSettings,
    Termination,
    TimeseriesSettings,
    run_timeseries,
)


class TestRunTimeseries:
    """Tests for run_timeseries()."""

    def test_hot_run_reaches_hyperthermia(self, body, hot_environment):
        result = run_timeseries(body, hot_environment)

        assert result.termination is Termination.HYPERTHERMIA
        assert result.core_temp[-1] >= 42.0
        assert np.all(result.core_temp[:-1] < 42.0)

    def test_one_sample_per_minute(self, body, hot_environment):
        result = run_timeseries(body, hot_environment)

        assert result.minutes[0] == 0.0
        np.testing.assert_array_equal(np.diff(result.minutes[:-1]), 1.0)
        assert 0.0 < result.minutes[-1] - result.minutes[-2] <= 1.0

    def test_last_entry_is_terminal_state(self, body, hot_environment):
        result = run_timeseries(body, hot_environment)

        assert result.core_temp[-1] == result.final.state.core_temp
        assert result.skin_temp[-1] == result.final.state.skin_temp
        assert result.minutes[-1] == pytest.approx(result.final.iteration / 600)
        assert len(result) == len(result.core_temp) == len(result.skin_temp)

    def test_first_sample_is_one_step_from_start(self, body, hot_environment):
        result = run_timeseries(body, hot_environment, settings=TimeseriesSettings(36.5, 31.3))

        assert result.core_temp[0] == pytest.approx(36.5, abs=0.01)
        assert result.skin_temp[0] == pytest.approx(31.3, abs=0.05)

    def test_on_sample_streams_every_entry(self, body, hot_environment):
        streamed = []
        result = run_timeseries(body, hot_environment, on_sample=lambda minutes, state: streamed.append(minutes))

        np.testing.assert_array_equal(streamed, result.minutes)

    def test_terminal_sample_not_duplicated(self, body, hot_environment):
        """When termination falls on a whole minute the state is recorded once."""
        settings = IntegratorSettings(flux_tolerance=1e6)
        result = run_timeseries(body, hot_environment, integrator_settings=settings)

        assert result.termination is Termination.EQUILIBRIUM
        np.testing.assert_array_equal(result.minutes, [0.0])

    @pytest.mark.slow
    def test_equilibrium_when_humid_but_cool(self, body):
        result = run_timeseries(body, EnvironmentalConditions(dry_temp=30.0, wet_temp=35.0, wind_speed=5.0))

        assert result.termination is Termination.EQUILIBRIUM
        assert result.core_temp[-1] < 42.0
