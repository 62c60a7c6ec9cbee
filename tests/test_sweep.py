"""
Tests for the wet-bulb sweep controller.
"""

import numpy as np
import pytest
import thermoreg.sweep as sweep_module
from conftest import HOT_DRY_TEMP, HOT_WIND_SPEED, coarse_settings
from thermoreg import (
    EnvironmentalConditions,
    SweepResult,
    SweepSettings,
    Termination,
    ThermalIntegrator,
    ThermalState,
    run_sweep,
    wet_bulb_values,
)


class TestWetBulbValues:
    """Tests for the sweep grid."""

    def test_default_grid_includes_upper_bound(self):
        values = wet_bulb_values(22.0, 35.0, 0.02)

        assert len(values) == 651
        assert values[0] == 22.0
        assert values[-1] == pytest.approx(35.0)

    def test_grid_is_index_based(self):
        """Values are low + k * step, without accumulated rounding drift."""
        values = wet_bulb_values(22.0, 35.0, 0.02)
        np.testing.assert_allclose(values, 22.0 + np.arange(651) * 0.02)

    def test_single_value_range(self):
        np.testing.assert_array_equal(wet_bulb_values(30.0, 30.0, 0.02), [30.0])

    def test_step_not_dividing_range(self):
        np.testing.assert_allclose(wet_bulb_values(22.0, 23.0, 0.3), [22.0, 22.3, 22.6, 22.9])

    def test_empty_when_high_below_low(self):
        assert len(wet_bulb_values(30.0, 25.0, 0.02)) == 0

    def test_step_must_be_positive(self):
        with pytest.raises(ValueError):
            wet_bulb_values(22.0, 35.0, 0.0)


class TestSweepResult:
    """Tests for the sweep result container."""

    def _result(self, terminations):
        n = len(terminations)
        return SweepResult(
            wet_bulb=np.array([28.0, 29.0, 30.0][:n]),
            terminal_core=np.full(n, 37.0),
            terminal_skin=np.full(n, 35.0),
            steps=np.ones(n, dtype=np.int64),
            terminations=terminations,
        )

    def test_critical_wet_bulb_is_first_hyperthermia(self):
        result = self._result([Termination.EQUILIBRIUM, Termination.HYPERTHERMIA, Termination.HYPERTHERMIA])
        assert result.critical_wet_bulb == 29.0
        assert len(result) == 3

    def test_no_critical_wet_bulb_when_all_equilibrium(self):
        result = self._result([Termination.EQUILIBRIUM, Termination.EQUILIBRIUM])
        assert result.critical_wet_bulb is None


class TestRunSweep:
    """Tests for run_sweep()."""

    def _hot_sweep(self, body, **kwargs):
        return run_sweep(
            body,
            dry_temp=HOT_DRY_TEMP,
            wind_speed=HOT_WIND_SPEED,
            wet_bulb_low=45.0,
            wet_bulb_high=45.02,
            show_progress=False,
            **kwargs,
        )

    def test_hot_sweep_reaches_hyperthermia(self, body):
        result = self._hot_sweep(body)

        assert len(result) == 2
        assert result.terminations == [Termination.HYPERTHERMIA, Termination.HYPERTHERMIA]
        assert np.all(result.terminal_core >= 42.0)
        assert result.critical_wet_bulb == 45.0

    def test_every_condition_starts_fresh(self, body):
        """Each condition matches a standalone run from the sweep's initial state."""
        result = self._hot_sweep(body)

        for i, wet_bulb in enumerate(result.wet_bulb):
            environment = EnvironmentalConditions(HOT_DRY_TEMP, float(wet_bulb), HOT_WIND_SPEED)
            alone = ThermalIntegrator(body, environment).run(ThermalState(core_temp=37.0, skin_temp=35.0))
            assert result.terminal_core[i] == alone.state.core_temp
            assert result.steps[i] == alone.steps

    def test_on_condition_receives_sampled_runs(self, body):
        conditions = []
        self._hot_sweep(body, on_condition=conditions.append)

        assert [c.wet_bulb for c in conditions] == pytest.approx([45.0, 45.02])
        for condition in conditions:
            assert condition.environment.wet_temp == condition.wet_bulb
            assert condition.run.samples[0].iteration == 0
            assert all(record.iteration % 600 == 0 for record in condition.run.samples)

    def test_progress_callback(self, body):
        calls = []
        self._hot_sweep(body, progress_callback=lambda current, total: calls.append((current, total)))

        assert calls == [(1, 2), (2, 2)]

    def test_empty_sweep(self, body):
        result = run_sweep(body, dry_temp=30.0, wind_speed=5.0, wet_bulb_low=30.0, wet_bulb_high=25.0, show_progress=False)

        assert len(result) == 0
        assert result.critical_wet_bulb is None

    @pytest.mark.slow
    def test_terminal_core_increases_with_wet_bulb(self, body):
        """At 30 °C dry-bulb and 5 m/s wind, wet-bulb 26 to 30 °C settle at rising core temperatures."""
        result = run_sweep(
            body,
            dry_temp=30.0,
            wind_speed=5.0,
            wet_bulb_low=26.0,
            wet_bulb_high=30.0,
            settings=SweepSettings(wet_bulb_step=2.0),
            integrator_settings=coarse_settings(),
            show_progress=False,
        )

        np.testing.assert_allclose(result.wet_bulb, [26.0, 28.0, 30.0])
        assert all(t is Termination.EQUILIBRIUM for t in result.terminations)
        assert np.all(np.diff(result.terminal_core) > 0)
        assert result.terminal_core[0] == pytest.approx(36.506, abs=0.01)
        assert result.terminal_core[-1] == pytest.approx(36.516, abs=0.01)

    @pytest.mark.slow
    def test_terminal_core_not_monotone_in_hot_still_air(self, body):
        """At 45 °C dry-bulb and 1 m/s wind, wet-bulb 26 °C settles cooler than 22 °C."""
        result = run_sweep(
            body,
            dry_temp=45.0,
            wind_speed=1.0,
            wet_bulb_low=22.0,
            wet_bulb_high=26.0,
            settings=SweepSettings(wet_bulb_step=4.0),
            show_progress=False,
        )

        np.testing.assert_allclose(result.wet_bulb, [22.0, 26.0])
        assert all(t is Termination.EQUILIBRIUM for t in result.terminations)
        assert result.terminal_core[0] == pytest.approx(36.5185, abs=1e-3)
        assert result.terminal_core[1] == pytest.approx(36.5144, abs=1e-3)
        assert result.terminal_core[1] < result.terminal_core[0] - 0.002

    def test_progress_bar_names_current_wet_bulb(self, body, monkeypatch):
        descriptions = []

        class RecordingReporter(sweep_module.ProgressReporter):
            def set_description(self, desc):
                descriptions.append(desc)
                super().set_description(desc)

        monkeypatch.setattr(sweep_module, "ProgressReporter", RecordingReporter)
        self._hot_sweep(body)

        assert descriptions == ["Wet-bulb sweep (Tweb=45)", "Wet-bulb sweep (Tweb=45.02)"]
