"""
Tests for fixed-width table output.
"""

import pytest
from thermoreg import (
    ConditionResult,
    EnvironmentalConditions,
    FluxSnapshot,
    OutputSinkError,
    RunResult,
    SimulationRecord,
    Termination,
    ThermalState,
)
from thermoreg.io import FluxRow, SweepWriter, TimeseriesWriter, format_cell, format_row

FLUX = FluxSnapshot(
    convective=-41.5,
    evaporative=-250.125,
    metabolic=88.4268,
    solar=0.0,
    blackbody=-26.3,
    core_shell=300.0,
    skin_flux=-1.7925,
    core_flux=-21.15732,
)


def _record(iteration, core=36.9, skin=34.8, water=0.001):
    return SimulationRecord(iteration, iteration * 0.1, FLUX, ThermalState(core, skin, water))


def _condition(wet_bulb, sample_iterations, final_iteration):
    run = RunResult(
        termination=Termination.EQUILIBRIUM,
        steps=final_iteration + 1,
        final=_record(final_iteration, core=36.5),
        samples=[_record(i) for i in sample_iterations],
    )
    return ConditionResult(wet_bulb, EnvironmentalConditions(30.0, wet_bulb, 5.0), run)


class TestFormatting:
    """Tests for cell and row formatting."""

    def test_width_is_thirteen(self):
        assert format_cell("sec") == "sec" + " " * 10
        assert len(format_cell(36.5)) == 13

    def test_six_significant_digits(self):
        assert format_cell(36.49911234).rstrip() == "36.4991"
        assert format_cell(0.0001).rstrip() == "0.0001"
        assert format_cell(1.5e-7).rstrip() == "1.5e-07"

    def test_integer_cell(self):
        assert format_cell(600).rstrip() == "600"

    def test_whole_float_cell(self):
        assert format_cell(22.0).rstrip() == "22"

    def test_long_cell_not_truncated(self):
        assert format_cell("a" * 20) == "a" * 20

    def test_row(self):
        assert format_row(("Tweb", "Tcore")) == "Tweb" + " " * 9 + "Tcore" + " " * 8

    def test_flux_row_seconds(self):
        row = FluxRow.from_record(_record(1234), steps_per_second=10)
        assert row.sec == 123
        assert row.t_core == 36.9
        assert row.water == 0.001


class TestSweepWriter:
    """Tests for SweepWriter."""

    def test_writes_both_files(self, tmp_path):
        run_path, data_path = tmp_path / "run.txt", tmp_path / "data.txt"

        with SweepWriter(run_path, data_path) as writer:
            writer.write_condition(_condition(22.0, [0, 600], 1000))
            writer.write_condition(_condition(22.02, [0], 300))

        run_lines = run_path.read_text().splitlines()
        assert run_lines[0] == ""
        assert run_lines[1] == "Tweb: 22"
        assert run_lines[2].split() == list(FluxRow.HEADER)
        assert [line.split()[0] for line in run_lines[3:6]] == ["0", "60", "100"]
        assert run_lines[6] == ""
        assert run_lines[7] == "Tweb: 22.02"
        assert len(run_lines) == 11

        data_lines = data_path.read_text().splitlines()
        assert data_lines[0].split() == ["Tweb", "Tcore"]
        assert data_lines[1].split() == ["22", "36.5"]
        assert data_lines[2].split() == ["22.02", "36.5"]

    def test_trajectory_row_contents(self, tmp_path):
        run_path = tmp_path / "run.txt"
        with SweepWriter(run_path, tmp_path / "data.txt") as writer:
            writer.write_condition(_condition(25.0, [], 5))

        final_row = run_path.read_text().splitlines()[-1].split()
        assert final_row == ["0", "-41.5", "-250.125", "88.4268", "0", "-26.3", "-1.7925", "-21.1573", "34.8", "36.5", "0.001"]

    def test_requires_context_manager(self, tmp_path):
        writer = SweepWriter(tmp_path / "run.txt", tmp_path / "data.txt")
        with pytest.raises(RuntimeError):
            writer.write_condition(_condition(22.0, [], 1))

    def test_unwritable_path_raises(self, tmp_path):
        with pytest.raises(OutputSinkError) as exc_info:
            with SweepWriter(tmp_path / "missing" / "run.txt", tmp_path / "data.txt"):
                pass
        assert "missing" in exc_info.value.path

    def test_unwritable_data_path_closes_run_file(self, tmp_path):
        writer = SweepWriter(tmp_path / "run.txt", tmp_path / "missing" / "data.txt")
        with pytest.raises(OutputSinkError):
            writer.__enter__()
        assert writer._run.closed


class TestTimeseriesWriter:
    """Tests for TimeseriesWriter."""

    def test_writes_header_and_rows(self, tmp_path):
        path = tmp_path / "run.txt"

        with TimeseriesWriter(path) as writer:
            writer.write_sample(0.0, ThermalState(36.5, 31.3))
            writer.write_sample(1.0, ThermalState(36.52, 31.9))
            writer.write_sample(1.5, ThermalState(36.53, 32.0))

        lines = path.read_text().splitlines()
        assert lines[0].split() == ["time(min)", "Tc", "Ts"]
        assert lines[1].split() == ["0", "36.5", "31.3"]
        assert lines[2].split() == ["1", "36.52", "31.9"]
        assert lines[3].split() == ["1.5", "36.53", "32"]

    def test_unwritable_path_raises(self, tmp_path):
        with pytest.raises(OutputSinkError):
            with TimeseriesWriter(tmp_path / "missing" / "run.txt"):
                pass
