"""
Fixed-width text output for sweep and time-series runs.

Tables are written as left-justified columns of a fixed width with
numbers printed to six significant digits. Each writer owns its files
for the duration of a ``with`` block; failing to open or write a file
raises :class:`~thermoreg.errors.OutputSinkError`, since a run has no
other place to put its results.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, TextIO

from .constants import COLUMN_WIDTH
from .errors import OutputSinkError
from .thermoreg_logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import ConditionResult, SimulationRecord, ThermalState

logger = get_logger(__name__)


# =============================================================================
# Formatting
# =============================================================================


def format_cell(value: object, width: int = COLUMN_WIDTH) -> str:
    """
    Format one table cell, left-justified to ``width``.

    Integers print as-is, other numbers with six significant digits,
    strings unchanged. Values longer than the width are not truncated.
    """
    if isinstance(value, str):
        text = value
    elif isinstance(value, int) and not isinstance(value, bool):
        text = str(value)
    else:
        text = format(float(value), "g")
    return text.ljust(width)


def format_row(values: Iterable[object], width: int = COLUMN_WIDTH) -> str:
    """Format a table row (without line terminator)."""
    return "".join(format_cell(value, width) for value in values)


@dataclass(frozen=True)
class FluxRow:
    """
    One row of the sweep trajectory table.

    Attributes:
        sec: Whole simulated seconds at the sampled step.
        conv: Convective flux (W).
        evap: Evaporative flux (W).
        met: Metabolic rate (W).
        solar: Solar flux (W).
        bb_rad: Blackbody flux from surroundings (W).
        shell: Net skin interface flux of the step.
        core: Net core interface flux of the step.
        t_skin: Skin temperature (°C).
        t_core: Core temperature (°C).
        water: Cumulative water balance (L).
    """

    HEADER: ClassVar[tuple[str, ...]] = (
        "sec",
        "conv",
        "evap",
        "met",
        "solar",
        "bbRad",
        "shell",
        "core",
        "Tskin",
        "Tcore",
        "water(L)",
    )

    sec: int
    conv: float
    evap: float
    met: float
    solar: float
    bb_rad: float
    shell: float
    core: float
    t_skin: float
    t_core: float
    water: float

    @classmethod
    def from_record(cls, record: SimulationRecord, steps_per_second: int) -> FluxRow:
        flux, state = record.flux, record.state
        return cls(
            sec=record.iteration // steps_per_second,
            conv=flux.convective,
            evap=flux.evaporative,
            met=flux.metabolic,
            solar=flux.solar,
            bb_rad=flux.blackbody,
            shell=flux.skin_flux,
            core=flux.core_flux,
            t_skin=state.skin_temp,
            t_core=state.core_temp,
            water=state.water_balance,
        )


@dataclass(frozen=True)
class TimeseriesRow:
    """One row of the time-series table: elapsed minutes, core and skin temperature."""

    HEADER: ClassVar[tuple[str, ...]] = ("time(min)", "Tc", "Ts")

    minutes: float
    core: float
    skin: float

    def cells(self) -> tuple[object, ...]:
        minutes = int(self.minutes) if float(self.minutes).is_integer() else self.minutes
        return (minutes, self.core, self.skin)


# =============================================================================
# Sinks
# =============================================================================


def open_sink(path: str | Path) -> TextIO:
    """
    Open an output file for writing.

    Raises:
        OutputSinkError: If the file cannot be opened.
    """
    try:
        return open(path, "w")
    except OSError as err:
        logger.error(f"Cannot open output file {path}: {err}")
        raise OutputSinkError(str(path), err.strerror or str(err)) from err


def _write(sink: TextIO, line: str) -> None:
    try:
        sink.write(line + "\n")
    except OSError as err:
        raise OutputSinkError(getattr(sink, "name", "<stream>"), err.strerror or str(err)) from err


class SweepWriter:
    """
    Writes the two sweep outputs.

    - ``run_path``: per condition, a blank line, ``Tweb: <value>``, the
      column header, the sampled rows and a final row at termination.
    - ``data_path``: one ``Tweb Tcore`` row per condition.

    Usage:
        with SweepWriter("run.txt", "data.txt", steps_per_second=10) as writer:
            run_sweep(..., on_condition=writer.write_condition)
    """

    def __init__(
        self,
        run_path: str | Path = "run.txt",
        data_path: str | Path = "data.txt",
        steps_per_second: int = 10,
        width: int = COLUMN_WIDTH,
    ):
        self.run_path = Path(run_path)
        self.data_path = Path(data_path)
        self.steps_per_second = steps_per_second
        self.width = width
        self._run: TextIO | None = None
        self._data: TextIO | None = None

    def __enter__(self) -> SweepWriter:
        self._run = open_sink(self.run_path)
        try:
            self._data = open_sink(self.data_path)
        except OutputSinkError:
            self._run.close()
            raise
        _write(self._data, format_row(("Tweb", "Tcore"), self.width))
        return self

    def __exit__(self, *exc_info) -> None:
        for sink in (self._run, self._data):
            if sink is not None:
                sink.close()
        self._run = self._data = None

    def write_condition(self, condition: ConditionResult) -> None:
        """Write one finished condition to both files."""
        if self._run is None or self._data is None:
            raise RuntimeError("SweepWriter must be used as a context manager")

        run = condition.run
        _write(self._run, "")
        _write(self._run, f"Tweb: {condition.wet_bulb:g}")
        _write(self._run, format_row(FluxRow.HEADER, self.width))
        for record in (*run.samples, run.final):
            row = FluxRow.from_record(record, self.steps_per_second)
            _write(self._run, format_row(astuple(row), self.width))
        _write(self._data, format_row((condition.wet_bulb, run.state.core_temp), self.width))


class TimeseriesWriter:
    """
    Writes the time-series table: a ``time(min) Tc Ts`` header and one
    row per sample.

    Usage:
        with TimeseriesWriter("run.txt") as writer:
            run_timeseries(..., on_sample=writer.write_sample)
    """

    def __init__(self, path: str | Path = "run.txt", width: int = COLUMN_WIDTH):
        self.path = Path(path)
        self.width = width
        self._sink: TextIO | None = None

    def __enter__(self) -> TimeseriesWriter:
        self._sink = open_sink(self.path)
        _write(self._sink, format_row(TimeseriesRow.HEADER, self.width))
        return self

    def __exit__(self, *exc_info) -> None:
        if self._sink is not None:
            self._sink.close()
            self._sink = None

    def write_sample(self, minutes: float, state: ThermalState) -> None:
        """Write one sampled state."""
        if self._sink is None:
            raise RuntimeError("TimeseriesWriter must be used as a context manager")
        row = TimeseriesRow(minutes, state.core_temp, state.skin_temp)
        _write(self._sink, format_row(row.cells(), self.width))
