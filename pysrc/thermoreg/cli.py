"""
Command line entry point.

Usage:
    thermoreg sweep [run.txt] [--config config.txt] [--data data.txt]
    thermoreg timeseries [run.txt] [--config config.txt]

Both commands read positional run parameters from the config file (see
:mod:`thermoreg.config`); malformed or missing fields fall back to their
defaults with a warning and do not change the exit status.
"""

from __future__ import annotations

import argparse

from .config import DEFAULT_CONFIG_PATH, load_settings, read_sweep_config, read_timeseries_config
from .errors import ThermoregError
from .io import SweepWriter, TimeseriesWriter
from .sweep import run_sweep
from .thermoreg_logging import LogLevel, get_logger, set_global_level
from .timeseries import run_timeseries

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thermoreg",
        description="Core/shell thermoregulation under heat stress",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sweep = subparsers.add_parser("sweep", help="Terminal core temperature across a wet-bulb range")
    sweep.add_argument("output", nargs="?", default="run.txt", help="Trajectory output (default: run.txt)")
    sweep.add_argument("--data", default="data.txt", help="Per-condition summary output (default: data.txt)")
    sweep.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Run parameters (default: config.txt)")
    sweep.add_argument("--settings", default=None, help="JSON settings overriding the bundled defaults")
    sweep.add_argument("--no-progress", action="store_true", help="Hide the progress bar")

    timeseries = subparsers.add_parser("timeseries", help="Core and skin temperature over time at one condition")
    timeseries.add_argument("output", nargs="?", default="run.txt", help="Output table (default: run.txt)")
    timeseries.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Run parameters (default: config.txt)")
    timeseries.add_argument("--settings", default=None, help="JSON settings overriding the bundled defaults")

    return parser


def _sweep(args: argparse.Namespace) -> None:
    config = read_sweep_config(args.config)
    settings = load_settings(args.settings)
    with SweepWriter(args.output, args.data, settings.integrator.steps_per_second) as writer:
        run_sweep(
            config.body,
            dry_temp=config.dry_temp,
            wind_speed=config.wind_speed,
            wet_bulb_low=config.wet_bulb_low,
            wet_bulb_high=config.wet_bulb_high,
            metabolic_override=config.metabolic_override,
            settings=settings.sweep,
            integrator_settings=settings.integrator,
            on_condition=writer.write_condition,
            show_progress=not args.no_progress,
        )
    logger.info(f"Wrote {args.output} and {args.data}")


def _timeseries(args: argparse.Namespace) -> None:
    config = read_timeseries_config(args.config)
    settings = load_settings(args.settings)
    with TimeseriesWriter(args.output) as writer:
        run_timeseries(
            config.body,
            config.environment,
            metabolic_override=config.metabolic_override,
            settings=settings.timeseries,
            integrator_settings=settings.integrator,
            on_sample=writer.write_sample,
        )
    logger.info(f"Wrote {args.output}")


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_global_level(LogLevel.DEBUG)
    elif args.quiet:
        set_global_level(LogLevel.WARNING)

    commands = {"sweep": _sweep, "timeseries": _timeseries}
    try:
        commands[args.command](args)
    except (ThermoregError, FileNotFoundError) as err:
        logger.error(str(err))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
