"""Configuration loading: positional run parameters and JSON settings.

Two kinds of configuration feed a run:

- The run parameters (body, ambient conditions) come from a flat text file
  of whitespace-separated fields read by position. Every field has a
  default; a missing, malformed or out-of-range field falls back to it,
  and each fallback is logged and recorded on the returned config.
- The numerical settings (step size, tolerances, initial temperatures)
  come from a JSON file, defaulting to the bundled default_settings.json.
"""

from __future__ import annotations

import json
import math
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .models import (
    BodyParameters,
    EnvironmentalConditions,
    IntegratorSettings,
    Settings,
    Sex,
    SweepSettings,
    TimeseriesSettings,
)
from .thermoreg_logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config.txt"


# =============================================================================
# Positional fields
# =============================================================================


@dataclass(frozen=True)
class FieldFallback:
    """
    A config field that could not be used as written.

    Attributes:
        field: Field name (e.g. "mass").
        raw: Text found in the file, or None if the field was missing.
        default: Value substituted for it.
        reason: Why the raw text was rejected.
    """

    field: str
    raw: str | None
    default: Any
    reason: str

    def __str__(self) -> str:
        found = "missing" if self.raw is None else f"{self.raw!r}"
        return f"{self.field}: {found} ({self.reason}), using default {self.default!r}"


@dataclass(frozen=True)
class _FieldSpec:
    name: str
    default: Any
    parse: Callable[[str], Any]
    check: Callable[[Any], bool] = lambda value: True
    requirement: str = ""


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text!r} is not a finite number")
    return value


def _temperature(name: str, default: float) -> _FieldSpec:
    return _FieldSpec(name, default, _parse_float)


_BODY_FIELDS = (
    _FieldSpec("mass", 80.0, _parse_float, lambda v: v > 0, "must be positive"),
    _FieldSpec("height", 185.0, _parse_float, lambda v: v > 0, "must be positive"),
    _FieldSpec("age", 25.0, _parse_float, lambda v: v >= 0, "must be non-negative"),
    _FieldSpec("reflectivity", 0.5, _parse_float, lambda v: 0 <= v <= 1, "must be in [0, 1]"),
    _temperature("dry_temp", 30.0),
)

_TAIL_FIELDS = (
    _FieldSpec("wind_speed", 5.0, _parse_float, lambda v: v >= 0, "must be non-negative"),
    _FieldSpec("metabolic_override", 0.0, _parse_float, lambda v: v >= 0, "must be non-negative (0 = basal rate)"),
    _FieldSpec("sex", Sex.MALE, Sex.from_code),
)

SWEEP_FIELDS: tuple[_FieldSpec, ...] = (
    *_BODY_FIELDS,
    _temperature("wet_bulb_low", 22.0),
    _temperature("wet_bulb_high", 35.0),
    *_TAIL_FIELDS,
)

TIMESERIES_FIELDS: tuple[_FieldSpec, ...] = (
    *_BODY_FIELDS,
    _temperature("wet_bulb", 35.0),
    *_TAIL_FIELDS,
)


def parse_fields(tokens: list[str], specs: tuple[_FieldSpec, ...]) -> tuple[dict[str, Any], list[FieldFallback]]:
    """
    Read positional fields, substituting defaults for unusable ones.

    Each field is parsed on its own, so one bad token does not affect the
    fields after it.

    Args:
        tokens: Whitespace-separated tokens of the config file.
        specs: Field specifications in file order.

    Returns:
        Tuple of (values by field name, fallbacks applied).
    """
    values: dict[str, Any] = {}
    fallbacks: list[FieldFallback] = []

    for index, spec in enumerate(specs):
        if index >= len(tokens):
            fallbacks.append(FieldFallback(spec.name, None, spec.default, "missing"))
            values[spec.name] = spec.default
            continue

        raw = tokens[index]
        try:
            value = spec.parse(raw)
        except ValueError:
            fallbacks.append(FieldFallback(spec.name, raw, spec.default, "malformed"))
            values[spec.name] = spec.default
            continue

        if not spec.check(value):
            fallbacks.append(FieldFallback(spec.name, raw, spec.default, spec.requirement))
            values[spec.name] = spec.default
            continue

        values[spec.name] = value

    if len(tokens) > len(specs):
        extra = " ".join(tokens[len(specs) :])
        logger.warning(f"Ignoring {len(tokens) - len(specs)} extra config token(s): {extra}")

    for fallback in fallbacks:
        logger.warning(f"Config field {fallback}")

    return values, fallbacks


def _read_tokens(path: str | Path) -> tuple[list[str], FieldFallback | None]:
    config_path = Path(path)
    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}; using defaults for every field")
        return [], FieldFallback("<file>", str(config_path), None, "config file not found")
    return config_path.read_text().split(), None


def _body_from(values: dict[str, Any]) -> BodyParameters:
    return BodyParameters(
        mass=values["mass"],
        height=values["height"],
        age=values["age"],
        sex=values["sex"],
        reflectivity=values["reflectivity"],
    )


@dataclass
class SweepConfig:
    """
    Run parameters of a wet-bulb sweep.

    Attributes:
        body: Body parameters.
        dry_temp: Dry-bulb temperature (°C).
        wet_bulb_low: First wet-bulb temperature of the sweep (°C).
        wet_bulb_high: Last wet-bulb temperature of the sweep (°C).
        wind_speed: Wind speed (m/s).
        metabolic_override: Metabolic rate (W), 0 for the basal rate.
        fallbacks: Fields that fell back to their defaults.
    """

    body: BodyParameters = field(default_factory=BodyParameters)
    dry_temp: float = 30.0
    wet_bulb_low: float = 22.0
    wet_bulb_high: float = 35.0
    wind_speed: float = 5.0
    metabolic_override: float = 0.0
    fallbacks: list[FieldFallback] = field(default_factory=list)


@dataclass
class TimeseriesConfig:
    """
    Run parameters of a single-condition time series.

    Attributes:
        body: Body parameters.
        environment: Ambient conditions.
        metabolic_override: Metabolic rate (W), 0 for the basal rate.
        fallbacks: Fields that fell back to their defaults.
    """

    body: BodyParameters = field(default_factory=BodyParameters)
    environment: EnvironmentalConditions = field(default_factory=lambda: EnvironmentalConditions(wet_temp=35.0))
    metabolic_override: float = 0.0
    fallbacks: list[FieldFallback] = field(default_factory=list)


def parse_sweep_config(text: str) -> SweepConfig:
    """Parse sweep run parameters from config text."""
    values, fallbacks = parse_fields(text.split(), SWEEP_FIELDS)
    return SweepConfig(
        body=_body_from(values),
        dry_temp=values["dry_temp"],
        wet_bulb_low=values["wet_bulb_low"],
        wet_bulb_high=values["wet_bulb_high"],
        wind_speed=values["wind_speed"],
        metabolic_override=values["metabolic_override"],
        fallbacks=fallbacks,
    )


def parse_timeseries_config(text: str) -> TimeseriesConfig:
    """Parse time-series run parameters from config text."""
    values, fallbacks = parse_fields(text.split(), TIMESERIES_FIELDS)
    return TimeseriesConfig(
        body=_body_from(values),
        environment=EnvironmentalConditions(
            dry_temp=values["dry_temp"],
            wet_temp=values["wet_bulb"],
            wind_speed=values["wind_speed"],
        ),
        metabolic_override=values["metabolic_override"],
        fallbacks=fallbacks,
    )


def read_sweep_config(path: str | Path = DEFAULT_CONFIG_PATH) -> SweepConfig:
    """
    Read sweep run parameters from a config file.

    Field order: mass height age reflectivity dry_temp wet_bulb_low
    wet_bulb_high wind_speed metabolic_override sex.

    A missing file is not an error: every field takes its default and
    the absence is logged and recorded as a fallback.

    Args:
        path: Config file path. Default "config.txt".

    Returns:
        SweepConfig with any fallbacks listed in ``fallbacks``.
    """
    tokens, missing = _read_tokens(path)
    config = parse_sweep_config(" ".join(tokens))
    if missing is not None:
        config.fallbacks.insert(0, missing)
    return config


def read_timeseries_config(path: str | Path = DEFAULT_CONFIG_PATH) -> TimeseriesConfig:
    """
    Read time-series run parameters from a config file.

    Field order: mass height age reflectivity dry_temp wet_bulb
    wind_speed metabolic_override sex.

    Args:
        path: Config file path. Default "config.txt".

    Returns:
        TimeseriesConfig with any fallbacks listed in ``fallbacks``.
    """
    tokens, missing = _read_tokens(path)
    config = parse_timeseries_config(" ".join(tokens))
    if missing is not None:
        config.fallbacks.insert(0, missing)
    return config


# =============================================================================
# JSON settings
# =============================================================================

_SECTIONS: dict[str, type] = {
    "integrator": IntegratorSettings,
    "sweep": SweepSettings,
    "timeseries": TimeseriesSettings,
}


def _load_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as err:
            raise ConfigurationError(str(path), f"not valid JSON ({err})") from err
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), "top level must be an object")
    return data


def load_settings(settings_json_path: str | Path | None = None) -> Settings:
    """
    Load numerical settings from JSON.

    The bundled default_settings.json is always read first; a user file
    overrides any subset of its sections and keys.

    Args:
        settings_json_path: Path to a settings JSON file, or None for the
            bundled defaults only.

    Returns:
        Settings with integrator, sweep and timeseries sections.

    Raises:
        FileNotFoundError: If the given file does not exist.
        ConfigurationError: If a section or key is unknown or a value is invalid.

    Examples:
        >>> settings = load_settings()
        >>> settings.integrator.flux_tolerance  # 0.0001
        >>> settings = load_settings("coarse.json")  # {"integrator": {"flux_tolerance": 0.01}}
    """
    merged = _load_json(Path(__file__).parent / "data" / "default_settings.json")

    if settings_json_path is not None:
        overrides = _load_json(Path(settings_json_path))
        for section, values in overrides.items():
            if section not in _SECTIONS:
                raise ConfigurationError(section, f"unknown settings section (expected one of {sorted(_SECTIONS)})")
            if not isinstance(values, dict):
                raise ConfigurationError(section, "section must be an object")
            merged.setdefault(section, {}).update(values)

    built: dict[str, Any] = {}
    for section, cls in _SECTIONS.items():
        values = merged.get(section, {})
        known = {f.name for f in fields(cls)}
        for key in values:
            if key not in known:
                raise ConfigurationError(f"{section}.{key}", "unknown setting")
        try:
            built[section] = cls(**values)
        except (TypeError, ValueError) as err:
            raise ConfigurationError(section, str(err)) from err

    logger.debug(f"Loaded settings from {settings_json_path or 'bundled defaults'}")
    return Settings(**built)
