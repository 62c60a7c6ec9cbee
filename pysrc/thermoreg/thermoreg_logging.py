"""
Logging for thermoreg.

Thin registry over the standard ``logging`` module so that every module
gets a named logger with a common minimum level that can be raised or
lowered for the whole package at once (e.g. from the command line).

Usage:
    from thermoreg.thermoreg_logging import get_logger

    logger = get_logger(__name__)
    logger.info("Sweep finished: 651 conditions")
    logger.debug(f"Equilibrium after {steps} steps")
    logger.warning("Field 'mass' malformed, using default 80")
"""

from __future__ import annotations

import logging
import sys
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels matching Python logging."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


class ThermoregLogger:
    """
    Named logger with its own minimum level, backed by Python logging.
    """

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        """
        Initialize logger.

        Args:
            name: Logger name (usually module name)
            level: Minimum log level to display
        """
        self.name = name
        self.level = level

    def _log(self, level: LogLevel, message: str) -> None:
        if level < self.level:
            return
        logging.getLogger(self.name).log(level, message)

    def debug(self, message: str) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message)

    def set_level(self, level: LogLevel | int) -> None:
        """Set minimum log level."""
        self.level = LogLevel(level) if isinstance(level, int) else level


# Global logger registry
_loggers: dict[str, ThermoregLogger] = {}
_global_level: LogLevel | None = None


def get_logger(name: str, level: LogLevel | int = LogLevel.INFO) -> ThermoregLogger:
    """
    Get or create a logger for the given name.

    Args:
        name: Logger name (usually module name or __name__)
        level: Minimum log level (default: INFO). Ignored once a global
            level has been set with set_global_level().

    Returns:
        ThermoregLogger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Run started")
    """
    if name not in _loggers:
        if _global_level is not None:
            level = _global_level
        _loggers[name] = ThermoregLogger(name, LogLevel(level) if isinstance(level, int) else level)
    return _loggers[name]


def set_global_level(level: LogLevel | int) -> None:
    """
    Set log level for all existing and future loggers.

    The level is also applied to the root Python logger so that messages
    passing the registry filter are actually emitted.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)

    Example:
        >>> import thermoreg.thermoreg_logging as tlog
        >>> tlog.set_global_level(tlog.LogLevel.DEBUG)
    """
    global _global_level
    level = LogLevel(level) if isinstance(level, int) else level
    _global_level = level
    for logger in _loggers.values():
        logger.set_level(level)
    logging.getLogger().setLevel(level)


# Configure Python logging to be less verbose by default
logging.basicConfig(
    level=logging.INFO,
    format="%(name)s: %(message)s",
    stream=sys.stderr,
)
