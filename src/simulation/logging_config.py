"""Logging configuration helpers for scanlift.

The ``simulation``, ``server`` and ``console`` loggers are
silent by default (each package installs a ``NullHandler``). Applications opt
in explicitly:

    from simulation import logging_config

    logging_config.enable_console_logging(level="DEBUG")

    # or from the environment
    logging_config.configure_from_env()

Environment variables:
    SCANLIFT_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

import logging
import os
from typing import List, Literal, Optional, Union

__all__ = [
    "LOGGER_NAMES",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "set_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAMES = ("simulation", "server", "console")
ENV_LEVEL = "SCANLIFT_LOGGING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _loggers() -> List[logging.Logger]:
    return [logging.getLogger(name) for name in LOGGER_NAMES]


def _clear_handlers() -> None:
    """Remove every handler we installed, keeping the NullHandlers."""
    for logger in _loggers():
        for handler in logger.handlers[:]:
            if not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
                handler.close()


def enable_console_logging(
    level: Union[LogLevel, int] = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Send all scanlift loggers to stderr through one shared handler.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    _clear_handlers()
    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))
    for logger in _loggers():
        logger.setLevel(_get_level(level))
        logger.addHandler(handler)
    return handler


def set_level(level: Union[LogLevel, int]) -> None:
    for logger in _loggers():
        logger.setLevel(_get_level(level))
        for handler in logger.handlers:
            handler.setLevel(_get_level(level))


def disable_logging() -> None:
    _clear_handlers()
    for logger in _loggers():
        logger.setLevel(logging.CRITICAL + 1)


def configure_from_env() -> Optional[logging.StreamHandler]:
    """Enable console logging when ``SCANLIFT_LOGGING`` names a level."""
    level = os.environ.get(ENV_LEVEL, "").strip()
    if not level:
        return None
    return enable_console_logging(level=level.upper())
