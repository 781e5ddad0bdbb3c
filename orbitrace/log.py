"""Logging configuration for Orbitrace loggers."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "ORBITRACE_LOG_LEVEL"

ORBITRACE_LOGGERS = [
    "orbitrace",
    "orbitrace.transport",
    "orbitrace.registry",
    "httpx",
]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def set_log_level(level: Optional[int] = None) -> None:
    """Set the logging level for Orbitrace loggers.

    By default, reads the ORBITRACE_LOG_LEVEL environment variable
    (DEBUG, INFO, WARNING or ERROR). Unset or unrecognized values fall back
    to logging.WARNING, so notices only show up when explicitly requested.

    Args:
        level: The logging level to set (overrides environment variable if provided)
    """
    if level is None:
        env_level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = _LEVELS.get(env_level, logging.WARNING)

    for logger_name in ORBITRACE_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)
