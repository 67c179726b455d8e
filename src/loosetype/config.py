"""Configuration utilities for loosetype.

This module centralizes small helpers and constants related to library configuration.
"""

import logging
import os

DEFAULT_FALLBACK = ""  # replacement for null-ish values when none is given

LOG_LEVEL_ENV_VAR = "LOOSETYPE_LOG_LEVEL"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING


class InvalidLogLevelError(Exception):
    """Raised when LOOSETYPE_LOG_LEVEL names an unknown logging level."""

    def __init__(self, level_name: str) -> None:
        super().__init__(f"Invalid log level: {level_name}")
        self.level_name = level_name


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The numeric level named by `LOOSETYPE_LOG_LEVEL` (case-insensitive),
        or WARNING when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable names an unknown level.
    """
    if not (name := os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise InvalidLogLevelError(name)
    return level
