"""
levels.py – Severity levels and threshold parsing.

Levels live on the standard library ``logging`` scale. The simulation host's own
level names (SEVERE, CONFIG, FINE, FINER, FINEST, ALL) are accepted as well, and
``OFF`` is a sentinel above every real level that disables all output.
"""

from __future__ import annotations

import logging
import sys

from simlog.exceptions import ConfigurationError

ALL = 1
FINEST = 3
FINER = 7
FINE = logging.DEBUG
CONFIG = 15
INFO = logging.INFO
WARNING = logging.WARNING
SEVERE = logging.ERROR
OFF = sys.maxsize

DEFAULT_LEVEL = INFO

# Numbers not already named by the standard library.
for _value, _name in ((ALL, "ALL"), (FINEST, "FINEST"), (FINER, "FINER"), (CONFIG, "CONFIG"), (OFF, "OFF")):
    logging.addLevelName(_value, _name)

_LEVELS_BY_NAME: dict[str, int] = {
    "ALL": ALL,
    "FINEST": FINEST,
    "FINER": FINER,
    "FINE": FINE,
    "DEBUG": logging.DEBUG,
    "CONFIG": CONFIG,
    "INFO": INFO,
    "WARNING": WARNING,
    "WARN": WARNING,
    "SEVERE": SEVERE,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "OFF": OFF,
}


def parse_level(value: int | str) -> int:
    """
    Resolve a level name or number to a threshold value.

    Parameters
    ----------
    value:
        Level name (case-insensitive), numeric string or positive integer.

    Returns
    -------
    int

    Raises
    ------
    ConfigurationError
        If the value does not name a known level.
    """
    if isinstance(value, bool):
        raise ConfigurationError("level", value, "expected a level name or number")
    if isinstance(value, int):
        if value < ALL:
            raise ConfigurationError("level", value, f"numeric levels must be >= {ALL}")
        return value
    if not isinstance(value, str):
        raise ConfigurationError("level", value, "expected a level name or number")

    text = value.strip().upper()
    if text in _LEVELS_BY_NAME:
        return _LEVELS_BY_NAME[text]
    if text.isdigit() and int(text) >= ALL:
        return int(text)
    known = ", ".join(sorted(_LEVELS_BY_NAME))
    raise ConfigurationError("level", value, f"unknown level name (known: {known})")


def level_name(level: int) -> str:
    """Return the display name of a level."""
    return logging.getLevelName(level)
