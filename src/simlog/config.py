"""
config.py – Logger options from explicit values, environment variables or
legacy property mappings.
All options are immutable after construction (frozen dataclass). Semantic
validation (level names, selectors, file access) happens in the configuration
gate, so a bad value never leaves the logger half configured.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from simlog.constants import (
    DEFAULT_FORMAT,
    DEFAULT_LEVEL_NAME,
    ENV_CLOCK_PREFIX,
    ENV_FILE_PATH,
    ENV_FORMAT,
    ENV_LEVEL,
    ENV_SUPPRESS_HOST_LOGGER,
    FILE_PATH_PROP_KEY,
    LOG_CLOCK_PROP_KEY,
    LOG_FORMAT_PROP_KEY,
    LOG_LEVEL_PROP_KEY,
    SHUT_STANDARD_LOGGER_PROP_KEY,
)


def _parse_bool(raw: object) -> bool:
    """Only ``true`` (any case) is true; everything else is false."""
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() == "true"


@dataclass(frozen=True)
class LogOptions:
    """
    Immutable logger options.

    Parameters
    ----------
    level:
        Threshold level name or number. Records below it are dropped.
        ``"OFF"`` disables all output.
    clock_prefix:
        If True, prefix every line with the current virtual time.
    format:
        Semicolon-delimited selector list, e.g. ``"level;message"``.
    file_path:
        If set, lines go to this file (truncated on open) instead of the console.
    suppress_host_logger:
        If True, the host framework's default logger is redirected to a
        discard sink.
    """

    level: str | int = DEFAULT_LEVEL_NAME
    clock_prefix: bool = False
    format: str = DEFAULT_FORMAT
    file_path: Path | None = None
    suppress_host_logger: bool = False

    def __post_init__(self) -> None:
        if self.file_path is not None and not isinstance(self.file_path, Path):
            object.__setattr__(self, "file_path", Path(self.file_path))
        if self.level is None:
            object.__setattr__(self, "level", DEFAULT_LEVEL_NAME)
        if self.format is None:
            object.__setattr__(self, "format", DEFAULT_FORMAT)

    @classmethod
    def from_env(cls) -> "LogOptions":
        """Construct options from ``SIMLOG_*`` environment variables (and ``.env``)."""
        load_dotenv()
        file_path = os.getenv(ENV_FILE_PATH, "").strip()
        return cls(
            level=os.getenv(ENV_LEVEL, DEFAULT_LEVEL_NAME),
            clock_prefix=_parse_bool(os.getenv(ENV_CLOCK_PREFIX, "false")),
            format=os.getenv(ENV_FORMAT, DEFAULT_FORMAT),
            file_path=Path(file_path) if file_path else None,
            suppress_host_logger=_parse_bool(os.getenv(ENV_SUPPRESS_HOST_LOGGER, "false")),
        )

    @classmethod
    def from_properties(cls, props: Mapping[str, object]) -> "LogOptions":
        """
        Construct options from a property mapping using the legacy keys
        (``LogLevel``, ``LogCloudSimClock``, ``LogFormat``, ``FilePath``,
        ``ShutStandardLogger``). Missing keys take their defaults.
        """
        file_path = props.get(FILE_PATH_PROP_KEY)
        return cls(
            level=str(props.get(LOG_LEVEL_PROP_KEY, DEFAULT_LEVEL_NAME)),
            clock_prefix=_parse_bool(props.get(LOG_CLOCK_PROP_KEY, False)),
            format=str(props.get(LOG_FORMAT_PROP_KEY, DEFAULT_FORMAT)),
            file_path=Path(str(file_path)) if file_path is not None else None,
            suppress_host_logger=_parse_bool(props.get(SHUT_STANDARD_LOGGER_PROP_KEY, False)),
        )
