"""
constants.py – Immutable project-wide constants.
Do NOT modify these at runtime. Add new selector aliases here when supporting
more legacy configuration strings.
"""

from __future__ import annotations

import os

# ── Property keys understood by LogOptions.from_properties ───────────────────
LOG_LEVEL_PROP_KEY = "LogLevel"
LOG_CLOCK_PROP_KEY = "LogCloudSimClock"
LOG_FORMAT_PROP_KEY = "LogFormat"
FILE_PATH_PROP_KEY = "FilePath"
SHUT_STANDARD_LOGGER_PROP_KEY = "ShutStandardLogger"

# ── Environment variables understood by LogOptions.from_env ─────────────────
ENV_LEVEL = "SIMLOG_LEVEL"
ENV_CLOCK_PREFIX = "SIMLOG_CLOCK_PREFIX"
ENV_FORMAT = "SIMLOG_FORMAT"
ENV_FILE_PATH = "SIMLOG_FILE_PATH"
ENV_SUPPRESS_HOST_LOGGER = "SIMLOG_SUPPRESS_HOST_LOGGER"

# ── Defaults ─────────────────────────────────────────────────────────────────
DEFAULT_LEVEL_NAME = "INFO"
DEFAULT_FORMAT = "level;message"

# ── Line layout ──────────────────────────────────────────────────────────────
FORMAT_SEPARATOR = ";"
FIELD_SEPARATOR = "\t"
# Text streams translate "\n" themselves; binary sinks write PLATFORM_NEW_LINE.
NEW_LINE = "\n"
PLATFORM_NEW_LINE = os.linesep

# ── Legacy record accessor names → selector names ────────────────────────────
SELECTOR_ALIASES: dict[str, str] = {
    "getLevel": "level",
    "getMessage": "message",
    "getLoggerName": "logger",
    "getMillis": "millis",
    "getSequenceNumber": "sequence",
    "getThreadID": "thread_id",
    "getSourceClassName": "module",
    "getSourceMethodName": "function",
}
