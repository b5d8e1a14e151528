"""
simlog
======
Diagnostic logging for discrete-event simulation hosts.
Lines can carry the host's virtual time, follow a configurable field layout,
and go to the console, a truncated file, or any caller-supplied stream.
"""

from simlog.config import LogOptions
from simlog.core import SimLog
from simlog.exceptions import (
    ConfigurationError,
    FormattingError,
    NotConfiguredError,
    SimLogError,
    SinkOpenError,
)
from simlog.gate import ConfigurationGate, configure, current
from simlog.host import ManualClock, StdlibHostLogger, format_time
from simlog.levels import DEFAULT_LEVEL, OFF

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ConfigurationGate",
    "DEFAULT_LEVEL",
    "FormattingError",
    "LogOptions",
    "ManualClock",
    "NotConfiguredError",
    "OFF",
    "SimLog",
    "SimLogError",
    "SinkOpenError",
    "StdlibHostLogger",
    "configure",
    "current",
    "format_time",
]
