"""
host.py – Collaborator contracts with the simulation host.

simlog needs exactly two things from its host:

- a virtual clock whose current value can be queried, and rendered with the
  shared ``format_time`` helper;
- the host's own default logger, whose output can be redirected.

``ManualClock`` and ``StdlibHostLogger`` are reference implementations for hosts
that do not bring their own.
"""

from __future__ import annotations

import logging
from typing import Protocol, TextIO

from simlog.utils.logging import get_logger

logger = get_logger(__name__)


class VirtualClock(Protocol):
    """The host's simulated time source. Values never decrease."""

    def now(self) -> float:
        """Return the current virtual time."""


class HostLogger(Protocol):
    """The host framework's own default logger."""

    def set_output(self, stream: TextIO) -> None:
        """Send all further host log output to ``stream``."""


def format_time(value: float) -> str:
    """Render a virtual time value as text, e.g. ``12.50``."""
    return f"{value:.2f}"


class ManualClock:
    """
    Virtual clock advanced explicitly by its owner.

    Parameters
    ----------
    start:
        Initial virtual time.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._time = float(start)

    def now(self) -> float:
        return self._time

    def set(self, value: float) -> None:
        """Move the clock to ``value``. Raises ValueError when moving backwards."""
        value = float(value)
        if value < self._time:
            raise ValueError(f"Virtual time cannot go backwards: {value} < {self._time}")
        self._time = value

    def advance(self, delta: float) -> float:
        """Move the clock forward by ``delta`` and return the new time."""
        self.set(self._time + delta)
        return self._time


class StdlibHostLogger:
    """
    Host-logger adapter over a standard library ``logging.Logger``.

    ``set_output`` only changes where the host's records end up: its stream
    handlers write to the new stream and records stop propagating to ancestor
    handlers. Levels and formatters are left alone.

    Parameters
    ----------
    target:
        The host's logger.
    """

    def __init__(self, target: logging.Logger) -> None:
        self.target = target

    def set_output(self, stream: TextIO) -> None:
        # Root handlers (e.g. from basicConfig) often share stderr with the console sink.
        self.target.propagate = False

        handlers = [h for h in self.target.handlers if isinstance(h, logging.StreamHandler)]
        if not handlers:
            self.target.addHandler(logging.StreamHandler(stream))
            logger.debug("Host logger %r had no stream handlers; attached one", self.target.name)
            return
        for handler in handlers:
            previous = handler.setStream(stream)
            if previous is not None and isinstance(handler, logging.FileHandler):
                previous.close()
        logger.debug("Redirected %d handler(s) of host logger %r", len(handlers), self.target.name)
