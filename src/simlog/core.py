"""
core.py – The configured logger.

A ``SimLog`` is created only by the configuration gate, once the options have
been validated and the primary sink opened. It owns a private, unregistered
``logging.Logger`` so it never collides with the host's or any library's loggers.
"""

from __future__ import annotations

import itertools
import logging
from typing import IO, Any

from simlog.config import LogOptions
from simlog.formatter import SimLogFormatter
from simlog.levels import DEFAULT_LEVEL, OFF, parse_level
from simlog.selectors import FormatSpec
from simlog.sinks import stream_sink

# Frames between the stdlib logging call and the caller of the public API.
_CALLER_STACKLEVEL = 3


class SimLog:
    """
    Level-gated print API over one formatter and any number of sinks.

    Parameters
    ----------
    options:
        The options this logger was configured from.
    threshold:
        Minimum level emitted; ``OFF`` disables output.
    formatter:
        Formatter shared by every sink.
    sink:
        Primary sink.
    name:
        Logger name, shown by the ``logger`` selector.
    """

    def __init__(
        self,
        *,
        options: LogOptions,
        threshold: int,
        formatter: SimLogFormatter,
        sink: logging.Handler,
        name: str = "simlog.trace",
    ) -> None:
        self.options = options
        self._formatter = formatter
        self._sequence = itertools.count()

        self._logger = logging.Logger(name, level=threshold)
        self._logger.propagate = False
        self._logger.disabled = threshold == OFF
        self._attach(sink)

    # ── Introspection ─────────────────────────────────────────────────────────

    @property
    def threshold(self) -> int:
        return self._logger.level

    @property
    def format_spec(self) -> FormatSpec:
        return self._formatter.spec

    @property
    def clock_prefix(self) -> bool:
        return self._formatter.clock_prefix

    @property
    def sinks(self) -> tuple[logging.Handler, ...]:
        """Active sinks, primary first."""
        return tuple(self._logger.handlers)

    def is_disabled(self) -> bool:
        """True iff the threshold is the ``OFF`` sentinel."""
        return self._logger.level == OFF

    def format_clock_time(self) -> str:
        """Current virtual time as rendered in line prefixes."""
        return self._formatter.clock_text()

    # ── Print API ─────────────────────────────────────────────────────────────

    def print(self, message: Any, level: int | str | None = None) -> None:
        """
        Log ``str(message)``.

        Parameters
        ----------
        message:
            Any object; its string form is logged.
        level:
            Level number or name. None means ``DEFAULT_LEVEL``.
        """
        self._emit(self._resolve(level), str(message))

    def print_line(self, message: str, level: int | str | None = None) -> None:
        """Log one line of text. Same contract as :meth:`print`."""
        self._emit(self._resolve(level), str(message))

    def printf(self, level: int | str | None, fmt: str, *args: Any) -> None:
        """
        Log ``fmt % args``.

        Substitution is skipped for records below the threshold.
        """
        resolved = self._resolve(level)
        if self._logger.isEnabledFor(resolved):
            self._emit(resolved, fmt % args)

    # ── Sinks ─────────────────────────────────────────────────────────────────

    def set_output(self, stream: IO[Any]) -> logging.Handler:
        """
        Attach ``stream`` as an additional sink.

        Existing sinks keep receiving output; the new one sees every line logged
        from now on.
        """
        handler = stream_sink(stream)
        self._attach(handler)
        return handler

    # ── Internals ─────────────────────────────────────────────────────────────

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(self._formatter)
        self._logger.addHandler(handler)

    @staticmethod
    def _resolve(level: int | str | None) -> int:
        return DEFAULT_LEVEL if level is None else parse_level(level)

    def _emit(self, level: int, message: str) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(
            level,
            message,
            extra={"sequence": next(self._sequence)},
            stacklevel=_CALLER_STACKLEVEL,
        )
