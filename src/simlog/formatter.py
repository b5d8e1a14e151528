"""
formatter.py – Renders log records into tab-separated lines.

Line layout::

    [<virtual time>\\t]<field 1>\\t<field 2>...<line ending>

A record that cannot be rendered is a fatal condition by default: the failure is
reported on stderr and the process exits. Tests swap in a
``RecordingFailureStrategy`` instead.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
import traceback
from typing import Callable

from simlog.constants import FIELD_SEPARATOR, NEW_LINE
from simlog.exceptions import FormattingError
from simlog.host import VirtualClock, format_time
from simlog.selectors import FormatSpec

FailureStrategy = Callable[[FormattingError, logging.LogRecord], None]


# ── Failure strategies ───────────────────────────────────────────────────────

def abort_process(error: FormattingError, record: logging.LogRecord) -> None:
    """Report ``error`` on stderr and terminate the process with status 1."""
    print("Error in logging:", file=sys.stderr)
    traceback.print_exception(type(error), error, error.__traceback__, file=sys.stderr)
    sys.stderr.flush()
    os._exit(1)


class RecordingFailureStrategy:
    """Collects formatting failures instead of terminating the process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._failures: list[tuple[FormattingError, logging.LogRecord]] = []

    def __call__(self, error: FormattingError, record: logging.LogRecord) -> None:
        with self._lock:
            self._failures.append((error, record))

    @property
    def failures(self) -> list[tuple[FormattingError, logging.LogRecord]]:
        """Point-in-time copy of the recorded failures."""
        with self._lock:
            return list(self._failures)

    @property
    def errors(self) -> list[FormattingError]:
        return [error for error, _ in self.failures]


# ── Formatter ────────────────────────────────────────────────────────────────

class SimLogFormatter(logging.Formatter):
    """
    Formatter driven by a parsed ``FormatSpec``.

    Parameters
    ----------
    spec:
        Fields to render, in order.
    clock:
        Virtual clock queried when ``clock_prefix`` is set.
    clock_prefix:
        If True, every line starts with the rendered virtual time.
    render_time:
        Shared helper turning a clock value into text.
    on_failure:
        Called with the error and the record when rendering fails. The record
        then renders as an empty string.
    """

    def __init__(
        self,
        spec: FormatSpec,
        *,
        clock: VirtualClock | None = None,
        clock_prefix: bool = False,
        render_time: Callable[[float], str] = format_time,
        on_failure: FailureStrategy = abort_process,
    ) -> None:
        super().__init__()
        if clock_prefix and clock is None:
            raise ValueError("clock_prefix requires a clock")
        self.spec = spec
        self.clock = clock
        self.clock_prefix = clock_prefix
        self.render_time = render_time
        self.on_failure = on_failure

    def format(self, record: logging.LogRecord) -> str:
        try:
            return self.render(record)
        except FormattingError as exc:
            self.on_failure(exc, record)
            return ""

    def render(self, record: logging.LogRecord) -> str:
        """Render ``record`` or raise FormattingError."""
        fields: list[str] = []
        for name, accessor in self.spec:
            try:
                fields.append(str(accessor(record)))
            except Exception as exc:
                raise FormattingError(name, f"{type(exc).__name__}: {exc}") from exc

        line = FIELD_SEPARATOR.join(fields)
        if self.clock_prefix:
            line = self.clock_text() + FIELD_SEPARATOR + line
        return line + NEW_LINE

    def clock_text(self) -> str:
        """Current virtual time rendered through the shared helper."""
        try:
            return self.render_time(self.clock.now())
        except Exception as exc:
            raise FormattingError("clock", f"{type(exc).__name__}: {exc}") from exc
