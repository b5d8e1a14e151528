"""
gate.py – One-time logger configuration.

The first successful ``configure`` wins. Every later call is a silent no-op that
returns the logger committed by the first one. Configuration is all-or-nothing:
options are validated and the sink opened before anything is committed, so a
failed attempt leaves the gate unconfigured and may be retried.
"""

from __future__ import annotations

import dataclasses
import threading
from typing import Any, Callable

from simlog.config import LogOptions
from simlog.core import SimLog
from simlog.exceptions import ConfigurationError, NotConfiguredError
from simlog.formatter import FailureStrategy, SimLogFormatter, abort_process
from simlog.host import HostLogger, VirtualClock, format_time
from simlog.levels import level_name, parse_level
from simlog.selectors import parse_format_spec
from simlog.sinks import DiscardSink, console_sink, file_sink
from simlog.utils.logging import get_logger

logger = get_logger(__name__)


class ConfigurationGate:
    """
    Builds the process's ``SimLog`` exactly once.

    Parameters
    ----------
    clock:
        The host's virtual clock. Required when ``clock_prefix`` is requested.
    host_logger:
        The host's default logger. Required when ``suppress_host_logger`` is
        requested.
    render_time:
        Shared helper rendering clock values as text.
    failure_strategy:
        What the formatter does with a record it cannot render.
    name:
        Name of the committed logger.
    """

    def __init__(
        self,
        *,
        clock: VirtualClock | None = None,
        host_logger: HostLogger | None = None,
        render_time: Callable[[float], str] = format_time,
        failure_strategy: FailureStrategy = abort_process,
        name: str = "simlog.trace",
    ) -> None:
        self._clock = clock
        self._host_logger = host_logger
        self._render_time = render_time
        self._failure_strategy = failure_strategy
        self._name = name
        self._lock = threading.Lock()
        self._committed: SimLog | None = None

    @property
    def configured(self) -> bool:
        return self._committed is not None

    def current(self) -> SimLog:
        """Return the committed logger or raise NotConfiguredError."""
        if self._committed is None:
            raise NotConfiguredError("configure() must succeed before the logger is used")
        return self._committed

    def configure(self, options: LogOptions | None = None, **overrides: Any) -> SimLog:
        """
        Configure the logger unless a previous call already did.

        Parameters
        ----------
        options:
            Logger options; defaults to ``LogOptions()``.
        **overrides:
            Individual ``LogOptions`` fields replacing those in ``options``.

        Returns
        -------
        SimLog
            The committed logger (the first one, on repeated calls).

        Raises
        ------
        ConfigurationError
            Bad level, bad format spec, or a missing host collaborator.
        SinkOpenError
            The log file cannot be opened.
        """
        with self._lock:
            if self._committed is not None:
                logger.debug("Logger already configured; ignoring configure() call")
                return self._committed

            options = options or LogOptions()
            if overrides:
                options = dataclasses.replace(options, **overrides)

            spec = parse_format_spec(options.format)
            threshold = parse_level(options.level)
            if options.clock_prefix and self._clock is None:
                raise ConfigurationError("clock_prefix", True, "no virtual clock was supplied")
            if options.suppress_host_logger and self._host_logger is None:
                raise ConfigurationError("suppress_host_logger", True, "no host logger was supplied")

            if options.file_path is not None:
                sink = file_sink(options.file_path)
                logger.info("Redirecting output to %s", options.file_path.resolve())
            else:
                sink = console_sink()

            # Everything validated and opened; commit.
            formatter = SimLogFormatter(
                spec,
                clock=self._clock,
                clock_prefix=options.clock_prefix,
                render_time=self._render_time,
                on_failure=self._failure_strategy,
            )
            committed = SimLog(
                options=options,
                threshold=threshold,
                formatter=formatter,
                sink=sink,
                name=self._name,
            )
            if options.suppress_host_logger:
                self._host_logger.set_output(DiscardSink())
                logger.debug("Host logger output redirected to a discard sink")

            self._committed = committed
            logger.debug(
                "Logger configured: level=%s format=%s clock_prefix=%s",
                level_name(threshold),
                spec,
                options.clock_prefix,
            )
            return committed


# ── Process-wide gate ────────────────────────────────────────────────────────

_default_gate: ConfigurationGate | None = None
_default_lock = threading.Lock()


def configure(
    options: LogOptions | None = None,
    *,
    clock: VirtualClock | None = None,
    host_logger: HostLogger | None = None,
    failure_strategy: FailureStrategy = abort_process,
    **overrides: Any,
) -> SimLog:
    """
    Configure the process-wide logger.

    Collaborators passed after the first successful call are ignored, like every
    other option.
    """
    global _default_gate
    with _default_lock:
        if _default_gate is None or not _default_gate.configured:
            _default_gate = ConfigurationGate(
                clock=clock,
                host_logger=host_logger,
                failure_strategy=failure_strategy,
            )
        return _default_gate.configure(options, **overrides)


def current() -> SimLog:
    """Return the process-wide logger; raises NotConfiguredError before configure()."""
    gate = _default_gate
    if gate is None:
        raise NotConfiguredError("configure() must succeed before the logger is used")
    return gate.current()
