"""
main.py – CLI entry point for simlog.

Commands:
  replay   Replay a recorded trace through a configured logger.

Trace format, one record per line::

  <virtual time> <level> <message...>

Usage:
  simlog replay trace.txt --level FINE --format "level;message" --clock-prefix
  cat trace.txt | simlog replay - --file out/sim.log
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, TextIO

import click

from simlog.config import LogOptions
from simlog.constants import (
    DEFAULT_FORMAT,
    DEFAULT_LEVEL_NAME,
    ENV_CLOCK_PREFIX,
    ENV_FILE_PATH,
    ENV_FORMAT,
    ENV_LEVEL,
)
from simlog.exceptions import SimLogError
from simlog.gate import ConfigurationGate
from simlog.host import ManualClock
from simlog.levels import parse_level
from simlog.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
def cli() -> None:
    """Diagnostic logging for discrete-event simulations."""


# ── replay ───────────────────────────────────────────────────────────────────

@cli.command("replay")
@click.argument("trace", type=click.File("r", encoding="utf-8"))
@click.option(
    "--level",
    default=DEFAULT_LEVEL_NAME,
    envvar=ENV_LEVEL,
    show_default=True,
    help="Threshold level; records below it are dropped. OFF disables output.",
)
@click.option(
    "--format",
    "fmt",
    default=DEFAULT_FORMAT,
    envvar=ENV_FORMAT,
    show_default=True,
    help="Semicolon-delimited selector list.",
)
@click.option(
    "--clock-prefix/--no-clock-prefix",
    default=False,
    envvar=ENV_CLOCK_PREFIX,
    show_default=True,
    help="Prefix each line with the virtual time.",
)
@click.option(
    "--file",
    "file_path",
    default=None,
    envvar=ENV_FILE_PATH,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to this file (truncated) instead of the console.",
)
@click.option("--log-level", default="WARNING", show_default=True, help="Diagnostics log level.")
def replay(
    trace: TextIO,
    fmt: str,
    level: str,
    clock_prefix: bool,
    file_path: Optional[Path],
    log_level: str,
) -> None:
    """Replay TRACE (or - for stdin) through a configured logger."""
    configure_logging(log_level)

    clock = ManualClock()
    gate = ConfigurationGate(clock=clock)
    options = LogOptions(level=level, clock_prefix=clock_prefix, format=fmt, file_path=file_path)
    try:
        log = gate.configure(options)
    except SimLogError as exc:
        raise click.UsageError(str(exc)) from exc

    count = 0
    for lineno, time, record_level, message in _read_trace(trace):
        try:
            clock.set(time)
        except ValueError as exc:
            raise click.UsageError(f"line {lineno}: {exc}") from exc
        log.print_line(message, record_level)
        count += 1

    logger.info("Replayed %d record(s)", count)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _read_trace(trace: TextIO) -> Iterator[tuple[int, float, int, str]]:
    """Yield ``(line number, time, level, message)`` for each non-blank line."""
    for lineno, raw in enumerate(trace, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        parts = line.split(None, 2)
        if len(parts) < 2:
            raise click.UsageError(f"line {lineno}: expected '<time> <level> <message>'")
        try:
            time = float(parts[0])
        except ValueError:
            raise click.UsageError(f"line {lineno}: bad time {parts[0]!r}")
        try:
            record_level = parse_level(parts[1])
        except SimLogError as exc:
            raise click.UsageError(f"line {lineno}: {exc}") from exc
        message = parts[2] if len(parts) > 2 else ""
        yield lineno, time, record_level, message


if __name__ == "__main__":
    cli()
