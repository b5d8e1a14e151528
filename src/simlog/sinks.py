"""
sinks.py – Output sinks for formatted log lines.

Every sink is a ``logging.StreamHandler`` whose terminator is empty: the
formatter already ends each line. The handler lock keeps concurrent lines
whole on a shared stream.
"""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import IO, Any

from simlog.constants import NEW_LINE, PLATFORM_NEW_LINE
from simlog.exceptions import SinkOpenError


class LineHandler(logging.StreamHandler):
    """Stream handler writing pre-terminated lines to a text stream."""

    terminator = ""


class ByteStreamHandler(LineHandler):
    """
    Stream handler for binary streams; lines are written as UTF-8 bytes ending
    in the platform line ending, as a text-mode file would receive them.
    """

    encoding = "utf-8"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            if PLATFORM_NEW_LINE != NEW_LINE:
                line = line.replace(NEW_LINE, PLATFORM_NEW_LINE)
            self.stream.write(line.encode(self.encoding))
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


class DiscardSink(io.TextIOBase):
    """Writable text stream that accepts and drops everything."""

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        return len(text)


def console_sink() -> LineHandler:
    """Sink writing to the process's standard error stream."""
    return LineHandler(sys.stderr)


def file_sink(path: str | Path) -> logging.FileHandler:
    """
    Open ``path`` in truncate mode and return a sink writing to it.

    The file stays open for the lifetime of the process.

    Raises
    ------
    SinkOpenError
        If the file cannot be opened.
    """
    try:
        handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    except OSError as exc:
        raise SinkOpenError(path, exc.strerror or str(exc)) from exc
    handler.terminator = ""
    return handler


def stream_sink(stream: IO[Any]) -> LineHandler:
    """
    Return a sink writing to a caller-supplied stream.

    Binary streams receive UTF-8 bytes; anything else is treated as a text stream.
    """
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return ByteStreamHandler(stream)
    return LineHandler(stream)
