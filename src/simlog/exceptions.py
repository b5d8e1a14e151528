"""
exceptions.py – Custom exception hierarchy for simlog.

Configuration-time errors are recoverable: nothing is committed when they are
raised. Formatting-time errors are handed to the formatter's failure strategy.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SimLogError(Exception):
    """Base exception for simlog. All simlog errors inherit from this."""


class ConfigurationError(SimLogError):
    """
    Raised when configuration options cannot be turned into a working logger.

    Attributes
    ----------
    option:
        Name of the offending option (e.g. ``"level"``, ``"format"``).
    value:
        The value that was rejected.
    detail:
        Human-readable explanation.
    """

    def __init__(self, option: str, value: Any, detail: str) -> None:
        self.option = option
        self.value = value
        self.detail = detail
        super().__init__(f"Invalid {option}={value!r}: {detail}")


class SinkOpenError(SimLogError, OSError):
    """
    Raised when the file sink cannot be opened.

    Attributes
    ----------
    path:
        The file path that failed to open.
    detail:
        Diagnostic detail from the underlying OS error.
    """

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Cannot open log file '{self.path}': {detail}")


class FormattingError(SimLogError):
    """
    Raised when a record cannot be rendered.

    Never surfaced to print callers; the formatter hands it to its failure strategy.

    Attributes
    ----------
    selector:
        Selector being rendered when the failure happened (``"clock"`` for the
        virtual-clock prefix).
    detail:
        Diagnostic detail.
    """

    def __init__(self, selector: str, detail: str) -> None:
        self.selector = selector
        self.detail = detail
        super().__init__(f"Cannot render selector '{selector}': {detail}")


class NotConfiguredError(SimLogError):
    """Raised when the logger is requested before a successful configure()."""
