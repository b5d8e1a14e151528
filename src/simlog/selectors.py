"""
selectors.py – Field-selector table and format-spec parsing.

A format spec is a semicolon-delimited list of selector names such as
``"level;message"``. Each name resolves, once, at configuration time, to an
accessor that extracts one field from a ``logging.LogRecord``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping

from simlog.constants import FORMAT_SEPARATOR, SELECTOR_ALIASES
from simlog.exceptions import ConfigurationError

Accessor = Callable[[logging.LogRecord], Any]


# ── Field-selector table ─────────────────────────────────────────────────────

FIELD_SELECTORS: Mapping[str, Accessor] = {
    # Host names that share a standard number render as the standard name:
    # FINE prints as DEBUG, SEVERE as ERROR.
    "level": lambda record: record.levelname,
    "message": lambda record: record.getMessage(),
    "logger": lambda record: record.name,
    "millis": lambda record: int(record.created * 1000),
    # Set by SimLog through ``extra``; records from elsewhere lack it.
    "sequence": lambda record: record.sequence,
    "thread": lambda record: record.threadName,
    "thread_id": lambda record: record.thread,
    "process": lambda record: record.process,
    "module": lambda record: record.module,
    "function": lambda record: record.funcName,
    "line": lambda record: record.lineno,
}


# ── Format spec ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FormatSpec:
    """
    Ordered, validated selection of record fields.

    Attributes
    ----------
    names:
        Canonical selector names, in output order. Never empty.
    accessors:
        Accessor resolved for each name, parallel to ``names``.
    """

    names: tuple[str, ...]
    accessors: tuple[Accessor, ...]

    def __iter__(self) -> Iterator[tuple[str, Accessor]]:
        return iter(zip(self.names, self.accessors))

    def __len__(self) -> int:
        return len(self.names)

    def __str__(self) -> str:
        return FORMAT_SEPARATOR.join(self.names)


def parse_format_spec(
    text: str,
    table: Mapping[str, Accessor] = FIELD_SELECTORS,
) -> FormatSpec:
    """
    Parse a semicolon-delimited selector list against ``table``.

    Whitespace around names is ignored, as are trailing empty segments.
    Legacy accessor names (``getLevel``, ``getMessage``, ...) resolve to their
    canonical selector.

    Parameters
    ----------
    text:
        The format string, e.g. ``"level;message"``.
    table:
        Selector table to resolve against.

    Returns
    -------
    FormatSpec

    Raises
    ------
    ConfigurationError
        If the spec is empty, has an empty inner segment, or names an unknown
        selector.
    """
    if not isinstance(text, str):
        raise ConfigurationError("format", text, "expected a string")

    parts = [part.strip() for part in text.split(FORMAT_SEPARATOR)]
    while parts and not parts[-1]:
        parts.pop()
    if not parts:
        raise ConfigurationError("format", text, "at least one selector is required")

    names: list[str] = []
    accessors: list[Accessor] = []
    for position, part in enumerate(parts, start=1):
        if not part:
            raise ConfigurationError("format", text, f"selector #{position} is empty")
        name = SELECTOR_ALIASES.get(part, part)
        if name not in table:
            known = ", ".join(sorted(table))
            raise ConfigurationError("format", text, f"unknown selector {part!r} (known: {known})")
        names.append(name)
        accessors.append(table[name])

    return FormatSpec(names=tuple(names), accessors=tuple(accessors))
