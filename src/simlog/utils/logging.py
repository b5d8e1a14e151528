"""
logging.py – Diagnostics logging for simlog itself.

simlog reports its own actions (file redirection, host-logger suppression,
ignored reconfiguration) on the ``simlog.*`` namespace. That namespace never
reaches the trace sinks: ``SimLog`` writes through a private, unregistered
logger, so diagnostics and trace lines cannot mix. ``configure_logging``
routes the diagnostics to stdout, away from the stderr console sink.
Use ``get_logger(__name__)`` at the top of every module.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the ``simlog`` diagnostics logger.

    Call once at application entrypoint (CLI or script).

    Parameters
    ----------
    level:
        Logging level string: DEBUG, INFO, WARNING, ERROR.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger("simlog")
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger scoped within the simlog namespace.

    Parameters
    ----------
    name:
        Typically ``__name__`` of the calling module.

    Returns
    -------
    logging.Logger
    """
    if not name.startswith("simlog"):
        name = f"simlog.{name}"
    return logging.getLogger(name)
