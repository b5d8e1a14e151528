"""
run_simulation_trace.py – Example: trace a toy simulation against its virtual clock.

Usage:
  python examples/run_simulation_trace.py

Writes clock-prefixed lines to out/simulation.log and mutes the toy host's own
framework logger.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import simlog
from simlog import LogOptions, ManualClock, StdlibHostLogger
from simlog.utils.logging import configure_logging

# ── Configuration ─────────────────────────────────────────────────────────────
OUTPUT_FILE = Path("out/simulation.log")
HOSTS = 2
CLOUDLETS = 5

configure_logging("INFO")

# The toy host's own chatty framework logger.
framework = logging.getLogger("toyhost.framework")
framework.addHandler(logging.StreamHandler(sys.stdout))
framework.setLevel(logging.DEBUG)


def main() -> None:
    clock = ManualClock()
    OUTPUT_FILE.parent.mkdir(parents=True, exist_ok=True)

    log = simlog.configure(
        LogOptions(
            level="FINE",
            clock_prefix=True,
            format="level;function;message",
            file_path=OUTPUT_FILE,
            suppress_host_logger=True,
        ),
        clock=clock,
        host_logger=StdlibHostLogger(framework),
    )

    log.print_line("simulation started")
    for cloudlet in range(CLOUDLETS):
        clock.advance(1.25)
        framework.debug("scheduler tick %d", cloudlet)  # muted
        host = cloudlet % HOSTS
        log.printf("FINE", "cloudlet %d submitted to host %d", cloudlet, host)
        if cloudlet == 3:
            log.printf("WARNING", "host %d utilisation at %.0f%%", host, 92.0)
    log.print("simulation finished")

    print(f"\nTrace written to: {OUTPUT_FILE}")
    print(OUTPUT_FILE.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
