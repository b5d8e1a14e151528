"""
tests/conftest.py – Shared fixtures for all tests.
"""
import io
import logging

import pytest

from simlog import gate as gate_module
from simlog.formatter import RecordingFailureStrategy
from simlog.gate import ConfigurationGate
from simlog.host import ManualClock, StdlibHostLogger


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock(start=0.0)


@pytest.fixture()
def failures() -> RecordingFailureStrategy:
    return RecordingFailureStrategy()


@pytest.fixture()
def host_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def host_logger(host_stream: io.StringIO):
    """A stand-in for the host framework's default logger, writing to ``host_stream``."""
    target = logging.Logger("host.framework", level=logging.DEBUG)
    target.addHandler(logging.StreamHandler(host_stream))
    target.propagate = False
    return target


@pytest.fixture()
def gate(clock, failures, host_logger) -> ConfigurationGate:
    return ConfigurationGate(
        clock=clock,
        host_logger=StdlibHostLogger(host_logger),
        failure_strategy=failures,
    )


@pytest.fixture(autouse=True)
def reset_default_gate(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(gate_module, "_default_gate", None)
