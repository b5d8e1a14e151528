"""
test_core.py – Tests for the level-gated print API and sink fan-out.
"""

from __future__ import annotations

import io
import os

import pytest

from simlog.config import LogOptions
from simlog.gate import ConfigurationGate
from simlog.host import ManualClock
from simlog.levels import DEFAULT_LEVEL


def _configure(gate: ConfigurationGate, **options) -> tuple:
    log = gate.configure(LogOptions(**options))
    sink = io.StringIO()
    log.set_output(sink)
    return log, sink


class TestRendering:
    def test_level_and_message(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, format="level;message")
        log.print("boot", "INFO")
        assert sink.getvalue() == "INFO\tboot\n"

    def test_clock_prefix(self, gate: ConfigurationGate, clock: ManualClock) -> None:
        log, sink = _configure(gate, clock_prefix=True)
        clock.set(17.25)
        log.print("boot", "INFO")
        assert sink.getvalue() == "17.25\tINFO\tboot\n"
        assert log.format_clock_time() == "17.25"

    def test_clock_advances_between_lines(self, gate: ConfigurationGate, clock: ManualClock) -> None:
        log, sink = _configure(gate, clock_prefix=True, format="message")
        log.print("a")
        clock.advance(2.0)
        log.print("b")
        assert sink.getvalue().splitlines() == ["0.00\ta", "2.00\tb"]

    def test_objects_use_their_string_form(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, format="message")
        log.print(42)
        log.print(["vm", 1])
        assert sink.getvalue() == "42\n['vm', 1]\n"

    def test_percent_signs_are_literal_in_print(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, format="message")
        log.print_line("cpu at 100%")
        assert sink.getvalue() == "cpu at 100%\n"

    def test_sequence_increments(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, format="sequence;message")
        log.print("a")
        log.print("skipped", "FINE")
        log.print("b")
        assert sink.getvalue() == "0\ta\n1\tb\n"

    def test_caller_location(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, format="module;function;message")
        log.print("here")
        log.printf(None, "%s", "there")
        assert sink.getvalue() == (
            "test_core\ttest_caller_location\there\n"
            "test_core\ttest_caller_location\tthere\n"
        )


class TestDefaultLevel:
    def test_none_means_default_level(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, level="ALL", format="level;message")
        log.print("x", None)
        log.print("x", DEFAULT_LEVEL)
        log.print("x")
        first, second, third = sink.getvalue().splitlines()
        assert first == second == third == "INFO\tx"

    def test_print_line_matches_print(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate)
        log.print("boot")
        log.print_line("boot")
        log.print_line("boot", None)
        assert sink.getvalue() == "INFO\tboot\n" * 3


class TestPrintf:
    def test_substitution(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate)
        log.printf("WARNING", "host %s has %d vms (%.1f%%)", "h1", 3, 75.0)
        assert sink.getvalue() == "WARNING\thost h1 has 3 vms (75.0%)\n"

    def test_no_args(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, format="message")
        log.printf(None, "100%%")
        assert sink.getvalue() == "100%\n"

    def test_gated_records_skip_substitution(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, level="INFO")
        log.printf("FINE", "%d", "not a number")
        assert sink.getvalue() == ""


class TestGating:
    def test_below_threshold_reaches_no_sink(self, gate: ConfigurationGate, capsys) -> None:
        log, sink = _configure(gate, level="WARNING")
        log.print("quiet", "INFO")
        log.print_line("quiet", "FINE")
        log.printf("CONFIG", "%s", "quiet")
        assert sink.getvalue() == ""
        assert capsys.readouterr().err == ""

    def test_at_threshold_is_emitted(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, level="WARNING")
        log.print("loud", "WARNING")
        log.print("louder", "SEVERE")
        assert sink.getvalue() == "WARNING\tloud\nERROR\tlouder\n"

    def test_off_emits_nothing(self, gate: ConfigurationGate, capsys) -> None:
        log, sink = _configure(gate, level="OFF")
        log.print("x", "SEVERE")
        log.print("x", "CRITICAL")
        assert sink.getvalue() == ""
        assert capsys.readouterr().err == ""


class TestIsDisabled:
    def test_off(self, gate: ConfigurationGate) -> None:
        assert gate.configure(LogOptions(level="OFF")).is_disabled()

    @pytest.mark.parametrize(
        "level", ["ALL", "FINEST", "FINER", "FINE", "CONFIG", "INFO", "WARNING", "SEVERE", "CRITICAL"]
    )
    def test_every_other_level(self, level: str) -> None:
        log = ConfigurationGate().configure(LogOptions(level=level))
        assert not log.is_disabled()


class TestSetOutput:
    def test_additional_sink_keeps_primary(self, gate: ConfigurationGate, capsys) -> None:
        log = gate.configure()
        log.print("before")
        sink = io.StringIO()
        log.set_output(sink)
        log.print("after")
        log.printf("WARNING", "%s!", "after")

        assert sink.getvalue() == "INFO\tafter\nWARNING\tafter!\n"
        assert capsys.readouterr().err == "INFO\tbefore\nINFO\tafter\nWARNING\tafter!\n"
        assert len(log.sinks) == 2

    def test_every_sink_sees_the_same_bytes(self, gate: ConfigurationGate, clock: ManualClock) -> None:
        log = gate.configure(LogOptions(clock_prefix=True))
        text_sink = io.StringIO()
        byte_sink = io.BytesIO()
        log.set_output(text_sink)
        log.set_output(byte_sink)

        clock.set(1.0)
        log.print("ünïcode")

        assert text_sink.getvalue() == "1.00\tINFO\tünïcode\n"
        assert byte_sink.getvalue() == text_sink.getvalue().replace("\n", os.linesep).encode("utf-8")


class TestFormattingFailure:
    def test_failure_is_recorded_and_nothing_is_written(self, failures) -> None:
        def broken_render(value: float) -> str:
            raise ArithmeticError("bad time")

        gate = ConfigurationGate(clock=ManualClock(), render_time=broken_render, failure_strategy=failures)
        log, sink = _configure(gate, clock_prefix=True)
        log.print("boot")

        assert sink.getvalue() == ""
        assert {e.selector for e in failures.errors} == {"clock"}
        assert len(failures.errors) == 2  # once per sink


class TestLevelNames:
    def test_shared_numbers_render_standard_names(self, gate: ConfigurationGate) -> None:
        log, sink = _configure(gate, level="ALL", format="level")
        log.print("x", "FINE")
        log.print("x", "SEVERE")
        log.print("x", "FINEST")
        assert sink.getvalue() == "DEBUG\nERROR\nFINEST\n"
