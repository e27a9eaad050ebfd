import io

from rich.console import Console

from simulator.transition_table import Halt
from simulator.turing_machine import Configuration
from tools.trace import (
    ConsoleTrace,
    format_banner,
    format_configuration,
    format_header,
    outcome_message,
)


def test_configuration_line():
    line = format_configuration(Configuration(3, 0, 1, b"1\x001"))
    assert line == "    3 |  1 [0] 1 "


def test_blank_cells_are_three_spaces():
    line = format_configuration(Configuration(0, 2, 0, b"1\x00\x00"))
    assert line == "    0 | [2]      "


def test_halting_state_labels():
    assert format_configuration(Configuration(12, Halt.ACCEPT, 0, b"a")) == "   12 | [A]"
    assert format_configuration(Configuration(7, Halt.REJECT, 1, b"ab")) == "    7 |  a [R]"


def test_multi_digit_state_label():
    assert format_configuration(Configuration(1, 15, 0, b"\x00")) == "    1 | [15]"


def test_header():
    header = format_header()
    assert header[0] == " Step | Configuration"
    assert header[1] == "------+" + "-" * 53


def test_banner_is_padded_to_width():
    banner = format_banner("Hi")
    assert banner == "--- Hi " + "-" * 53
    assert len(banner) == 60
    assert len(format_banner("Hi", width=20)) == 20


def test_long_banner_is_not_truncated():
    message = "x" * 100
    assert format_banner(message) == f"--- {message} "


def test_outcome_messages():
    assert outcome_message(Halt.ACCEPT, 1, 10, "") == 'Accepted input "" in 1 step'
    assert outcome_message(Halt.ACCEPT, 3, 10, "11") == 'Accepted input "11" in 3 steps'
    assert outcome_message(Halt.REJECT, 2, 10, "1") == 'Rejected input "1" in 2 steps'
    assert outcome_message(0, 5, 5, "ab") == "Did not finish within 5 steps. Computation aborted"


def test_console_trace_prints_header_once_and_blank_line_on_close():
    out = io.StringIO()
    console = Console(file=out, width=200, color_system=None)
    with ConsoleTrace(console) as trace:
        trace(Configuration(0, 0, 0, b"[1]\x00"))
        trace(Configuration(1, Halt.ACCEPT, 1, b"[1]\x00"))

    lines = out.getvalue().split("\n")
    assert lines[0] == ""
    assert lines[1] == " Step | Configuration"
    assert lines[3] == "    0 | [0] 1  ]    "
    assert lines[4] == "    1 |  [ [A] ]    "
    assert lines[5] == ""
    assert trace.lines == 2


def test_console_trace_silent_when_unused():
    out = io.StringIO()
    ConsoleTrace(Console(file=out)).close()
    assert out.getvalue() == ""


def test_control_bytes_keep_the_slot_width():
    line = format_configuration(Configuration(2, 0, 0, b"a\nb\t\x7f"))
    assert line == "    2 | [0] ?  b  ?  ? "
    assert "\n" not in line and "\t" not in line
