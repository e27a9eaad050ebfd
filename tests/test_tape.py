import numpy as np

from simulator.tape import Tape


def test_initial_capacity_is_twice_input_plus_one():
    assert len(Tape(b"abc")) == 7
    assert len(Tape(b"")) == 1


def test_input_is_copied_at_the_left_end():
    tape = Tape(b"ab")
    assert tape.cells() == b"ab\x00\x00\x00"
    assert tape.read(0) == ord("a")
    assert tape.read(1) == ord("b")


def test_reads_past_the_end_are_blank():
    tape = Tape(b"a")
    assert tape.read(2) == 0
    assert tape.read(1000) == 0
    assert len(tape) == 3


def test_growth_doubles_capacity():
    tape = Tape(b"ab")
    tape.write(5, ord("x"))
    assert len(tape) == 10
    tape.write(25, ord("y"))
    assert len(tape) == 40


def test_growth_preserves_content():
    tape = Tape(b"hello")
    tape.write(30, ord("!"))
    assert tape.cells()[:5] == b"hello"
    assert tape.read(30) == ord("!")
    assert tape.content() == b"hello" + b"\x00" * 25 + b"!"


def test_ensure_keeps_capacity_when_in_range():
    tape = Tape(b"abc")
    tape.ensure(6)
    assert len(tape) == 7
    tape.ensure(7)
    assert len(tape) == 14


def test_from_buffer():
    tape = Tape.from_buffer(np.array([1, 2, 0, 0], dtype=np.uint8))
    assert len(tape) == 4
    assert tape.content() == b"\x01\x02"
