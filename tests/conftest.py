from pathlib import Path

import pytest

from simulator.transition_table import Direction, Halt
from simulator.turing_machine import TuringMachine

MACHINES_DIR = Path(__file__).resolve().parent.parent / "machines"


@pytest.fixture
def machines_dir():
    return MACHINES_DIR


@pytest.fixture
def unary_scan():
    """State 0 walks right over 1s and accepts on the first blank."""
    tm = TuringMachine(1)
    tm.set_transition(0, ord("1"), 0, ord("1"), Direction.RIGHT)
    tm.set_transition(0, 0, Halt.ACCEPT, 0, Direction.LEFT)
    return tm


@pytest.fixture
def right_looper():
    """Single state that moves right forever without changing the tape."""
    tm = TuringMachine(1)
    for symbol in range(256):
        tm.set_transition(0, symbol, 0, symbol, Direction.RIGHT)
    return tm
