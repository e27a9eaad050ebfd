from enum import Enum, IntEnum
from typing import NamedTuple, Union

import numpy as np

NUM_SYMBOLS = 256
BLANK = 0

# Codes used for halting states in the dense target array and in table files
ACCEPT_CODE = -2
REJECT_CODE = -1


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1


class Halt(Enum):
    ACCEPT = ACCEPT_CODE
    REJECT = REJECT_CODE


State = Union[int, Halt]


class Transition(NamedTuple):
    target: State
    output: int
    direction: Direction


DEFAULT_TRANSITION = Transition(Halt.REJECT, BLANK, Direction.LEFT)


def encode_state(state):
    """Map a state to its integer code (-2 accept, -1 reject, else the index)."""
    if isinstance(state, Halt):
        return state.value
    if state < 0:
        raise ValueError(f"Ordinary states must be non-negative, got {state}")
    return int(state)


def check_symbol(symbol):
    if not 0 <= symbol < NUM_SYMBOLS:
        raise ValueError(f"Symbols are bytes (0-{NUM_SYMBOLS - 1}), got {symbol}")


def decode_state(code):
    """Inverse of encode_state."""
    code = int(code)
    if code == ACCEPT_CODE:
        return Halt.ACCEPT
    if code == REJECT_CODE:
        return Halt.REJECT
    if code < 0:
        raise ValueError(f"Invalid state code {code}")
    return code


class TransitionTable:
    """
    Dense (state, symbol) -> Transition table.
    Every ordinary state carries one entry per byte value, and every entry
    starts out as DEFAULT_TRANSITION (reject, write blank, move left).
    """

    def __init__(self, num_states):
        if num_states < 0:
            raise ValueError(f"Number of states must be >= 0, got {num_states}")
        self.num_states = num_states
        self.targets = np.full((num_states, NUM_SYMBOLS), REJECT_CODE, dtype=np.int64)
        self.outputs = np.zeros((num_states, NUM_SYMBOLS), dtype=np.uint8)
        self.directions = np.zeros((num_states, NUM_SYMBOLS), dtype=np.uint8)
        # Entries written by set_transition, including ones equal to the default
        self.assigned = np.zeros((num_states, NUM_SYMBOLS), dtype=np.bool_)

    def __contains__(self, state):
        if isinstance(state, (bool, Halt)) or not isinstance(state, (int, np.integer)):
            return False
        return 0 <= state < self.num_states

    def set_transition(self, state, symbol, target, output, direction):
        check_symbol(symbol)
        check_symbol(output)
        # Unknown source states are ignored; the loader owns range checks
        if state not in self:
            return
        self.targets[state, symbol] = encode_state(target)
        self.outputs[state, symbol] = output
        self.directions[state, symbol] = Direction(direction)
        self.assigned[state, symbol] = True

    def lookup(self, state, symbol):
        if isinstance(state, Halt):
            raise ValueError(f"No transitions leave the halting state {state.name}")
        check_symbol(symbol)
        if state not in self:
            return DEFAULT_TRANSITION
        return Transition(
            decode_state(self.targets[state, symbol]),
            int(self.outputs[state, symbol]),
            Direction(int(self.directions[state, symbol])),
        )

    def is_default(self, state, symbol):
        return self.lookup(state, symbol) == DEFAULT_TRANSITION

    def configured(self):
        """Yield (state, symbol, transition) for every entry written by set_transition."""
        for state, symbol in zip(*np.nonzero(self.assigned)):
            yield int(state), int(symbol), self.lookup(int(state), int(symbol))

    def arrays(self):
        return self.targets, self.outputs, self.directions

    def __eq__(self, other):
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return (
            self.num_states == other.num_states
            and np.array_equal(self.targets, other.targets)
            and np.array_equal(self.outputs, other.outputs)
            and np.array_equal(self.directions, other.directions)
            and np.array_equal(self.assigned, other.assigned)
        )
