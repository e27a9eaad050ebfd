from typing import NamedTuple

from simulator.tape import Tape
from simulator.transition_table import Direction, Halt, TransitionTable, decode_state, encode_state


class MachineHaltedError(RuntimeError):
    pass


class TapeNotInitializedError(RuntimeError):
    pass


class Configuration(NamedTuple):
    """Snapshot of a machine handed to trace sinks."""
    step: int
    state: object
    head: int
    cells: bytes


class TuringMachine:
    def __init__(self, num_states):
        self.table = TransitionTable(num_states)
        self.current_state = 0
        self.head = 0
        self.steps = 0
        self.tape = None

    @property
    def num_states(self):
        return self.table.num_states

    @property
    def halted(self):
        return isinstance(self.current_state, Halt)

    @property
    def accepted(self):
        return self.current_state is Halt.ACCEPT

    @property
    def rejected(self):
        return self.current_state is Halt.REJECT

    def set_transition(self, state, symbol, target, output, direction):
        self.table.set_transition(state, symbol, target, output, direction)

    def initialize_tape(self, data):
        self.tape = Tape(data)

    def snapshot(self):
        if self.tape is None:
            raise TapeNotInitializedError("initialize_tape() must be called before running")
        return Configuration(self.steps, self.current_state, self.head, self.tape.cells())

    def step(self):
        if self.tape is None:
            raise TapeNotInitializedError("initialize_tape() must be called before running")
        if self.halted:
            raise MachineHaltedError(f"Machine already halted in {self.current_state.name}")

        self.steps += 1
        symbol = self.tape.read(self.head)
        transition = self.table.lookup(self.current_state, symbol)
        self.tape.write(self.head, transition.output)
        self.current_state = transition.target
        self._move_head(transition.direction)

    def _move_head(self, direction):
        if direction == Direction.RIGHT:
            self.head += 1
            # Keep the head inside the buffer so the next read is in range
            self.tape.ensure(self.head)
        elif self.head > 0:
            self.head -= 1

    def run(self, step_limit, trace=None, use_jit=False):
        """
        Step until the machine halts or step_limit steps have run.
        Returns the final state: Halt.ACCEPT, Halt.REJECT or the ordinary
        state the machine was in when the limit ran out.

        trace, if given, is called with a Configuration before the first
        step and after each step. use_jit runs silent computations in the
        numba kernel instead of the Python loop.
        """
        if use_jit and trace is None:
            return self._run_compiled(step_limit)

        if trace is not None:
            trace(self.snapshot())

        for _ in range(step_limit):
            self.step()
            if trace is not None:
                trace(self.snapshot())
            if self.halted:
                break

        return self.current_state

    def _run_compiled(self, step_limit):
        from simulator.kernel_cpu import run_kernel

        if self.tape is None:
            raise TapeNotInitializedError("initialize_tape() must be called before running")
        if step_limit <= 0:
            return self.current_state
        if self.halted:
            raise MachineHaltedError(f"Machine already halted in {self.current_state.name}")

        targets, outputs, directions = self.table.arrays()
        buffer, head, state_code, steps = run_kernel(
            targets, outputs, directions,
            self.tape.buffer, self.head, encode_state(self.current_state),
            self.steps, step_limit,
        )
        self.tape = Tape.from_buffer(buffer)
        self.head = int(head)
        self.current_state = decode_state(state_code)
        self.steps = int(steps)
        return self.current_state
