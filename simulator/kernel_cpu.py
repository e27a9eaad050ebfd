import numpy as np
from numba import njit


@njit(cache=True)
def run_kernel(targets, outputs, directions, tape, head, state, steps, step_limit):
    """
    Compiled run loop over the dense transition arrays.
    States are integer codes: -2 accept, -1 reject, >= 0 ordinary.
    A state with no row in the table behaves as the default transition
    (reject, write blank, move left).
    Returns (tape, head, state, steps); tape may be a new, larger buffer.
    """
    num_states = targets.shape[0]

    for _ in range(step_limit):
        steps += 1
        symbol = tape[head]

        if state < num_states:
            new_state = targets[state, symbol]
            tape[head] = outputs[state, symbol]
            move_right = directions[state, symbol] == 1
        else:
            new_state = -1
            tape[head] = 0
            move_right = False

        state = new_state

        if move_right:
            head += 1
            if head == tape.shape[0]:
                grown = np.zeros(tape.shape[0] * 2, dtype=np.uint8)
                grown[:tape.shape[0]] = tape
                tape = grown
        elif head > 0:
            head -= 1

        if state < 0:
            break

    return tape, head, state, steps
