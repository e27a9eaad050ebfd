import numpy as np

from simulator.transition_table import BLANK


class Tape:
    """
    Right-infinite tape backed by a uint8 buffer.
    The input sits at index 0 and the buffer starts at twice the input
    length plus one cell. It doubles whenever a position past the end is
    needed and never grows to the left.
    """

    def __init__(self, data=b""):
        data = bytes(data)
        self.buffer = np.zeros(2 * len(data) + 1, dtype=np.uint8)
        self.buffer[:len(data)] = np.frombuffer(data, dtype=np.uint8)

    def __len__(self):
        return len(self.buffer)

    def ensure(self, pos):
        while pos >= len(self.buffer):
            self.buffer = np.concatenate([self.buffer, np.zeros(len(self.buffer), dtype=np.uint8)])

    def read(self, pos):
        if pos >= len(self.buffer):
            return BLANK
        return int(self.buffer[pos])

    def write(self, pos, symbol):
        self.ensure(pos)
        self.buffer[pos] = symbol

    def cells(self):
        return self.buffer.tobytes()

    def content(self):
        """Tape bytes with trailing blanks stripped."""
        return self.cells().rstrip(b"\x00")

    @classmethod
    def from_buffer(cls, buffer):
        tape = cls()
        tape.buffer = np.ascontiguousarray(buffer, dtype=np.uint8)
        return tape
