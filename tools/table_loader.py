from simulator.transition_table import ACCEPT_CODE, BLANK, Direction, Halt, decode_state
from simulator.turing_machine import TuringMachine

BLANK_CHAR = "_"
COMMENT_PREFIX = "---"
INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1
DIRECTIONS = {"L": Direction.LEFT, "R": Direction.RIGHT}


class TableFormatError(ValueError):
    def __init__(self, line_number, message):
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number
        self.message = message


def parse_symbol(field):
    if field == BLANK_CHAR:
        return BLANK
    encoded = field.encode("utf-8")
    if len(encoded) != 1:
        raise ValueError(f"Symbol {field!r} is not a single byte")
    return encoded[0]


def parse_number(field):
    number = int(field)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"{field} is outside the 32-bit integer range")
    return number


def parse_state_count(line):
    try:
        num_states = parse_number(line.strip())
    except ValueError:
        raise TableFormatError(1, "Failed to parse number") from None
    if num_states <= 0:
        raise TableFormatError(1, "Invalid state number")
    return num_states


def parse_table(text):
    """
    Build a TuringMachine from the text table format.

    Line 1 holds the number of states. Every other line is blank, a comment
    whose first token starts with '---', or five fields:
        <state> <read> <next> <write> <L|R>
    '_' stands for the blank symbol and next states -2 / -1 mean accept /
    reject. Raises TableFormatError on the first malformed line.
    """
    lines = text.splitlines()
    if not lines:
        raise TableFormatError(1, "Missing number of states")

    tm = TuringMachine(parse_state_count(lines[0]))

    for line_number, line in enumerate(lines[1:], start=2):
        fields = line.split()

        if not fields or fields[0].startswith(COMMENT_PREFIX):
            continue

        if len(fields) != 5:
            raise TableFormatError(line_number, "Wrong number of fields")
        if len(fields[1]) != 1 or len(fields[3]) != 1 or len(fields[4]) != 1:
            raise TableFormatError(line_number, "Field too long")

        try:
            current_state = parse_number(fields[0])
            next_state = parse_number(fields[2])
        except ValueError:
            raise TableFormatError(line_number, "Failed to parse number") from None

        if next_state < ACCEPT_CODE:
            raise TableFormatError(line_number, "Invalid state number")

        try:
            input_symbol = parse_symbol(fields[1])
            output_symbol = parse_symbol(fields[3])
        except ValueError:
            raise TableFormatError(line_number, "Field too long") from None

        if fields[4] not in DIRECTIONS:
            raise TableFormatError(line_number, "Failed to parse direction")

        tm.set_transition(current_state, input_symbol, decode_state(next_state),
                          output_symbol, DIRECTIONS[fields[4]])

    return tm


def load_table(path):
    with open(path, "r", encoding="utf-8") as f:
        return parse_table(f.read())


def format_symbol(symbol):
    if symbol == BLANK:
        return BLANK_CHAR
    # Only printable, non-space ASCII survives the whitespace-split format
    if not 33 <= symbol <= 126 or chr(symbol) == BLANK_CHAR:
        raise ValueError(f"Symbol {symbol} cannot be written in the table format")
    return chr(symbol)


def format_state(state):
    return str(state.value) if isinstance(state, Halt) else str(state)


def dump_table(table, comment=None):
    """Render a TransitionTable back to the text format (configured entries only)."""
    lines = [str(table.num_states)]
    if comment:
        lines.append(f"{COMMENT_PREFIX} {comment}")
    for state, symbol, transition in table.configured():
        lines.append(" ".join([
            str(state),
            format_symbol(symbol),
            format_state(transition.target),
            format_symbol(transition.output),
            "R" if transition.direction == Direction.RIGHT else "L",
        ]))
    return "\n".join(lines) + "\n"
