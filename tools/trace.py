from rich.console import Console

from simulator.transition_table import BLANK, Halt

STEP_WIDTH = 5
DEFAULT_BANNER_WIDTH = 60
UNPRINTABLE = "?"

HALT_LABELS = {Halt.ACCEPT: "A", Halt.REJECT: "R"}


def format_state_label(state):
    return HALT_LABELS[state] if isinstance(state, Halt) else str(state)


def format_cell(symbol):
    if symbol == BLANK:
        return "   "
    char = chr(symbol)
    # Control bytes would break the line layout
    return f" {char if char.isprintable() else UNPRINTABLE} "


def format_configuration(config):
    """One trace line: step number, then a 3-char slot per tape cell with the head cell shown as [state]."""
    parts = [f"{config.step:{STEP_WIDTH}d} | "]
    for pos, symbol in enumerate(config.cells):
        if pos == config.head:
            parts.append(f"[{format_state_label(config.state)}]")
        else:
            parts.append(format_cell(symbol))
    return "".join(parts)


def format_header():
    return [
        f"{'Step':>{STEP_WIDTH}} | Configuration",
        "-" * (STEP_WIDTH + 1) + "+" + "-" * 53,
    ]


def format_banner(message, width=DEFAULT_BANNER_WIDTH):
    pre = "--- "
    post = " "
    return pre + message + post + "-" * max(0, width - len(pre) - len(message) - len(post))


def plural_steps(count):
    return f"{count} step" if count == 1 else f"{count} steps"


def outcome_message(state, steps, max_steps, input_string):
    if state is Halt.ACCEPT:
        return f'Accepted input "{input_string}" in {plural_steps(steps)}'
    if state is Halt.REJECT:
        return f'Rejected input "{input_string}" in {plural_steps(steps)}'
    return f"Did not finish within {max_steps} steps. Computation aborted"


class ConsoleTrace:
    """Trace sink that prints each configuration through a rich Console."""

    def __init__(self, console=None):
        self.console = console or Console(emoji=False)
        self.lines = 0

    def __call__(self, config):
        if self.lines == 0:
            self.console.print()
            for line in format_header():
                self._print(line)
        self._print(format_configuration(config))
        self.lines += 1

    def _print(self, line):
        self.console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def close(self):
        if self.lines:
            self.console.print()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
