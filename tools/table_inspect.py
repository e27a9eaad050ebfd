import argparse
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from simulator.transition_table import Direction, Halt
from tools.table_loader import TableFormatError, dump_table, load_table

console = Console(emoji=False)


def describe_symbol(symbol):
    if symbol == 0:
        return "_"
    char = chr(symbol)
    return char if char.isprintable() and not char.isspace() else f"0x{symbol:02x}"


def describe_state(state):
    if isinstance(state, Halt):
        return state.name
    return str(state)


def build_transition_table(tm, title=None):
    """Render the configured transitions of a machine as a rich Table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("State", justify="right")
    table.add_column("Read", justify="center")
    table.add_column("Next", justify="right")
    table.add_column("Write", justify="center")
    table.add_column("Move", justify="center")

    for state, symbol, transition in tm.table.configured():
        color = {Halt.ACCEPT: "green", Halt.REJECT: "red"}.get(transition.target, "cyan")
        table.add_row(
            str(state),
            Text(describe_symbol(symbol)),
            Text(describe_state(transition.target), style=color),
            Text(describe_symbol(transition.output)),
            "R" if transition.direction == Direction.RIGHT else "L",
        )
    return table


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Transition Table Inspector")
    parser.add_argument("filename", help="File containing TM encoding")
    parser.add_argument("--normalize", action="store_true",
                        help="Print the table back in the text format instead of a summary")
    args = parser.parse_args(argv)

    try:
        tm = load_table(args.filename)
    except FileNotFoundError:
        console.print(f"Error: File not found: {args.filename}", style="red", markup=False)
        return 1
    except TableFormatError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        return 1

    if args.normalize:
        console.print(dump_table(tm.table).rstrip("\n"), markup=False, highlight=False, soft_wrap=True)
        return 0

    configured = sum(1 for _ in tm.table.configured())
    console.print(f"[INFO] {args.filename}", markup=False)
    console.print(f"  States: {tm.num_states}")
    console.print(f"  Configured transitions: {configured}")
    console.print(build_transition_table(tm, title="Transition Table"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
