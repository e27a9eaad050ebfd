# app.py

import argparse
import os
import sys

from rich.console import Console
from rich.markup import escape

from config.config_loader import default_config, load_config
from logger.logger import JSONLogger, run_record
from simulator.transition_table import Halt
from tools.table_loader import TableFormatError, load_table
from tools.trace import ConsoleTrace, format_banner, outcome_message

console = Console(emoji=False)
error_console = Console(stderr=True, emoji=False)

USAGE = """\
Usage: utm [--silent] [--config PATH] [--jit] [--log] <filename> <inputString> <maxSteps>

Optional:
  --silent            Do not print trace of the computation
  --config PATH       Runtime configuration file (JSON)
  --jit               Run silent computations with the compiled kernel
  --log               Append a run record to the JSON lines log

Required:
  <filename>          File containing TM encoding
  <inputString>       Input to tape
  <maxSteps>          Max number of steps

NOTE: Use underscore '_' as blank when encoding a TM."""

RUNTIME_CONFIG_PATH = "config/runtime_config.json"

OUTCOME_STYLES = {Halt.ACCEPT: "green", Halt.REJECT: "red"}


class UsageError(Exception):
    pass


class UsageParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser():
    parser = UsageParser(prog="utm", add_help=False)
    parser.add_argument("--silent", action="store_true")
    parser.add_argument("--config")
    parser.add_argument("--jit", action="store_true")
    parser.add_argument("--log", action="store_true")
    parser.add_argument("filename")
    parser.add_argument("input_string")
    parser.add_argument("max_steps", type=non_negative_int)
    return parser


def print_usage():
    console.print(USAGE, markup=False, highlight=False, soft_wrap=True)


def print_message(message, width, style=None):
    console.print(format_banner(message, width), style=style, markup=False, highlight=False, soft_wrap=True)


def fail(message):
    error_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)
    sys.exit(1)


def split_positionals(argv):
    """Options come first; the last three arguments are always the positionals, even if they start with '-'."""
    if len(argv) < 3:
        return list(argv)
    return list(argv[:-3]) + ["--"] + list(argv[-3:])


def parse_args(argv):
    if argv and argv[0] in ("-h", "--help"):
        print_usage()
        sys.exit(0)
    try:
        return build_parser().parse_args(split_positionals(argv))
    except UsageError as e:
        print_usage()
        error_console.print(f"Error: {e}", markup=False, highlight=False)
        sys.exit(1)


def resolve_config(path):
    if path is None:
        if not os.path.exists(RUNTIME_CONFIG_PATH):
            return default_config()
        path = RUNTIME_CONFIG_PATH
    try:
        return load_config(path)
    except (FileNotFoundError, ValueError, TypeError) as e:
        # json.JSONDecodeError is a ValueError
        fail(f"Error: {e}")


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = resolve_config(args.config)

    trace_enabled = config["trace_enabled"] and not args.silent
    use_jit = args.jit or config["use_jit"]
    width = config["banner_width"]

    try:
        tm = load_table(args.filename)
    except FileNotFoundError:
        fail(f"Error: File not found: {args.filename}")
    except TableFormatError as e:
        fail(f"Error: {e}")

    tm.initialize_tape(args.input_string.encode("utf-8"))

    print_message(f'Started on input "{args.input_string}"', width)

    if trace_enabled:
        with ConsoleTrace(console) as trace:
            final_state = tm.run(args.max_steps, trace=trace)
    else:
        final_state = tm.run(args.max_steps, use_jit=use_jit)

    message = outcome_message(final_state, tm.steps, args.max_steps, args.input_string)
    print_message(message, width, style=OUTCOME_STYLES.get(final_state, "yellow"))

    if args.log or config["log_runs"]:
        logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
        entry = run_record(args.filename, args.input_string, final_state, tm.steps, args.max_steps)
        logger.log(entry)
        console.print(f"[dim]Run logged to {escape(logger.current_log)}[/dim]", highlight=False, soft_wrap=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
