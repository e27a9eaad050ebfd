import json
import os
from datetime import datetime, timezone

from simulator.transition_table import Halt


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="utm_runs_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def log(self, entry: dict):
        """Append a single run record."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_batch(self, entries: list):
        """Append several run records at once."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")


def outcome_name(state):
    if state is Halt.ACCEPT:
        return "accept"
    if state is Halt.REJECT:
        return "reject"
    return "timeout"


def run_record(machine_file, input_string, final_state, steps, max_steps):
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "machine_file": str(machine_file),
        "input": input_string,
        "outcome": outcome_name(final_state),
        "final_state": final_state.name if isinstance(final_state, Halt) else final_state,
        "steps": steps,
        "max_steps": max_steps,
    }
