import json
import os
from datetime import datetime, timezone

from logger.logger import JSONLogger, outcome_name, run_record
from simulator.transition_table import Halt


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_creates_directory_and_dated_file(tmp_path):
    out_dir = tmp_path / "logs" / "nested"
    logger = JSONLogger(str(out_dir), "runs_")
    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    assert out_dir.is_dir()
    assert logger.current_log == os.path.join(str(out_dir), f"runs_{today}.jsonl")


def test_log_appends(tmp_path):
    logger = JSONLogger(str(tmp_path), "runs_")
    logger.log({"a": 1})
    logger.log_batch([{"b": 2}, {"c": 3}])
    assert read_lines(logger.current_log) == [{"a": 1}, {"b": 2}, {"c": 3}]


def test_outcome_names():
    assert outcome_name(Halt.ACCEPT) == "accept"
    assert outcome_name(Halt.REJECT) == "reject"
    assert outcome_name(3) == "timeout"


def test_run_record():
    entry = run_record("machines/unary_scan.tm", "11", Halt.ACCEPT, 3, 10)
    assert entry["machine_file"] == "machines/unary_scan.tm"
    assert entry["input"] == "11"
    assert entry["outcome"] == "accept"
    assert entry["final_state"] == "ACCEPT"
    assert entry["steps"] == 3
    assert entry["max_steps"] == 10
    datetime.fromisoformat(entry["timestamp"])
    json.dumps(entry)


def test_run_record_timeout_keeps_state_number():
    entry = run_record("m.tm", "ab", 2, 5, 5)
    assert entry["outcome"] == "timeout"
    assert entry["final_state"] == 2
