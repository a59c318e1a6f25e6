"""Observability — JSON formatter output."""

import json
import logging
from datetime import datetime

from jobhorizon.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "jobhorizon.test", logging.WARNING, __file__, 1, "job %s", ("42",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_renders_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "jobhorizon.test"
    assert log["message"] == "job 42"
    assert "timestamp" in log


def test_json_formatter_stamps_record_creation_time():
    record = _record()
    record.created = 0.0
    log = json.loads(JSONFormatter().format(record))
    assert datetime.fromisoformat(log["timestamp"]).timestamp() == 0.0


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="FORBIDDEN", path="/job/42", unrelated="x"),
    ))
    assert log["error_code"] == "FORBIDDEN"
    assert log["path"] == "/job/42"
    assert "unrelated" not in log


def test_json_formatter_carries_request_context():
    log = json.loads(JSONFormatter().format(
        _record(method="GET", path="/jobs", status_code=200, duration_ms=1.5),
    ))
    assert (log["method"], log["path"], log["status_code"], log["duration_ms"]) == (
        "GET", "/jobs", 200, 1.5,
    )
