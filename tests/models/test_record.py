"""
Unit tests for LogRecord and Severity in spotlog.models.record.
"""

import re
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from spotlog.models import NO_FAULT, Severity, LogRecord, format_fault, timestamp_now


RFC3339 = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(Z|[+-]\d{2}:\d{2})$")


def make_record(**fields) -> LogRecord:
    """Helper function to build LogRecord instances for tests."""
    base = {"file": "/srv/app/main.py", "line": 42, "timestamp": "2026-10-19T12:00:00+00:00"}
    base.update(fields)
    return LogRecord(**base)


# ---- Severity --------------------------------------------------------------

@pytest.mark.parametrize("label, expected", [
    ("success", Severity.SUCCESS),
    ("SUCCESS", Severity.SUCCESS),
    ("Success", Severity.SUCCESS),
    (" info ", Severity.INFO),
    ("Warning", Severity.WARNING),
    ("ERROR", Severity.ERROR),
    ("fatal", Severity.FATAL),
    ("PaNiC", Severity.PANIC),
])
def test_classify_is_case_insensitive(label, expected):
    assert Severity.classify(label) is expected


@pytest.mark.parametrize("label", ["", None, "verbose", "default", "critical"])
def test_classify_unknown_falls_back_to_default(label):
    assert Severity.classify(label) is Severity.DEFAULT


# ---- Record construction ---------------------------------------------------

def test_record_normalizes_status_and_message():
    record = make_record(status="SUCCESS", message="Service Is Up")
    assert record.status == "success"
    assert record.message == "service is up"
    assert record.severity is Severity.SUCCESS


def test_record_keeps_fault_text_verbatim():
    record = make_record(fault="Disk FULL")
    assert record.fault == "Disk FULL"


def test_record_is_immutable():
    record = make_record()
    with pytest.raises(FrozenInstanceError):
        record.message = "changed"


@pytest.mark.parametrize("fields", [
    {"file": ""},
    {"line": -1},
    {"line": "42"},
    {"line": True},
    {"timestamp": ""},
])
def test_record_rejects_missing_mandatory_fields(fields):
    with pytest.raises(ValueError):
        make_record(**fields)


def test_create_stamps_rfc3339_timestamp():
    record = LogRecord.create("app.py", 7)
    assert RFC3339.match(record.timestamp)


def test_create_uses_injected_clock():
    clock = lambda: datetime(2026, 10, 19, 12, 30, 5, tzinfo=timezone.utc)
    record = LogRecord.create("app.py", 7, clock=clock)
    assert record.timestamp == timestamp_now(clock)
    parsed = datetime.fromisoformat(record.timestamp)
    assert parsed == clock()


def test_each_create_builds_a_new_record():
    first = LogRecord.create("app.py", 1, message="one")
    second = LogRecord.create("app.py", 2, message="two")
    assert first is not second
    assert first.message == "one"
    assert second.message == "two"


# ---- Field helpers ---------------------------------------------------------

def test_populated_fields_tracks_non_empty_optionals():
    assert make_record().populated_fields() == frozenset()
    assert make_record(status="info", fault="x").populated_fields() == {"status", "fault"}


def test_to_dict_omits_empty_optional_fields():
    data = make_record(message="hello").to_dict()
    assert data == {
        "file": "/srv/app/main.py",
        "line": 42,
        "timestamp": "2026-10-19T12:00:00+00:00",
        "message": "hello",
    }


def test_to_dict_full_record_field_order():
    data = make_record(status="info", message="m", fault="f").to_dict()
    assert list(data) == ["file", "line", "timestamp", "status", "message", "fault"]


def test_format_fault():
    assert format_fault(None) == NO_FAULT == "<nil>"
    assert format_fault(RuntimeError("disk full")) == "disk full"
