"""Tests for JSONL logging."""

import json
import tempfile
from pathlib import Path

import pytest

from tally.logging import JSONLLogger, LogRecord


@pytest.fixture
def temp_log_dir():
    """Create a temporary directory for logs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def logger(temp_log_dir: Path) -> JSONLLogger:
    return JSONLLogger(log_dir=temp_log_dir)


def test_log_record_to_dict():
    """Test LogRecord excludes None values."""
    record = LogRecord(timestamp="2024-01-01T00:00:00Z", event="test")
    data = record.to_dict()

    assert "timestamp" in data
    assert "event" in data
    assert "uid" not in data  # None excluded
    assert "extra" not in data  # Empty dict excluded


def test_log_creates_file(logger: JSONLLogger):
    """Test that logging creates the log file."""
    logger.log("test_event")

    assert logger.log_path.exists()


def test_log_writes_jsonl(logger: JSONLLogger):
    """Test that logs are written in JSONL format."""
    logger.log("event1", uid="u1")
    logger.log("event2", uid="u2")

    with open(logger.log_path) as f:
        lines = f.readlines()

    assert len(lines) == 2
    assert json.loads(lines[0])["uid"] == "u1"
    assert json.loads(lines[1])["event"] == "event2"


def test_log_interaction(logger: JSONLLogger):
    """Test logging a handled message."""
    logger.log_interaction(
        "u1",
        "activity-switch",
        interface="telegram",
        activity="sleep",
        slot=3,
        duration_ms=12.5,
    )

    with open(logger.log_path) as f:
        record = json.loads(f.readline())

    assert record["event"] == "interaction"
    assert record["uid"] == "u1"
    assert record["activity"] == "sleep"
    assert record["slot"] == 3
    assert record["duration_ms"] == 12.5


def test_log_error(logger: JSONLLogger):
    """Test logging a failure with its stage."""
    logger.log_error("store down", chat_id="4242", stage="append")

    with open(logger.log_path) as f:
        record = json.loads(f.readline())

    assert record["event"] == "error"
    assert record["error"] == "store down"
    assert record["extra"]["stage"] == "append"


def test_rotation(temp_log_dir: Path):
    """Test log rotation when max size is exceeded."""
    logger = JSONLLogger(log_dir=temp_log_dir, max_size_mb=0.001)  # ~1KB

    # Write enough to trigger rotation
    for i in range(100):
        logger.log(f"event_{i}", data="x" * 100)

    # Should have rotated files
    log_files = list(temp_log_dir.glob("logs*.jsonl"))
    assert len(log_files) >= 2


def test_extra_fields(logger: JSONLLogger):
    """Test that extra fields are included."""
    logger.log("custom", custom_field="value", another=123)

    with open(logger.log_path) as f:
        record = json.loads(f.readline())

    assert record["extra"]["custom_field"] == "value"
    assert record["extra"]["another"] == 123
