"""Tests for FileRecord."""

from datetime import datetime

import pytest

from workspace_aggregator.metrics import FileMetrics
from workspace_aggregator.scanning import FileRecord


def test_from_metrics_copies_every_field():
    metrics = FileMetrics(
        total_lines=3,
        code_lines=1,
        comment_lines=1,
        blank_lines=1,
        max_line_length=9,
        average_line_length=4.0,
        cyclomatic_complexity=2.0,
        comment_ratio=1 / 3,
        language="Python",
    )
    record = FileRecord.from_metrics("pkg/mod.py", 42, 1_700_000_000.0, metrics)

    assert record.path == "pkg/mod.py"
    assert record.size == 42
    assert record.total_lines == record.code_lines + record.comment_lines + record.blank_lines
    assert record.cyclomatic_complexity == 2.0
    assert record.language == "Python"


def test_extension_and_modified_at(make_record):
    record = make_record(path="src/Main.RS", last_modified=1_700_000_000.0)
    assert record.extension == "rs"
    assert record.modified_at == datetime.fromtimestamp(1_700_000_000.0)
    assert make_record(path="Makefile").extension == ""


def test_records_are_immutable(make_record):
    record = make_record()
    with pytest.raises(AttributeError):
        record.size = 1
