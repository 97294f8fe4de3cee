"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from workspace_aggregator.exceptions import (
    AggregationError,
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    FilesystemError,
    InvalidConfigError,
    InvalidPathError,
    OutputError,
    ProcessingError,
    WorkspaceAggregatorError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error,parent",
        [
            (InvalidPathError(Path("x"), "missing"), ConfigurationError),
            (InvalidConfigError("workers", 0, "too small"), ConfigurationError),
            (FilesystemError(Path("x"), "denied"), AnalysisError),
            (FileAccessError(Path("x"), "denied"), AnalysisError),
            (ProcessingError(Path("x"), "boom"), AnalysisError),
            (AggregationError("twice"), AnalysisError),
            (OutputError("meta", Path("m.json"), "disk full"), WorkspaceAggregatorError),
        ],
    )
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, WorkspaceAggregatorError)


class TestMessages:
    def test_details_in_str(self):
        error = FileAccessError(Path("src/a.py"), "Permission denied")
        assert str(error) == "Cannot access file: src/a.py (filepath=src/a.py, reason=Permission denied)"
        assert error.reason == "Permission denied"

    def test_plain_message(self):
        assert str(WorkspaceAggregatorError("plain")) == "plain"

    def test_invalid_config_attributes(self):
        error = InvalidConfigError("chunk_size", 0, "must be at least 1")
        assert (error.key, error.value, error.reason) == ("chunk_size", 0, "must be at least 1")
        assert error.details["value"] == "0"

    def test_output_error_attributes(self):
        error = OutputError("tree", Path("out/tree.txt"), "read-only")
        assert error.output == "tree"
        assert "Failed to write tree output" in str(error)
