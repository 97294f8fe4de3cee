"""Scan-time exceptions: traversal, file access, metric computation."""

from pathlib import Path

from .base import WorkspaceAggregatorError


class AnalysisError(WorkspaceAggregatorError):
    """Base class for errors raised while scanning and measuring files."""
    pass


class FilesystemError(AnalysisError):
    """Raised when a directory cannot be listed. Aborts the run."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read directory: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class FileAccessError(AnalysisError):
    """Raised when a file cannot be read as text."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ProcessingError(AnalysisError):
    """Raised when metrics cannot be computed for a readable file."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Failed to process file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class AggregationError(AnalysisError):
    """Raised when the statistics lifecycle is violated."""

    def __init__(self, reason: str):
        super().__init__(f"Aggregation error: {reason}", details={"reason": reason})
        self.reason = reason
