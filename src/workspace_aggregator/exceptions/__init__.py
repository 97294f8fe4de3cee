"""Exception hierarchy for Workspace Aggregator."""

from .analysis import (
    AggregationError,
    AnalysisError,
    FileAccessError,
    FilesystemError,
    ProcessingError,
)
from .base import WorkspaceAggregatorError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .output import OutputError

__all__ = [
    "WorkspaceAggregatorError",
    "AnalysisError",
    "FilesystemError",
    "FileAccessError",
    "ProcessingError",
    "AggregationError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "OutputError",
]
