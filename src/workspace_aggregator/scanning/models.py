"""Data models for the scanning layer."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePosixPath

from ..metrics.models import FileMetrics


@dataclass(frozen=True)
class FileRecord:
    """Everything recorded about one successfully measured file.

    ``path`` is relative to the scan root, with forward slashes.
    """

    path: str
    size: int
    last_modified: float
    total_lines: int
    code_lines: int
    comment_lines: int
    blank_lines: int
    max_line_length: int
    average_line_length: float
    cyclomatic_complexity: float
    comment_ratio: float
    language: str

    @classmethod
    def from_metrics(
        cls, path: str, size: int, last_modified: float, metrics: FileMetrics
    ) -> "FileRecord":
        return cls(
            path=path,
            size=size,
            last_modified=last_modified,
            total_lines=metrics.total_lines,
            code_lines=metrics.code_lines,
            comment_lines=metrics.comment_lines,
            blank_lines=metrics.blank_lines,
            max_line_length=metrics.max_line_length,
            average_line_length=metrics.average_line_length,
            cyclomatic_complexity=metrics.cyclomatic_complexity,
            comment_ratio=metrics.comment_ratio,
            language=metrics.language,
        )

    @property
    def extension(self) -> str:
        """Lowercase extension without the dot ('' when there is none)."""
        suffix = PurePosixPath(self.path).suffix
        return suffix[1:].lower() if suffix else ""

    @property
    def modified_at(self) -> datetime:
        return datetime.fromtimestamp(self.last_modified)


@dataclass(frozen=True)
class ScanTotals:
    """Result of the counting pass, used to size progress reporting."""

    files: int = 0
    size: int = 0
