"""Data models for the metrics layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileMetrics:
    """Measurements derived from one file's text alone."""

    total_lines: int
    code_lines: int
    comment_lines: int
    blank_lines: int
    max_line_length: int
    average_line_length: float
    cyclomatic_complexity: float
    comment_ratio: float
    language: str
