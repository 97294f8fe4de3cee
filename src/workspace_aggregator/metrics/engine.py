"""Per-file metric computation."""

from pathlib import PurePath

from .complexity import estimate_cyclomatic
from .language import detect_language
from .lines import count_lines, split_lines
from .models import FileMetrics


class MetricsEngine:
    """Computes FileMetrics from a path and its text.

    ``analyze`` is a pure function of its arguments; one engine can be
    shared between worker threads.
    """

    def analyze(self, path: PurePath, content: str) -> FileMetrics:
        lines = split_lines(content)
        counts = count_lines(lines)

        return FileMetrics(
            total_lines=counts.total,
            code_lines=counts.code,
            comment_lines=counts.comment,
            blank_lines=counts.blank,
            max_line_length=counts.max_length,
            average_line_length=counts.average_length,
            cyclomatic_complexity=estimate_cyclomatic(lines),
            comment_ratio=counts.comment / counts.total if counts.total else 0.0,
            language=detect_language(path, content),
        )
