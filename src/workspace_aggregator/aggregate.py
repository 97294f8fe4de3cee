"""Run-wide statistics accumulated during the scan.

One AggregateStatistics value is created per run, filled by the scanner
through ``record`` and the ``record_*_error`` methods, finalized once,
and then handed read-only to every renderer.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .exceptions import AggregationError
from .scanning.models import FileRecord

# Size of the largest-files list.
TOP_K = 20


@dataclass
class LanguageAggregate:
    """Running totals for one detected language."""

    files: int = 0
    total_lines: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    blank_lines: int = 0
    complexity_total: float = 0.0

    def add(self, record: FileRecord) -> None:
        self.files += 1
        self.total_lines += record.total_lines
        self.code_lines += record.code_lines
        self.comment_lines += record.comment_lines
        self.blank_lines += record.blank_lines
        self.complexity_total += record.cyclomatic_complexity

    @property
    def complexity(self) -> float:
        """Average cyclomatic complexity over the language's files."""
        return self.complexity_total / self.files if self.files else 0.0


@dataclass(frozen=True)
class ComplexityMetrics:
    """Distribution of cyclomatic complexity across all recorded files."""

    mean: float = 0.0
    max: float = 0.0
    min: float = 0.0
    std_dev: float = 0.0


@dataclass(frozen=True)
class ErrorRecord:
    """A per-file or per-output failure. ``target`` is a path or an output name."""

    target: str
    message: str


@dataclass
class AggregateStatistics:
    file_statistics: dict[str, FileRecord] = field(default_factory=dict)
    language_statistics: dict[str, LanguageAggregate] = field(default_factory=dict)
    extension_counts: Counter = field(default_factory=Counter)
    total_size: int = 0
    total_lines: int = 0
    largest_files: list[tuple[str, int]] = field(default_factory=list)

    access_errors: list[ErrorRecord] = field(default_factory=list)
    processing_errors: list[ErrorRecord] = field(default_factory=list)
    output_errors: list[ErrorRecord] = field(default_factory=list)

    processing_times: dict[str, float] = field(default_factory=dict)
    scan_duration: float = 0.0

    _complexity: Optional[ComplexityMetrics] = field(default=None, init=False, repr=False)

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def record(self, record: FileRecord) -> None:
        """
        Add one measured file.

        Raises:
            AggregationError: If the path was already recorded or the
                statistics are finalized
        """
        if self._complexity is not None:
            raise AggregationError(f"cannot record {record.path} after finalize()")
        if record.path in self.file_statistics:
            raise AggregationError(f"duplicate path: {record.path}")

        self.file_statistics[record.path] = record
        self.extension_counts[record.extension] += 1
        self.total_size += record.size
        self.total_lines += record.total_lines

        # Stable sort keeps encounter order among equal sizes
        self.largest_files.append((record.path, record.size))
        self.largest_files.sort(key=lambda item: item[1], reverse=True)
        del self.largest_files[TOP_K:]

        self.language_statistics.setdefault(record.language, LanguageAggregate()).add(record)

    def record_access_error(self, path: str, message: str) -> None:
        self.access_errors.append(ErrorRecord(path, message))

    def record_processing_error(self, path: str, message: str) -> None:
        self.processing_errors.append(ErrorRecord(path, message))

    def record_output_error(self, output: str, message: str) -> None:
        self.output_errors.append(ErrorRecord(output, message))

    def record_processing_time(self, path: str, seconds: float) -> None:
        self.processing_times[path] = seconds

    def finalize(self, scan_duration: Optional[float] = None) -> ComplexityMetrics:
        """
        Compute the complexity distribution. Runs exactly once.

        Uses the population standard deviation. An empty scan yields all
        zeros.
        """
        if self._complexity is not None:
            raise AggregationError("finalize() called twice")

        if scan_duration is not None:
            self.scan_duration = scan_duration

        values = np.array(
            [r.cyclomatic_complexity for r in self.file_statistics.values()], dtype=float
        )
        if values.size == 0:
            self._complexity = ComplexityMetrics()
        else:
            self._complexity = ComplexityMetrics(
                mean=float(np.mean(values)),
                max=float(np.max(values)),
                min=float(np.min(values)),
                std_dev=float(np.std(values)),
            )
        return self._complexity

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_finalized(self) -> bool:
        return self._complexity is not None

    @property
    def complexity_metrics(self) -> ComplexityMetrics:
        if self._complexity is None:
            raise AggregationError("complexity metrics read before finalize()")
        return self._complexity

    @property
    def total_files(self) -> int:
        return len(self.file_statistics)

    @property
    def error_count(self) -> int:
        return len(self.access_errors) + len(self.processing_errors) + len(self.output_errors)

    @property
    def errors(self) -> list[ErrorRecord]:
        return self.access_errors + self.processing_errors + self.output_errors

    def records(self) -> list[FileRecord]:
        """Recorded files in recording order."""
        return list(self.file_statistics.values())

    def top_by_complexity(self, n: int) -> list[FileRecord]:
        ranked = sorted(
            self.file_statistics.values(), key=lambda r: (-r.cyclomatic_complexity, r.path)
        )
        return ranked[:n]

    def largest(self, n: int) -> list[FileRecord]:
        return [self.file_statistics[path] for path, _ in self.largest_files[:n]]

    def most_recent(self, n: int) -> list[FileRecord]:
        ranked = sorted(self.file_statistics.values(), key=lambda r: (-r.last_modified, r.path))
        return ranked[:n]

    def languages_by_lines(self) -> list[tuple[str, LanguageAggregate]]:
        """Languages ordered by total lines, largest first (ties by name)."""
        return sorted(
            self.language_statistics.items(), key=lambda item: (-item[1].total_lines, item[0])
        )
