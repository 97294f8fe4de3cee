"""Directory traversal and per-file measurement."""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..exceptions import FileAccessError, FilesystemError, ProcessingError
from ..filters import PathFilterChain
from ..logging_config import get_logger
from ..metrics import MetricsEngine
from .models import FileRecord, ScanTotals

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig

logger = get_logger(__name__)


def read_source(path: Path) -> str:
    """Read a file as strict UTF-8 text, leaving line endings untouched."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


@dataclass(frozen=True)
class ScanEntry:
    """A file accepted by the filters: absolute path plus root-relative key."""

    path: Path
    relative: str


@dataclass
class _Outcome:
    entry: ScanEntry
    record: Optional[FileRecord] = None
    error: Optional[Exception] = None
    elapsed: float = 0.0


class FileScanner:
    """
    Walks the tree under ``config.root`` and measures accepted files.

    ``count`` and ``scan`` are driven by the same ``walk`` generator, so
    both passes see the same files in the same order.
    """

    def __init__(
        self,
        config: ScanConfig,
        filters: Optional[PathFilterChain] = None,
        engine: Optional[MetricsEngine] = None,
    ):
        self.config = config
        self.root = config.root
        self.filters = filters or PathFilterChain.from_config(config)
        self.engine = engine or MetricsEngine()
        logger.debug(f"Initialized {self.__class__.__name__} for {self.root}")

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def walk(self) -> Iterator[ScanEntry]:
        """
        Yield accepted files depth-first, entries in name order.

        Raises:
            FilesystemError: If a directory cannot be listed
        """
        visited: set[tuple[int, int]] = set()
        yield from self._walk_dir(self.root, visited)

    def _walk_dir(self, directory: Path, visited: set[tuple[int, int]]) -> Iterator[ScanEntry]:
        try:
            st = directory.stat()
        except OSError as e:
            raise FilesystemError(directory, str(e))

        # Symlinked directories may point back up the tree
        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug(f"Skipped (already visited): {directory}")
            return
        visited.add(key)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise FilesystemError(directory, str(e))

        for entry in entries:
            path = Path(entry.path)
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
            except OSError as e:
                logger.warning(f"Cannot stat {path}: {e}")
                continue

            reason = self.filters.skip_reason(path, is_dir=is_dir)
            if reason is not None:
                logger.debug(f"Skipped ({reason}): {path}")
                continue

            if is_dir:
                yield from self._walk_dir(path, visited)
                continue

            if not is_file:
                continue

            accepted, why = self.filters.should_process_file(path)
            if not accepted:
                logger.debug(f"Skipped ({why}): {path}")
                continue

            yield ScanEntry(path, self.filters.relative(path).as_posix())

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def count(self) -> ScanTotals:
        """Counting pass: number and total size of the files ``scan`` will visit."""
        files = 0
        size = 0
        for entry in self.walk():
            files += 1
            try:
                size += entry.path.stat().st_size
            except OSError as e:
                logger.debug(f"Cannot stat {entry.path}: {e}")
        logger.info(f"Found {files} files ({size} bytes) to process")
        return ScanTotals(files=files, size=size)

    def scan(
        self,
        stats: AggregateStatistics,
        on_file: Optional[Callable[[str], None]] = None,
    ) -> AggregateStatistics:
        """
        Processing pass: measure every accepted file into ``stats``.

        Unreadable or unmeasurable files are recorded as errors and
        skipped. Records are added in walk order even when a worker pool
        computes the metrics.

        Args:
            stats: Statistics to fill
            on_file: Called with the relative path after each file

        Returns:
            ``stats``
        """
        if self.config.workers > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                outcomes = executor.map(self._measure, self.walk())
                for outcome in outcomes:
                    self._apply(stats, outcome, on_file)
        else:
            for entry in self.walk():
                self._apply(stats, self._measure(entry), on_file)

        logger.info(
            f"Scan complete: {stats.total_files} analyzed, "
            f"{len(stats.access_errors)} unreadable, {len(stats.processing_errors)} failed"
        )
        return stats

    def _measure(self, entry: ScanEntry) -> _Outcome:
        started = time.perf_counter()
        try:
            record = self.measure_file(entry)
        except (FileAccessError, ProcessingError) as e:
            return _Outcome(entry, error=e, elapsed=time.perf_counter() - started)
        return _Outcome(entry, record=record, elapsed=time.perf_counter() - started)

    def _apply(
        self,
        stats: AggregateStatistics,
        outcome: _Outcome,
        on_file: Optional[Callable[[str], None]],
    ) -> None:
        rel = outcome.entry.relative
        if isinstance(outcome.error, FileAccessError):
            logger.warning(f"Access error for {rel}: {outcome.error.reason}")
            stats.record_access_error(rel, outcome.error.reason)
        elif isinstance(outcome.error, ProcessingError):
            logger.error(f"Processing error for {rel}: {outcome.error.reason}")
            stats.record_processing_error(rel, outcome.error.reason)
        elif outcome.record is not None:
            stats.record(outcome.record)
            stats.record_processing_time(rel, outcome.elapsed)
            logger.debug(f"Analyzed: {rel}")

        if on_file is not None:
            on_file(rel)

    def measure_file(self, entry: ScanEntry) -> FileRecord:
        """
        Read one file and compute its record.

        Raises:
            FileAccessError: If the file cannot be read as UTF-8 text
            ProcessingError: If metrics or file metadata cannot be obtained
        """
        try:
            content = read_source(entry.path)
        except UnicodeDecodeError as e:
            raise FileAccessError(entry.path, f"not valid UTF-8 ({e.reason})")
        except OSError as e:
            raise FileAccessError(entry.path, e.strerror or str(e))

        try:
            metrics = self.engine.analyze(entry.path, content)
            st = entry.path.stat()
        except (OSError, ValueError, ArithmeticError) as e:
            raise ProcessingError(entry.path, str(e))

        return FileRecord.from_metrics(entry.relative, st.st_size, st.st_mtime, metrics)
