"""One aggregation run: count, scan, finalize, render."""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..aggregate import AggregateStatistics
from ..config import ScanConfig
from ..exceptions import OutputError
from ..logging_config import get_logger
from ..renderers import get_renderer
from ..scanning import FileScanner, ScanTotals
from .progress import ProgressReporter, SilentReporter

logger = get_logger(__name__)


@dataclass
class RunResult:
    """Outcome of a run: the finalized statistics and the artifacts written."""

    stats: AggregateStatistics
    totals: ScanTotals
    written: list[Path] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return self.stats.error_count


def run(
    config: ScanConfig,
    progress: Optional[Union[ProgressReporter, SilentReporter]] = None,
) -> RunResult:
    """
    Scan ``config.root`` and write every requested artifact.

    A failing artifact is recorded as an output error and the remaining
    artifacts are still written.

    Raises:
        FilesystemError: If a directory of the tree cannot be listed
    """
    reporter = progress or SilentReporter()
    started = time.perf_counter()

    scanner = FileScanner(config)
    totals = scanner.count()

    stats = AggregateStatistics()
    reporter.run(totals.files, lambda advance: scanner.scan(stats, on_file=advance))
    stats.finalize(scan_duration=time.perf_counter() - started)

    result = RunResult(stats=stats, totals=totals)
    for output_type in config.outputs:
        path = config.output_path(output_type)
        logger.info(f"Creating {output_type.value} output: {path}")
        try:
            renderer = get_renderer(output_type, filters=scanner.filters)
            result.written.append(renderer.write(stats, config, path))
        except OutputError as e:
            logger.error(str(e))
            stats.record_output_error(output_type.value, e.reason)
        except Exception as e:
            logger.error(f"Unexpected error writing {output_type.value} output: {e}")
            stats.record_output_error(output_type.value, str(e))

    return result
