"""Machine-readable JSON metadata."""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING, Any

from .. import __version__
from .base import BaseRenderer

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig

TOP_LARGEST = 10


class MetaRenderer(BaseRenderer):
    """Renders ``meta.json``."""

    name = "meta"

    def build(self, stats: AggregateStatistics, config: ScanConfig) -> dict[str, Any]:
        complexity = stats.complexity_metrics
        return {
            "version": __version__,
            "timestamp": datetime.now().astimezone().isoformat(),
            "project": {
                "path": str(config.root),
                "files": {
                    "total": stats.total_files,
                    "size_bytes": stats.total_size,
                    "lines": stats.total_lines,
                },
            },
            "languages": {
                language: {
                    "files": agg.files,
                    "lines": agg.total_lines,
                    "code_lines": agg.code_lines,
                    "comment_lines": agg.comment_lines,
                    "blank_lines": agg.blank_lines,
                    "complexity": {
                        "cyclomatic": agg.complexity,
                        "comment_ratio": agg.comment_lines / agg.total_lines
                        if agg.total_lines
                        else 0.0,
                    },
                }
                for language, agg in sorted(stats.language_statistics.items())
            },
            "complexity_metrics": {
                "average": complexity.mean,
                "maximum": complexity.max,
                "minimum": complexity.min,
                "standard_deviation": complexity.std_dev,
            },
            "file_sizes": {
                "largest": [
                    {"path": path, "size_bytes": size}
                    for path, size in stats.largest_files[:TOP_LARGEST]
                ],
            },
            "errors": {
                "access": len(stats.access_errors),
                "processing": len(stats.processing_errors),
                "output": len(stats.output_errors),
                "total": stats.error_count,
            },
            "configuration": {
                "exclude_extensions": sorted(config.exclude_extensions),
                "exclude_directories": sorted(config.exclude_directories),
                "exclude_patterns": sorted(config.exclude_patterns),
                "respect_gitignore": config.respect_gitignore,
                "generated_types": [t.value for t in config.outputs],
            },
        }

    def render(self, stats: AggregateStatistics, config: ScanConfig) -> str:
        return json.dumps(self.build(stats, config), indent=2) + "\n"
