"""Processed-files list grouped by extension."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import TYPE_CHECKING

from .base import TIME_FORMAT, BaseRenderer

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig


class FilesListRenderer(BaseRenderer):
    """Renders ``files.txt``."""

    name = "files"

    def render(self, stats: AggregateStatistics, config: ScanConfig) -> str:
        groups: dict[str, list[str]] = defaultdict(list)
        for record in stats.records():
            groups[record.extension or "unknown"].append(record.path)

        lines = [
            "# Processed Files List",
            f"# Generated: {datetime.now().strftime(TIME_FORMAT)}",
            f"# Base Path: {config.root}",
            f"# Total Files: {stats.total_files}",
            f"# Total Size: {stats.total_size} bytes",
        ]

        for ext in sorted(groups):
            lines += ["", f"## {ext.upper()} files"]
            lines += sorted(groups[ext])

        lines += ["", "## Summary"]
        for ext in sorted(groups):
            lines.append(f"{ext}: {len(groups[ext])} files")

        return "\n".join(lines) + "\n"
