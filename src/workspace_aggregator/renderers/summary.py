"""Summary dashboard: key metrics, distributions and recommendations."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from ._format import KB, MB
from .base import TIME_FORMAT, BaseRenderer
from .charts import bar, percent

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig

WIDTH = 80
RULE = "-" * 40
TOP_N = 5

# (label, inclusive upper bound); the last bucket is open-ended
COMPLEXITY_BUCKETS = (
    ("Low (1-5)", 5.0),
    ("Moderate (6-10)", 10.0),
    ("High (11-20)", 20.0),
    ("Very High (>20)", float("inf")),
)

REFACTOR_COMPLEXITY = 20.0
LOW_COMMENT_RATIO = 0.10
LARGE_FILE_BYTES = 100 * KB


def complexity_bucket(value: float) -> str:
    for label, upper in COMPLEXITY_BUCKETS:
        if value <= upper:
            return label
    return COMPLEXITY_BUCKETS[-1][0]


def recommendations(stats: AggregateStatistics) -> list[str]:
    """Rule-based improvement hints; empty when nothing stands out."""
    records = stats.file_statistics.values()
    complex_files = sum(1 for r in records if r.cyclomatic_complexity > REFACTOR_COMPLEXITY)
    undocumented = sum(1 for r in records if r.comment_ratio < LOW_COMMENT_RATIO)
    large_files = sum(1 for r in records if r.size > LARGE_FILE_BYTES)

    hints = []
    if complex_files:
        hints.append(f"Consider refactoring {complex_files} files with high complexity")
    if undocumented:
        hints.append(f"Add documentation to {undocumented} files with low comment coverage")
    if large_files:
        hints.append(f"Consider splitting {large_files} large files (>100KB)")
    return hints


class SummaryRenderer(BaseRenderer):
    """Renders ``summary.txt`` as plain text."""

    name = "summary"

    def render(self, stats: AggregateStatistics, config: ScanConfig) -> str:
        lines: list[str] = []
        separator = "=" * WIDTH
        lines += [
            separator,
            "Project Analysis Summary".center(WIDTH).rstrip(),
            f"Generated: {datetime.now().strftime(TIME_FORMAT)}".center(WIDTH).rstrip(),
            separator,
            "",
            "Project Location",
            RULE,
            f"Base Path: {config.root}",
            "",
        ]
        self._key_metrics(lines, stats)
        self._languages(lines, stats)
        self._complexity(lines, stats)
        self._insights(lines, stats)

        lines += ["Recommendations", RULE]
        hints = recommendations(stats)
        if hints:
            lines += [f"* {hint}" for hint in hints]
        else:
            lines.append("No immediate improvements needed")
        lines += ["", separator]
        return "\n".join(lines) + "\n"

    def _key_metrics(self, lines: list[str], stats: AggregateStatistics) -> None:
        files = stats.total_files
        largest = max((r.size for r in stats.file_statistics.values()), default=0)
        avg_size = stats.total_size / files if files else 0.0
        avg_lines = stats.total_lines / files if files else 0.0
        code = sum(agg.code_lines for agg in stats.language_statistics.values())
        comments = sum(agg.comment_lines for agg in stats.language_statistics.values())
        ratio = code / comments if comments else 0.0

        lines += [
            "Key Metrics",
            RULE,
            "File Statistics:",
            f"  Total Files:        {files:>8}",
            f"  Total Size:         {stats.total_size / MB:>8.2f} MB",
            f"  Average File Size:  {avg_size / KB:>8.2f} KB",
            f"  Largest File:       {largest / MB:>8.2f} MB",
            "",
            "Code Statistics:",
            f"  Total Lines:        {stats.total_lines:>8}",
            f"  Average Lines:      {avg_lines:>8.1f}",
            f"  Code/Comment Ratio: {ratio:>8.1f}",
            f"  Languages:          {len(stats.language_statistics):>8}",
            "",
        ]

    def _languages(self, lines: list[str], stats: AggregateStatistics) -> None:
        lines += ["Language Distribution", RULE]
        for language, agg in stats.languages_by_lines():
            share = percent(agg.total_lines, stats.total_lines)
            lines.append(f"{language:>15}: {share:>6.1f}% {bar(share)} ({agg.files} files)")
        lines.append("")

    def _complexity(self, lines: list[str], stats: AggregateStatistics) -> None:
        counts = dict.fromkeys((label for label, _ in COMPLEXITY_BUCKETS), 0)
        for record in stats.file_statistics.values():
            counts[complexity_bucket(record.cyclomatic_complexity)] += 1

        metrics = stats.complexity_metrics
        lines += [
            "Complexity Analysis",
            RULE,
            f"Average: {metrics.mean:.2f}  Max: {metrics.max:.2f}  "
            f"Min: {metrics.min:.2f}  Std Dev: {metrics.std_dev:.2f}",
            "",
            "Complexity Distribution:",
        ]
        for label, count in counts.items():
            share = percent(count, stats.total_files)
            lines.append(f"  {label:<16} {int(share):>3}% {bar(share)}")
        lines += ["", "Most Complex Files:"]
        for record in stats.top_by_complexity(TOP_N):
            lines.append(f"  {record.cyclomatic_complexity:.1f} - {record.path}")
        lines.append("")

    def _insights(self, lines: list[str], stats: AggregateStatistics) -> None:
        lines += ["File Insights", RULE, "Largest Files:"]
        for record in stats.largest(TOP_N):
            lines.append(f"  {record.size / MB:>8.2f} MB - {record.path}")
        lines += ["", "Recent Changes:"]
        for record in stats.most_recent(TOP_N):
            lines.append(f"  {record.modified_at.strftime(TIME_FORMAT)} - {record.path}")
        lines.append("")

        # Both breakdowns cover the top-K largest files only
        by_ext: dict[str, list[int]] = defaultdict(lambda: [0, 0])
        by_dir: dict[str, list[int]] = defaultdict(lambda: [0, 0])
        for path, size in stats.largest_files:
            pure = PurePosixPath(path)
            if pure.suffix:
                by_ext[pure.suffix[1:]][0] += 1
                by_ext[pure.suffix[1:]][1] += size
            by_dir[str(pure.parent)][0] += 1
            by_dir[str(pure.parent)][1] += size

        if by_ext:
            lines.append("File Types:")
            for ext, (count, size) in sorted(by_ext.items(), key=lambda i: (-i[1][1], i[0])):
                lines.append(f"  .{ext:<8} {count:>4} files {size / MB:>8.2f} MB")
            lines.append("")

        if by_dir:
            lines.append("Directory Distribution:")
            ranked = sorted(by_dir.items(), key=lambda i: (-i[1][1], i[0]))
            for directory, (count, size) in ranked[:TOP_N]:
                lines.append(f"  {count:>4} files {size / MB:>8.2f} MB: {directory}")
            lines.append("")
