"""Workspace dump: every recorded file with its metadata and full text."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ..logging_config import get_logger
from ..scanning import read_source
from ._format import format_duration, format_file_size
from .base import TIME_FORMAT, BaseRenderer

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig
    from ..scanning import FileRecord

logger = get_logger(__name__)

LOW_COMMENT_RATIO = 0.10
TOP_COMPLEX = 5


class WorkspaceRenderer(BaseRenderer):
    """Renders ``workspace.txt``."""

    name = "workspace"

    def render(self, stats: AggregateStatistics, config: ScanConfig) -> str:
        lines: list[str] = []
        self._header(lines, stats, config)
        for record in stats.records():
            self._file_section(lines, record, config)
        self._summary(lines, stats)
        return "\n".join(lines) + "\n"

    def _header(self, lines: list[str], stats: AggregateStatistics, config: ScanConfig) -> None:
        lines += [
            "# Project Analysis Export",
            f"Generated: {datetime.now().strftime(TIME_FORMAT)}",
            "",
            "## Project Overview",
            f"- Base Directory: {config.root}",
            f"- Total Files: {stats.total_files}",
            f"- Total Size: {format_file_size(stats.total_size)}",
            f"- Total Lines: {stats.total_lines}",
            "",
            "## Language Distribution",
        ]
        for language, agg in stats.languages_by_lines():
            lines += [
                "",
                f"### {language}:",
                f"- Files: {agg.files}",
                f"- Total Lines: {agg.total_lines}",
                f"- Code Lines: {agg.code_lines}",
                f"- Comment Lines: {agg.comment_lines}",
                f"- Blank Lines: {agg.blank_lines}",
                f"- Average Complexity: {agg.complexity:.2f}",
            ]
        lines += [
            "",
            "## File Contents",
            "Each file is separated by clear markers and includes metadata.",
            "",
        ]

    def _file_section(self, lines: list[str], record: FileRecord, config: ScanConfig) -> None:
        lines += [
            "",
            f"### File: {record.path}",
            "#### Metadata",
            f"- Size: {record.size} bytes",
            f"- Modified: {record.modified_at.strftime(TIME_FORMAT)}",
            f"- Language: {record.language}",
            f"- Total Lines: {record.total_lines}",
            f"- Lines of Code: {record.code_lines}",
            f"- Comment Lines: {record.comment_lines}",
            f"- Blank Lines: {record.blank_lines}",
            f"- Cyclomatic Complexity: {record.cyclomatic_complexity:.2f}",
            "",
            "#### Content",
            f"```{record.extension}",
        ]

        try:
            content = read_source(config.root / record.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not re-read {record.path}: {e}")
            lines.append("// Error: Could not read file content")
        else:
            if content.endswith("\n"):
                content = content[:-2] if content.endswith("\r\n") else content[:-1]
            lines.append(content)

        lines += ["```", "", "---"]

    def _summary(self, lines: list[str], stats: AggregateStatistics) -> None:
        lines += [
            "",
            "## Project Summary",
            "### Statistics",
            f"- Total Files Processed: {stats.total_files}",
            f"- Total Size: {format_file_size(stats.total_size)}",
            f"- Total Lines: {stats.total_lines}",
            f"- Processing Time: {format_duration(stats.scan_duration)}",
            "",
            "### Complexity Overview",
            "",
            "Most Complex Files:",
        ]
        for record in stats.top_by_complexity(TOP_COMPLEX):
            lines.append(f"- {record.path} (Complexity: {record.cyclomatic_complexity:.2f})")

        lines += ["", "### Potential Improvements"]
        under_documented = sum(
            1 for r in stats.file_statistics.values() if r.comment_ratio < LOW_COMMENT_RATIO
        )
        if under_documented:
            lines.append(
                f"- {under_documented} files could benefit from additional documentation"
            )
        else:
            lines.append("- No files with low comment coverage")
