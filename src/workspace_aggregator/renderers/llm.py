"""LLM-oriented export: a summary document plus size-bounded chunks.

Files are split into two tiers. "core" files (cyclomatic complexity
above 10) contribute their full source text; "supporting" files
contribute a short metrics block. Each tier is packed greedily, in
descending complexity order, into chunks of at most ``chunk_size``
characters. A block larger than the budget gets a chunk of its own and
is never split.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import OutputError
from ..logging_config import get_logger
from ..scanning import read_source
from .base import TIME_FORMAT, BaseRenderer

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig
    from ..scanning import FileRecord

logger = get_logger(__name__)

CORE_TIER = "core"
SUPPORTING_TIER = "supporting"
CORE_COMPLEXITY = 10.0
TOP_COMPLEX = 5


@dataclass
class Chunk:
    sequence: int
    total: int
    tier: str
    content: str

    @property
    def filename(self) -> str:
        return f"chunk_{self.sequence}_of_{self.total}__{self.tier}.md"

    def document(self) -> str:
        return f"# Code Analysis Chunk {self.sequence}/{self.total}\nType: {self.tier}\n\n{self.content}"


def pack_chunks(blocks: list[str], budget: int, tier: str) -> list[Chunk]:
    """
    Greedily pack blocks, in order, into chunks of at most ``budget`` characters.

    A block is never split. When appending a block would exceed the
    budget and the current chunk is not empty, the chunk is sealed first;
    an oversized block therefore ends up alone in its own chunk.
    Sequence numbers are left at 0 for ``number_chunks`` to fill in.
    """
    chunks: list[Chunk] = []
    current: list[str] = []
    size = 0

    for block in blocks:
        if current and size + len(block) > budget:
            chunks.append(Chunk(0, 0, tier, "".join(current)))
            current, size = [], 0
        current.append(block)
        size += len(block)

    if current:
        chunks.append(Chunk(0, 0, tier, "".join(current)))
    return chunks


def number_chunks(chunks: list[Chunk]) -> list[Chunk]:
    total = len(chunks)
    for index, chunk in enumerate(chunks, start=1):
        chunk.sequence = index
        chunk.total = total
    return chunks


def core_block(record: FileRecord, content: str) -> str:
    return (
        f"\n### File: {record.path}\n"
        f"#### Metrics\n"
        f"- Lines: {record.total_lines}\n"
        f"- Complexity: {record.cyclomatic_complexity:.2f}\n"
        f"- Comments: {record.comment_lines}\n"
        f"\n```{record.extension}\n{content}\n```\n"
    )


def supporting_block(record: FileRecord) -> str:
    return (
        f"\n### {record.path}\n"
        f"- Lines: {record.total_lines}\n"
        f"- Complexity: {record.cyclomatic_complexity:.2f}\n"
        f"- Comments: {record.comment_lines}\n"
    )


class LLMRenderer(BaseRenderer):
    """Renders ``llm.md`` and the sibling ``llm.chunks/`` directory."""

    name = "llm"

    def chunks(self, stats: AggregateStatistics, config: ScanConfig) -> list[Chunk]:
        ranked = sorted(
            stats.file_statistics.values(), key=lambda r: (-r.cyclomatic_complexity, r.path)
        )

        core_blocks = []
        supporting_blocks = []
        for record in ranked:
            if record.cyclomatic_complexity > CORE_COMPLEXITY:
                try:
                    content = read_source(config.root / record.path)
                except (OSError, UnicodeDecodeError) as e:
                    logger.warning(f"Skipping {record.path} in LLM export: {e}")
                    continue
                core_blocks.append(core_block(record, content))
            else:
                supporting_blocks.append(supporting_block(record))

        return number_chunks(
            pack_chunks(core_blocks, config.chunk_size, CORE_TIER)
            + pack_chunks(supporting_blocks, config.chunk_size, SUPPORTING_TIER)
        )

    def render(self, stats: AggregateStatistics, config: ScanConfig) -> str:
        return self._summary(stats, self.chunks(stats, config))

    def _summary(self, stats: AggregateStatistics, chunks: list[Chunk]) -> str:
        lines = [
            "# Project Code Analysis",
            f"Generated: {datetime.now().strftime(TIME_FORMAT)}",
            "",
            "## Project Overview",
            f"- Total Files: {stats.total_files}",
            f"- Total Lines: {stats.total_lines}",
            f"- Total Size: {stats.total_size} bytes",
            "",
            "## Language Distribution",
        ]
        for language, agg in stats.languages_by_lines():
            ratio = agg.comment_lines / agg.total_lines * 100.0 if agg.total_lines else 0.0
            lines += [
                f"### {language}",
                f"- Files: {agg.files}",
                f"- Total Lines: {agg.total_lines}",
                f"- Code Lines: {agg.code_lines}",
                f"- Comment Lines: {agg.comment_lines}",
                f"- Comment Ratio: {ratio:.2f}%",
                "",
            ]

        lines += ["## Complexity Analysis", "Most Complex Files:"]
        for record in stats.top_by_complexity(TOP_COMPLEX):
            lines.append(f"- {record.path} (Complexity: {record.cyclomatic_complexity:.2f})")

        lines += [
            "",
            "## Content Structure",
            "The code analysis is split into the following chunks:",
        ]
        for chunk in chunks:
            lines.append(f"- {chunk.filename} ({chunk.tier}, {len(chunk.content)} chars)")
        if not chunks:
            lines.append("- (no files)")
        return "\n".join(lines) + "\n"

    def write(self, stats: AggregateStatistics, config: ScanConfig, path: Path) -> Path:
        """Write the summary document and one file per chunk."""
        path = Path(path)
        chunks_dir = path.with_suffix(".chunks")
        try:
            chunks = self.chunks(stats, config)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self._summary(stats, chunks), encoding="utf-8")

            chunks_dir.mkdir(parents=True, exist_ok=True)
            for stale in chunks_dir.glob("chunk_*_of_*__*.md"):
                stale.unlink()
            for chunk in chunks:
                (chunks_dir / chunk.filename).write_text(chunk.document(), encoding="utf-8")
        except OSError as e:
            raise OutputError(self.name, path, str(e))

        logger.info(f"Created llm output: {path} ({len(chunks)} chunks in {chunks_dir})")
        return path
