"""ASCII directory tree of the scanned workspace."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..filters import PathFilterChain
from ..logging_config import get_logger
from .base import TIME_FORMAT, BaseRenderer

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig

logger = get_logger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class TreeRenderer(BaseRenderer):
    """Renders ``tree.txt``.

    The tree is read from disk, not from the statistics: it applies the
    same skip chain as the scan but not the extension allow-list, so
    binary and unknown files are listed too.
    """

    name = "tree"

    def __init__(self, filters: Optional[PathFilterChain] = None):
        self.filters = filters

    def render(self, stats: AggregateStatistics, config: ScanConfig) -> str:
        filters = self.filters or PathFilterChain.from_config(config)

        lines = [
            f"Directory Tree for: {config.root}",
            f"Generated: {datetime.now().strftime(TIME_FORMAT)}",
        ]
        if filters.gitignore.active:
            lines.append("Note: Respecting .gitignore rules")
        lines.append("")

        self._walk(config.root, "", filters, lines, set())
        return "\n".join(lines) + "\n"

    def _walk(
        self,
        directory: Path,
        prefix: str,
        filters: PathFilterChain,
        lines: list[str],
        visited: set[tuple[int, int]],
    ) -> None:
        try:
            st = directory.stat()
            key = (st.st_dev, st.st_ino)
            if key in visited:
                return
            visited.add(key)
            with os.scandir(directory) as it:
                raw = list(it)
        except OSError as e:
            logger.warning(f"Cannot list {directory}: {e}")
            return

        entries = []
        for entry in raw:
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            if filters.should_skip(Path(entry.path), is_dir=is_dir):
                continue
            entries.append((not is_dir, entry.name, is_dir))

        # Directories first, then files, each by name
        entries.sort()

        for index, (_, name, is_dir) in enumerate(entries):
            is_last = index == len(entries) - 1
            branch = LAST_BRANCH if is_last else BRANCH
            if is_dir:
                lines.append(f"{prefix}{branch}{name}/")
                self._walk(
                    directory / name,
                    prefix + (SPACE if is_last else PIPE),
                    filters,
                    lines,
                    visited,
                )
            else:
                lines.append(f"{prefix}{branch}{name}")
