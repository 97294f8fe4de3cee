"""Base renderer interface for the generated reports."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import OutputError
from ..logging_config import get_logger

if TYPE_CHECKING:
    from ..aggregate import AggregateStatistics
    from ..config import ScanConfig

logger = get_logger(__name__)

SEPARATOR = "=" * 100
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class BaseRenderer(ABC):
    """Abstract base class for report renderers.

    Renderers only read the finalized statistics and the configuration;
    they never modify either.
    """

    name: str = ""

    @abstractmethod
    def render(self, stats: AggregateStatistics, config: ScanConfig) -> str:
        """Return the report text."""

    def write(self, stats: AggregateStatistics, config: ScanConfig, path: Path) -> Path:
        """
        Render and write the report, creating parent directories.

        Raises:
            OutputError: If the report cannot be written
        """
        path = Path(path)
        try:
            text = self.render(stats, config)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputError(self.name, path, str(e))
        logger.info(f"Created {self.name} output: {path}")
        return path
