"""
Workspace Aggregator - source tree reports for people and LLMs

Scans a directory tree, measures every text and code file (line counts,
a coarse cyclomatic-complexity estimate, language), and writes reports:
a full workspace dump, a file list, a directory tree, a summary
dashboard, JSON metadata and a chunked export sized for LLM context
windows.
"""

__version__ = "0.3.0"

from .aggregate import AggregateStatistics, ComplexityMetrics, LanguageAggregate
from .config import OutputType, ScanConfig, load_config
from .core import RunResult, run
from .scanning import FileRecord

__all__ = [
    "run",
    "RunResult",
    "load_config",
    "ScanConfig",
    "OutputType",
    "AggregateStatistics",
    "ComplexityMetrics",
    "LanguageAggregate",
    "FileRecord",
]
