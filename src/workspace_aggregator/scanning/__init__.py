"""Tree traversal and per-file records."""

from .models import FileRecord, ScanTotals
from .scanner import FileScanner, ScanEntry, read_source

__all__ = [
    "FileScanner",
    "ScanEntry",
    "FileRecord",
    "ScanTotals",
    "read_source",
]
