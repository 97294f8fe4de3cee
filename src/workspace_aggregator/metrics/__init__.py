"""Line, complexity and language metrics for single files."""

from .complexity import COMPLEXITY_KEYWORDS, COMPLEXITY_OPERATORS, estimate_cyclomatic
from .engine import MetricsEngine
from .language import EXTENSION_LANGUAGES, UNKNOWN_LANGUAGE, detect_language
from .lines import COMMENT_MARKERS, LineKind, classify_line, split_lines
from .models import FileMetrics

__all__ = [
    "MetricsEngine",
    "FileMetrics",
    "COMMENT_MARKERS",
    "LineKind",
    "classify_line",
    "split_lines",
    "COMPLEXITY_KEYWORDS",
    "COMPLEXITY_OPERATORS",
    "estimate_cyclomatic",
    "EXTENSION_LANGUAGES",
    "UNKNOWN_LANGUAGE",
    "detect_language",
]
