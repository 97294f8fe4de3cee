"""Line splitting and blank/comment/code classification."""

from dataclasses import dataclass
from enum import Enum

# Line comments, block comment open/continuation/close, docstrings and
# markup comments across the supported languages.
COMMENT_MARKERS = ("//", "#", "/*", "*", "*/", "'''", '"""', "<!--", "-->")


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    CODE = "code"


@dataclass
class LineCounts:
    total: int = 0
    code: int = 0
    comment: int = 0
    blank: int = 0
    max_length: int = 0
    total_length: int = 0

    @property
    def average_length(self) -> float:
        return self.total_length / self.total if self.total else 0.0


def split_lines(content: str) -> list[str]:
    """Split on ``\\n``; a trailing newline does not start an extra line.

    A ``\\r`` left at the end of a line (CRLF files) is dropped.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def classify_line(line: str) -> LineKind:
    trimmed = line.strip()
    if not trimmed:
        return LineKind.BLANK
    if trimmed.startswith(COMMENT_MARKERS):
        return LineKind.COMMENT
    return LineKind.CODE


def count_lines(lines: list[str]) -> LineCounts:
    """Classify every line and collect length statistics."""
    counts = LineCounts()
    for line in lines:
        counts.total += 1
        kind = classify_line(line)
        if kind is LineKind.BLANK:
            counts.blank += 1
        elif kind is LineKind.COMMENT:
            counts.comment += 1
        else:
            counts.code += 1

        length = len(line)
        counts.max_length = max(counts.max_length, length)
        counts.total_length += length
    return counts
