"""Cyclomatic complexity approximation.

This is deliberately coarse: ``1 + number of lines that contain a branch
keyword or a short-circuit operator``. It does not build a control-flow
graph, does not understand strings or comments, and counts a line once
no matter how many decision points it holds. It is O(n) in the number of
lines and language-agnostic.
"""

import re

COMPLEXITY_KEYWORDS = (
    "if",
    "else",
    "elif",
    "match",
    "while",
    "for",
    "case",
    "switch",
    "catch",
    "except",
)

COMPLEXITY_OPERATORS = ("&&", "||")

_DECISION_PATTERN = re.compile(
    r"\b(?:" + "|".join(COMPLEXITY_KEYWORDS) + r")\b"
    + "|"
    + "|".join(re.escape(op) for op in COMPLEXITY_OPERATORS)
)


def is_decision_line(line: str) -> bool:
    return _DECISION_PATTERN.search(line) is not None


def estimate_cyclomatic(lines: list[str]) -> float:
    """Return ``1 + count(decision lines)``."""
    return 1.0 + sum(1 for line in lines if is_decision_line(line))
