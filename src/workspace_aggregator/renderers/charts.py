"""Plain-text bars for the summary report."""

BAR_CHAR = "█"


def bar(percentage: float, max_width: int = 30) -> str:
    """A bar proportional to ``percentage`` (0-100), at most ``max_width`` wide."""
    percentage = min(max(percentage, 0.0), 100.0)
    return BAR_CHAR * int(percentage / 100.0 * max_width)


def percent(part: float, whole: float) -> float:
    return part / whole * 100.0 if whole else 0.0
