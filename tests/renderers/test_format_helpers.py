"""Tests for size/duration formatting and summary bars."""

import pytest

from workspace_aggregator.renderers._format import format_duration, format_file_size
from workspace_aggregator.renderers.charts import bar, percent


@pytest.mark.parametrize(
    "size,expected",
    [(0, "0 B"), (1023, "1023 B"), (1024, "1.00 KB"), (1536, "1.50 KB"), (5 * 1024**2, "5.00 MB"), (3 * 1024**3, "3.00 GB")],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


@pytest.mark.parametrize(
    "seconds,expected",
    [(0.04, "40ms"), (3.5, "3s 500ms"), (125, "2m 5s"), (3725, "1h 2m 5s")],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_bar_is_clamped():
    assert bar(50, max_width=10) == "█████"
    assert bar(250, max_width=10) == "█" * 10
    assert bar(-5) == ""


def test_percent_of_zero():
    assert percent(3, 0) == 0.0
    assert percent(1, 4) == 25.0
