"""Tests for the summary dashboard."""

import pytest

from workspace_aggregator.aggregate import AggregateStatistics
from workspace_aggregator.config import ScanConfig
from workspace_aggregator.renderers import SummaryRenderer
from workspace_aggregator.renderers.summary import complexity_bucket, recommendations


class TestComplexityBucket:
    @pytest.mark.parametrize(
        "value,label",
        [
            (1.0, "Low (1-5)"),
            (5.0, "Low (1-5)"),
            (6.0, "Moderate (6-10)"),
            (10.0, "Moderate (6-10)"),
            (11.0, "High (11-20)"),
            (20.0, "High (11-20)"),
            (21.0, "Very High (>20)"),
            (250.0, "Very High (>20)"),
        ],
    )
    def test_boundaries(self, value, label):
        assert complexity_bucket(value) == label


class TestRecommendations:
    def test_none_needed(self, make_record):
        stats = AggregateStatistics()
        stats.record(make_record(comment=5, total=10, code=5, blank=0))
        assert recommendations(stats) == []

    def test_all_rules(self, make_record):
        stats = AggregateStatistics()
        stats.record(make_record("big.py", size=200 * 1024, complexity=25.0, comment=0))
        hints = recommendations(stats)

        assert hints == [
            "Consider refactoring 1 files with high complexity",
            "Add documentation to 1 files with low comment coverage",
            "Consider splitting 1 large files (>100KB)",
        ]


class TestSummaryRenderer:
    def test_sections(self, make_tree, scan):
        root = make_tree({"a.py": "# doc\nx = 1\n", "lib/b.rs": "// doc\nfn b() {}\n"})
        config = ScanConfig(root=root)
        text = SummaryRenderer().render(scan(config), config)

        for heading in (
            "Project Analysis Summary",
            "Project Location",
            "Key Metrics",
            "Language Distribution",
            "Complexity Distribution:",
            "Most Complex Files:",
            "Largest Files:",
            "Recent Changes:",
            "File Types:",
            "Directory Distribution:",
            "Recommendations",
        ):
            assert heading in text
        assert f"Base Path: {root}" in text
        assert "No immediate improvements needed" in text
        assert "  Low (1-5)        100% " in text
        assert "\x1b[" not in text

    def test_code_comment_ratio_ignores_blank_lines(self, project, scan):
        config = ScanConfig(root=project)
        text = SummaryRenderer().render(scan(config), config)

        assert "  Code/Comment Ratio:      1.0" in text

    def test_language_bars_are_proportional(self, make_tree, scan):
        root = make_tree({"a.py": "x = 1\n" * 3, "b.rs": "let x = 1;\n"})
        config = ScanConfig(root=root)
        lines = SummaryRenderer().render(scan(config), config).splitlines()

        python = next(line for line in lines if line.strip().startswith("Python:"))
        rust = next(line for line in lines if line.strip().startswith("Rust:"))
        assert "75.0%" in python and "(1 files)" in python
        assert "25.0%" in rust
        assert python.count("█") == 22
        assert rust.count("█") == 7

    def test_empty_project(self, make_tree, scan):
        root = make_tree({}, name="empty")
        config = ScanConfig(root=root)
        text = SummaryRenderer().render(scan(config), config)
        assert "Total Files:               0" in text
        assert "No immediate improvements needed" in text
