"""Tests for MetricsEngine."""

from pathlib import PurePath

import pytest

from workspace_aggregator.metrics import MetricsEngine


@pytest.fixture
def engine():
    return MetricsEngine()


class TestAnalyze:
    def test_rust_one_liner(self, engine):
        m = engine.analyze(PurePath("a.rs"), "fn main() {}\n")
        assert m.language == "Rust"
        assert (m.total_lines, m.code_lines, m.comment_lines, m.blank_lines) == (1, 1, 0, 0)
        assert m.cyclomatic_complexity == 1.0
        assert m.max_line_length == 12

    def test_python_comment_and_blank(self, engine):
        m = engine.analyze(PurePath("b.py"), "# comment\n\n")
        assert m.language == "Python"
        assert (m.total_lines, m.code_lines, m.comment_lines, m.blank_lines) == (2, 0, 1, 1)
        assert m.comment_ratio == pytest.approx(0.5)

    def test_empty_file(self, engine):
        m = engine.analyze(PurePath("empty.py"), "")
        assert m.total_lines == 0
        assert m.comment_ratio == 0.0
        assert m.average_line_length == 0.0
        assert m.cyclomatic_complexity == 1.0

    def test_totals_add_up(self, engine):
        content = "// header\n\nfn main() {\n    if x && y {\n    }\n}\n"
        m = engine.analyze(PurePath("main.rs"), content)
        assert m.total_lines == m.code_lines + m.comment_lines + m.blank_lines == 6
        assert m.cyclomatic_complexity == 2.0
