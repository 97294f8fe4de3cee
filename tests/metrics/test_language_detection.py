"""Tests for language detection."""

from pathlib import PurePath

from workspace_aggregator.metrics import UNKNOWN_LANGUAGE, detect_language
from workspace_aggregator.metrics.language import score_languages


class TestDetectLanguage:
    def test_extension_table(self):
        assert detect_language(PurePath("a.rs"), "") == "Rust"
        assert detect_language(PurePath("b.PY"), "") == "Python"
        assert detect_language(PurePath("c.yml"), "") == "YAML"

    def test_extension_wins_over_content(self):
        assert detect_language(PurePath("a.py"), "fn main() { pub fn x() }") == "Python"

    def test_content_scoring_for_unmapped_extension(self):
        content = "def foo():\n    import os\n"
        assert detect_language(PurePath("script.txt"), content) == "Python"

    def test_tie_breaks_alphabetically(self):
        content = "fn x\ndef y\n"
        scores = score_languages(content)
        assert scores["Rust"] == scores["Python"] == 1
        assert detect_language(PurePath("notes.txt"), content) == "Python"

    def test_all_zero_is_unknown(self):
        assert detect_language(PurePath("notes.txt"), "hello world") == UNKNOWN_LANGUAGE

    def test_no_extension_uses_content(self):
        assert detect_language(PurePath("Gofile"), "package main\nfunc main() {}\n") == "Go"
