"""Tests for PathFilterChain."""

from workspace_aggregator.config import OutputType, ScanConfig
from workspace_aggregator.filters import PathFilterChain


class TestSkipReason:
    def test_hidden_and_builtin(self, make_tree):
        root = make_tree({".secret/a.py": "", "node_modules/x/y.js": "", "src/a.py": ""})
        chain = PathFilterChain(root)

        assert chain.skip_reason(root / ".secret") == "hidden path"
        assert chain.skip_reason(root / "node_modules") == "built-in ignore: node_modules"
        assert chain.skip_reason(root / "src") is None
        assert chain.skip_reason(root / "src" / "a.py") is None

    def test_root_location_does_not_matter(self, tmp_path):
        root = tmp_path / ".hidden" / "tmp" / "project"
        root.mkdir(parents=True)
        (root / "main.py").write_text("x = 1\n")
        chain = PathFilterChain(root)

        assert not chain.should_skip(root / "main.py")

    def test_excluded_directory_name_at_any_depth(self, make_tree):
        root = make_tree({"docs/a.md": "", "src/docs/b.md": ""})
        chain = PathFilterChain(root, exclude_directories={"docs"})

        assert chain.skip_reason(root / "docs") == "excluded directory: docs"
        assert chain.should_skip(root / "src" / "docs")

    def test_pattern_matches_relative_path(self, make_tree):
        root = make_tree({"src/generated_api.py": "", "src/api.py": ""})
        chain = PathFilterChain(root, exclude_patterns={"generated"})

        assert chain.skip_reason(root / "src" / "generated_api.py") == "matched pattern: generated"
        assert not chain.should_skip(root / "src" / "api.py")

    def test_gitignore_respected_only_when_enabled(self, make_tree):
        root = make_tree({".gitignore": "build_out/\n", "build_out/a.py": ""})

        assert PathFilterChain(root, respect_gitignore=True).skip_reason(
            root / "build_out", is_dir=True
        ) == "matched .gitignore"
        assert not PathFilterChain(root).should_skip(root / "build_out", is_dir=True)

    def test_output_artifacts_are_skipped(self, make_tree):
        root = make_tree({"main.py": "x = 1\n", "summary.txt": "old report"})
        config = ScanConfig(root=root, outputs=(OutputType.SUMMARY,), output_dir=root)
        chain = PathFilterChain.from_config(config)

        assert chain.skip_reason(root / "summary.txt") == "output artifact"
        assert not chain.should_skip(root / "main.py")

    def test_should_process_file_uses_excluded_extensions(self, make_tree):
        root = make_tree({"a.md": "", "b.py": ""})
        chain = PathFilterChain(root, exclude_extensions={"md"})

        assert chain.should_process_file(root / "a.md") == (False, "Excluded extension: md")
        assert chain.should_process_file(root / "b.py") == (True, "")
