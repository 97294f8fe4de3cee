"""Tests for the workspace dump renderer."""

from workspace_aggregator.config import ScanConfig
from workspace_aggregator.renderers import WorkspaceRenderer


class TestWorkspaceRenderer:
    def test_sections_and_content(self, project, scan):
        config = ScanConfig(root=project)
        text = WorkspaceRenderer().render(scan(config), config)

        assert text.startswith("# Project Analysis Export\n")
        assert f"- Base Directory: {project}" in text
        assert "- Total Files: 2" in text
        assert "### Rust:" in text and "### Python:" in text
        assert "### File: a.rs" in text
        assert "```rs\nfn main() {}\n```" in text
        assert "```py\n# comment\n\n```" in text
        assert "- Cyclomatic Complexity: 1.00" in text
        assert "- Processing Time: 250ms" in text

    def test_files_in_walk_order(self, project, scan):
        config = ScanConfig(root=project)
        text = WorkspaceRenderer().render(scan(config), config)
        assert text.index("### File: a.rs") < text.index("### File: b.py")

    def test_most_complex_and_documentation_hint(self, make_tree, scan):
        root = make_tree({"busy.py": "if a:\n" * 4, "calm.py": "# ok\nx = 1\n"})
        config = ScanConfig(root=root)
        text = WorkspaceRenderer().render(scan(config), config)

        most_complex = text.split("Most Complex Files:\n", 1)[1]
        assert most_complex.startswith("- busy.py (Complexity: 5.00)\n- calm.py (Complexity: 1.00)")
        assert "- 1 files could benefit from additional documentation" in text

    def test_content_keeps_original_line_endings(self, make_tree, scan):
        root = make_tree({"win.py": b"x = 1\r\ny = 2\r\n", "mac.py": b"a = 1\rb = 2"})
        config = ScanConfig(root=root)
        text = WorkspaceRenderer().render(scan(config), config)

        assert "```py\nx = 1\r\ny = 2\n```" in text
        assert "```py\na = 1\rb = 2\n```" in text

    def test_unreadable_file_marker(self, project, scan):
        config = ScanConfig(root=project)
        stats = scan(config)
        (project / "b.py").unlink()

        text = WorkspaceRenderer().render(stats, config)
        assert "// Error: Could not read file content" in text
        assert "fn main() {}" in text
