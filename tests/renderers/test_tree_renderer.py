"""Tests for the directory tree renderer."""

import pytest

from workspace_aggregator.aggregate import AggregateStatistics
from workspace_aggregator.config import ScanConfig
from workspace_aggregator.renderers import TreeRenderer


@pytest.fixture
def tree_project(make_tree):
    return make_tree(
        {
            "src/main.py": "x\n",
            "src/util/helpers.py": "y\n",
            "README": "readme\n",
            "logo.png": b"\x89PNG",
            "node_modules/pkg/index.js": "z\n",
            ".git/config": "[core]\n",
        }
    )


def body(text):
    """Tree lines after the header block."""
    return text.split("\n\n", 1)[1].rstrip("\n").split("\n")


class TestTreeRenderer:
    def test_layout(self, tree_project):
        text = TreeRenderer().render(AggregateStatistics(), ScanConfig(root=tree_project))

        assert text.startswith(f"Directory Tree for: {tree_project}\n")
        assert body(text) == [
            "├── src/",
            "│   ├── util/",
            "│   │   └── helpers.py",
            "│   └── main.py",
            "├── README",
            "└── logo.png",
        ]

    def test_last_directory_uses_blank_continuation(self, make_tree):
        root = make_tree({"a.txt": "", "z/inner/f.txt": ""})
        text = TreeRenderer().render(AggregateStatistics(), ScanConfig(root=root))

        assert body(text) == [
            "├── z/",
            "│   └── inner/",
            "│       └── f.txt",
            "└── a.txt",
        ]

    def test_user_exclusions_apply(self, tree_project):
        config = ScanConfig(root=tree_project, exclude_directories={"util"}, exclude_patterns={"logo"})
        lines = body(TreeRenderer().render(AggregateStatistics(), config))

        assert not any("util" in line or "logo" in line for line in lines)
        assert "│   └── main.py" in lines

    def test_gitignore_note_and_filtering(self, tree_project):
        (tree_project / ".gitignore").write_text("*.png\n")
        config = ScanConfig(root=tree_project, respect_gitignore=True)
        text = TreeRenderer().render(AggregateStatistics(), config)

        assert "Note: Respecting .gitignore rules" in text
        assert "logo.png" not in text

    def test_no_note_without_gitignore(self, tree_project):
        text = TreeRenderer().render(AggregateStatistics(), ScanConfig(root=tree_project))
        assert "Note:" not in text
