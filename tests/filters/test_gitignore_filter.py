"""Tests for root .gitignore matching."""

import warnings
from pathlib import PurePath

from workspace_aggregator.filters import GitignoreFilter


class TestGitignoreFilter:
    def test_matches_file_patterns(self, make_tree):
        root = make_tree({".gitignore": "*.log\nsecret.txt\n"})
        gitignore = GitignoreFilter(root)

        assert gitignore.active
        assert gitignore.is_ignored(PurePath("debug.log"))
        assert gitignore.is_ignored(PurePath("nested/dir/trace.log"))
        assert gitignore.is_ignored(PurePath("secret.txt"))
        assert not gitignore.is_ignored(PurePath("main.py"))

    def test_directory_only_pattern(self, make_tree):
        root = make_tree({".gitignore": "generated/\n"})
        gitignore = GitignoreFilter(root)

        assert gitignore.is_ignored(PurePath("generated"), is_dir=True)
        assert not gitignore.is_ignored(PurePath("generated"), is_dir=False)

    def test_negation(self, make_tree):
        root = make_tree({".gitignore": "*.md\n!KEEP.md\n"})
        gitignore = GitignoreFilter(root)

        assert gitignore.is_ignored(PurePath("notes.md"))
        assert not gitignore.is_ignored(PurePath("KEEP.md"))

    def test_disabled_never_matches(self, make_tree):
        root = make_tree({".gitignore": "*.log\n"})
        gitignore = GitignoreFilter(root, enabled=False)

        assert not gitignore.active
        assert not gitignore.is_ignored(PurePath("debug.log"))

    def test_missing_gitignore(self, make_tree):
        root = make_tree({"main.py": "x = 1\n"})
        gitignore = GitignoreFilter(root)

        assert not gitignore.active
        assert not gitignore.is_ignored(PurePath("main.py"))

    def test_undecodable_gitignore_is_disabled(self, make_tree):
        root = make_tree({".gitignore": b"\xff\xfe\x00*.log\n"})
        gitignore = GitignoreFilter(root)

        assert not gitignore.active
        assert not gitignore.is_ignored(PurePath("debug.log"))

    def test_loaded_once(self, make_tree):
        root = make_tree({".gitignore": "*.log\n"})
        gitignore = GitignoreFilter(root)
        assert gitignore.is_ignored(PurePath("a.log"))

        (root / ".gitignore").write_text("*.txt\n")
        assert gitignore.is_ignored(PurePath("a.log"))
        assert not gitignore.is_ignored(PurePath("a.txt"))

    def test_compiles_without_deprecation_warnings(self, make_tree):
        root = make_tree({".gitignore": "build/\n*.tmp\n"})

        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            gitignore = GitignoreFilter(root)
            assert gitignore.is_ignored(PurePath("a.tmp"))
            assert gitignore.is_ignored(PurePath("build"), is_dir=True)
