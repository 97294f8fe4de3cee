"""Shared test fixtures for Workspace Aggregator tests."""

import os
from pathlib import Path

import pytest

from workspace_aggregator.aggregate import AggregateStatistics
from workspace_aggregator.config import ScanConfig
from workspace_aggregator.scanning import FileRecord, FileScanner


def write_files(root: Path, files: dict) -> Path:
    """Create ``files`` (relative path -> text or bytes) under ``root``."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
    return root


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Keep user/project config files and env vars out of load_config."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("WORKSPACE_AGGREGATOR_"):
            monkeypatch.delenv(key)
    return tmp_path


@pytest.fixture
def make_tree(tmp_path):
    """Factory: build a project directory from a {path: content} dict."""

    def _make(files: dict, name: str = "project") -> Path:
        root = tmp_path / name
        root.mkdir(exist_ok=True)
        return write_files(root, files)

    return _make


@pytest.fixture
def project(make_tree):
    """The two-file project: one Rust line, one Python comment plus blank."""
    return make_tree({"a.rs": "fn main() {}\n", "b.py": "# comment\n\n"})


@pytest.fixture
def out_dir(tmp_path):
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def scan():
    """Factory: scan a config into finalized statistics."""

    def _scan(config: ScanConfig) -> AggregateStatistics:
        stats = FileScanner(config).scan(AggregateStatistics())
        stats.finalize(scan_duration=0.25)
        return stats

    return _scan


@pytest.fixture
def make_record():
    """Factory for FileRecord values with sensible defaults."""

    def _make(
        path="a.py",
        size=100,
        complexity=1.0,
        language="Python",
        total=10,
        code=6,
        comment=2,
        blank=2,
        last_modified=1_700_000_000.0,
    ) -> FileRecord:
        return FileRecord(
            path=path,
            size=size,
            last_modified=last_modified,
            total_lines=total,
            code_lines=code,
            comment_lines=comment,
            blank_lines=blank,
            max_line_length=40,
            average_line_length=20.0,
            cyclomatic_complexity=complexity,
            comment_ratio=comment / total if total else 0.0,
            language=language,
        )

    return _make
