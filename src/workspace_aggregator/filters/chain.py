"""The filter chain shared by the scan passes and the tree renderer."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Optional

from .gitignore import GitignoreFilter
from .patterns import builtin_match, is_hidden, should_process_file

if TYPE_CHECKING:
    from ..config import ScanConfig


class PathFilterChain:
    """Decides which entries of the tree are skipped and which files are read.

    Every check is a pure function of the path and the chain's settings,
    so two walks over the same tree with the same chain always reach the
    same decisions. The checks are independent; their order only affects
    which reason ``skip_reason`` reports.
    """

    def __init__(
        self,
        root: Path,
        exclude_extensions: Iterable[str] = (),
        exclude_directories: Iterable[str] = (),
        exclude_patterns: Iterable[str] = (),
        respect_gitignore: bool = False,
        artifact_paths: Iterable[Path] = (),
    ):
        self.root = Path(root)
        self.exclude_extensions = frozenset(exclude_extensions)
        self.exclude_directories = frozenset(exclude_directories)
        self.exclude_patterns = tuple(sorted(exclude_patterns))
        self.gitignore = GitignoreFilter(self.root, enabled=respect_gitignore)
        self.artifact_paths = frozenset(artifact_paths)

    @classmethod
    def from_config(cls, config: ScanConfig) -> PathFilterChain:
        return cls(
            config.root,
            exclude_extensions=config.exclude_extensions,
            exclude_directories=config.exclude_directories,
            exclude_patterns=config.exclude_patterns,
            respect_gitignore=config.respect_gitignore,
            artifact_paths=config.artifact_paths(),
        )

    def relative(self, path: PurePath) -> PurePath:
        """Path relative to the root (unchanged if it is not under it)."""
        try:
            return path.relative_to(self.root)
        except ValueError:
            return path

    def skip_reason(self, path: Path, is_dir: Optional[bool] = None) -> Optional[str]:
        """
        Explain why an entry is skipped.

        Args:
            path: Entry path (under the root, or already root-relative)
            is_dir: Whether the entry is a directory; looked up when None

        Returns:
            A short reason, or None if the entry is kept
        """
        rel = self.relative(path)

        if is_hidden(rel):
            return "hidden path"

        ignored = builtin_match(rel)
        if ignored is not None:
            return f"built-in ignore: {ignored}"

        if is_dir is None:
            is_dir = path.is_dir()
        if self.gitignore.is_ignored(rel, is_dir=is_dir):
            return "matched .gitignore"

        if path.name in self.exclude_directories:
            return f"excluded directory: {path.name}"

        rel_str = rel.as_posix()
        for pattern in self.exclude_patterns:
            if pattern in rel_str:
                return f"matched pattern: {pattern}"

        if self.artifact_paths and Path(path).resolve() in self.artifact_paths:
            return "output artifact"

        return None

    def should_skip(self, path: Path, is_dir: Optional[bool] = None) -> bool:
        return self.skip_reason(path, is_dir=is_dir) is not None

    def should_process_file(self, path: PurePath) -> tuple[bool, str]:
        """Apply the extension allow-list and the user's excluded extensions."""
        return should_process_file(path, self.exclude_extensions)
