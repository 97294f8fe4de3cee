"""Root ``.gitignore`` matching."""

from pathlib import Path, PurePath
from typing import Optional

import pathspec

from ..logging_config import get_logger

logger = get_logger(__name__)


class GitignoreFilter:
    """Matches paths against the scan root's ``.gitignore``.

    The pattern file is read and compiled at most once, on the first
    lookup. Only the root ``.gitignore`` is consulted; nested ignore files
    are not. A missing, unreadable or unparsable file disables matching
    instead of failing the run.
    """

    def __init__(self, root: Path, enabled: bool = True):
        self.root = Path(root)
        self.enabled = enabled
        self._spec: Optional[pathspec.GitIgnoreSpec] = None
        self._loaded = False

    @property
    def active(self) -> bool:
        """Whether a compiled pattern set is in use."""
        return self._load() is not None

    def _load(self) -> Optional[pathspec.GitIgnoreSpec]:
        if self._loaded:
            return self._spec
        self._loaded = True

        if not self.enabled:
            return None

        gitignore_path = self.root / ".gitignore"
        if not gitignore_path.is_file():
            logger.info(f"No .gitignore found in: {self.root}")
            return None

        try:
            with open(gitignore_path, encoding="utf-8") as f:
                self._spec = pathspec.GitIgnoreSpec.from_lines(f.read().splitlines())
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning(f"Failed to load {gitignore_path}, ignoring it: {e}")
            self._spec = None
        else:
            logger.info(f"Using .gitignore patterns from: {self.root}")
        return self._spec

    def is_ignored(self, relative_path: PurePath, is_dir: bool = False) -> bool:
        """
        Check a root-relative path against the compiled patterns.

        Args:
            relative_path: Path relative to the scan root
            is_dir: Directory entries are matched with a trailing slash so
                    directory-only patterns (``build/``) apply

        Returns:
            True if the path is ignored
        """
        spec = self._load()
        if spec is None:
            return False

        candidate = relative_path.as_posix()
        if is_dir:
            candidate += "/"
        if spec.match_file(candidate):
            logger.debug(f"Ignored by .gitignore: {candidate}")
            return True
        return False
