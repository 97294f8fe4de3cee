"""Built-in ignore rules and the text/code extension allow-list.

All functions here are pure: they look only at the path they are given.
``is_hidden`` and ``builtin_match`` expect a path relative to the scan root so
that the location of the root itself (e.g. under a dot-directory) never
hides the whole tree.
"""

from collections.abc import Iterable
from pathlib import PurePath
from typing import Optional

# Directory and file names that are never scanned. Not user-configurable.
BUILTIN_IGNORES = frozenset(
    {
        # Virtual environments
        ".venv",
        "venv",
        "env",
        "virtualenv",
        # Build and cache
        "target",
        "dist",
        "build",
        "__pycache__",
        ".cache",
        ".next",
        "tmp",
        # Dependencies
        "node_modules",
        "site-packages",
        "vendor",
        "deps",
        # IDE and config
        ".git",
        ".idea",
        ".vscode",
        ".env",
        ".DS_Store",
        # Coverage and tests
        "coverage",
        ".coverage",
        ".pytest_cache",
        "__tests__",
        "test-results",
        # Infrastructure
        ".terraform",
        ".serverless",
        ".aws-sam",
    }
)

# Extensions (lowercase, no dot) of files read as text.
TEXT_EXTENSIONS = frozenset(
    {
        # Programming languages
        "txt",
        "md",
        "rs",
        "py",
        "js",
        "jsx",
        "ts",
        "tsx",
        "java",
        "c",
        "cpp",
        "h",
        "hpp",
        "cs",
        "go",
        "php",
        "rb",
        "swift",
        "kt",
        "scala",
        # Web
        "html",
        "htm",
        "css",
        "scss",
        "sass",
        "less",
        "svg",
        # Config and data
        "json",
        "yaml",
        "yml",
        "xml",
        "toml",
        "ini",
        "conf",
        "config",
        "properties",
        "props",
        "env",
        # Documentation
        "markdown",
        "rst",
        "asciidoc",
        "adoc",
        # Scripts
        "sh",
        "bash",
        "zsh",
        "fish",
        "ps1",
        "bat",
        "cmd",
        # Other
        "sql",
        "graphql",
        "proto",
    }
)


def is_hidden(relative_path: PurePath) -> bool:
    """True if any segment of the path is a dot-entry."""
    return any(part.startswith(".") and part not in (".", "..") for part in relative_path.parts)


def builtin_match(relative_path: PurePath) -> Optional[str]:
    """Return the first path segment found in the built-in ignore list."""
    for part in relative_path.parts:
        if part in BUILTIN_IGNORES:
            return part
    return None


def file_extension(path: PurePath) -> str:
    """Lowercase extension without the dot ('' when there is none)."""
    return path.suffix[1:].lower() if path.suffix else ""


def should_process_file(path: PurePath, exclude_extensions: Iterable[str]) -> tuple[bool, str]:
    """
    Decide whether an accepted file is read and measured.

    Args:
        path: File path
        exclude_extensions: Lowercase extensions (no dot) to reject

    Returns:
        (accepted, reason) -- reason is empty when accepted
    """
    ext = file_extension(path)
    if not ext:
        return False, "No extension"
    if ext not in TEXT_EXTENSIONS:
        return False, f"Unsupported extension: {ext}"
    if ext in exclude_extensions:
        return False, f"Excluded extension: {ext}"
    return True, ""
