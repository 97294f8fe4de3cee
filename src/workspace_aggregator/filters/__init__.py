"""Path filtering: built-in ignores, .gitignore, user exclusions."""

from .chain import PathFilterChain
from .gitignore import GitignoreFilter
from .patterns import (
    BUILTIN_IGNORES,
    TEXT_EXTENSIONS,
    file_extension,
    should_process_file,
)

__all__ = [
    "PathFilterChain",
    "GitignoreFilter",
    "BUILTIN_IGNORES",
    "TEXT_EXTENSIONS",
    "file_extension",
    "should_process_file",
]
