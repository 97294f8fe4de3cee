"""Report renderers for Workspace Aggregator."""

from typing import Optional

from ..config import OutputType
from ..filters import PathFilterChain
from .base import BaseRenderer
from .files import FilesListRenderer
from .llm import Chunk, LLMRenderer, pack_chunks
from .meta import MetaRenderer
from .summary import SummaryRenderer
from .tree import TreeRenderer
from .workspace import WorkspaceRenderer

_RENDERERS = {
    OutputType.WORKSPACE: WorkspaceRenderer,
    OutputType.FILES: FilesListRenderer,
    OutputType.TREE: TreeRenderer,
    OutputType.SUMMARY: SummaryRenderer,
    OutputType.META: MetaRenderer,
    OutputType.LLM: LLMRenderer,
}


def get_renderer(output_type, filters: Optional[PathFilterChain] = None) -> BaseRenderer:
    """Get a renderer instance for an output type.

    Args:
        output_type: An OutputType or its name ("workspace", "files", ...)
        filters: Filter chain of the scan, reused by the tree renderer so
                 the .gitignore is compiled once per run

    Returns:
        Renderer instance

    Raises:
        InvalidConfigError: If the name is not a known output type
    """
    output_type = OutputType.parse(output_type)
    if output_type is OutputType.TREE:
        return TreeRenderer(filters)
    return _RENDERERS[output_type]()


__all__ = [
    "BaseRenderer",
    "WorkspaceRenderer",
    "FilesListRenderer",
    "TreeRenderer",
    "SummaryRenderer",
    "MetaRenderer",
    "LLMRenderer",
    "Chunk",
    "pack_chunks",
    "get_renderer",
]
