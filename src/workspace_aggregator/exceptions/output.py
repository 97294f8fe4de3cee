"""Output exceptions: artifact rendering and writing."""

from pathlib import Path

from .base import WorkspaceAggregatorError


class OutputError(WorkspaceAggregatorError):
    """Raised when a renderer fails to produce its artifact."""

    def __init__(self, output: str, path: Path, reason: str):
        super().__init__(
            f"Failed to write {output} output: {path}",
            details={"output": output, "path": str(path), "reason": reason},
        )
        self.output = output
        self.path = path
        self.reason = reason
