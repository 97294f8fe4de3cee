"""CLI entry point."""

import typer

from ._common import console

app = typer.Typer(
    name="workspace-aggregator",
    help="Workspace Aggregator - source tree reports for people and LLMs",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .aggregate import main  # noqa: F401, E402

__all__ = ["app", "console", "main"]
