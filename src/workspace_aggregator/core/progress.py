"""Progress reporting: a Rich progress bar or a silent stand-in."""

from typing import Callable, TypeVar

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

T = TypeVar("T")

Advance = Callable[[str], None]


class ProgressReporter:
    """Rich progress bar wrapper.

    ``style`` selects the layout: "simple" (spinner and counter),
    "detailed" (current file, bar, percentage, elapsed time) or "bar"
    (bar and counter only).
    """

    def __init__(self, console: Console, style: str = "detailed"):
        self.console = console
        self.style = style

    def _columns(self) -> tuple:
        if self.style == "simple":
            return (
                SpinnerColumn(),
                TextColumn("Processing files"),
                MofNCompleteColumn(),
            )
        if self.style == "bar":
            return (BarColumn(), MofNCompleteColumn())
        return (
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
        )

    def run(self, total: int, callback: Callable[[Advance], T]) -> T:
        with Progress(*self._columns(), console=self.console, transient=False) as progress:
            task = progress.add_task("Processing files", total=total)

            def advance(path: str) -> None:
                progress.update(task, advance=1, description=f"Processing: {path}")

            result = callback(advance)
            progress.update(task, description="Complete!")
            return result


class SilentReporter:
    """No-op reporter for tests and --quiet mode."""

    def run(self, total: int, callback: Callable[[Advance], T]) -> T:
        return callback(lambda path: None)
