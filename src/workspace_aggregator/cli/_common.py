"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from ..config import OutputType, ScanConfig
from ..core import RunResult
from ..exceptions import InvalidConfigError
from ..renderers._format import format_duration, format_file_size

console = Console()

MAX_ERRORS_SHOWN = 10


def parse_output_overrides(values: Optional[list[str]]) -> Optional[dict[OutputType, Path]]:
    """Parse repeated ``TYPE=PATH`` options into an override mapping."""
    if not values:
        return None
    overrides = {}
    for value in values:
        name, sep, path = value.partition("=")
        if not sep or not path.strip():
            raise InvalidConfigError("output", value, "expected TYPE=PATH")
        overrides[OutputType.parse(name)] = Path(path.strip())
    return overrides


def join_values(values: Optional[list[str]]) -> Optional[str]:
    """Collapse repeated options into one comma-separated value."""
    if not values:
        return None
    return ",".join(values)


def display_summary(result: RunResult, config: ScanConfig) -> None:
    """Print the end-of-run summary."""
    stats = result.stats

    console.print()
    console.print("[bold green]Processing completed[/bold green]")
    console.print(f"  Files processed:      {stats.total_files}")
    console.print(f"  Total size processed: {format_file_size(stats.total_size)}")
    console.print(f"  Time taken:           {format_duration(stats.scan_duration)}")

    languages = stats.languages_by_lines()
    if languages:
        table = Table(title="Language Statistics", show_header=True, header_style="bold cyan")
        table.add_column("Language")
        table.add_column("Files", justify="right")
        table.add_column("Lines", justify="right")
        table.add_column("Code", justify="right")
        table.add_column("Comments", justify="right")
        table.add_column("Blank", justify="right")
        table.add_column("Avg Complexity", justify="right")
        for language, agg in languages:
            table.add_row(
                language,
                str(agg.files),
                str(agg.total_lines),
                str(agg.code_lines),
                str(agg.comment_lines),
                str(agg.blank_lines),
                f"{agg.complexity:.2f}",
            )
        console.print()
        console.print(table)

    if config.exclude_extensions:
        excluded = ", ".join(sorted(config.exclude_extensions))
        console.print(f"\n[dim]Excluded extensions:[/dim] {excluded}")

    if result.written:
        console.print("\n[bold]Generated:[/bold]")
        for path in result.written:
            console.print(f"  {path}")

    if stats.error_count:
        console.print(f"\n[yellow]Completed with {stats.error_count} errors[/yellow]")
        for error in stats.errors[:MAX_ERRORS_SHOWN]:
            console.print(f"  [red]{error.target}[/red]: {error.message}")
        hidden = stats.error_count - MAX_ERRORS_SHOWN
        if hidden > 0:
            console.print(f"  [dim]... and {hidden} more[/dim]")
