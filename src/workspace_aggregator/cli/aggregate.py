"""Main aggregation command."""

from pathlib import Path
from typing import Optional

import click
import typer

from ..config import PROGRESS_STYLES, OutputType, load_config
from ..core import ProgressReporter, SilentReporter, run
from ..exceptions import ConfigurationError, WorkspaceAggregatorError
from ..logging_config import VERBOSITY_LEVELS, setup_logging
from . import app
from ._common import console, display_summary, join_values, parse_output_overrides


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Directory to scan (default: current directory)",
    ),
    generate: Optional[list[str]] = typer.Option(
        None,
        "--generate",
        "-g",
        help=(
            "Outputs to generate, repeatable or comma-separated: "
            + ", ".join(t.value for t in OutputType)
        ),
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for generated files (default: current directory)",
        file_okay=False,
    ),
    output: Optional[list[str]] = typer.Option(
        None,
        "--output",
        help="Explicit path for one output, as TYPE=PATH (repeatable)",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="File extensions to exclude (e.g. md,txt)",
    ),
    exclude_dir: Optional[list[str]] = typer.Option(
        None,
        "--exclude-dir",
        "-d",
        help="Directory names to exclude",
    ),
    exclude_pattern: Optional[list[str]] = typer.Option(
        None,
        "--exclude-pattern",
        "-p",
        help="Skip any path containing this text",
    ),
    respect_gitignore: bool = typer.Option(
        False,
        "--respect-gitignore",
        "-r",
        help="Skip paths matched by the root .gitignore",
    ),
    timestamp: bool = typer.Option(
        False,
        "--timestamp",
        "-t",
        help="Add a timestamp to generated file names",
    ),
    chunk_size: Optional[int] = typer.Option(
        None,
        "--chunk-size",
        help="Character budget of one LLM chunk (default: 16000)",
        min=1,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Worker threads for metric computation (default: 1)",
        min=1,
        max=32,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="No progress bar or summary; errors only",
    ),
    verbosity: Optional[str] = typer.Option(
        None,
        "--verbosity",
        help="Log level",
        click_type=click.Choice(list(VERBOSITY_LEVELS), case_sensitive=False),
    ),
    progress_style: Optional[str] = typer.Option(
        None,
        "--progress-style",
        help="Progress bar layout",
        click_type=click.Choice(list(PROGRESS_STYLES), case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Aggregate a source tree into text reports.

    Scans PATH, measures every text and code file, and writes the
    selected reports: workspace dump, file list, directory tree,
    summary dashboard, JSON metadata and chunked LLM export.

    [bold cyan]Examples:[/bold cyan]

      workspace-aggregator

      workspace-aggregator src -g summary,meta -o reports

      workspace-aggregator -e md,txt -d tests --respect-gitignore

      workspace-aggregator -g llm --chunk-size 8000
    """
    if version:
        from .. import __version__

        console.print(
            f"[bold cyan]Workspace Aggregator[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    logger = setup_logging(verbose=verbose, quiet=quiet, level=verbosity)

    try:
        settings = load_config(
            root=path,
            config_file=config,
            outputs=join_values(generate),
            output_dir=output_dir,
            output_paths=parse_output_overrides(output),
            exclude_extensions=join_values(exclude),
            exclude_directories=join_values(exclude_dir),
            exclude_patterns=join_values(exclude_pattern),
            respect_gitignore=respect_gitignore or None,
            use_timestamp=timestamp or None,
            chunk_size=chunk_size,
            workers=workers,
            verbose=verbose,
            quiet=quiet or None,
            verbosity=verbosity,
            progress_style=progress_style,
        )
        logger = setup_logging(verbose=verbose, quiet=settings.quiet, level=settings.verbosity)

        reporter = (
            SilentReporter()
            if settings.quiet
            else ProgressReporter(console, style=settings.progress_style)
        )
        result = run(settings, progress=reporter)

        if not settings.quiet:
            display_summary(result, settings)

    except ConfigurationError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)

    except WorkspaceAggregatorError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Aggregation interrupted by user")
        console.print("\n[yellow]Aggregation interrupted[/yellow]")
        raise typer.Exit(130)
