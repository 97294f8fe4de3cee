"""
Logging setup for Workspace Aggregator.

Console output goes through a RichHandler on stderr so it never mixes
with progress bars or reports written to stdout. Module loggers live
under the ``workspace_aggregator`` namespace.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "workspace_aggregator"

# Verbosity names accepted by the CLI and config files.
VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(threadName)s] %(name)s: %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False, level: Optional[str] = None) -> int:
    """Map CLI flags and a verbosity name to a logging level.

    ``quiet`` wins over ``verbose``, and both win over ``level``.
    Unknown names fall back to WARNING.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    if level is None:
        return logging.WARNING
    return VERBOSITY_LEVELS.get(level.lower(), logging.WARNING)


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging with rich handler for colored output.

    Safe to call more than once; the CLI calls it again after the
    configuration files have been merged.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to append logs to
        level: Verbosity name (error/warn/info/debug/trace)

    Returns:
        The ``workspace_aggregator`` logger
    """
    log_level = resolve_level(verbose=verbose, quiet=quiet, level=level)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]
    if log_file:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(
        level=log_level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the package namespace.

    ``get_logger(__name__)`` is the usual call; bare names such as
    ``"scanning"`` are prefixed with ``workspace_aggregator.``.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
