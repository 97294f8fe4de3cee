"""Configuration loading and validation for Workspace Aggregator.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.workspace-aggregator.toml)
    3. Project config (./workspace-aggregator.toml)
    4. Explicit config file
    5. Environment variables (WORKSPACE_AGGREGATOR_* prefix)
    6. Overrides (passed as kwargs, typically from the CLI)

Example:
    >>> config = load_config("src", exclude_extensions="md,txt")
    >>> sorted(config.exclude_extensions)
    ['md', 'txt']
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, Union, get_type_hints

from .exceptions import InvalidConfigError, InvalidPathError, WorkspaceAggregatorError
from .logging_config import VERBOSITY_LEVELS

Verbosity = Literal["error", "warn", "info", "debug", "trace"]
ProgressStyle = Literal["simple", "detailed", "bar"]

PROGRESS_STYLES = ("simple", "detailed", "bar")

ENV_PREFIX = "WORKSPACE_AGGREGATOR_"
CONFIG_FILENAME = "workspace-aggregator.toml"


class OutputType(str, Enum):
    """Artifacts the renderers can produce."""

    WORKSPACE = "workspace"
    FILES = "files"
    TREE = "tree"
    SUMMARY = "summary"
    META = "meta"
    LLM = "llm"

    @property
    def default_filename(self) -> str:
        return _OUTPUT_FILENAMES[self]

    @classmethod
    def parse(cls, value: Union[str, "OutputType"]) -> "OutputType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise InvalidConfigError("outputs", value, f"unknown output type (choose from {choices})")


_OUTPUT_FILENAMES = {
    OutputType.WORKSPACE: "workspace.txt",
    OutputType.FILES: "files.txt",
    OutputType.TREE: "tree.txt",
    OutputType.SUMMARY: "summary.txt",
    OutputType.META: "meta.json",
    OutputType.LLM: "llm.md",
}

# Generated when no output type is requested explicitly.
DEFAULT_OUTPUTS: tuple[OutputType, ...] = (
    OutputType.WORKSPACE,
    OutputType.FILES,
    OutputType.TREE,
    OutputType.SUMMARY,
    OutputType.META,
)

# Chunk budget for the LLM format (roughly 4000 tokens).
DEFAULT_CHUNK_SIZE = 16000


@dataclass(frozen=True)
class ScanConfig:
    """Validated, immutable settings for a single aggregation run.

    Attributes:
        Scan input:
            root: Directory to scan
            exclude_extensions: Lowercase extensions (no dot) never processed
            exclude_directories: Entry names pruned from the walk
            exclude_patterns: Substrings; any relative path containing one is skipped
            respect_gitignore: Consult the root .gitignore

        Outputs:
            outputs: Requested artifacts, in generation order
            output_dir: Directory for default artifact paths
            output_paths: Per-artifact path overrides
            use_timestamp: Insert the run timestamp into default file names
            chunk_size: Character budget of one LLM chunk

        Execution:
            workers: Metric worker threads (1 = sequential)
            verbosity: Logging verbosity name
            quiet: Suppress progress and console summary
            progress_style: Progress bar layout
    """

    root: Path
    exclude_extensions: frozenset[str] = frozenset()
    exclude_directories: frozenset[str] = frozenset()
    exclude_patterns: frozenset[str] = frozenset()
    respect_gitignore: bool = False

    outputs: tuple[OutputType, ...] = DEFAULT_OUTPUTS
    output_dir: Path = Path(".")
    output_paths: Mapping[OutputType, Path] = field(default_factory=dict, hash=False)
    use_timestamp: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE

    workers: int = 1
    verbosity: Verbosity = "warn"
    quiet: bool = False
    progress_style: ProgressStyle = "detailed"

    timestamp: str = field(
        default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S"), compare=False
    )

    def __post_init__(self) -> None:
        """Normalize collection fields and validate values."""
        root = Path(self.root)
        if not root.exists():
            raise InvalidPathError(root, "Directory not found")
        if not root.is_dir():
            raise InvalidPathError(root, "Not a directory")
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "output_dir", Path(self.output_dir))

        object.__setattr__(
            self, "exclude_extensions", frozenset(_normalize_extensions(self.exclude_extensions))
        )
        object.__setattr__(
            self, "exclude_directories", frozenset(_split_values(self.exclude_directories))
        )
        object.__setattr__(self, "exclude_patterns", frozenset(_split_values(self.exclude_patterns)))

        outputs = tuple(dict.fromkeys(OutputType.parse(o) for o in _split_values(self.outputs)))
        object.__setattr__(self, "outputs", outputs or DEFAULT_OUTPUTS)
        object.__setattr__(
            self,
            "output_paths",
            {OutputType.parse(k): Path(v) for k, v in dict(self.output_paths).items()},
        )

        if self.chunk_size < 1:
            raise InvalidConfigError("chunk_size", self.chunk_size, "must be at least 1")
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(VERBOSITY_LEVELS)}"
            )
        if self.progress_style not in PROGRESS_STYLES:
            raise InvalidConfigError(
                "progress_style", self.progress_style, f"expected one of {', '.join(PROGRESS_STYLES)}"
            )

    def output_path(self, output_type: OutputType) -> Path:
        """Resolve where an artifact is written."""
        if output_type in self.output_paths:
            return self.output_paths[output_type]

        filename = output_type.default_filename
        if self.use_timestamp:
            stem, dot, suffix = filename.rpartition(".")
            filename = f"{stem}_{self.timestamp}{dot}{suffix}"
        return self.output_dir / filename

    def artifact_paths(self) -> frozenset[Path]:
        """Absolute paths this run writes, so the scan can leave them out."""
        paths = set()
        for output_type in self.outputs:
            path = self.output_path(output_type).resolve()
            paths.add(path)
            if output_type is OutputType.LLM:
                paths.add(path.with_suffix(".chunks"))
        return frozenset(paths)


def _split_values(value: Any) -> list[str]:
    """Accept a comma-separated string or an iterable of strings."""
    if value is None:
        return []
    if isinstance(value, (str, OutputType)):
        value = [value] if isinstance(value, OutputType) else value.split(",")
    result = []
    for item in value:
        if isinstance(item, OutputType):
            result.append(item)
            continue
        item = str(item).strip()
        if item:
            result.append(item)
    return result


def _normalize_extensions(value: Any) -> list[str]:
    return [ext.lower().lstrip(".") for ext in _split_values(value) if ext.lstrip(".")]


def load_config(
    root: Optional[Union[str, Path]] = None,
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        root: Directory to scan (default: current directory)
        config_file: Optional explicit TOML config file
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options fall through

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If a config source or value is invalid, or the
            root directory does not exist
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not Path(config_file).exists():
            raise InvalidConfigError("config_file", config_file, "file not found")
        merged.update(_load_toml_file(Path(config_file)))

    merged.update(_load_env_vars())

    # "verbose" is a CLI convenience for verbosity=debug
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "debug"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    if root is not None:
        merged["root"] = root
    merged.setdefault("root", Path.cwd())

    unknown = sorted(set(merged) - set(ScanConfig.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration option")

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        raise WorkspaceAggregatorError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from WORKSPACE_AGGREGATOR_* environment variables.

    Set-valued fields (exclude_* and outputs) take comma-separated values,
    e.g. ``WORKSPACE_AGGREGATOR_EXCLUDE_EXTENSIONS=md,txt``.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        if field_name in ("output_paths", "timestamp"):
            continue

        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is Path:
        return Path(value)

    if origin in (frozenset, tuple):
        return _split_values(value)

    return value


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return its top-level table.

    Raises:
        InvalidConfigError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config_file", path, str(e))
