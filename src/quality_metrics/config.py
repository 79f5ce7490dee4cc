"""Configuration loading and management for Software Quality Metrics.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Project config (./quality-metrics.toml)
    3. Explicit config file
    4. Environment variables (QUALITY_METRICS_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, workers=2)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    2
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .dialects import get_all_known_extensions
from .exceptions import InvalidConfigError, QualityMetricsError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "QUALITY_METRICS_"
PROJECT_CONFIG_NAME = "quality-metrics.toml"

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a metrics run.

    Attributes:
        File discovery:
            skip_dirs: Directory names pruned from the walk (exact match)
            extensions: Extensions to analyse; each must have a dialect
            follow_symlinks: Follow symbolic links to directories

        Performance tuning:
            workers: Number of parallel workers (None = auto-detect)

        Output control:
            verbosity: Logging verbosity level
            output_path: CSV file written after the run (None = no file)
            fail_below: Exit non-zero when any chunk's maintainability
                index is below this value (None = never)
    """

    # File discovery
    skip_dirs: list[str] = field(
        default_factory=lambda: [
            "venv",
            "conda",
            "git",
            "renv",
            ".git",
            ".venv",
            "__pycache__",
            "node_modules",
        ]
    )
    extensions: list[str] = field(default_factory=get_all_known_extensions)
    follow_symlinks: bool = False

    # Performance tuning
    workers: Optional[int] = None

    # Output control
    verbosity: Verbosity = "normal"
    output_path: Optional[str] = None
    fail_below: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        known = set(get_all_known_extensions())
        for ext in self.extensions:
            if ext.lower() not in known:
                raise InvalidConfigError(
                    "extensions", ext, f"no dialect registered (known: {', '.join(sorted(known))})"
                )
        if not self.extensions:
            raise InvalidConfigError("extensions", self.extensions, "at least one is required")

        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be one of quiet, normal, verbose"
            )

        if self.fail_below is not None and not 0 <= self.fail_below <= 100:
            raise InvalidConfigError("fail_below", self.fail_below, "must be between 0 and 100")

    @property
    def handled_extensions(self) -> tuple[str, ...]:
        """Lower-cased extensions, ready for ``str.endswith``."""
        return tuple(ext.lower() for ext in self.extensions)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored so unset CLI options do not mask file settings

    Returns:
        Validated AnalysisConfig instance

    Raises:
        QualityMetricsError: If a config file is invalid or missing
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise QualityMetricsError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file))

    merged.update(_load_env_vars())

    # --quiet beats --verbose
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # unknown key
        raise QualityMetricsError(f"Invalid configuration: {e}")


def _read_config_file(path: Path) -> dict:
    try:
        return _load_toml_file(path)
    except QualityMetricsError:
        raise
    except Exception as e:
        raise QualityMetricsError(f"Invalid config file '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from QUALITY_METRICS_* environment variables.

    Supported environment variables:
        QUALITY_METRICS_WORKERS: int
        QUALITY_METRICS_FOLLOW_SYMLINKS: bool (true/false/1/0)
        QUALITY_METRICS_VERBOSITY: quiet/normal/verbose
        QUALITY_METRICS_OUTPUT_PATH: str
        QUALITY_METRICS_FAIL_BELOW: int
        QUALITY_METRICS_SKIP_DIRS: comma-separated names
        QUALITY_METRICS_EXTENSIONS: comma-separated extensions

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise QualityMetricsError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Optional[X] is Union[X, None]; unwrap to X
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return [item.strip() for item in value.split(",") if item.strip()]

    if type_hint is bool:
        flag = value.strip().lower()
        if flag not in _TRUE_VALUES | _FALSE_VALUES:
            raise ValueError(f"expected true/false, got '{value}'")
        return flag in _TRUE_VALUES

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        QualityMetricsError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            # Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise QualityMetricsError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
