"""Exception hierarchy for Software Quality Metrics."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    UnsupportedDialectError,
)
from .base import QualityMetricsError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "QualityMetricsError",
    "AnalysisError",
    "FileAccessError",
    "UnsupportedDialectError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
