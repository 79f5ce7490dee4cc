"""
Software Quality Metrics - per-function code metrics for scripts and queries

Line counts, textual cyclomatic complexity, Halstead measures and the
Maintainability Index for Python, R and SQL sources, reported per function
and per file.
"""

__version__ = "0.2.0"

from .core import MetricsCollector, analyze_source, count_lines
from .dialects import Dialect, get_dialect, register_dialect
from .models import HalsteadMetrics, MetricsRecord, SourceFile

__all__ = [
    "analyze_source",  # Single file entry point
    "MetricsCollector",  # Directory entry point
    "count_lines",
    "Dialect",
    "get_dialect",
    "register_dialect",
    "MetricsRecord",
    "HalsteadMetrics",
    "SourceFile",
]
