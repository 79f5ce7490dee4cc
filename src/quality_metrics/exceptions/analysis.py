"""Analysis-related exceptions: file access and unsupported dialects."""

from pathlib import Path
from typing import List

from .base import QualityMetricsError


class AnalysisError(QualityMetricsError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed, read or written."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class UnsupportedDialectError(AnalysisError):
    """Raised when a file extension has no registered dialect."""

    def __init__(self, extension: str, supported_extensions: List[str]):
        super().__init__(
            f"Unsupported dialect: {extension or '<none>'}",
            details={"extension": extension, "supported": ", ".join(supported_extensions)},
        )
        self.extension = extension
        self.supported_extensions = supported_extensions
