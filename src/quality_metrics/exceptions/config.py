"""Errors in user input: the analysis root and configuration values."""

from pathlib import Path
from typing import Any

from .base import QualityMetricsError


class ConfigurationError(QualityMetricsError):
    """Settings or command-line input that cannot be used."""


class InvalidPathError(ConfigurationError):
    """The analysis root is missing or is not a directory."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot analyze {path}", details={"reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """A configuration value failed validation."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(f"Invalid configuration for {key}: {value!r}", details={"reason": reason})
        self.key = key
        self.value = value
        self.reason = reason
