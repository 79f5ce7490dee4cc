"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from quality_metrics.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
    QualityMetricsError,
    UnsupportedDialectError,
)


class TestBaseError:
    def test_message_only(self):
        assert str(QualityMetricsError("boom")) == "boom"

    def test_details_appended(self):
        error = QualityMetricsError("boom", details={"file": "a.py", "line": "3"})
        assert str(error) == "boom (file=a.py, line=3)"
        assert error.message == "boom"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error,parent",
        [
            (FileAccessError(Path("a.py"), "gone"), AnalysisError),
            (UnsupportedDialectError(".java", [".py"]), AnalysisError),
            (InvalidPathError(Path("x"), "missing"), ConfigurationError),
            (InvalidConfigError("workers", 0, "too small"), ConfigurationError),
        ],
    )
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, QualityMetricsError)


class TestAttributes:
    def test_file_access(self):
        error = FileAccessError(Path("a.py"), "permission denied")
        assert error.filepath == Path("a.py")
        assert error.reason == "permission denied"
        assert "permission denied" in str(error)

    def test_unsupported_dialect(self):
        error = UnsupportedDialectError(".java", [".py", ".sql"])
        assert error.extension == ".java"
        assert "Unsupported dialect: .java" in str(error)
        assert ".py, .sql" in str(error)

    def test_unsupported_dialect_without_extension(self):
        assert "<none>" in str(UnsupportedDialectError("", [".py"]))

    def test_invalid_config(self):
        error = InvalidConfigError("workers", 0, "must be at least 1")
        assert error.key == "workers"
        assert error.value == 0
        assert str(error).startswith("Invalid configuration for workers: 0")
