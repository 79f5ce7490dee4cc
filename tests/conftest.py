"""Shared test fixtures for quality metrics tests."""

import pytest

from quality_metrics.dialects import DIALECTS, _BY_EXTENSION
from quality_metrics.models import SourceFile


@pytest.fixture
def add_function_lines():
    """Smallest keyword-style function: one signature, one return."""
    return ["def add(a, b):", "return a + b"]


@pytest.fixture
def sql_query_lines():
    """A commented query."""
    return ["-- total sales", "select sum(x) from t"]


@pytest.fixture
def docstring_function_lines():
    """Function with a multi-line docstring and an inline comment, normalized."""
    return [
        "def get_user_specified_models(file_path: str) -> list:",
        '"""',
        "read coordinated_data.json to find which models to include in the group run",
        'and this"""',
        'with open(file_path, "r") as file:',
        "json_data = json.load(file)",
        "# get all models to run",
        'included = json_data["group_run"]["include"]',
        "included_models = []",
        "for key, value in included.items():",
        "if value:",
        "included_models.append(key)",
        "return included_models",
    ]


@pytest.fixture
def python_module_lines():
    """Top-level code, two functions, trailing top-level call."""
    return [
        "import os",
        "def add(a, b):",
        "return a + b",
        "def sub(a, b):",
        "return a - b",
        "print(add(1, 2))",
    ]


@pytest.fixture
def r_script_lines():
    """R script with one assigned function."""
    return [
        "# helpers",
        "library(dplyr)",
        "meow <- function(name) {",
        "if (name == 'cat') {",
        "print(name)",
        "}",
        "}",
    ]


@pytest.fixture
def make_source():
    """Factory for SourceFile values."""

    def _make(lines, filename="script.py", filepath="project"):
        extension = "." + filename.rsplit(".", 1)[-1] if "." in filename else ""
        return SourceFile(
            filepath=filepath,
            filename=filename,
            file_extension=extension,
            lines=tuple(lines),
        )

    return _make


@pytest.fixture
def isolated_registry():
    """Restore the dialect registry after a test registers its own dialects."""
    dialects = dict(DIALECTS)
    by_extension = dict(_BY_EXTENSION)
    yield
    DIALECTS.clear()
    DIALECTS.update(dialects)
    _BY_EXTENSION.clear()
    _BY_EXTENSION.update(by_extension)


@pytest.fixture
def source_tree(tmp_path):
    """Directory tree with handled, unhandled and skipped files."""
    (tmp_path / "calc.py").write_text("def add(a, b):\n    return a + b\n")
    (tmp_path / "report.sql").write_text("-- total sales\nSELECT sum(x) FROM t\n")
    (tmp_path / "notes.txt").write_text("not source\n")
    stats = tmp_path / "stats"
    stats.mkdir()
    (stats / "Model.R").write_text("fit <- function(df) {\n  lm(y ~ x, df)\n}\n")
    venv = tmp_path / "venv"
    venv.mkdir()
    (venv / "vendored.py").write_text("def hidden():\n    pass\n")
    return tmp_path
