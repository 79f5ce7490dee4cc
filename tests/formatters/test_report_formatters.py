"""Tests for the report formatters."""

import csv
import io
import json

import pytest
from rich.console import Console

from quality_metrics.core import analyze_source
from quality_metrics.formatters import (
    CsvFormatter,
    JsonFormatter,
    RichFormatter,
    get_formatter,
)
from quality_metrics.models import REPORT_COLUMNS, RunContext


@pytest.fixture
def context():
    return RunContext(root_dir="project", timestamp="20240102_030405")


@pytest.fixture
def records(make_source, add_function_lines, sql_query_lines):
    return analyze_source(make_source(add_function_lines, "calc.py")) + analyze_source(
        make_source(sql_query_lines, "sales.sql")
    )


class TestGetFormatter:
    @pytest.mark.parametrize(
        "name,cls", [("rich", RichFormatter), ("json", JsonFormatter), ("csv", CsvFormatter)]
    )
    def test_known_names(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="xml"):
            get_formatter("xml")


class TestCsvFormatter:
    def test_header_and_rows(self, records, context):
        rows = list(csv.DictReader(io.StringIO(CsvFormatter().format(records, context))))

        assert len(rows) == 4
        assert list(rows[0]) == ["run_timestamp"] + REPORT_COLUMNS
        assert {row["run_timestamp"] for row in rows} == {"20240102_030405"}

    def test_values(self, records, context):
        rows = list(csv.DictReader(io.StringIO(CsvFormatter().format(records, context))))
        add = next(row for row in rows if row["function_name"] == "add")

        assert add["filename"] == "calc.py"
        assert add["cyclocomplexity"] == "1"
        assert add["v_volume"] == "11"
        assert add["maintainability_index"] == "86"

    def test_empty_report_has_header_only(self, context):
        output = CsvFormatter().format([], context)
        assert output.splitlines() == [",".join(["run_timestamp"] + REPORT_COLUMNS)]

    def test_render_prints_to_stdout(self, records, context, capsys):
        CsvFormatter().render(records, context)
        assert capsys.readouterr().out.startswith("run_timestamp,")


class TestJsonFormatter:
    def test_structure(self, records, context):
        data = json.loads(JsonFormatter().format(records, context))

        assert data["run_timestamp"] == "20240102_030405"
        assert data["root_dir"] == "project"
        assert data["summary"]["files_analyzed"] == 2
        assert data["summary"]["max_complexity"] == 3
        assert len(data["records"]) == 4
        assert data["records"][0]["function_name"] == "_FILE_TOTAL"

    def test_empty_report(self, context):
        data = json.loads(JsonFormatter().format([], context))
        assert data["records"] == []
        assert data["summary"]["chunks"] == 0


class TestRichFormatter:
    def test_format_contains_summary_and_rows(self, records, context):
        output = RichFormatter().format(records, context)

        assert "Code Metrics" in output
        assert "calc.py" in output
        assert "add" in output
        assert "_FILE_TOTAL" in output
        assert "86" in output

    def test_empty_report(self, context):
        assert "No source files found." in RichFormatter().format([], context)

    def test_markup_in_names_is_escaped(self, make_source, context):
        records = analyze_source(make_source(["def [bold](x):", "return x"], "odd.py"))
        output = RichFormatter().format(records, context)
        assert "[bold]" in output

    def test_render_uses_given_console(self, records, context):
        console = Console(file=io.StringIO(), width=160, color_system=None)
        RichFormatter(console=console).render(records, context)
        assert "Code Metrics" in console.file.getvalue()
