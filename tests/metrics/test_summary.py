"""Tests for quality_metrics.metrics.summary."""

from quality_metrics.core import analyze_source
from quality_metrics.metrics.summary import summarize
from quality_metrics.models import ReportSummary


class TestSummarize:
    def test_empty_report(self):
        assert summarize([]) == ReportSummary()

    def test_two_files(self, make_source, add_function_lines, sql_query_lines):
        records = analyze_source(make_source(add_function_lines, "calc.py")) + analyze_source(
            make_source(sql_query_lines, "sales.sql")
        )
        summary = summarize(records)

        assert summary.files_analyzed == 2
        assert summary.chunks == 4
        # whole-file rows only, so function chunks are not double counted
        assert summary.loc_total == 4
        assert summary.loc_code == 3
        assert summary.loc_comments == 1
        assert summary.mean_maintainability == 90.5  # (86 + 95) / 2
        assert summary.median_maintainability == 90.5
        assert summary.max_complexity == 3
        assert summary.unmaintainable_chunks == 0

    def test_counts_unmaintainable_chunks(self, make_source):
        lines = [f"v{i} = v{i} + {i} * w{i} - {i} / z if a else b" for i in range(300)]
        records = analyze_source(make_source(lines, "big.py"))
        summary = summarize(records)
        assert records[0].maintainability_index < 25
        assert summary.unmaintainable_chunks == 1
