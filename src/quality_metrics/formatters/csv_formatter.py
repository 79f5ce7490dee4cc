"""CSV formatter for metrics reports."""

import csv
import io
from typing import List

from .base import BaseFormatter
from ..models import REPORT_COLUMNS, MetricsRecord, RunContext


class CsvFormatter(BaseFormatter):
    """Render the report as CSV, one row per chunk."""

    columns = ["run_timestamp"] + REPORT_COLUMNS

    def render(self, records: List[MetricsRecord], context: RunContext) -> None:
        print(self.format(records, context), end="")

    def format(self, records: List[MetricsRecord], context: RunContext) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=self.columns, lineterminator="\n")
        writer.writeheader()
        for record in records:
            writer.writerow({"run_timestamp": context.timestamp, **record.to_row()})
        return output.getvalue()
