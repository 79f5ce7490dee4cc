"""JSON formatter for metrics reports."""

import json
from dataclasses import asdict
from typing import List

from .base import BaseFormatter
from ..metrics.summary import summarize
from ..models import MetricsRecord, RunContext


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, records: List[MetricsRecord], context: RunContext) -> None:
        print(self.format(records, context))

    def format(self, records: List[MetricsRecord], context: RunContext) -> str:
        data = {
            "run_timestamp": context.timestamp,
            "root_dir": context.root_dir,
            "summary": asdict(summarize(records)),
            "records": [r.to_row() for r in records],
        }
        return json.dumps(data, indent=2)
