"""Rich terminal formatter for metrics reports."""

import io
import os
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..metrics.maintainability import maintainability_band
from ..metrics.summary import summarize
from ..models import MetricsRecord, RunContext
from .base import BaseFormatter

_BAND_STYLES = {
    "excellent": "green",
    "needs improvement": "yellow",
    "concerning": "red",
    "unmaintainable": "red bold",
}


def _mi_label(index: int) -> str:
    style = _BAND_STYLES[maintainability_band(index)]
    return f"[{style}]{index}[/{style}]"


class RichFormatter(BaseFormatter):
    """Summary panel followed by one table row per chunk."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def render(self, records: List[MetricsRecord], context: RunContext) -> None:
        self._print_summary(self.console, records, context)
        self._print_table(self.console, records)

    def format(self, records: List[MetricsRecord], context: RunContext) -> str:
        buffer = Console(file=io.StringIO(), width=160, color_system=None)
        self._print_summary(buffer, records, context)
        self._print_table(buffer, records)
        return buffer.file.getvalue()

    def _print_summary(
        self, console: Console, records: List[MetricsRecord], context: RunContext
    ) -> None:
        summary = summarize(records)
        lines = [
            f"Root: [bold]{escape(context.root_dir)}[/bold]   Run: {context.timestamp}",
            f"Files: [bold]{summary.files_analyzed}[/bold]   "
            f"Chunks: [bold]{summary.chunks}[/bold]",
            f"Lines: {summary.loc_total} total, {summary.loc_code} code, "
            f"{summary.loc_comments} comments",
            f"Maintainability: mean {summary.mean_maintainability:.1f}, "
            f"median {summary.median_maintainability:.1f}   "
            f"Max complexity: {summary.max_complexity}",
        ]
        if summary.unmaintainable_chunks:
            lines.append(
                f"[red]{summary.unmaintainable_chunks} chunk(s) below the "
                f"maintainable threshold[/red]"
            )
        console.print(
            Panel("\n".join(lines), title="[bold cyan]Code Metrics[/bold cyan]", expand=False)
        )

    def _print_table(self, console: Console, records: List[MetricsRecord]) -> None:
        if not records:
            console.print("[yellow]No source files found.[/yellow]")
            return

        table = Table(show_lines=False)
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Function")
        table.add_column("LOC", justify="right")
        table.add_column("Code", justify="right")
        table.add_column("Comments", justify="right")
        table.add_column("CC", justify="right")
        table.add_column("Volume", justify="right")
        table.add_column("Difficulty", justify="right")
        table.add_column("Effort", justify="right")
        table.add_column("Bugs", justify="right")
        table.add_column("MI", justify="right")

        for r in records:
            name = escape(r.function_name)
            function = f"[dim]{name}[/dim]" if r.is_whole_file else name
            table.add_row(
                escape(os.path.join(r.filepath, r.filename)),
                function,
                str(r.loc_total),
                str(r.loc_code),
                str(r.loc_comments),
                str(r.cyclocomplexity),
                str(r.halstead.v_volume),
                f"{r.halstead.d_difficulty:.2f}",
                str(r.halstead.e_effort),
                str(r.halstead.bugs_deliver_b),
                _mi_label(r.maintainability_index),
            )

        console.print(table)
