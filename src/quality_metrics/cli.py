"""Command-line interface for Software Quality Metrics"""

import dataclasses
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from . import __version__
from .config import load_config
from .core import MetricsCollector
from .exceptions import QualityMetricsError
from .file_ops import write_text_file
from .formatters import CsvFormatter, get_formatter
from .logging_config import get_logger, setup_logging
from .models import RunContext

app = typer.Typer(
    name="quality-metrics",
    help="Software Quality Metrics - size, complexity, Halstead and maintainability per function",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)
logger = get_logger(__name__)


def _apply_verbosity(verbosity: str) -> None:
    """Reconfigure logging once TOML and environment settings are merged."""
    setup_logging(verbose=verbosity == "verbose", quiet=verbosity == "quiet")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"quality-metrics {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Path = typer.Argument(
        Path("."),
        help="Directory tree to analyze",
        file_okay=False,
        dir_okay=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default), csv, json",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the report as CSV to this file",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    exclude_dir: Optional[List[str]] = typer.Option(
        None,
        "--exclude-dir",
        "-x",
        help="Directory name to skip, in addition to the configured ones (repeatable)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Number of parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    fail_below: Optional[int] = typer.Option(
        None,
        "--fail-below",
        help="Exit 1 if any chunk's maintainability index is below this value (for CI gating)",
        min=0,
        max=100,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Compute code metrics for every .py, .r and .sql file under PATH.

    [bold cyan]Examples:[/bold cyan]

      quality-metrics src/

      quality-metrics . --format csv > metrics.csv

      quality-metrics . --output output.csv --exclude-dir legacy

      quality-metrics . --fail-below 25 --format json
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        formatter = get_formatter(fmt)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--format")

    try:
        settings = load_config(
            config_file=config,
            verbose=verbose,
            quiet=quiet,
            workers=workers,
            output_path=str(output) if output is not None else None,
            fail_below=fail_below,
        )
        if exclude_dir:
            settings = dataclasses.replace(
                settings, skip_dirs=[*settings.skip_dirs, *exclude_dir]
            )
        _apply_verbosity(settings.verbosity)

        collector = MetricsCollector(settings)
        records = collector.collect(path)
        context = RunContext(root_dir=str(path), output_path=settings.output_path)

        formatter.render(records, context)

        if settings.output_path:
            write_text_file(Path(settings.output_path), CsvFormatter().format(records, context))
            logger.info(f"Report written to {settings.output_path}")

        if collector.files_skipped:
            console.print(f"[yellow]{collector.files_skipped} file(s) could not be read[/yellow]")

    except QualityMetricsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if settings.fail_below is not None:
        failing = [r for r in records if r.maintainability_index < settings.fail_below]
        if failing:
            console.print(
                f"[red]{len(failing)} chunk(s) below maintainability index "
                f"{settings.fail_below}[/red]"
            )
            raise typer.Exit(1)


if __name__ == "__main__":
    app()
