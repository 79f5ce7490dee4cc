"""
Logging setup for quality_metrics.

Log records go to stderr through rich so that CSV and JSON reports written
to stdout stay machine-readable.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "quality_metrics"

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _level_for(verbose: bool, quiet: bool) -> int:
    # quiet wins when both flags are given
    if quiet:
        return logging.ERROR
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route logging to a rich stderr handler, and optionally to a file.

    Args:
        verbose: Log at DEBUG and show source locations
        quiet: Log errors only
        log_file: Path of a file that receives the same records

    Returns:
        The package logger
    """
    level = _level_for(verbose, quiet)

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            show_path=verbose,
            markup=False,
            rich_tracebacks=True,
        )
    ]
    if log_file:
        to_file = logging.FileHandler(log_file, encoding="utf-8")
        to_file.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        handlers.append(to_file)

    # replaces handlers installed by an earlier call
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``quality_metrics`` namespace (the package logger for None)."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
