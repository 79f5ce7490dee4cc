"""Metrics pipeline: source files in, ordered metrics records out.

Usage:
    collector = MetricsCollector(load_config())
    records = collector.collect(Path("src"))

Larger trees are analysed on a thread pool. Records are sorted afterwards,
so the report order is the same either way.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .config import AnalysisConfig
from .dialects import Dialect, dialect_for_extension, resolve_dialect
from .exceptions import FileAccessError
from .file_ops import iter_source_files, read_source_file
from .logging_config import get_logger
from .metrics.classifier import classify_lines
from .metrics.complexity import cyclomatic_complexity
from .metrics.halstead import halstead_metrics
from .metrics.maintainability import maintainability_index
from .metrics.segmenter import segment
from .models import ClassifiedLines, FunctionChunk, LineCounts, MetricsRecord, SourceFile

logger = get_logger(__name__)

# CPU count, capped at 8
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# smaller batches run sequentially
_PARALLEL_MIN_FILES = 10


def _line_counts(lines: Sequence[str], classified: ClassifiedLines) -> LineCounts:
    return LineCounts(
        loc_total=len(lines),
        loc_code=len(classified.code),
        loc_comments=len(classified.comments),
    )


def count_lines(lines: Sequence[str], dialect: Union[Dialect, str]) -> LineCounts:
    """Total, code and comment line counts for a chunk."""
    return _line_counts(lines, classify_lines(lines, dialect))


def score_chunk(chunk: FunctionChunk, source: SourceFile, dialect: Dialect) -> MetricsRecord:
    """Classify a chunk's lines and run every scorer over its code lines."""
    classified = classify_lines(chunk.lines, dialect)
    counts = _line_counts(chunk.lines, classified)
    complexity = cyclomatic_complexity(classified.code, dialect)
    halstead = halstead_metrics(classified.code, dialect)

    return MetricsRecord(
        filepath=source.filepath,
        file_extension=source.file_extension,
        filename=source.filename,
        function_name=chunk.name,
        loc_total=counts.loc_total,
        loc_code=counts.loc_code,
        loc_comments=counts.loc_comments,
        cyclocomplexity=complexity,
        halstead=halstead,
        maintainability_index=maintainability_index(
            halstead.v_volume, complexity, counts.loc_code
        ),
    )


def analyze_source(
    source: SourceFile, dialect: Optional[Union[Dialect, str]] = None
) -> List[MetricsRecord]:
    """
    Produce one record per chunk of a normalized source file.

    Args:
        source: Normalized file contents
        dialect: Overrides the dialect derived from the file extension

    Returns:
        Whole-file record first, then one record per detected function

    Raises:
        UnsupportedDialectError: If the extension has no registered dialect
    """
    if dialect is None:
        rules = dialect_for_extension(source.file_extension)
    else:
        rules = resolve_dialect(dialect)

    return [score_chunk(chunk, source, rules) for chunk in segment(source.lines, rules)]


def sort_records(records: Iterable[MetricsRecord]) -> List[MetricsRecord]:
    """Order by path, extension, file name; whole-file row first per file."""
    return sorted(records, key=lambda r: r.sort_key)


class MetricsCollector:
    """Walks a directory tree and collects metrics for every handled file.

    Attributes:
        files_analyzed: Files successfully analysed by the last collect()
        files_skipped: Files that could not be read by the last collect()
    """

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or AnalysisConfig()
        self._max_workers = self.config.workers or _DEFAULT_WORKERS
        self.files_analyzed = 0
        self.files_skipped = 0

    def discover(self, root_dir: Path) -> List[Path]:
        """List handled source files under ``root_dir``."""
        return list(
            iter_source_files(
                root_dir,
                self.config.handled_extensions,
                skip_dirs=self.config.skip_dirs,
                follow_symlinks=self.config.follow_symlinks,
            )
        )

    def analyze_file(self, filepath: Path) -> Optional[List[MetricsRecord]]:
        """Records for one file, or None if it cannot be read."""
        try:
            source = read_source_file(filepath)
        except FileAccessError as e:
            logger.warning(f"Skipping {filepath}: {e.reason}")
            return None

        records = analyze_source(source)
        logger.debug(f"{filepath}: {len(records)} chunk(s)")
        return records

    def collect(self, root_dir: Path, parallel: bool = True) -> List[MetricsRecord]:
        """
        Analyse every handled file below ``root_dir``.

        Args:
            root_dir: Directory to scan
            parallel: Allow a thread pool for larger trees

        Returns:
            Sorted metrics records

        Raises:
            InvalidPathError: If root_dir is not a directory
            UnsupportedDialectError: If a discovered file has no dialect
        """
        paths = self.discover(Path(root_dir))
        logger.info(f"Found {len(paths)} source file(s) under {root_dir}")

        self.files_analyzed = 0
        self.files_skipped = 0
        records: List[MetricsRecord] = []

        def _add(result: Optional[List[MetricsRecord]]) -> None:
            if result is None:
                self.files_skipped += 1
            else:
                self.files_analyzed += 1
                records.extend(result)

        if not parallel or self._max_workers == 1 or len(paths) < _PARALLEL_MIN_FILES:
            for path in paths:
                _add(self.analyze_file(path))
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = [executor.submit(self.analyze_file, path) for path in paths]
                for future in as_completed(futures):
                    _add(future.result())

        return sort_records(records)
