"""Aggregate statistics over a metrics report."""

from typing import Sequence

import numpy as np

from ..models import MetricsRecord, ReportSummary
from .maintainability import UNMAINTAINABLE_BELOW


def summarize(records: Sequence[MetricsRecord]) -> ReportSummary:
    """
    Summarize a report.

    Line totals and maintainability averages come from the whole-file rows so
    that function chunks are not counted twice; complexity and the
    unmaintainable count cover every row.

    Args:
        records: Report rows as produced by the collector

    Returns:
        ReportSummary (all zeros for an empty report)
    """
    if not records:
        return ReportSummary()

    files = [r for r in records if r.is_whole_file]
    file_mi = np.array([r.maintainability_index for r in files], dtype=float)
    loc = np.array([[r.loc_total, r.loc_code, r.loc_comments] for r in files], dtype=int)
    complexity = np.array([r.cyclocomplexity for r in records], dtype=int)
    chunk_mi = np.array([r.maintainability_index for r in records], dtype=int)

    if files:
        loc_total, loc_code, loc_comments = (int(v) for v in loc.sum(axis=0))
        mean_mi = float(np.mean(file_mi))
        median_mi = float(np.median(file_mi))
    else:
        loc_total = loc_code = loc_comments = 0
        mean_mi = median_mi = 0.0

    return ReportSummary(
        files_analyzed=len(files),
        chunks=len(records),
        loc_total=loc_total,
        loc_code=loc_code,
        loc_comments=loc_comments,
        mean_maintainability=round(mean_mi, 2),
        median_maintainability=round(median_mi, 2),
        max_complexity=int(complexity.max()),
        unmaintainable_chunks=int(np.count_nonzero(chunk_mi < UNMAINTAINABLE_BELOW)),
    )
