"""Metrics extraction: classification, segmentation and scoring."""

from .classifier import classify_lines, opens_docstring, split_code_and_comments
from .complexity import cyclomatic_complexity
from .halstead import OPERATORS, halstead_metrics
from .maintainability import maintainability_band, maintainability_index
from .segmenter import segment, segment_functions, whole_file_chunk
from .summary import summarize

__all__ = [
    "classify_lines",
    "split_code_and_comments",
    "opens_docstring",
    "segment",
    "segment_functions",
    "whole_file_chunk",
    "cyclomatic_complexity",
    "halstead_metrics",
    "OPERATORS",
    "maintainability_index",
    "maintainability_band",
    "summarize",
]
