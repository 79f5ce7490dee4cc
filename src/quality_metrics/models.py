"""Data models for Software Quality Metrics"""

import datetime
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Sentinel chunk name for whole-file metrics; the underscore keeps it ahead
# of lower-cased function names when sorted.
WHOLE_FILE_CHUNK = "_FILE_TOTAL"


@dataclass(frozen=True)
class SourceFile:
    """A source file after normalization (stripped, lower-cased, no blanks)."""

    filepath: str
    filename: str
    file_extension: str
    lines: Tuple[str, ...]


@dataclass(frozen=True)
class ClassifiedLines:
    """Lines of a chunk split into code and comments, input order kept."""

    code: Tuple[str, ...]
    comments: Tuple[str, ...]


@dataclass(frozen=True)
class FunctionChunk:
    """A named run of lines: one detected function, or the whole file."""

    name: str
    lines: Tuple[str, ...]

    @property
    def is_whole_file(self) -> bool:
        return self.name == WHOLE_FILE_CHUNK


@dataclass(frozen=True)
class LineCounts:
    """
    loc_total excludes empty lines.
    loc_code includes the signature line as well as returns.
    loc_comments includes block start and end lines.
    """

    loc_total: int
    loc_code: int
    loc_comments: int


@dataclass(frozen=True)
class HalsteadMetrics:
    """Classical Halstead measures for one chunk."""

    # distinct operators (e.g. +, -, =, if)
    n1_operators_distinct: int = 0
    # distinct operands (variables, constants)
    n2_operands_distinct: int = 0
    # operator occurrences, duplicates included
    N1_operators_total: int = 0
    # operand occurrences, duplicates included
    N2_operands_total: int = 0
    N_program_len: int = 0
    n_program_vocab: int = 0
    v_volume: int = 0
    d_difficulty: float = 0.0
    e_effort: int = 0
    # estimated implementation time, in seconds
    implement_time_t: int = 0
    bugs_deliver_b: int = 0


@dataclass(frozen=True)
class MetricsRecord:
    """One report row: metrics for a single chunk of a single file."""

    filepath: str
    file_extension: str
    filename: str
    function_name: str
    loc_total: int
    loc_code: int
    loc_comments: int
    cyclocomplexity: int
    halstead: HalsteadMetrics
    maintainability_index: int

    @property
    def is_whole_file(self) -> bool:
        return self.function_name == WHOLE_FILE_CHUNK

    @property
    def sort_key(self) -> Tuple[str, str, str, bool, str]:
        return (
            self.filepath,
            self.file_extension,
            self.filename,
            not self.is_whole_file,
            self.function_name,
        )

    def to_row(self) -> Dict[str, Any]:
        """Flatten into report columns, Halstead fields inlined."""
        row: Dict[str, Any] = {
            "filepath": self.filepath,
            "file_extension": self.file_extension,
            "filename": self.filename,
            "function_name": self.function_name,
            "loc_total": self.loc_total,
            "loc_code": self.loc_code,
            "loc_comments": self.loc_comments,
            "cyclocomplexity": self.cyclocomplexity,
        }
        row.update(asdict(self.halstead))
        row["maintainability_index"] = self.maintainability_index
        return row


REPORT_COLUMNS: List[str] = list(
    MetricsRecord("", "", "", "", 0, 0, 0, 1, HalsteadMetrics(), 0).to_row()
)


def _run_timestamp() -> str:
    return datetime.datetime.now().strftime("%Y%m%d_%H%M%S")


@dataclass(frozen=True)
class RunContext:
    """Per-run values handed to formatters alongside the records."""

    root_dir: str = "."
    timestamp: str = field(default_factory=_run_timestamp)
    output_path: Optional[str] = None


@dataclass(frozen=True)
class ReportSummary:
    """Aggregate figures over a report."""

    files_analyzed: int = 0
    chunks: int = 0
    loc_total: int = 0
    loc_code: int = 0
    loc_comments: int = 0
    mean_maintainability: float = 0.0
    median_maintainability: float = 0.0
    max_complexity: int = 0
    unmaintainable_chunks: int = 0
