"""Function segmentation: split a file into named chunks.

Shortcoming: there is no closing-brace or indentation tracking, so the final
function of a file absorbs every top-level line that follows it.
"""

from typing import List, Optional, Sequence, Union

from ..dialects import Dialect, resolve_dialect
from ..models import WHOLE_FILE_CHUNK, FunctionChunk


def segment_functions(
    lines: Sequence[str], dialect: Union[Dialect, str]
) -> List[FunctionChunk]:
    """Split lines into one chunk per detected function signature.

    Lines before the first signature are not part of any function chunk.
    Flat dialects return a single chunk holding every line.

    Raises:
        UnsupportedDialectError: If ``dialect`` is not registered
    """
    rules = resolve_dialect(dialect)

    if not rules.has_functions:
        return [FunctionChunk(name=rules.flat_chunk_name, lines=tuple(lines))]

    functions: List[FunctionChunk] = []
    current_name: Optional[str] = None
    current_lines: List[str] = []

    for line in lines:
        if rules.is_signature(line):
            if current_name is not None:
                functions.append(FunctionChunk(name=current_name, lines=tuple(current_lines)))
            current_name = rules.extract_name(line)
            current_lines = [line]
        elif current_name is not None:
            current_lines.append(line)

    if current_name is not None:
        functions.append(FunctionChunk(name=current_name, lines=tuple(current_lines)))

    return functions


def whole_file_chunk(lines: Sequence[str]) -> FunctionChunk:
    """The synthetic chunk carrying module-level (whole file) metrics."""
    return FunctionChunk(name=WHOLE_FILE_CHUNK, lines=tuple(lines))


def segment(lines: Sequence[str], dialect: Union[Dialect, str]) -> List[FunctionChunk]:
    """Whole-file chunk first, then every function chunk in file order."""
    return [whole_file_chunk(lines)] + segment_functions(lines, dialect)
