"""Line classification: code lines vs. comment lines.

A single forward pass with one piece of state, ``in_block``. The rules are
heuristics, not a parser: string literals that look like comment markers are
misclassified, and a lone docstring marker only opens a block when the line
before it holds the dialect's definition keyword.
"""

from typing import Iterable, Optional, Tuple, Union

from ..dialects import Dialect, resolve_dialect
from ..models import ClassifiedLines


def opens_docstring(previous_line: Optional[str], line: str, dialect: Dialect) -> bool:
    """Decide whether a lone docstring marker starts a comment block.

    A marker alone on a line is read as the start of a docstring only when
    the line immediately before it contains the definition keyword. Anywhere
    else it is read as the end of a block, even when no block is open.
    """
    if line not in dialect.docstring_markers:
        return False
    return (
        previous_line is not None
        and dialect.definition_keyword is not None
        and dialect.definition_keyword in previous_line
    )


def is_self_contained_block(line: str, dialect: Dialect) -> bool:
    """True for a block comment that opens and closes on one line, e.g. ``/* x */``.

    Markers may overlap for docstring dialects (``\"\"\"\"`` counts), while
    bracket markers need room for both (``/*/`` does not).
    """
    for start in dialect.block_start:
        if not line.startswith(start):
            continue
        for stop in dialect.block_stop:
            if not line.endswith(stop):
                continue
            if start in dialect.docstring_markers or len(line) >= len(start) + len(stop):
                return True
    return False


def classify_lines(lines: Iterable[str], dialect: Union[Dialect, str]) -> ClassifiedLines:
    """Split normalized lines into code and comment lines.

    Args:
        lines: Normalized (stripped, lower-cased) source lines
        dialect: Dialect, dialect name or file extension

    Returns:
        ClassifiedLines holding every non-blank input line exactly once

    Raises:
        UnsupportedDialectError: If ``dialect`` is not registered
    """
    rules = resolve_dialect(dialect)
    block_start = rules.block_start
    block_stop = rules.block_stop

    code: list[str] = []
    comments: list[str] = []
    in_block = False
    previous_line: Optional[str] = None

    for line in lines:
        if not line:
            continue

        if line in rules.docstring_markers:
            # opens after a definition, otherwise closes (or no-ops)
            in_block = opens_docstring(previous_line, line, rules)
            comments.append(line)
        elif is_self_contained_block(line, rules):
            in_block = False
            comments.append(line)
        elif line.startswith(block_start):
            in_block = True
            comments.append(line)
        elif in_block:
            comments.append(line)
            if line.endswith(block_stop):
                in_block = False
        elif line.startswith(rules.line_comment):
            comments.append(line)
        else:
            code.append(line)

        previous_line = line

    return ClassifiedLines(code=tuple(code), comments=tuple(comments))


def split_code_and_comments(
    lines: Iterable[str], dialect: Union[Dialect, str]
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return ``(code_lines, comment_lines)`` for ``lines``."""
    classified = classify_lines(lines, dialect)
    return classified.code, classified.comments
