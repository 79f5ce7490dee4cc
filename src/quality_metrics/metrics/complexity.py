"""Textual cyclomatic complexity.

Counts control-flow keyword occurrences rather than building a control-flow
graph. Keywords are matched as substrings, so overlapping keywords ("if " in
"elif ") and keywords inside identifiers all count.
"""

from typing import Iterable, Union

from ..dialects import Dialect, resolve_dialect

BASE_COMPLEXITY = 1


def decision_points(line: str, keywords: Iterable[str]) -> int:
    """Sum of non-overlapping occurrences of each keyword in ``line``."""
    return sum(line.count(keyword) for keyword in keywords)


def cyclomatic_complexity(code_lines: Iterable[str], dialect: Union[Dialect, str]) -> int:
    """
    Compute complexity over code-only lines.

    Args:
        code_lines: Lines already classified as code
        dialect: Dialect, dialect name or file extension

    Returns:
        1 plus the number of keyword occurrences; never below 1
    """
    keywords = resolve_dialect(dialect).complexity_keywords

    complexity = BASE_COMPLEXITY
    for line in code_lines:
        complexity += decision_points(line, keywords)

    return complexity
