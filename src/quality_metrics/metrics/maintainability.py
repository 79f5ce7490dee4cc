"""Maintainability Index.

    MI = max(0, (171 - 5.2 ln(V) - 0.23 G - 16.2 ln(LOC)) * 100 / 171)

Rescaled to 0-100 as in Visual Studio's code metrics:
https://learn.microsoft.com/en-us/visualstudio/code-quality/code-metrics-values
"""

import math

A = 171
B = 5.2
C = 0.23
D = 16.2

# (lower bound, label), highest first
BANDS = (
    (75, "excellent"),
    (50, "needs improvement"),
    (25, "concerning"),
    (0, "unmaintainable"),
)
UNMAINTAINABLE_BELOW = 25


def maintainability_index(volume: float, complexity: int, code_line_count: int) -> int:
    """
    Combine Halstead volume, cyclomatic complexity and code size.

    Args:
        volume: Halstead volume
        complexity: Cyclomatic complexity
        code_line_count: Number of code lines (comments excluded)

    Returns:
        Index truncated to an int in [0, 100]; 0 when volume or line count
        is not positive, since ln() is undefined there
    """
    if volume <= 0 or code_line_count <= 0:
        return 0

    index = (A - B * math.log(volume) - C * complexity - D * math.log(code_line_count)) * 100 / A
    return int(min(100, max(0, index)))


def maintainability_band(index: int) -> str:
    """Label an index: more syntax, more nesting, more code = less maintainable."""
    for lower, label in BANDS:
        if index >= lower:
            return label
    return BANDS[-1][1]
