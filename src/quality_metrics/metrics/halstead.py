"""Halstead software science metrics.

    n1, n2  distinct operators, distinct operands
    N1, N2  total operators, total operands
    N = N1 + N2                 program length
    n = n1 + n2                 vocabulary
    V = N * log2(n)             volume
    D = (n1 / 2) * (N2 / n2)    difficulty
    E = D * V                   effort
    T = E / 18                  implementation time (seconds)
    B = E^2 / 3000              delivered bugs
"""

import math
from typing import Iterable, Optional, Union

from ..dialects import Dialect
from ..models import HalsteadMetrics

# Shared by every dialect.
OPERATORS = frozenset(
    [
        "+", "-", "*", "/", "%", "=",                   # arithmetic
        "==", "!=", "<", ">", "<=", ">=",               # comparison
        "and", "&", "or", "|", "not", "!",              # logic
        "if", "else", "while", "for", "def", "function", "return",  # keywords
    ]
)


def is_operator(token: str) -> bool:
    return token in OPERATORS


def is_operand(token: str) -> bool:
    return token.isalnum() and not is_operator(token)


def halstead_metrics(
    code_lines: Iterable[str], dialect: Optional[Union[Dialect, str]] = None
) -> HalsteadMetrics:
    """
    Tokenize code lines on whitespace and derive Halstead metrics.

    Tokens that are neither operators nor alphanumeric operands are ignored.
    Empty input yields all-zero metrics.

    Args:
        code_lines: Lines already classified as code
        dialect: Accepted like the other scorers; the operator table is
            the same for every dialect

    Returns:
        HalsteadMetrics for the lines
    """
    operators_seen: list[str] = []
    operands_seen: list[str] = []

    for line in code_lines:
        for token in line.split():
            if is_operator(token):
                operators_seen.append(token)
            elif is_operand(token):
                operands_seen.append(token)

    n1 = len(set(operators_seen))
    n2 = len(set(operands_seen))
    N1 = len(operators_seen)
    N2 = len(operands_seen)

    vocabulary = n1 + n2
    length = N1 + N2
    volume = int(length * math.log2(vocabulary)) if vocabulary > 0 else 0
    difficulty = (n1 / 2) * (N2 / n2) if n2 > 0 else 0.0
    effort = int(difficulty * volume)

    return HalsteadMetrics(
        n1_operators_distinct=n1,
        n2_operands_distinct=n2,
        N1_operators_total=N1,
        N2_operands_total=N2,
        N_program_len=length,
        n_program_vocab=vocabulary,
        v_volume=volume,
        d_difficulty=difficulty,
        e_effort=effort,
        implement_time_t=int(effort / 18),
        bugs_deliver_b=int((effort ** 2) / 3000),
    )

