from __future__ import annotations

"""Optimal string alignment (restricted Damerau-Levenshtein) distance.

Adds transposition of two adjacent graphemes to the Levenshtein edits. A
substring may be edited at most once, so OSA does not satisfy the
triangle inequality: ``osa("CA", "ABC") == 3`` although
``osa("CA", "AC") + osa("AC", "ABC") == 2``.
"""

from typing import List, Optional

from ..graphemes import tokenize
from .common import cell, check_text, trivial_distance


def osa_distance(one: str, other: str) -> int:
    """Return the OSA distance between *one* and *other*."""

    check_text(one, other)
    trivial = trivial_distance(one, other)
    if trivial is not None:
        return trivial

    a = tokenize(one)
    b = tokenize(other)
    width = len(b) + 1

    # rows i-2, i-1 and i of the conceptual matrix
    before: Optional[List[int]] = None
    previous: List[int] = list(range(width))
    for i in range(1, len(a) + 1):
        current = [i] + [0] * (width - 1)
        for j in range(1, width):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            value = min(
                previous[j - 1] + cost,
                current[j - 1] + 1,
                previous[j] + 1,
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                value = min(value, cell(before, j - 2) + 1)
            current[j] = value
        before, previous = previous, current
    return previous[-1]
