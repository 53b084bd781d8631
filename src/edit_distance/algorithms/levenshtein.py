from __future__ import annotations

"""Levenshtein edit distance over grapheme clusters."""

from typing import Hashable, List, Sequence

from ..graphemes import tokenize
from .common import check_text, trivial_distance


def levenshtein_sequence(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Return the Levenshtein distance between two token sequences.

    Iterative, with a single rolling row of ``len(b) + 1`` entries.
    """

    if not a:
        return len(b)
    if not b:
        return len(a)
    row: List[int] = list(range(len(b) + 1))
    for i, token_a in enumerate(a, start=1):
        last = i
        current = [i]
        for j, token_b in enumerate(b, start=1):
            substitution_cost = row[j - 1] + (token_a != token_b)
            insertion_cost = last + 1
            deletion_cost = row[j] + 1
            last = min(substitution_cost, insertion_cost, deletion_cost)
            current.append(last)
        row = current
    return row[-1]


def levenshtein_distance(one: str, other: str) -> int:
    """Return the Levenshtein distance between *one* and *other*.

    Insertions, deletions and substitutions each cost 1; the unit of edit
    is a grapheme cluster rather than a code point.
    """

    check_text(one, other)
    trivial = trivial_distance(one, other)
    if trivial is not None:
        return trivial
    return levenshtein_sequence(tokenize(one), tokenize(other))
