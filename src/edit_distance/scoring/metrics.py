from __future__ import annotations

"""Error rates built on the Levenshtein engine."""

from typing import Sequence

from ..algorithms import levenshtein_sequence
from ..graphemes import tokenize


def _error_rate(reference: Sequence[str], hypothesis: Sequence[str]) -> float:
    if not reference:
        return 0.0 if not hypothesis else 1.0
    return levenshtein_sequence(reference, hypothesis) / float(len(reference))


def character_error_rate(reference: str, hypothesis: str) -> float:
    """Grapheme edits needed per grapheme of *reference*."""

    return _error_rate(tokenize(reference), tokenize(hypothesis))


def word_error_rate(reference: str, hypothesis: str) -> float:
    """Word error rate over whitespace-separated tokens."""

    return _error_rate(reference.split(), hypothesis.split())


def exact_match_rate(distances: Sequence[int]) -> float:
    """Fraction of distances equal to zero."""

    if not distances:
        return 0.0
    return sum(1 for value in distances if value == 0) / len(distances)
