"""Levenshtein and optimal string alignment edit distances."""
from importlib.metadata import version, PackageNotFoundError

from .algorithms import levenshtein_distance, osa_distance
from .graphemes import grapheme_length, tokenize

try:
    __version__ = version("edit-distance")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "grapheme_length",
    "levenshtein_distance",
    "osa_distance",
    "tokenize",
]
