from .metrics import character_error_rate, exact_match_rate, word_error_rate
from . import reports

__all__ = [
    "character_error_rate",
    "exact_match_rate",
    "word_error_rate",
    "reports",
]
