from __future__ import annotations

"""Guards shared by the distance engines."""

from typing import List, Optional

from ..graphemes import grapheme_length


class InternalInvariantError(AssertionError):
    """Raised when a DP cell is read before it has been computed."""


def check_text(one: object, other: object) -> None:
    for value in (one, other):
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")


def trivial_distance(one: str, other: str) -> Optional[int]:
    """Return the distance when it follows without running the DP.

    Equal strings are at distance 0 and an empty string is as far from
    the other as the other's grapheme length. ``None`` means the general
    algorithm must run.
    """

    if one == other:
        return 0
    if not one:
        return grapheme_length(other)
    if not other:
        return grapheme_length(one)
    return None


def cell(row: Optional[List[int]], j: int) -> int:
    """Read ``row[j]``, failing loudly outside the populated window."""

    if row is None or not 0 <= j < len(row):
        raise InternalInvariantError(f"distance cell {j} read outside the computed rows")
    return row[j]
