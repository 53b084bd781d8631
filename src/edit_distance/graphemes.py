from __future__ import annotations

"""Grapheme-cluster segmentation of input text."""

from typing import Tuple

import regex

_GRAPHEME = regex.compile(r"\X")

Sequence = Tuple[str, ...]


def tokenize(text: str) -> Sequence:
    """Split *text* into extended grapheme clusters, preserving order.

    A combining sequence or a multi-code-point emoji is a single unit, so
    ``tokenize("e\\u0301")`` yields one element.
    """

    return tuple(_GRAPHEME.findall(text))


def grapheme_length(text: str) -> int:
    """Number of user-perceived characters in *text*."""

    if text.isascii():
        # every ASCII code point is its own cluster except CR LF
        return len(text) - text.count("\r\n")
    return len(tokenize(text))
