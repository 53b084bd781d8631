from __future__ import annotations

from edit_distance import grapheme_length, tokenize


def test_tokenize_ascii_preserves_order() -> None:
    assert tokenize("gleam") == ("g", "l", "e", "a", "m")


def test_tokenize_empty_string() -> None:
    assert tokenize("") == ()
    assert grapheme_length("") == 0


def test_combining_sequence_is_one_unit() -> None:
    text = "cafe\u0301"
    assert len(text) == 5
    assert tokenize(text)[-1] == "e\u0301"
    assert grapheme_length(text) == 4


def test_emoji_clusters_are_one_unit() -> None:
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
    flags = "\U0001F1EB\U0001F1F7\U0001F1E9\U0001F1EA"
    assert grapheme_length(family) == 1
    assert grapheme_length(flags) == 2


def test_crlf_counts_once() -> None:
    assert grapheme_length("a\r\nb") == 3
    assert tokenize("a\r\nb") == ("a", "\r\n", "b")
