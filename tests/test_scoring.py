from __future__ import annotations

import pytest

from edit_distance.scoring import character_error_rate, exact_match_rate, word_error_rate


def test_character_error_rate() -> None:
    assert character_error_rate("kitten", "sitting") == pytest.approx(3 / 6)
    assert character_error_rate("", "") == 0.0
    assert character_error_rate("", "x") == 1.0


def test_word_error_rate() -> None:
    assert word_error_rate("place blue at f two now", "place blue at f two") == pytest.approx(1 / 6)


def test_exact_match_rate() -> None:
    assert exact_match_rate([0, 1, 0, 3]) == pytest.approx(0.5)
    assert exact_match_rate([]) == 0.0
