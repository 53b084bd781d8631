from __future__ import annotations

import pytest

import edit_distance.algorithms as metrics_module
from edit_distance.algorithms import available_metrics, get_metric, register_metric


def test_builtin_metrics_registered() -> None:
    assert set(available_metrics()) >= {"levenshtein", "osa"}
    assert get_metric("osa")("abc", "acb") == 1


def test_unknown_metric_raises() -> None:
    with pytest.raises(ValueError, match="Unknown metric"):
        get_metric("jaro")


def test_register_metric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(metrics_module, "_METRICS", dict(metrics_module._METRICS))
    register_metric("length_gap", lambda a, b: abs(len(a) - len(b)))
    assert get_metric("length_gap")("abc", "a") == 2
    with pytest.raises(ValueError):
        register_metric("", lambda a, b: 0)
