from __future__ import annotations

import json
from pathlib import Path

import pytest

from edit_distance.scoring.reports import load_trace, summarise, write_report


def test_summarise_computes_metric_stats() -> None:
    records = [
        {"pair_id": "a", "distances": {"levenshtein": 2, "osa": 1}, "skipped": False},
        {"pair_id": "b", "distances": {"levenshtein": 0, "osa": 0}, "skipped": False},
        {"pair_id": "c", "distances": {}, "skipped": True},
    ]

    summary = summarise(records)

    assert summary["num_pairs"] == 3
    assert summary["num_skipped"] == 1
    assert summary["levenshtein_mean"] == pytest.approx(1.0)
    assert summary["osa_max"] == 1
    assert summary["osa_exact_match_rate"] == pytest.approx(0.5)
    assert summary["transposition_savings"] == 1


def test_summarise_empty() -> None:
    assert summarise([]) == {"num_pairs": 0, "num_skipped": 0}


def test_write_report_persists_summary(tmp_path: Path) -> None:
    run_dir = tmp_path / "run"
    run_dir.mkdir()
    run_dir.joinpath("trace.jsonl").write_text(
        "\n".join(
            json.dumps({"pair_id": str(i), "distances": {"levenshtein": i}, "skipped": False})
            for i in range(2)
        )
        + "\n",
        encoding="utf-8",
    )

    target = write_report(run_dir)
    payload = json.loads(target.read_text())
    assert payload["summary"]["num_pairs"] == 2
    assert "transposition_savings" not in payload["summary"]
    assert len(load_trace(run_dir)) == 2


def test_load_trace_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_trace(tmp_path)
