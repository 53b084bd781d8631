from __future__ import annotations

"""Helpers for loading and summarising run artefacts."""

from pathlib import Path
from statistics import mean
from typing import Any, Dict, List

from ..utils import jsonio
from .metrics import exact_match_rate


def load_trace(run_path: Path) -> List[Dict[str, Any]]:
    trace_path = run_path / "trace.jsonl"
    if not trace_path.exists():
        raise FileNotFoundError(f"Trace not found at {trace_path}")
    return jsonio.read_jsonl(trace_path)


def summarise(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    scored = [record for record in records if not record.get("skipped", False)]
    summary: Dict[str, Any] = {
        "num_pairs": len(records),
        "num_skipped": len(records) - len(scored),
    }

    names = sorted({name for record in scored for name in record.get("distances", {})})
    for name in names:
        values = [
            record["distances"][name]
            for record in scored
            if name in record.get("distances", {})
        ]
        summary[f"{name}_mean"] = mean(values)
        summary[f"{name}_max"] = max(values)
        summary[f"{name}_exact_match_rate"] = exact_match_rate(values)

    if "levenshtein" in names and "osa" in names:
        summary["transposition_savings"] = sum(
            1
            for record in scored
            if record["distances"].get("osa") is not None
            and record["distances"].get("levenshtein") is not None
            and record["distances"]["osa"] < record["distances"]["levenshtein"]
        )
    return summary


def write_report(run_path: Path, destination: Path | None = None) -> Path:
    records = load_trace(run_path)
    summary = summarise(records)
    target = destination or (run_path / "report.json")
    jsonio.write_json(target, {"summary": summary, "records": records})
    return target
