from __future__ import annotations

"""Batch runner scoring many string pairs."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..algorithms import get_metric
from ..config import BatchSettings, InputTooLongError, PairModel, select_pairs
from ..graphemes import grapheme_length
from ..utils import jsonio

logger = logging.getLogger(__name__)


@dataclass
class PairRecord:
    pair_id: str
    one_length: int
    other_length: int
    distances: Dict[str, int] = field(default_factory=dict)
    skipped: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pair_id": self.pair_id,
            "one_length": self.one_length,
            "other_length": self.other_length,
            "distances": dict(self.distances),
            "skipped": self.skipped,
        }


class BatchRunner:
    def __init__(self, settings: Optional[BatchSettings] = None):
        self.settings = settings or BatchSettings()
        self.metrics = {name: get_metric(name) for name in self.settings.metrics}

    def score_pair(self, pair: PairModel) -> PairRecord:
        record = PairRecord(
            pair_id=pair.pair_id,
            one_length=grapheme_length(pair.one),
            other_length=grapheme_length(pair.other),
        )
        cap = self.settings.max_length
        if cap is not None and max(record.one_length, record.other_length) > cap:
            if not self.settings.skip_long:
                raise InputTooLongError(
                    f"Pair '{pair.pair_id}' exceeds max_length={cap} "
                    f"({record.one_length}, {record.other_length} graphemes)"
                )
            logger.warning("Skipping pair %s: longer than %d graphemes", pair.pair_id, cap)
            record.skipped = True
            return record
        for name, metric in self.metrics.items():
            record.distances[name] = metric(pair.one, pair.other)
        return record

    def run(
        self,
        pairs: Iterable[PairModel],
        *,
        limit: Optional[int] = None,
        run_dir: Optional[Path] = None,
    ) -> List[PairRecord]:
        selected = select_pairs(pairs, limit=limit)
        logger.info("Scoring %d pairs with %s", len(selected), ", ".join(self.metrics))
        results = [self.score_pair(pair) for pair in selected]
        if run_dir is not None:
            persist_run(results, run_dir, metrics=list(self.metrics))
        return results


def persist_run(
    run_records: Iterable[PairRecord],
    run_dir: Path,
    *,
    metrics: List[str],
) -> None:
    records = list(run_records)
    run_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(timezone.utc).isoformat()
    trace_path = run_dir / "trace.jsonl"
    table_path = run_dir / "distances.tsv"
    summary_path = run_dir / "summary.json"
    jsonio.write_jsonl(trace_path, [record.to_dict() for record in records])

    rows: List[str] = ["\t".join(["pair_id", "one_length", "other_length", *metrics])]
    for record in records:
        values = [
            str(record.distances[name]) if name in record.distances else ""
            for name in metrics
        ]
        rows.append(
            "\t".join(
                [record.pair_id, str(record.one_length), str(record.other_length), *values]
            )
        )
    table_path.write_text("\n".join(rows) + "\n", encoding="utf-8")

    scored = [record for record in records if not record.skipped]
    summary = {
        "generated_at": timestamp,
        "metrics": metrics,
        "num_pairs": len(records),
        "num_skipped": len(records) - len(scored),
        "avg_distance": {
            name: (
                sum(record.distances[name] for record in scored) / len(scored)
                if scored
                else 0.0
            )
            for name in metrics
        },
    }
    jsonio.write_json(summary_path, summary)
    logger.info("Wrote run artefacts to %s", run_dir)
