from __future__ import annotations

"""Distance metric registry."""

from typing import Callable, Dict

from .common import InternalInvariantError
from .levenshtein import levenshtein_distance, levenshtein_sequence
from .osa import osa_distance

DistanceFunction = Callable[[str, str], int]

_METRICS: Dict[str, DistanceFunction] = {
    "levenshtein": levenshtein_distance,
    "osa": osa_distance,
}


def get_metric(name: str) -> DistanceFunction:
    try:
        return _METRICS[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown metric '{name}' (available: {', '.join(sorted(_METRICS))})"
        ) from exc


def register_metric(name: str, func: DistanceFunction) -> None:
    """Register a distance function under *name*."""

    if not name:
        raise ValueError("Metric name must be non-empty")
    _METRICS[name] = func


def available_metrics() -> Dict[str, DistanceFunction]:
    """Return the currently registered metric mapping."""

    return dict(_METRICS)


__all__ = [
    "DistanceFunction",
    "InternalInvariantError",
    "available_metrics",
    "get_metric",
    "levenshtein_distance",
    "levenshtein_sequence",
    "osa_distance",
    "register_metric",
]
