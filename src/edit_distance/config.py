from __future__ import annotations

"""Configuration models and input loading for batch runs."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .algorithms import available_metrics
from .utils import jsonio

logger = logging.getLogger(__name__)


class PairModel(BaseModel):
    """One pair of strings to compare."""

    pair_id: str
    one: str
    other: str


class BatchSettings(BaseModel):
    """Settings controlling a batch run."""

    metrics: List[str] = Field(default_factory=lambda: ["levenshtein", "osa"])
    max_length: Optional[int] = Field(default=None, ge=1)
    skip_long: bool = False

    @field_validator("metrics")
    @classmethod
    def _known_metrics(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one metric is required")
        known = available_metrics()
        unknown = [name for name in value if name not in known]
        if unknown:
            raise ValueError(f"unknown metrics: {', '.join(unknown)}")
        if len(set(value)) != len(value):
            raise ValueError("metrics must not repeat")
        return value


class SettingsNotFoundError(FileNotFoundError):
    """Raised when a settings file cannot be located."""


class PairFileNotFoundError(FileNotFoundError):
    """Raised when a pairs file cannot be located."""


class InputTooLongError(ValueError):
    """Raised when a pair exceeds the configured grapheme length cap."""


def load_settings(path: Optional[Path] = None) -> BatchSettings:
    """Load batch settings from YAML, or the defaults when *path* is ``None``."""

    if path is None:
        return BatchSettings()
    if not path.exists():
        raise SettingsNotFoundError(f"Settings file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    try:
        settings = BatchSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings in {path}: {exc}") from exc
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def load_pairs(path: Path) -> List[PairModel]:
    """Read all pairs from a JSONL file."""

    if not path.exists():
        raise PairFileNotFoundError(f"Pairs file not found at {path}")
    pairs: List[PairModel] = []
    for line_number, entry in jsonio.iter_jsonl(path):
        if isinstance(entry, dict):
            entry.setdefault("pair_id", f"pair-{line_number}")
        try:
            pairs.append(PairModel.model_validate(entry))
        except ValidationError as exc:
            raise ValueError(f"Invalid pair in {path}:{line_number}: {exc}") from exc
    logger.info("Loaded %d pairs from %s", len(pairs), path)
    return pairs


def select_pairs(
    pairs: Iterable[PairModel], *, limit: Optional[int] = None
) -> List[PairModel]:
    """Take at most *limit* pairs from the front of the list."""

    selected = list(pairs)
    if limit is not None:
        return selected[: max(limit, 0)]
    return selected
