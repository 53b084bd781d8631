from __future__ import annotations

"""Reading and writing the JSON/JSONL artefacts of a batch run."""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Tuple


def write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=indent, ensure_ascii=False)
        handle.write("\n")


def iter_jsonl(path: Path) -> Iterator[Tuple[int, Any]]:
    """Yield ``(line_number, record)`` for every non-blank line of *path*."""

    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield line_number, json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{line_number}: invalid JSON ({exc.msg})") from exc


def read_jsonl(path: Path) -> List[Any]:
    return [record for _, record in iter_jsonl(path)]


def write_jsonl(path: Path, rows: Iterable[Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row, ensure_ascii=False) + "\n")
