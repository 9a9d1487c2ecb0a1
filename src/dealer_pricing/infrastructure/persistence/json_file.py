"""A single JSON document on disk, shared by the file-backed repositories."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable


class JsonFile:
    """Loads and rewrites one JSON file.

    The file is created with ``empty`` when missing.  Every ``load`` reads
    from disk, so two repositories pointed at the same file see each
    other's writes.
    """

    def __init__(self, path: Path, empty: Any) -> None:
        self.path = path
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            self.write(copy.deepcopy(empty))

    def read(self) -> Any:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, data: Any) -> None:
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def upsert(records: list[dict], record: dict, same: Callable[[dict], bool]) -> list[dict]:
    """Replace the first record matching ``same`` in place, or append."""
    for i, existing in enumerate(records):
        if same(existing):
            records[i] = record
            return records
    records.append(record)
    return records
