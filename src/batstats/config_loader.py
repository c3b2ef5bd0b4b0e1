"""Persist and load CLI column mapping profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass
class ColumnProfile:
    columns: Dict[str, str]

    @classmethod
    def load(cls, path: Path) -> "ColumnProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        columns = data.get("columns", {}) if isinstance(data, dict) else None
        if not isinstance(columns, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in columns.items()
        ):
            raise ValueError(f"{path} must hold a 'columns' object mapping field names to headers")
        return cls(columns=columns)

    def save(self, path: Path) -> None:
        payload = {"columns": self.columns}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
