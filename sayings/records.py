"""Loading generated records back for quick dataset inspection."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import config


def load_records(source: str | Path) -> list[dict]:
    """
    Load generated records from a directory tree or an aggregated JSON file.

    A directory is searched recursively for generated .json files; error files
    are skipped. A file must hold a JSON array (or a single object).
    """
    source = Path(source)
    if source.is_dir():
        records = []
        for path in sorted(source.rglob(f"*{config.OUTPUT_SUFFIX}")):
            if path.name.endswith(config.ERROR_SUFFIX):
                continue
            with path.open("r", encoding="utf-8") as f:
                records.append(json.load(f))
        return records

    with source.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return data if isinstance(data, list) else [data]


def filter_records(records: list[dict], field: str, value: Any) -> list[dict]:
    return [r for r in records if r.get(field) == value]
