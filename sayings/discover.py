"""
Finds saying files that still need processing.

The dataset directory itself is the job state: an input whose sibling .json
exists has already been processed and is skipped unless overwrite is set.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Sequence, TypeVar

import config

T = TypeVar("T")


def _walk(directory: Path, overwrite: bool, limit_per_dir: int | None, found: list[Path]) -> None:
    entries = sorted(os.scandir(directory), key=lambda e: e.name)
    added_here = 0

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir():
            _walk(path, overwrite, limit_per_dir, found)
        elif entry.name.endswith(config.INPUT_SUFFIX):
            if limit_per_dir is not None and added_here >= limit_per_dir:
                continue
            if overwrite or not path.with_suffix(config.OUTPUT_SUFFIX).exists():
                found.append(path)
                added_here += 1


def discover_files(
    root: str | Path,
    limit: int | None = None,
    overwrite: bool = False,
    limit_per_dir: int | None = None,
) -> list[Path]:
    """
    Collect eligible input files under `root`.

    Args:
        root:          Dataset directory, searched recursively.
        limit:         Keep only the first `limit` files overall (0/None: all).
        overwrite:     Include files that already have a .json output.
        limit_per_dir: Cap on eligible files taken from each single directory.

    Returns:
        Paths sorted by their full path string; empty when `root` is missing.
    """
    root = Path(root)
    if not root.is_dir():
        print(f"[ERROR] Directory not found: {root}")
        return []

    found: list[Path] = []
    _walk(root, overwrite, limit_per_dir, found)
    found.sort(key=str)

    return found[:limit] if limit else found


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Consecutive groups of `size` items; the last group may be shorter."""
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield items[start: start + size]
