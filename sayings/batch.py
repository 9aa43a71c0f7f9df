"""
Validate-and-retry processing of one batch of saying files.

A batch is sent to the model once. Items that fail validation are sent again,
alone, with corrective instructions. Whatever still fails is written to a
sibling -error.json file for manual review; everything else becomes a sibling
.json file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import config
from sayings.client import call_model
from sayings.prompts import CORRECTIVE_INSTRUCTIONS
from sayings.schema import SayingRecord
from sayings.validate import validate_saying

ModelCall = Callable[..., list]


@dataclass(frozen=True)
class SayingInput:
    path: Path
    content: str


@dataclass
class ItemFailure:
    saying: SayingInput
    reason: str
    record: SayingRecord | None = None


@dataclass
class BatchResult:
    successes: list[tuple[SayingInput, SayingRecord]] = field(default_factory=list)
    failures: list[ItemFailure] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """Terminal failures as "path: reason" lines for the run summary."""
        return [f"{f.saying.path}: {f.reason}" for f in self.failures]


def output_path(path: Path) -> Path:
    return path.with_suffix(config.OUTPUT_SUFFIX)


def error_path(path: Path) -> Path:
    return path.with_name(path.stem + config.ERROR_SUFFIX)


def read_saying(path: Path) -> SayingInput:
    with path.open("r", encoding="utf-8") as f:
        return SayingInput(path=path, content=f.read().strip())


def _dump(record: SayingRecord | None) -> dict | None:
    return record.model_dump() if record is not None else None


def _validate_pass(
    items: list[SayingInput],
    call: ModelCall,
    extra_instructions: str = "",
) -> tuple[list[tuple[SayingInput, SayingRecord]], list[ItemFailure]]:
    """Run one gateway call over `items` and split the answers into good and bad."""
    records = call([item.content for item in items], extra_instructions)
    if len(records) != len(items):
        raise ValueError(
            f"Record count mismatch: sent {len(items)}, received {len(records)}"
        )

    good: list[tuple[SayingInput, SayingRecord]] = []
    bad: list[ItemFailure] = []
    for item, record in zip(items, records):
        reason = validate_saying(record, item.content)
        if reason:
            bad.append(ItemFailure(saying=item, reason=reason, record=record))
        else:
            good.append((item, record))
    return good, bad


def write_success(item: SayingInput, record: SayingRecord) -> Path:
    out = output_path(item.path)
    with out.open("w", encoding="utf-8") as f:
        json.dump(record.to_output(), f, ensure_ascii=False, indent=2)

    # A stale error file from an earlier run no longer applies.
    stale = error_path(item.path)
    if stale.exists():
        stale.unlink()
    return out


def write_failure(failure: ItemFailure) -> Path:
    record = failure.record
    got = f"{record.lu_part1 if record else ''} | {record.lu_part2 if record else ''}"
    payload = {
        "file": str(failure.saying.path),
        "error": failure.reason,
        "expected": failure.saying.content,
        "got": got,
        "fullData": _dump(record),
    }
    out = error_path(failure.saying.path)
    with out.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return out


def process_batch(paths: list[Path], call: ModelCall = call_model) -> BatchResult:
    """
    Read, analyse, validate (with one corrective retry) and persist a batch.

    Args:
        paths: Input .txt files, in batch order.
        call:  Gateway function, call(texts, extra_instructions) -> records.

    Returns:
        The BatchResult after the retry pass. Gateway and filesystem errors
        propagate and abort the batch before anything is written.
    """
    items = [read_saying(Path(p)) for p in paths]
    if not items:
        return BatchResult()

    print(f"Processing batch of {len(items)} items...")
    successes, failures = _validate_pass(items, call)
    for failure in failures:
        print(f"  [WARN] ⚠️  Initial validation failed for: {failure.saying.path} - {failure.reason}")
        print(f"  Received data: {json.dumps(_dump(failure.record), ensure_ascii=False, indent=2)}")

    if failures:
        print(f"\nRetrying {len(failures)} failed items with corrected instructions...")
        retried, failures = _validate_pass(
            [f.saying for f in failures], call, CORRECTIVE_INSTRUCTIONS
        )
        successes.extend(retried)
        for failure in failures:
            print(f"  [WARN] ❌ Still failing after retry: {failure.saying.path} - {failure.reason}")
            print(f"  Received data: {json.dumps(_dump(failure.record), ensure_ascii=False, indent=2)}")

    for item, record in successes:
        out = write_success(item, record)
        print(f"Generated: {out}")

    for failure in failures:
        write_failure(failure)
        print(f"[ERROR] ❌ FAILED: {failure.saying.path} - {failure.reason}")

    return BatchResult(successes=successes, failures=failures)
