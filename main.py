"""
Entry point for the Luxembourgish sayings dataset generator.

Usage:
    python main.py                  # every .txt without a .json yet
    python main.py 50               # at most 50 files overall
    python main.py --overwrite      # regenerate existing outputs too
    python main.py -n 3             # at most 3 files per directory
    python main.py 20 -n 2 --data-dir datasets/proverbs --batch-size 5
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

import config
from sayings.batch import ModelCall, process_batch
from sayings.client import call_model
from sayings.discover import chunked, discover_files


@dataclass
class RunReport:
    """Outcome of a whole run, accumulated batch by batch."""

    processed: int = 0
    succeeded: int = 0
    errors: list[str] = field(default_factory=list)


# ── Core run loop ──────────────────────────────────────────────────────────────

def run(
    data_dir: str | Path,
    limit: int | None = None,
    overwrite: bool = False,
    limit_per_dir: int | None = None,
    batch_size: int = config.BATCH_SIZE,
    call: ModelCall | None = None,
) -> RunReport:
    """
    Discover pending sayings and process them batch by batch.

    A batch-level failure (backend or filesystem) stops the run: the exception
    is re-raised with the partial report attached as `exc.report`.
    """
    call = call or call_model
    report = RunReport()

    files = discover_files(data_dir, limit=limit, overwrite=overwrite, limit_per_dir=limit_per_dir)
    if not files:
        print("No new files to process.")
        return report

    print(f"Processing {len(files)} files...")

    batches = list(chunked(files, batch_size))
    for batch in tqdm(batches, desc="  Processing batches", unit="batch"):
        try:
            result = process_batch(list(batch), call=call)
        except Exception as exc:
            print(f"[ERROR] Failed to process batch: {exc}")
            exc.report = report
            raise
        report.processed += len(batch)
        report.succeeded += len(result.successes)
        report.errors.extend(result.errors)

    return report


def print_summary(report: RunReport, aborted: bool = False) -> None:
    """Print unresolved failures; the success line only for a completed run."""
    if report.errors:
        print("\n" + "=" * 50)
        verb = "Aborted" if aborted else "Finished"
        print(f"{verb} with {len(report.errors)} errors:")
        for error in report.errors:
            print(f"❌ {error}")
        print("=" * 50)
    elif not aborted:
        print("\nFinished processing successfully.")


# ── CLI ────────────────────────────────────────────────────────────────────────

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Split and translate Luxembourgish sayings into JSON records with an LLM."
    )
    parser.add_argument(
        "limit",
        nargs="?",
        type=int,
        default=None,
        help="Maximum number of files to process in this run (default: all)",
    )
    parser.add_argument(
        "--overwrite", "-o",
        action="store_true",
        help="Regenerate files that already have a .json output",
    )
    parser.add_argument(
        "--n", "-n",
        type=int,
        default=None,
        dest="limit_per_dir",
        help="Maximum number of files to take from each directory",
    )
    parser.add_argument(
        "--data-dir",
        default=config.DATASETS_DIR,
        help=f"Dataset directory (default: {config.DATASETS_DIR})",
    )
    parser.add_argument(
        "--batch-size", "-b",
        type=int,
        default=config.BATCH_SIZE,
        dest="batch_size",
        help=f"Sayings per API call (default: {config.BATCH_SIZE})",
    )
    return parser.parse_args(argv)


# ── Main ───────────────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    print(f"Data directory  : {args.data_dir}")
    print(f"Backends        : {', '.join(b['model'] for b in config.BACKENDS)}")
    print(f"Batch size      : {args.batch_size}")
    print(f"Overwrite       : {args.overwrite}\n")

    try:
        report = run(
            data_dir=args.data_dir,
            limit=args.limit,
            overwrite=args.overwrite,
            limit_per_dir=args.limit_per_dir,
            batch_size=args.batch_size,
        )
    except Exception as exc:
        print_summary(getattr(exc, "report", RunReport()), aborted=True)
        print(f"[ERROR] Run aborted: {exc}")
        sys.exit(1)

    print_summary(report)


if __name__ == "__main__":
    main()
