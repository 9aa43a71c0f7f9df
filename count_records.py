"""
Count generated records whose field has a given value.

Usage:
    python count_records.py                               # vulgarity == 2 under datasets/
    python count_records.py --field culturalPopularity --value 5
    python count_records.py dataset.json --field wordsDifficulty --value 1
"""

from __future__ import annotations

import argparse
import json

import config
from sayings.records import filter_records, load_records


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Count generated sayings records by field value.")
    parser.add_argument(
        "source",
        nargs="?",
        default=config.DATASETS_DIR,
        help=f"Dataset directory or aggregated JSON file (default: {config.DATASETS_DIR})",
    )
    parser.add_argument("--field", "-f", default="vulgarity", help="Record field to match (default: vulgarity)")
    parser.add_argument("--value", "-v", type=int, default=2, help="Integer value to match (default: 2)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    items = filter_records(load_records(args.source), args.field, args.value)
    print(json.dumps(items, ensure_ascii=False, indent=2))
    print("length", len(items))


if __name__ == "__main__":
    main()
