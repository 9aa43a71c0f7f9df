"""
Checks that a model record is a faithful two-part split of the original saying.
"""

from __future__ import annotations

import re

from sayings.schema import SayingRecord

# Every saying must be split in two, in Luxembourgish and in both translations.
PART2_FIELDS = (
    "lu_part2",
    "en_literal_translation_p2",
    "en_closest_real_corresponding_saying_p2",
)

_WS = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WS.sub(" ", text).strip()


def normalize(text: str) -> str:
    """Comparison key: no commas or periods, single spaces, lower case."""
    return _collapse(re.sub(r"[,.]", "", text)).lower()


def validate_saying(record: SayingRecord | None, original: str) -> str | None:
    """
    Validate one record against the text it was produced from.

    Returns:
        None when the record is valid, otherwise the reason it was rejected.
        Empty part-2 fields are reported before a text mismatch.
    """
    if record is None:
        return "No data returned"

    for field in PART2_FIELDS:
        value = getattr(record, field, None)
        if not value or not value.strip():
            return f"Field {field} is empty - sayings must always be split in 2"

    combined = f"{record.lu_part1 or ''} {record.lu_part2 or ''}"
    if normalize(_collapse(original)) != normalize(_collapse(combined)):
        return "Combined parts do not match original text"

    return None
