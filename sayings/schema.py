"""
Structured output contract for the sayings task.

The backend is asked to answer with a SayingBatch: one SayingRecord per input
saying, in the same order as the prompt.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SayingRecord(BaseModel):
    """One analysed and translated saying."""

    original_lu: str = Field(
        default="",
        description="The original Luxembourgish saying provided in the input",
    )
    lu_part1: str = Field(description="First part of the saying in Luxembourgish")
    lu_part2: str = Field(description="Second part of the saying in Luxembourgish")
    en_literal_translation_p1: str = Field(
        description="Literal but grammatically correct translation of the Luxembourgish saying, Part 1"
    )
    en_literal_translation_p2: str = Field(
        description="Literal but grammatically correct translation of the Luxembourgish saying, Part 2"
    )
    en_closest_real_corresponding_saying_p1: str = Field(
        description="Closest real corresponding English saying of the Luxembourgish saying, Part 1"
    )
    en_closest_real_corresponding_saying_p2: str = Field(
        description="Closest real corresponding English saying of the Luxembourgish saying, Part 2"
    )
    culturalPopularity: int = Field(
        ge=1,
        le=5,
        description="Popularity score (1-5) based on how common or well known the saying is in modern Luxembourgish.",
    )
    wordsDifficulty: int = Field(
        ge=1,
        le=5,
        description="Difficulty score (1-5), based on how many uncommon or complicated words are used in the original Luxembourgish.",
    )
    vulgarity: int | None = Field(
        default=None,
        ge=1,
        le=5,
        description="Vulgarity score (1-5), where 1 is not vulgar at all and 5 is extremely offensive or inappropriate.",
    )

    def to_output(self) -> dict:
        """Fields written to the generated .json file (never the raw original)."""
        return self.model_dump(exclude={"original_lu"}, exclude_none=True)


class SayingBatch(BaseModel):
    sayings: list[SayingRecord] = Field(description="List of analyzed and translated sayings")
