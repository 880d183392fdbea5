"""
Data models for flashcards and their review statistics.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Difficulty(str, Enum):
    """
    The most recent self-reported difficulty of a card.
    """

    Easy = "Easy"
    Medium = "Medium"
    Hard = "Hard"


class CardMetadata(BaseModel):
    """
    Review statistics for a single card.

    Replaced wholesale when statistics are reset; otherwise only mutated
    field by field through Deck.update_card_difficulty.
    """

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid"
    )

    difficulty: Difficulty = Field(
        default=Difficulty.Medium,
        description="Most recent self-reported difficulty.",
    )
    times_reviewed: int = Field(
        default=0,
        ge=0,
        description="Number of completed ratings.",
    )
    correct_count: int = Field(
        default=0,
        ge=0,
        description="Number of ratings counted as correct.",
    )
    last_reviewed: Optional[date] = Field(
        default=None,
        description="Calendar date of the last rating (None if never rated).",
    )

    @model_validator(mode="after")
    def check_correct_not_above_reviewed(self) -> "CardMetadata":
        """Ensures correct_count never exceeds times_reviewed."""
        if self.correct_count > self.times_reviewed:
            raise ValueError(
                f"correct_count ({self.correct_count}) cannot exceed "
                f"times_reviewed ({self.times_reviewed})."
            )
        return self

    @property
    def success_rate(self) -> float:
        """Fraction of reviews rated correct, 0.0 if never reviewed."""
        if self.times_reviewed == 0:
            return 0.0
        return self.correct_count / self.times_reviewed


class Flashcard(BaseModel):
    """
    A question/answer pair and its review metadata.

    Only the metadata is mutable; id, question and answer are fixed at
    creation.
    """

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid"
    )

    id: int = Field(
        ...,
        ge=0,
        frozen=True,
        description="Deck-unique id assigned by Deck.add_card.",
    )
    question: str = Field(..., frozen=True, description="Question text.")
    answer: str = Field(..., frozen=True, description="Answer text.")
    metadata: CardMetadata = Field(
        default_factory=CardMetadata,
        description="Review statistics for this card.",
    )


class DeckStats(BaseModel):
    """Aggregate review statistics across a deck."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    total_cards: int = Field(default=0, ge=0)
    total_reviews: int = Field(default=0, ge=0)
    total_correct: int = Field(default=0, ge=0)

    @property
    def overall_success_rate(self) -> float:
        """Fraction of all reviews rated correct, 0.0 with no reviews."""
        if self.total_reviews == 0:
            return 0.0
        return self.total_correct / self.total_reviews
