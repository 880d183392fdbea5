"""
Defines the Deck aggregate, the single authority for creating, deleting and
updating flashcards.
"""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import CardMetadata, DeckStats, Difficulty, Flashcard

logger = logging.getLogger(__name__)


class Deck(BaseModel):
    """
    A collection of flashcards keyed by id, plus id-generation state.

    Ids are handed out from next_id and never reused, even after the card
    holding them is deleted.
    """

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid"
    )

    cards: Dict[int, Flashcard] = Field(
        default_factory=dict,
        description="Cards keyed by their id.",
    )
    next_id: int = Field(
        default=1,
        ge=1,
        description="The id assigned to the next created card.",
    )

    @model_validator(mode="after")
    def check_ids_consistent(self) -> "Deck":
        """Ensures keys match card ids and next_id is above every id."""
        for key, card in self.cards.items():
            if key != card.id:
                raise ValueError(
                    f"Card key {key} does not match card id {card.id}."
                )
        if self.cards and self.next_id <= max(self.cards):
            raise ValueError(
                f"next_id ({self.next_id}) must be greater than every "
                f"card id (max {max(self.cards)})."
            )
        return self

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def add_card(self, question: str, answer: str) -> int:
        """
        Create a card with default metadata and return its newly assigned id.

        Duplicate questions are allowed.
        """
        card_id = self.next_id
        self.cards[card_id] = Flashcard(
            id=card_id, question=question, answer=answer
        )
        self.next_id += 1
        logger.debug(f"Added card {card_id}.")
        return card_id

    def get_card(self, card_id: int) -> Optional[Flashcard]:
        """Return the card with the given id, or None if absent."""
        return self.cards.get(card_id)

    def delete_card(self, card_id: int) -> bool:
        """
        Remove a card if present.

        Returns:
            bool: True if a card was removed. next_id is left untouched.
        """
        removed = self.cards.pop(card_id, None)
        if removed is None:
            logger.debug(f"Delete ignored, card {card_id} not found.")
            return False
        logger.debug(f"Deleted card {card_id}.")
        return True

    def update_card_difficulty(
        self,
        card_id: int,
        difficulty: Difficulty,
        correct: bool,
        reviewed_on: Optional[date] = None,
    ) -> None:
        """
        Record one review outcome for a card.

        This is the only path that changes review statistics. Sets the
        difficulty, increments times_reviewed, increments correct_count when
        correct, and stamps last_reviewed with reviewed_on (today by
        default). A missing id is silently ignored.
        """
        card = self.cards.get(card_id)
        if card is None:
            logger.warning(
                f"Rating for card {card_id} ignored, card not found."
            )
            return

        metadata = card.metadata
        metadata.difficulty = difficulty
        metadata.times_reviewed += 1
        if correct:
            metadata.correct_count += 1
        metadata.last_reviewed = reviewed_on or date.today()
        logger.debug(
            f"Card {card_id} rated {difficulty.value} "
            f"(correct={correct}), reviewed {metadata.times_reviewed} times."
        )

    def reset_all_stats(self) -> None:
        """Replace every card's metadata with fresh defaults."""
        for card in self.cards.values():
            card.metadata = CardMetadata()
        logger.info(f"Reset statistics for {len(self.cards)} cards.")

    def random_card_order(
        self, rng: Optional[random.Random] = None
    ) -> List[int]:
        """
        Return every card id exactly once, in shuffled order.

        Parameters:
            rng: Object with a ``shuffle(list)`` method used to permute the
                ids. Defaults to the module-level ``random`` generator.
        """
        card_ids = list(self.cards)
        if rng is None:
            random.shuffle(card_ids)
        else:
            rng.shuffle(card_ids)
        return card_ids

    def list_cards(self) -> List[Flashcard]:
        """Return all cards ordered by ascending id."""
        return [self.cards[card_id] for card_id in sorted(self.cards)]

    def get_stats(self) -> DeckStats:
        """Aggregate review counters across the deck."""
        return DeckStats(
            total_cards=len(self.cards),
            total_reviews=sum(
                c.metadata.times_reviewed for c in self.cards.values()
            ),
            total_correct=sum(
                c.metadata.correct_count for c in self.cards.values()
            ),
        )
