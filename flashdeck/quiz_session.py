"""
This module defines the QuizSession class, the control flow of a single quiz
run over a deck. It holds no I/O of its own: the caller displays cards, reads
ratings from the user and persists the deck once the session is over.
"""

import logging
import random
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .deck import Deck
from .exceptions import QuizSessionError
from .models import Difficulty, Flashcard

logger = logging.getLogger(__name__)

QUIT_KEY = "q"

# Rating key -> (difficulty to record, counts as correct)
RATING_CHOICES: Dict[str, Tuple[Difficulty, bool]] = {
    "c": (Difficulty.Easy, True),
    "g": (Difficulty.Medium, True),
    "w": (Difficulty.Hard, False),
}


class QuizState(Enum):
    """
    States of a quiz run.
    """

    NotStarted = "not_started"
    Presenting = "presenting"
    Revealed = "revealed"
    Rating = "rating"
    Summary = "summary"
    Aborted = "aborted"
    Empty = "empty"


class RatingOutcome(Enum):
    """
    Result of submitting a rating key.
    """

    Recorded = "recorded"
    Invalid = "invalid"
    Quit = "quit"


class QuizSummary(BaseModel):
    """Counts for a finished or aborted quiz."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    attempted: int = Field(default=0, ge=0)
    correct: int = Field(default=0, ge=0)
    aborted: bool = False

    @property
    def percentage(self) -> float:
        if self.attempted == 0:
            return 0.0
        return 100.0 * self.correct / self.attempted


def normalize_rating(raw: str) -> str:
    """Lowercase a rating input and strip surrounding whitespace."""
    return raw.strip().lower()


class QuizSession:
    """
    Walks a deck in a shuffled order captured at start, recording a rating
    for each card through Deck.update_card_difficulty.

    Per card: Presenting -> reveal() -> Revealed -> submit_rating(). An
    unrecognised rating moves to Rating and waits for another attempt;
    c/g/w record the outcome and move to the next card or Summary; q moves
    to Aborted without recording anything for the current card.
    """

    def __init__(self, deck: Deck, rng: Optional[random.Random] = None):
        """
        Parameters:
            deck (Deck): Deck to quiz over; mutated in place as ratings arrive.
            rng (Optional[random.Random]): Shuffle source for the card order.
        """
        self.deck = deck
        self.rng = rng
        self.card_order: List[int] = []
        self.state = QuizState.NotStarted
        self.attempted = 0
        self.correct = 0
        self._index = 0

    def _require_state(self, *allowed: QuizState) -> None:
        if self.state not in allowed:
            raise QuizSessionError(
                f"Operation not allowed in quiz state '{self.state.value}'."
            )

    @property
    def total(self) -> int:
        """Number of cards in the captured order."""
        return len(self.card_order)

    @property
    def position(self) -> int:
        """1-based position of the current card in the captured order."""
        return self._index + 1

    @property
    def is_finished(self) -> bool:
        return self.state in (
            QuizState.Summary,
            QuizState.Aborted,
            QuizState.Empty,
        )

    @property
    def current_card(self) -> Optional[Flashcard]:
        """The card being quizzed, or None outside a card's turn."""
        if self.state not in (
            QuizState.Presenting,
            QuizState.Revealed,
            QuizState.Rating,
        ):
            return None
        return self.deck.get_card(self.card_order[self._index])

    def start(self) -> Optional[Flashcard]:
        """
        Capture the card order and present the first card.

        Returns:
            The first card, or None when the deck is empty (the session then
            ends in the Empty state without a summary).
        """
        self._require_state(QuizState.NotStarted)
        self.card_order = self.deck.random_card_order(self.rng)
        if not self.card_order:
            logger.info("Quiz requested on an empty deck.")
            self.state = QuizState.Empty
            return None

        logger.info(f"Starting quiz over {self.total} cards.")
        self.state = QuizState.Presenting
        return self.current_card

    def reveal(self) -> Flashcard:
        """Acknowledge the question and move to the answer."""
        self._require_state(QuizState.Presenting)
        self.state = QuizState.Revealed
        return self.current_card

    def submit_rating(self, raw: str) -> RatingOutcome:
        """
        Apply a rating key to the current card.

        Parameters:
            raw (str): User input; compared after stripping and lowercasing.

        Returns:
            RatingOutcome: Recorded for c/g/w, Quit for q, Invalid otherwise.
        """
        self._require_state(QuizState.Revealed, QuizState.Rating)
        key = normalize_rating(raw)

        if key == QUIT_KEY:
            logger.info(
                f"Quiz aborted after {self.attempted} of {self.total} cards."
            )
            self.state = QuizState.Aborted
            return RatingOutcome.Quit

        choice = RATING_CHOICES.get(key)
        if choice is None:
            self.state = QuizState.Rating
            return RatingOutcome.Invalid

        difficulty, correct = choice
        self.deck.update_card_difficulty(
            self.card_order[self._index], difficulty, correct
        )
        self.attempted += 1
        if correct:
            self.correct += 1

        self._index += 1
        if self._index < self.total:
            self.state = QuizState.Presenting
        else:
            logger.info(
                f"Quiz complete: {self.correct}/{self.attempted} correct."
            )
            self.state = QuizState.Summary
        return RatingOutcome.Recorded

    def summary(self) -> QuizSummary:
        """Counts for the run; only available once it completed or was quit."""
        self._require_state(QuizState.Summary, QuizState.Aborted)
        return QuizSummary(
            attempted=self.attempted,
            correct=self.correct,
            aborted=self.state is QuizState.Aborted,
        )
