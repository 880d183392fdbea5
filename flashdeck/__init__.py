"""Flashdeck - A local flashcard manager with self-rated quizzes."""

from .models import CardMetadata, DeckStats, Difficulty, Flashcard
from .deck import Deck
from .quiz_session import QuizSession, QuizState, QuizSummary, RatingOutcome
from .storage import load_deck, save_deck

__all__ = [
    "CardMetadata",
    "DeckStats",
    "Difficulty",
    "Flashcard",
    "Deck",
    "QuizSession",
    "QuizState",
    "QuizSummary",
    "RatingOutcome",
    "load_deck",
    "save_deck",
]
