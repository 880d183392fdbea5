import logging
import random
from pathlib import Path
from typing import Optional

from flashdeck.cli.quiz_ui import start_quiz_flow
from flashdeck.deck import Deck
from flashdeck.quiz_session import QuizSession, QuizSummary
from flashdeck.storage import save_deck

logger = logging.getLogger(__name__)


def quiz_logic(
    deck: Deck,
    deck_path: Path,
    seed: Optional[int] = None,
) -> Optional[QuizSummary]:
    """
    Run an interactive quiz over a loaded deck and persist the results.

    The deck is saved after the session returns, whether it finished or was
    quit. Nothing is saved for an empty deck.

    Parameters:
        deck (Deck): Deck loaded from deck_path; mutated by the session.
        deck_path (Path): File the deck is written back to.
        seed (Optional[int]): Seed for a reproducible card order.

    Returns:
        Optional[QuizSummary]: The session summary, or None for an empty deck.
    """
    rng = random.Random(seed) if seed is not None else None
    session = QuizSession(deck, rng=rng)

    summary = start_quiz_flow(session)
    if summary is None:
        return None

    save_deck(deck, deck_path)
    logger.info(f"Quiz results saved to {deck_path}.")
    return summary
