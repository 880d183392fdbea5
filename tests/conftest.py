import pytest
from datetime import date
from pathlib import Path

from flashdeck.deck import Deck
from flashdeck.models import Difficulty


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(tmp_path: Path, monkeypatch):
    """
    Change the working directory to the test's tmp_path for the duration of
    the test, so the default relative deck file never touches the repo.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FLASHDECK_FILE", raising=False)
    yield


# --- Deck Fixtures ---
@pytest.fixture
def empty_deck() -> Deck:
    """Provide a freshly created deck with no cards."""
    return Deck()


@pytest.fixture
def sample_deck() -> Deck:
    """
    Create a deck with three cards, one of which has been reviewed.

    Returns:
        Deck: Cards 1-3 ("2+2?", "Capital of France?", "H2O is?"); card 2 was
        rated Hard once on 2024-03-01 and next_id is 4.
    """
    deck = Deck()
    deck.add_card("2+2?", "4")
    deck.add_card("Capital of France?", "Paris")
    deck.add_card("H2O is?", "Water")
    deck.update_card_difficulty(
        2, Difficulty.Hard, correct=False, reviewed_on=date(2024, 3, 1)
    )
    return deck


@pytest.fixture
def deck_file(tmp_path: Path) -> Path:
    """
    Provide the filesystem path for a temporary deck file.

    Returns:
        Path: Path to "flashcards.json" inside `tmp_path` (not created).
    """
    return tmp_path / "flashcards.json"
