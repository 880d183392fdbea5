"""
Unit tests for the flashdeck.cli.quiz_ui module.
"""

from unittest.mock import MagicMock, patch

import pytest

from flashdeck.cli.quiz_ui import display_summary, start_quiz_flow
from flashdeck.deck import Deck
from flashdeck.models import Difficulty
from flashdeck.quiz_session import QuizSession, QuizSummary


@pytest.fixture
def in_order() -> MagicMock:
    """Shuffle source that keeps the deck's insertion order."""
    rng = MagicMock()
    rng.shuffle.side_effect = lambda ids: None
    return rng


def test_start_quiz_flow_empty_deck(empty_deck: Deck, capsys):
    """Tests the quiz flow when the deck has no cards."""
    with patch("rich.console.Console.input") as mock_input:
        summary = start_quiz_flow(QuizSession(empty_deck))

    assert summary is None
    mock_input.assert_not_called()
    output = capsys.readouterr().out
    assert "No flashcards to quiz! Add some first." in output
    assert "Results" not in output


def test_start_quiz_flow_with_one_card(in_order: MagicMock, capsys):
    """Tests the full quiz flow for a single card."""
    # Arrange
    deck = Deck()
    deck.add_card("What is the capital of France?", "Paris")

    # Act
    with patch("rich.console.Console.input", side_effect=["", "c"]):
        summary = start_quiz_flow(QuizSession(deck, rng=in_order))

    # Assert
    output = capsys.readouterr().out
    assert "Card 1/1" in output
    assert "What is the capital of France?" in output
    assert "Paris" in output
    assert "Marked as correct & easy!" in output
    assert "Quiz Complete!" in output
    assert "Results: 1/1 correct (100.0%)" in output
    assert summary == QuizSummary(attempted=1, correct=1)
    assert deck.get_card(1).metadata.difficulty == Difficulty.Easy


def test_acknowledgement_content_is_ignored(in_order: MagicMock):
    deck = Deck()
    deck.add_card("Q", "A")

    with patch(
        "rich.console.Console.input", side_effect=["some text", "g"]
    ):
        summary = start_quiz_flow(QuizSession(deck, rng=in_order))

    assert summary.attempted == 1
    assert deck.get_card(1).metadata.difficulty == Difficulty.Medium


def test_invalid_rating_input_reprompts(in_order: MagicMock, capsys):
    """Tests that invalid rating inputs re-prompt on the same card."""
    deck = Deck()
    deck.add_card("Question", "Answer")

    with patch(
        "rich.console.Console.input", side_effect=["", "x", "5", "W"]
    ) as mock_input:
        summary = start_quiz_flow(QuizSession(deck, rng=in_order))

    output = capsys.readouterr().out
    assert output.count("Invalid input!") == 2
    assert "Marked as hard - review this one more!" in output
    assert mock_input.call_count == 4
    assert summary == QuizSummary(attempted=1, correct=0)
    assert deck.get_card(1).metadata.times_reviewed == 1


def test_wrong_then_quit_summary(in_order: MagicMock, capsys):
    deck = Deck()
    deck.add_card("Q1", "A1")
    deck.add_card("Q2", "A2")

    with patch(
        "rich.console.Console.input", side_effect=["", "w", "", "q"]
    ):
        summary = start_quiz_flow(QuizSession(deck, rng=in_order))

    output = capsys.readouterr().out
    assert "Card 2/2" in output
    assert "Quiz ended early!" in output
    assert "Results: 0/1 correct (0.0%)" in output
    assert summary == QuizSummary(attempted=1, correct=0, aborted=True)
    assert deck.get_card(2).metadata.times_reviewed == 0


def test_question_markup_is_not_interpreted(in_order: MagicMock, capsys):
    deck = Deck()
    deck.add_card("What does [bold] mean?", "[x] marks the spot")

    with patch("rich.console.Console.input", side_effect=["", "c"]):
        start_quiz_flow(QuizSession(deck, rng=in_order))

    output = capsys.readouterr().out
    assert "[bold]" in output
    assert "[x] marks the spot" in output


def test_display_summary_without_attempts(capsys):
    display_summary(QuizSummary(attempted=0, correct=0, aborted=True))

    output = capsys.readouterr().out
    assert "Quiz ended early!" in output
    assert "Results: 0/0 correct (0.0%)" in output
