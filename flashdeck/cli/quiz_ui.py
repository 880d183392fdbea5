"""
Command-line interface for quizzing over a deck.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from flashdeck.models import Flashcard
from flashdeck.quiz_session import (
    QuizSession,
    QuizSummary,
    RatingOutcome,
    normalize_rating,
)

logger = logging.getLogger(__name__)
console = Console()

_RATING_MESSAGES = {
    "c": "[green]Marked as correct & easy![/green]",
    "g": "[green]Marked as correct but medium difficulty![/green]",
    "w": "[yellow]Marked as hard - review this one more![/yellow]",
}


def _display_question(session: QuizSession, card: Flashcard) -> None:
    """
    Show the card's question and wait for the user to press Enter.

    Whatever the user types before Enter is ignored.
    """
    console.rule(f"[bold]Card {session.position}/{session.total}[/bold]")
    console.print(
        Panel(escape(card.question), title="Question", border_style="green")
    )
    console.input("[italic]Press Enter to reveal answer...[/italic]")


def _display_answer(card: Flashcard) -> None:
    console.print(
        Panel(escape(card.answer), title="Answer", border_style="blue")
    )


def _collect_rating(session: QuizSession) -> RatingOutcome:
    """
    Prompt for a rating until one is accepted.

    Returns:
        RatingOutcome: Recorded or Quit; Invalid input is re-prompted here.
    """
    while True:
        raw = console.input("[bold]Rate your performance (c/g/w/q): [/bold]")
        outcome = session.submit_rating(raw)
        if outcome is RatingOutcome.Invalid:
            console.print(
                "[bold red]Invalid input! Use: c (correct/easy), "
                "g (got it/medium), w (wrong/hard), q (quit)[/bold red]"
            )
            continue
        if outcome is RatingOutcome.Recorded:
            console.print(_RATING_MESSAGES[normalize_rating(raw)])
            console.print("")
        return outcome


def display_summary(summary: QuizSummary) -> None:
    """Print the quiz result line."""
    if summary.aborted:
        console.print("[bold yellow]Quiz ended early![/bold yellow]")
    console.print("[bold green]Quiz Complete![/bold green]")
    console.print(
        f"Results: {summary.correct}/{summary.attempted} correct "
        f"({summary.percentage:.1f}%)"
    )


def start_quiz_flow(session: QuizSession) -> Optional[QuizSummary]:
    """
    Runs a quiz session interactively on the console.

    Args:
        session: A QuizSession that has not been started yet.

    Returns:
        The session summary, or None if the deck had no cards.
    """
    card = session.start()
    if card is None:
        console.print(
            "[bold yellow]No flashcards to quiz! Add some first.[/bold yellow]"
        )
        return None

    console.print(
        "[bold cyan]Starting quiz! Press Enter to see the answer, "
        "then rate your performance:[/bold cyan]"
    )
    console.print(
        "Ratings: (c)orrect + easy, (g)ot it but medium, "
        "(w)rong/hard, (q)uit"
    )
    console.print("")

    while card is not None:
        _display_question(session, card)
        _display_answer(session.reveal())
        if _collect_rating(session) is RatingOutcome.Quit:
            break
        card = session.current_card

    summary = session.summary()
    display_summary(summary)
    return summary
