"""
CLI entry point for flashdeck.
"""

# Standard library imports
from pathlib import Path
from typing import NoReturn, Optional

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local application imports
from flashdeck.deck import Deck
from flashdeck.exceptions import DeckFileNotFoundError, FlashdeckError
from flashdeck.models import DeckStats, Difficulty, Flashcard
from flashdeck.storage import load_deck, save_deck
from flashdeck.cli._quiz_logic import quiz_logic


console = Console()

app = typer.Typer(
    name="flashdeck",
    help="Flashdeck: a local flashcard manager with self-rated quizzes.",
    add_completion=False,
    rich_markup_mode="markdown",
)

DEFAULT_DECK_FILE = Path("flashcards.json")
QUESTION_PREVIEW_LENGTH = 30

_DIFFICULTY_STYLES = {
    Difficulty.Easy: "green",
    Difficulty.Medium: "yellow",
    Difficulty.Hard: "red",
}


# ---------------------------------------------------------------------------
# Helpers for resolving and loading the deck file
# ---------------------------------------------------------------------------


# Common typer option reused across commands
_file_option = typer.Option(  # noqa: B008
    DEFAULT_DECK_FILE,
    "--file",
    "-f",
    help="Path to the JSON deck file. Falls back to FLASHDECK_FILE env var.",
    envvar="FLASHDECK_FILE",
)


def _load_deck_or_new(deck_path: Path) -> Deck:
    """
    Load the deck stored at deck_path, or start an empty one if the file
    does not exist yet.
    """
    try:
        return load_deck(deck_path)
    except DeckFileNotFoundError:
        return Deck()


def _fail(message: str, error: Exception) -> NoReturn:
    """Print an error message and exit with status 1."""
    console.print(f"[bold red]{message}:[/bold red] {escape(str(error))}")
    raise typer.Exit(code=1) from error


def _format_difficulty(difficulty: Difficulty) -> str:
    style = _DIFFICULTY_STYLES[difficulty]
    return f"[{style}]{difficulty.value}[/{style}]"


def _format_last_reviewed(card: Flashcard) -> str:
    last_reviewed = card.metadata.last_reviewed
    return last_reviewed.strftime("%Y-%m-%d") if last_reviewed else "Never"


# ---------------------------------------------------------------------------
# Add
# ---------------------------------------------------------------------------


@app.command()
def add(
    question: str = typer.Argument(  # noqa: B008
        ..., help="The question for the flashcard."
    ),
    answer: str = typer.Argument(  # noqa: B008
        ..., help="The answer for the flashcard."
    ),
    file: Path = _file_option,
):
    """Add a new flashcard."""
    try:
        deck = _load_deck_or_new(file)
        card_id = deck.add_card(question, answer)
        save_deck(deck, file)
    except FlashdeckError as e:
        _fail("Error adding flashcard", e)

    console.print(
        f"[green]Added flashcard #{card_id}:[/green] {escape(question)}"
    )


# ---------------------------------------------------------------------------
# List helpers & command
# ---------------------------------------------------------------------------


def _display_card_table(cons: Console, deck: Deck) -> None:
    """
    Render one row per card, ordered by id, with its success rate.

    Parameters:
        cons (Console): Rich Console used to print the table.
        deck (Deck): Deck whose cards are listed.
    """
    cards_table = Table(title=f"Flashcards in deck ({len(deck.cards)})")
    cards_table.add_column("ID", style="cyan", justify="right")
    cards_table.add_column("Difficulty")
    cards_table.add_column("Question")
    cards_table.add_column("Success", style="magenta", justify="right")
    cards_table.add_column("Correct/Reviewed", justify="right")
    cards_table.add_column("Last Reviewed", style="dim")

    for card in deck.list_cards():
        metadata = card.metadata
        cards_table.add_row(
            f"#{card.id}",
            _format_difficulty(metadata.difficulty),
            escape(card.question[:QUESTION_PREVIEW_LENGTH].strip()),
            f"{metadata.success_rate * 100:.0f}%",
            f"{metadata.correct_count}/{metadata.times_reviewed}",
            _format_last_reviewed(card),
        )
    cons.print(cards_table)


def _display_deck_stats(cons: Console, stats: DeckStats) -> None:
    """
    Prints a table summarizing cards, reviews and overall success rate.

    Parameters:
        cons (Console): Rich Console used to print the table.
        stats (DeckStats): Aggregated deck counters.
    """
    stats_table = Table(title="Deck Statistics", show_header=False)
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", style="magenta")
    stats_table.add_row("Total cards", str(stats.total_cards))
    stats_table.add_row("Total reviews", str(stats.total_reviews))
    stats_table.add_row(
        "Overall success rate", f"{stats.overall_success_rate * 100:.1f}%"
    )
    cons.print(stats_table)


@app.command("list")
def list_cards(
    file: Path = _file_option,
):
    """List all flashcards with their statistics."""
    try:
        deck = _load_deck_or_new(file)
    except FlashdeckError as e:
        _fail("Error loading deck", e)

    if deck.is_empty:
        console.print(
            "[yellow]No flashcards found. Add some with "
            "'flashdeck add <question> <answer>'[/yellow]"
        )
        return

    _display_card_table(console, deck)
    _display_deck_stats(console, deck.get_stats())


# ---------------------------------------------------------------------------
# View
# ---------------------------------------------------------------------------


@app.command()
def view(
    card_id: int = typer.Argument(  # noqa: B008
        ..., metavar="ID", help="The ID of the flashcard to view."
    ),
    file: Path = _file_option,
):
    """View a specific flashcard by ID."""
    try:
        deck = _load_deck_or_new(file)
    except FlashdeckError as e:
        _fail("Error loading deck", e)

    card = deck.get_card(card_id)
    if card is None:
        console.print(f"[red]Flashcard #{card_id} not found.[/red]")
        return

    metadata = card.metadata
    console.print(f"[bold]Flashcard #{card.id}:[/bold]")
    console.print(f"Question: {escape(card.question)}")
    console.print(f"Answer: {escape(card.answer)}")
    console.print("")
    console.print("[bold]Statistics:[/bold]")
    console.print(f"   Difficulty: {_format_difficulty(metadata.difficulty)}")
    console.print(f"   Times reviewed: {metadata.times_reviewed}")
    console.print(f"   Correct answers: {metadata.correct_count}")
    if metadata.times_reviewed > 0:
        console.print(
            f"   Success rate: {metadata.success_rate * 100:.1f}%"
        )
        console.print(f"   Last reviewed: {_format_last_reviewed(card)}")
    else:
        console.print("   Success rate: Not yet reviewed")


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


@app.command()
def delete(
    card_id: int = typer.Argument(  # noqa: B008
        ..., metavar="ID", help="The ID of the flashcard to delete."
    ),
    file: Path = _file_option,
):
    """Delete a flashcard by ID."""
    try:
        deck = _load_deck_or_new(file)
        removed = deck.delete_card(card_id)
        if removed:
            save_deck(deck, file)
    except FlashdeckError as e:
        _fail("Error deleting flashcard", e)

    if removed:
        console.print(f"[green]Deleted flashcard #{card_id}[/green]")
    else:
        console.print(f"[red]Flashcard #{card_id} not found.[/red]")


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------


@app.command()
def reset(
    file: Path = _file_option,
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Bypass confirmation prompt."
    ),
):
    """Reset all card statistics."""
    try:
        deck = _load_deck_or_new(file)
    except FlashdeckError as e:
        _fail("Error loading deck", e)

    if deck.is_empty:
        console.print("[red]No flashcards to reset.[/red]")
        return

    if not yes:
        confirmed = typer.confirm(
            "Are you sure you want to reset all statistics? "
            "This cannot be undone."
        )
        if not confirmed:
            console.print("Reset cancelled.")
            raise typer.Exit()

    try:
        deck.reset_all_stats()
        save_deck(deck, file)
    except FlashdeckError as e:
        _fail("Error resetting statistics", e)

    console.print("[green]Reset all flashcard statistics.[/green]")


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------


@app.command()
def quiz(
    file: Path = _file_option,
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the card shuffle for a reproducible order.",
    ),
):
    """Start a quiz session over every card in the deck."""
    try:
        deck = _load_deck_or_new(file)
        quiz_logic(deck=deck, deck_path=file, seed=seed)
    except FlashdeckError as e:
        _fail("Error during quiz", e)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {e}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
