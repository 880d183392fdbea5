"""
Persistence of a Deck to a single JSON document.

The document mirrors the Deck model: a ``cards`` object keyed by the string
form of each card id, and ``next_id``. Saving is a plain full overwrite of
the target file.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .deck import Deck
from .exceptions import DeckFileNotFoundError, DeckFormatError, DeckStorageError

logger = logging.getLogger(__name__)


def deck_to_json(deck: Deck) -> str:
    """
    Encode a deck as a JSON document.

    Raises:
        DeckFormatError: If the deck cannot be serialized.
    """
    try:
        return deck.model_dump_json(indent=2)
    except PydanticSerializationError as e:
        raise DeckFormatError(
            f"Failed to serialize deck: {e}", original_exception=e
        ) from e


def deck_from_json(content: Union[str, bytes]) -> Deck:
    """
    Decode a deck from a JSON document.

    Raises:
        DeckFormatError: If the content is not valid JSON or does not match
            the deck schema (missing fields, wrong types, unknown
            difficulty values, mismatched ids).
    """
    try:
        return Deck.model_validate_json(content)
    except ValidationError as e:
        error_details = e.errors()[0]
        field = ".".join(map(str, error_details["loc"]))
        msg = error_details["msg"]
        location = f" in field '{field}'" if field else ""
        raise DeckFormatError(
            f"Invalid deck data{location}: {msg}", original_exception=e
        ) from e


def save_deck(deck: Deck, path: Union[str, Path]) -> None:
    """
    Write the full deck to ``path``, replacing any previous content.

    Missing parent directories are not created.

    Raises:
        DeckFormatError: If the deck cannot be serialized.
        DeckStorageError: If the file cannot be written.
    """
    path = Path(path)
    content = deck_to_json(deck)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write deck file {path}: {e}")
        raise DeckStorageError(
            f"Failed to write deck file {path}: {e}", original_exception=e
        ) from e
    logger.info(f"Saved {len(deck.cards)} cards to {path}.")


def load_deck(path: Union[str, Path]) -> Deck:
    """
    Read a deck previously written by save_deck.

    Raises:
        DeckFileNotFoundError: If ``path`` does not exist.
        DeckStorageError: If the file exists but cannot be read.
        DeckFormatError: If the content is not a valid deck document.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DeckFileNotFoundError(
            f"Deck file not found: {path}", original_exception=e
        ) from e
    except UnicodeDecodeError as e:
        raise DeckFormatError(
            f"Deck file {path} is not valid UTF-8: {e}", original_exception=e
        ) from e
    except OSError as e:
        logger.error(f"Could not read deck file {path}: {e}")
        raise DeckStorageError(
            f"Failed to read deck file {path}: {e}", original_exception=e
        ) from e

    deck = deck_from_json(content)
    logger.info(f"Loaded {len(deck.cards)} cards from {path}.")
    return deck
