from typing import Optional


class FlashdeckError(Exception):
    """Base exception for flashdeck errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class DeckStorageError(FlashdeckError):
    """Raised when the deck file cannot be read or written."""

    pass


class DeckFileNotFoundError(DeckStorageError):
    """Raised when the deck file does not exist."""

    pass


class DeckFormatError(FlashdeckError):
    """Indicates that deck data could not be encoded or decoded."""

    pass


class QuizSessionError(FlashdeckError):
    """Raised when a quiz session operation is called in the wrong state."""

    pass
