"""Exceptions raised by the Simple Jack engine."""


class SimpleJackError(Exception):
    """Base class for all Simple Jack errors."""


class InvalidPlayerCountError(SimpleJackError, ValueError):
    """Raised when the number of players is not an integer between 2 and 6."""


class InvalidDeckError(SimpleJackError, ValueError):
    """Raised when a supplied deck is not a well-formed 52-card deck."""


class InvalidCardError(SimpleJackError, ValueError):
    """Raised when a card token has an unrecognised suit or rank."""

    def __init__(self, card: object, message: str | None = None) -> None:
        self.card = card
        super().__init__(message or f"Card is not valid: {card!r}")


class DeckExhaustedError(SimpleJackError, IndexError):
    """Raised when drawing from an empty deck."""
