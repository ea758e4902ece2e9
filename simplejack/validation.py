"""Guards for the card resource and round configuration."""

from typing import Sequence

from config import config
from simplejack.cards import Card, Rank, Suit
from simplejack.errors import (
    InvalidCardError,
    InvalidDeckError,
    InvalidPlayerCountError,
)

DECK_SIZE = 52


def validate_card(card: Card | str) -> Card:
    """
    Return the card if its suit and rank are recognised.

    Tokens are parsed into ``Card`` values; ``Card`` instances are returned
    unchanged.

    Raises:
        InvalidCardError: if the card is malformed
    """
    if isinstance(card, Card):
        if not isinstance(card.suit, Suit) or not isinstance(card.rank, Rank):
            raise InvalidCardError(
                card,
                f"Card is not valid: suit={card.suit!r}, rank={card.rank!r}",
            )
        return card
    return Card.from_string(card)


def validate_deck(deck: Sequence[Card | str]) -> list[Card]:
    """
    Check that a deck is a sequence of exactly 52 distinct, valid cards.

    The input is left untouched.

    Returns:
        The deck as a list of ``Card`` values, in the same order

    Raises:
        InvalidDeckError: if the deck is not a list/tuple, has the wrong
            length, contains duplicates or contains an invalid card
    """
    if not isinstance(deck, (list, tuple)):
        raise InvalidDeckError("deck must be a list of cards")

    if len(deck) != DECK_SIZE:
        raise InvalidDeckError(f"The deck must have {DECK_SIZE} cards.")

    try:
        cards = [validate_card(card) for card in deck]
    except InvalidCardError as exc:
        raise InvalidDeckError(f"All cards in deck must be valid: {exc}") from exc

    if len(set(cards)) != DECK_SIZE:
        raise InvalidDeckError(f"The deck must have {DECK_SIZE} unique cards.")

    return cards


def validate_player_count(players: object) -> int:
    """
    Check that the number of players is an integer between 2 and 6.

    Raises:
        InvalidPlayerCountError: if the count is missing, not an int or out of range
    """
    low = config.game.min_players
    high = config.game.max_players
    # bool is an int subclass
    if isinstance(players, bool) or not isinstance(players, int):
        raise InvalidPlayerCountError(f"There must be {low} to {high} players")
    if not low <= players <= high:
        raise InvalidPlayerCountError(f"There must be {low} to {high} players")
    return players
