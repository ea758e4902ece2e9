"""Deck container and deck sources (shuffled and stacked decks)."""

from random import Random
from typing import Iterator, Mapping, Sequence

from config import config
from simplejack.cards import Card, full_deck
from simplejack.errors import (
    DeckExhaustedError,
    InvalidCardError,
    InvalidDeckError,
    InvalidPlayerCountError,
)
from simplejack.validation import validate_card, validate_deck


class Deck:
    """
    An ordered, shrinking sequence of cards drawn from the front.

    The deck is validated once on construction; cards are never put back.
    """

    def __init__(self, cards: Sequence[Card | str]) -> None:
        """
        Initialize a deck from 52 cards or card tokens.

        Raises:
            InvalidDeckError: if the cards do not form a valid deck
        """
        self._cards: list[Card] = validate_deck(cards)

    @classmethod
    def shuffled(cls, rng: Random | None = None) -> "Deck":
        """Create a freshly shuffled deck."""
        return cls(generate_deck(rng))

    @classmethod
    def restore(cls, cards: Sequence[Card | str]) -> "Deck":
        """
        Rebuild a partially dealt deck (e.g. from a saved session).

        Only the individual cards are validated.
        """
        deck = cls.__new__(cls)
        deck._cards = [validate_card(c) for c in cards]
        return deck

    def draw(self) -> Card:
        """Draw the card at the front of the deck."""
        if not self._cards:
            raise DeckExhaustedError("Cannot draw from empty deck")
        return self._cards.pop(0)

    def peek(self) -> Card | None:
        """Return the next card without drawing it."""
        return self._cards[0] if self._cards else None

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """Check if every card has been dealt."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


def generate_deck(rng: Random | None = None) -> list[Card]:
    """Return all 52 cards in random order."""
    cards = full_deck()
    (rng or Random()).shuffle(cards)
    return cards


def stack_deck(
    test_case: Sequence[Card | str] | Mapping[int | str, Sequence[Card | str]] | None = None,
    rng: Random | None = None,
) -> list[Card]:
    """
    Build a full deck whose first cards are dealt in a known order.

    ``test_case`` is either a list of cards placed at the top of the deck, or
    a mapping of seat id (1-6) to the cards that seat should receive. Seat
    hands are interleaved the way the engine deals: one card per seat per
    circuit, in ascending seat order. Seats that run out of cards are simply
    skipped. The rest of the deck is shuffled.

    Examples:
        >>> stack_deck({1: ["Spades-Ace", "Hearts-King"], 2: ["Clubs-Queen"]})[:3]
        [Card(SPADES, ACE), Card(CLUBS, QUEEN), Card(HEARTS, KING)]

    Raises:
        TypeError: if ``test_case`` is neither a sequence nor a mapping
        InvalidPlayerCountError: if a seat id is outside 1-6
        InvalidDeckError: if a card is invalid or appears twice
    """
    if not test_case:
        return generate_deck(rng)

    if isinstance(test_case, Mapping):
        tokens = _interleave_hands(test_case)
    elif isinstance(test_case, (list, tuple)):
        tokens = list(test_case)
    else:
        raise TypeError("test_case must be a list of cards or a mapping of seat hands")

    invalid = []
    head: list[Card] = []
    for token in tokens:
        try:
            head.append(validate_card(token))
        except InvalidCardError:
            invalid.append(str(token))
    if invalid:
        raise InvalidDeckError(f"Invalid cards found: {', '.join(invalid)}")

    if len(set(head)) != len(head):
        raise InvalidDeckError("Duplicate cards found in test case")

    stacked = set(head)
    remaining = [card for card in full_deck() if card not in stacked]
    (rng or Random()).shuffle(remaining)
    return head + remaining


def _interleave_hands(
    hands: Mapping[int | str, Sequence[Card | str]],
) -> list[Card | str]:
    """Flatten seat hands into deal order."""
    try:
        seat_ids = sorted(int(seat) for seat in hands)
    except ValueError:
        raise InvalidPlayerCountError("Seat ids must be integers") from None

    max_players = config.game.max_players
    if any(seat < 1 or seat > max_players for seat in seat_ids):
        raise InvalidPlayerCountError(f"Seat ids must be between 1 and {max_players}")

    by_seat = {int(seat): list(cards) for seat, cards in hands.items()}
    longest = max((len(cards) for cards in by_seat.values()), default=0)

    order: list[Card | str] = []
    for index in range(longest):
        for seat in seat_ids:
            if index < len(by_seat[seat]):
                order.append(by_seat[seat][index])
    return order
