"""Hand evaluation for Simple Jack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from simplejack.cards import Card

TARGET_SCORE = 21
STAND_THRESHOLD = 17


def card_value(card: Card) -> int:
    """Return the fixed value of a card, counting an Ace as 1."""
    return card.rank.value_points


def score(cards: Iterable[Card]) -> int:
    """
    Calculate the value of a hand.

    Non-ace cards count their face value (Jack, Queen and King are 10).
    Aces are valued as a block: every ace counts 11 when the resulting total
    does not exceed 21, otherwise every ace counts 1.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        else:
            total += card_value(card)

    if aces == 0:
        return total

    if total + 11 * aces <= TARGET_SCORE:
        return total + 11 * aces
    return total + aces


@dataclass
class Hand:
    """The cards held by one seat, with its derived score and status flags."""

    seat_id: int
    cards: list[Card] = field(default_factory=list)
    score: int = 0
    is_eliminated: bool = False
    has_stood: bool = False

    def __post_init__(self) -> None:
        self.score = score(self.cards)

    def add_card(self, card: Card) -> int:
        """Add a card to the hand and return the recomputed score."""
        self.cards.append(card)
        self.score = score(self.cards)
        return self.score

    @property
    def is_busted(self) -> bool:
        """Check if the hand has gone over the target score."""
        return self.score > TARGET_SCORE

    @property
    def has_target_score(self) -> bool:
        """Check if the hand scores exactly the target."""
        return self.score == TARGET_SCORE

    @property
    def must_draw(self) -> bool:
        """Check if the seat is forced to take another card."""
        return self.score < STAND_THRESHOLD and not self.has_stood

    @property
    def is_active(self) -> bool:
        """Check if the seat is still in contention."""
        return not self.is_eliminated

    def cards_to_string(self) -> str:
        """Render the cards as ``['Spades-Jack', 'Spades-Ace']``."""
        return "[" + ", ".join(f"'{card}'" for card in self.cards) + "]"

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return f"{self.cards_to_string()} ({self.score})"

    def __repr__(self) -> str:
        return f"Hand(seat={self.seat_id}, cards={self.cards!r}, score={self.score})"
