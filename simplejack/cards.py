"""Card, Suit and Rank - immutable card representations."""

from dataclasses import dataclass
from enum import Enum

from simplejack.errors import InvalidCardError


class Suit(Enum):
    """Card suits. Values are the suit part of a card token."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Return the unicode symbol for the suit."""
        return {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }[self]

    @property
    def is_red(self) -> bool:
        """Check if the suit is printed in red."""
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(Enum):
    """Card ranks. Values are the rank part of a card token."""

    ACE = "Ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        return self.value

    @property
    def value_points(self) -> int:
        """Return the fixed point value (Ace = 1, face cards = 10)."""
        if self == Rank.ACE:
            return 1
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card, rendered as a ``"<Suit>-<Rank>"`` token."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.suit.value}-{self.rank.value}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, token: object) -> "Card":
        """
        Create a card from a token like ``'Spades-Ace'`` or ``'Hearts-10'``.

        Raises:
            InvalidCardError: if the token is not a string or the suit or
                rank is not recognised.
        """
        if not isinstance(token, str):
            raise InvalidCardError(token)

        parts = token.split("-")
        if len(parts) != 2:
            raise InvalidCardError(token)

        suit_str, rank_str = parts
        try:
            return cls(Suit(suit_str), Rank(rank_str))
        except ValueError:
            raise InvalidCardError(token) from None


def full_deck() -> list[Card]:
    """Return the 52 standard cards in suit-major order."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]
