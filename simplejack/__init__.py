"""Simple Jack engine - 100% UI-agnostic."""

from simplejack.cards import Card, Rank, Suit
from simplejack.deck import Deck, generate_deck, stack_deck
from simplejack.errors import (
    DeckExhaustedError,
    InvalidCardError,
    InvalidDeckError,
    InvalidPlayerCountError,
    SimpleJackError,
)
from simplejack.hand import Hand, score
from simplejack.validation import validate_card, validate_deck, validate_player_count

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "generate_deck",
    "stack_deck",
    "Hand",
    "score",
    "validate_card",
    "validate_deck",
    "validate_player_count",
    "SimpleJackError",
    "InvalidCardError",
    "InvalidDeckError",
    "InvalidPlayerCountError",
    "DeckExhaustedError",
]
