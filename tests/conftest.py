"""Pytest fixtures for Simple Jack tests."""

import pytest
from random import Random

from simplejack.cards import Card, Rank, Suit, full_deck
from simplejack.deck import stack_deck
from simplejack.hand import Hand
from simplejack.game import SimpleJackGame


def cards(*tokens: str) -> list[Card]:
    """Parse card tokens."""
    return [Card.from_string(t) for t in tokens]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def ordered_tokens():
    """All 52 card tokens in suit-major order."""
    return [str(c) for c in full_deck()]


@pytest.fixture
def make_deck(rng):
    """Factory for decks stacked with known cards on top."""

    def _make(test_case=None):
        return [str(c) for c in stack_deck(test_case, rng=rng)]

    return _make


@pytest.fixture
def game(rng):
    """A new interactive game for a named human player."""
    return SimpleJackGame(player_name="TestUser", rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand for seat 1."""
    return Hand(seat_id=1)


@pytest.fixture
def twenty_one_hand():
    """Jack and Ace."""
    return Hand(seat_id=1, cards=[Card(Suit.SPADES, Rank.JACK), Card(Suit.SPADES, Rank.ACE)])


@pytest.fixture
def bust_hand():
    """A busted hand (10-6-K)."""
    return Hand(seat_id=2, cards=cards("Spades-10", "Hearts-6", "Clubs-King"))
