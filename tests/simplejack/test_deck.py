"""Tests for the Deck container and deck builders."""

import pytest
from random import Random

from simplejack.cards import Card, Rank, Suit
from simplejack.deck import Deck, generate_deck, stack_deck
from simplejack.errors import (
    DeckExhaustedError,
    InvalidCardError,
    InvalidDeckError,
    InvalidPlayerCountError,
)


def tokens(deck):
    return [str(c) for c in deck]


class TestDeck:
    """Tests for the Deck class."""

    def test_draws_from_the_front(self, ordered_tokens):
        deck = Deck(ordered_tokens)
        assert str(deck.draw()) == ordered_tokens[0]
        assert str(deck.draw()) == ordered_tokens[1]
        assert deck.cards_remaining == 50

    def test_peek_does_not_draw(self, ordered_tokens):
        deck = Deck(ordered_tokens)
        assert str(deck.peek()) == ordered_tokens[0]
        assert len(deck) == 52

    def test_drawn_cards_never_return(self, ordered_tokens):
        deck = Deck(ordered_tokens)
        drawn = [deck.draw() for _ in range(52)]
        assert len(set(drawn)) == 52
        assert deck.is_empty
        assert deck.peek() is None

    def test_draw_from_empty_deck(self, ordered_tokens):
        deck = Deck(ordered_tokens)
        for _ in range(52):
            deck.draw()
        with pytest.raises(DeckExhaustedError):
            deck.draw()

    def test_rejects_invalid_deck(self):
        with pytest.raises(InvalidDeckError):
            Deck(["Spades-King"])

    def test_shuffled_is_reproducible(self):
        assert tokens(Deck.shuffled(Random(7))) == tokens(Deck.shuffled(Random(7)))

    def test_restore_partial_deck(self):
        deck = Deck.restore(["Spades-2", "Hearts-3"])
        assert deck.cards_remaining == 2
        assert deck.draw() == Card(Suit.SPADES, Rank.TWO)

    def test_restore_rejects_invalid_cards(self):
        with pytest.raises(InvalidCardError):
            Deck.restore(["Spades-2", "Hearts-33"])


class TestGenerateDeck:
    def test_full_unique_deck(self, rng):
        deck = generate_deck(rng)
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_seeded_shuffle_is_stable(self):
        assert generate_deck(Random(1)) == generate_deck(Random(1))
        assert generate_deck(Random(1)) != generate_deck(Random(2))


class TestStackDeck:
    """Tests for stack_deck."""

    @pytest.mark.parametrize("test_case", [None, [], {}])
    def test_empty_test_case_gives_shuffled_deck(self, test_case, rng):
        deck = stack_deck(test_case, rng=rng)
        assert len(set(deck)) == 52

    def test_list_goes_on_top(self, rng):
        head = ["Spades-Ace", "Hearts-8", "Clubs-King"]
        deck = stack_deck(head, rng=rng)
        assert tokens(deck[:3]) == head
        assert len(set(deck)) == 52

    def test_full_list_is_kept_as_is(self, ordered_tokens, rng):
        assert tokens(stack_deck(ordered_tokens, rng=rng)) == ordered_tokens

    def test_seat_hands_are_interleaved(self, rng):
        deck = stack_deck(
            {
                "1": ["Spades-Ace", "Hearts-King"],
                "2": ["Clubs-Queen", "Diamonds-Jack", "Hearts-10"],
            },
            rng=rng,
        )
        assert tokens(deck[:5]) == [
            "Spades-Ace",
            "Clubs-Queen",
            "Hearts-King",
            "Diamonds-Jack",
            "Hearts-10",
        ]

    def test_seats_are_sorted(self, rng):
        deck = stack_deck({3: ["Spades-Ace"], 1: ["Hearts-King"], 5: ["Clubs-Queen"]}, rng=rng)
        assert tokens(deck[:3]) == ["Hearts-King", "Spades-Ace", "Clubs-Queen"]

    def test_empty_seat_hands_are_skipped(self, rng):
        deck = stack_deck({1: [], 2: ["Spades-Ace"], 3: []}, rng=rng)
        assert str(deck[0]) == "Spades-Ace"
        assert len(set(deck)) == 52

    @pytest.mark.parametrize("seat", [0, 7, -1])
    def test_rejects_out_of_range_seats(self, seat, rng):
        with pytest.raises(InvalidPlayerCountError, match="between 1 and 6"):
            stack_deck({seat: ["Spades-Ace"]}, rng=rng)

    @pytest.mark.parametrize(
        "test_case, bad",
        [
            (["Invalid-Card"], "Invalid-Card"),
            (["Spades"], "Spades"),
            (["Hearts-15"], "Hearts-15"),
            ([123], "123"),
            ({1: ["Invalid-Card"]}, "Invalid-Card"),
        ],
    )
    def test_rejects_invalid_cards(self, test_case, bad, rng):
        with pytest.raises(InvalidDeckError, match=f"Invalid cards found: {bad}"):
            stack_deck(test_case, rng=rng)

    @pytest.mark.parametrize(
        "test_case",
        [["Spades-Ace", "Spades-Ace"], {1: ["Spades-Ace"], 2: ["Spades-Ace"]}],
    )
    def test_rejects_duplicates(self, test_case, rng):
        with pytest.raises(InvalidDeckError, match="Duplicate cards"):
            stack_deck(test_case, rng=rng)

    @pytest.mark.parametrize("test_case", ["invalid", 123])
    def test_rejects_other_types(self, test_case, rng):
        with pytest.raises(TypeError):
            stack_deck(test_case, rng=rng)

    def test_remainder_is_shuffled(self):
        decks = {tuple(tokens(stack_deck(["Spades-Ace"], rng=Random(seed)))) for seed in range(5)}
        assert len(decks) > 1
