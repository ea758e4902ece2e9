"""Tests for seat names and commentary lines."""

import pytest

from simplejack import commentary
from simplejack.cards import Card


@pytest.mark.parametrize(
    "seat_id, players, name, expected",
    [
        (1, 2, "Alice", "Alice"),
        (2, 2, "Alice", "Dealer"),
        (1, 4, None, "Player 1"),
        (3, 4, None, "Player 3"),
        (4, 4, None, "Dealer"),
        (1, 3, "", "Player 1"),
    ],
)
def test_display_name(seat_id, players, name, expected):
    assert commentary.display_name(seat_id, players, name) == expected


def test_join_names():
    assert commentary.join_names(["A"]) == "A"
    assert commentary.join_names(["A", "B"]) == "A and B"
    assert commentary.join_names(["A", "B", "C"]) == "A, B and C"


def test_lines():
    card = Card.from_string("Hearts-10")
    assert commentary.draws("Player 2", card) == "Player 2 draws Hearts-10"
    assert commentary.busts("Dealer", 24) == "Dealer busts with 24!"
    assert commentary.push_tie(["Player 1", "Player 3", "Dealer"], 19) == (
        "Push - Player 1, Player 3 and Dealer are tied with 19 points."
    )
    assert commentary.game_summary("3", "['Hearts-10', 'Spades-9']", 19) == (
        "Winner: 3, Hand: ['Hearts-10', 'Spades-9'], Value: 19"
    )
