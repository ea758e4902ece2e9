"""Commentary lines, push messages and round summaries."""

from typing import Sequence

from simplejack.cards import Card

DEALER_NAME = "Dealer"


def display_name(seat_id: int, players: int, player_name: str | None = None) -> str:
    """
    Label a seat for commentary and summaries.

    Seat 1 carries the human player's name when one is given, the last seat
    is the Dealer, every other seat is ``"Player <seat>"``.
    """
    if seat_id == 1 and player_name:
        return player_name
    if seat_id == players:
        return DEALER_NAME
    return f"Player {seat_id}"


def join_names(names: Sequence[str]) -> str:
    """Join names as ``"A and B"`` or ``"A, B and C"``."""
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


def draws(name: str, card: Card) -> str:
    return f"{name} draws {card}"


def hits_target(name: str) -> str:
    return f"{name} hits 21!"


def busts(name: str, score: int) -> str:
    return f"{name} busts with {score}!"


def stands(name: str, score: int) -> str:
    return f"{name} chooses to stand with {score}"


def deck_exhausted() -> str:
    return "The deck is exhausted. No more cards can be dealt."


def wins_highest(name: str, score: int) -> str:
    return f"{name} wins with the highest score of {score}!"


def push_all_busted() -> str:
    return "Push - All players have busted."


def push_tie(names: Sequence[str], score: int) -> str:
    return f"Push - {join_names(names)} are tied with {score} points."


def game_summary(winner: str, cards: str, score: int) -> str:
    """Build the final summary line for a single winner."""
    return f"Winner: {winner}, Hand: {cards}, Value: {score}"
