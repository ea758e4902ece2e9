"""Play a whole round without a human seat."""

from typing import Sequence

from simplejack import commentary
from simplejack.cards import Card
from simplejack.game.engine import SimpleJackGame
from simplejack.game.state import RoundState


def simple_jack(deck: Sequence[Card | str], players: int) -> str | None:
    """
    Deal a full round where every seat follows the forced-draw rule.

    Returns:
        ``"Winner: <seat id>, Hand: [...], Value: <score>"``, or None on a push

    Raises:
        InvalidPlayerCountError: if ``players`` is not 2-6
        InvalidDeckError: if ``deck`` is not a valid 52-card deck
    """
    game = SimpleJackGame(interactive=False)
    game.start_round(players, deck)

    state = game.advance_until_blocked()
    if state is not RoundState.COMPLETE:
        raise RuntimeError(f"Round did not complete (state: {state})")

    result = game.result
    if result is None or result.winner is None:
        return None

    hand = game.hands[result.winner - 1]
    return commentary.game_summary(str(hand.seat_id), hand.cards_to_string(), hand.score)
