"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: AWAITING_PLAYERS → DEALING ⇄ AWAITING_DECISION → RESOLVING → COMPLETE

    A corrupted card ends the round in ABORTED with no result.
    """

    # No round in progress, seat count not chosen yet
    AWAITING_PLAYERS = auto()

    # Seats are drawing or being skipped
    DEALING = auto()

    # Paused on the human seat until hit or stand
    AWAITING_DECISION = auto()

    # Game over, winner not yet determined
    RESOLVING = auto()

    # Winner or push determined
    COMPLETE = auto()

    # Stopped by an invalid card; nothing more is dealt
    ABORTED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.AWAITING_PLAYERS: [RoundState.DEALING],
    RoundState.DEALING: [
        RoundState.AWAITING_DECISION,
        RoundState.RESOLVING,
        RoundState.ABORTED,
    ],
    RoundState.AWAITING_DECISION: [
        RoundState.DEALING,
        RoundState.RESOLVING,
        RoundState.ABORTED,
    ],
    RoundState.RESOLVING: [RoundState.COMPLETE],
    RoundState.COMPLETE: [RoundState.AWAITING_PLAYERS, RoundState.DEALING],
    RoundState.ABORTED: [RoundState.AWAITING_PLAYERS, RoundState.DEALING],
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    ``reset_round`` may leave any state for AWAITING_PLAYERS; that escape
    hatch is not listed here.
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
