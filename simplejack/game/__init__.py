"""Round engine and state management."""

from simplejack.game.events import GameEvent, EventType
from simplejack.game.state import RoundState
from simplejack.game.snapshot import Outcome, RoundResult, RoundSnapshot, PUSH_SENTINEL
from simplejack.game.engine import SimpleJackGame

__all__ = [
    "GameEvent",
    "EventType",
    "RoundState",
    "Outcome",
    "RoundResult",
    "RoundSnapshot",
    "PUSH_SENTINEL",
    "SimpleJackGame",
]
