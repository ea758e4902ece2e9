"""Read-only views of a round for the presentation layer."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from simplejack.game.state import RoundState
from simplejack.hand import Hand

# Wire value of ``winner`` when a round ends without a single winner
PUSH_SENTINEL = -1


class Outcome(Enum):
    """How a finished round was decided."""

    WIN = "win"
    PUSH = "push"


@dataclass(frozen=True)
class RoundResult:
    """Resolution of a finished round."""

    outcome: Outcome
    winner: int | None = None
    score: int | None = None
    push_message: str | None = None
    summary: str | None = None

    @classmethod
    def win(cls, seat_id: int, score: int, summary: str) -> "RoundResult":
        return cls(Outcome.WIN, winner=seat_id, score=score, summary=summary)

    @classmethod
    def push(cls, message: str, score: int | None = None) -> "RoundResult":
        return cls(Outcome.PUSH, score=score, push_message=message)

    @property
    def is_push(self) -> bool:
        return self.outcome is Outcome.PUSH

    @property
    def winner_id(self) -> int:
        """Winner seat id, or ``PUSH_SENTINEL`` for a push."""
        return PUSH_SENTINEL if self.winner is None else self.winner


@dataclass(frozen=True)
class SeatView:
    """Snapshot of one seat."""

    seat_id: int
    name: str
    cards: tuple[str, ...]
    score: int
    is_eliminated: bool
    has_stood: bool
    is_human: bool

    @classmethod
    def from_hand(cls, hand: Hand, name: str, is_human: bool) -> "SeatView":
        return cls(
            seat_id=hand.seat_id,
            name=name,
            cards=tuple(str(card) for card in hand.cards),
            score=hand.score,
            is_eliminated=hand.is_eliminated,
            has_stood=hand.has_stood,
            is_human=is_human,
        )


@dataclass(frozen=True)
class RoundSnapshot:
    """Everything a UI needs to render the round; never mutated."""

    state: RoundState
    players: int | None
    player_name: str
    dealing_speed_ms: int
    seats: tuple[SeatView, ...]
    current_seat: int
    cards_remaining: int
    high_score: int
    game_over: bool
    commentary: tuple[str, ...]
    result: RoundResult | None

    @property
    def awaiting_decision(self) -> bool:
        return self.state is RoundState.AWAITING_DECISION

    @property
    def winner(self) -> int | None:
        """Winner seat id, ``PUSH_SENTINEL`` for a push, None while playing."""
        return self.result.winner_id if self.result else None

    @property
    def push_message(self) -> str | None:
        return self.result.push_message if self.result else None

    @property
    def game_summary(self) -> str | None:
        return self.result.summary if self.result else None

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible representation."""
        return {
            "state": self.state.name,
            "players": self.players,
            "player_name": self.player_name,
            "dealing_speed_ms": self.dealing_speed_ms,
            "seats": [
                {
                    "seat_id": seat.seat_id,
                    "name": seat.name,
                    "cards": list(seat.cards),
                    "score": seat.score,
                    "is_eliminated": seat.is_eliminated,
                    "has_stood": seat.has_stood,
                    "is_human": seat.is_human,
                }
                for seat in self.seats
            ],
            "current_seat": self.current_seat,
            "cards_remaining": self.cards_remaining,
            "high_score": self.high_score,
            "game_over": self.game_over,
            "awaiting_decision": self.awaiting_decision,
            "commentary": list(self.commentary),
            "winner": self.winner,
            "outcome": self.result.outcome.value if self.result else None,
            "push_message": self.push_message,
            "game_summary": self.game_summary,
        }
