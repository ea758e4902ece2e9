"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Literal


class StartRequest(BaseModel):
    """Request to start a round."""

    # Range is enforced by the engine; omitted means config.game.default_players
    players: int | None = Field(default=None, description="Number of seats (2-6)")
    player_name: str | None = Field(default=None, max_length=40)
    dealing_speed: Literal["slow", "normal", "fast"] | None = None
    deck: list[str] | None = Field(
        default=None,
        description="52 card tokens such as 'Spades-Ace', in deal order",
    )


class ActionRequest(BaseModel):
    """Request for a human seat decision."""

    action: Literal["hit", "stand"]


class SeatResponse(BaseModel):
    """One seat's hand."""

    seat_id: int
    name: str
    cards: list[str]
    score: int
    is_eliminated: bool
    has_stood: bool
    is_human: bool


class GameStateResponse(BaseModel):
    """Current round state."""

    state: str
    players: int | None
    player_name: str
    dealing_speed_ms: int
    seats: list[SeatResponse]
    current_seat: int
    cards_remaining: int
    high_score: int
    game_over: bool
    awaiting_decision: bool
    can_hit: bool
    can_stand: bool
    commentary: list[str]
    winner: int | None = None
    outcome: Literal["win", "push"] | None = None
    push_message: str | None = None
    game_summary: str | None = None


class SessionResponse(BaseModel):
    """New session token."""

    session_id: str
