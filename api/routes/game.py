"""Game API endpoints."""

import logging
import time
from fastapi import APIRouter, Depends, HTTPException, Header
from typing import Annotated, Any, Callable

from api.schemas import (
    ActionRequest,
    GameStateResponse,
    SeatResponse,
    SessionResponse,
    StartRequest,
)
from api.session import get_session_signer, get_session_store
from config import DealingSpeed, config
from simplejack.cards import Card
from simplejack.deck import Deck
from simplejack.errors import SimpleJackError
from simplejack.game import Outcome, RoundResult, SimpleJackGame
from simplejack.hand import Hand

logger = logging.getLogger(__name__)

router = APIRouter()

# In-memory game cache (for performance, backed by session store)
_games: dict[str, SimpleJackGame] = {}

# Session data keys
SESSION_KEY_GAME = "game"
SESSION_KEY_CREATED_AT = "created_at"
SESSION_KEY_LAST_ACTIVITY = "last_activity"


def _serialize_hand(hand: Hand) -> dict[str, Any]:
    """Serialize a hand to a dict. The score is derived and not stored."""
    return {
        "seat_id": hand.seat_id,
        "cards": [str(c) for c in hand.cards],
        "is_eliminated": hand.is_eliminated,
        "has_stood": hand.has_stood,
    }


def _deserialize_hand(data: dict[str, Any]) -> Hand:
    """Deserialize a hand from a dict."""
    return Hand(
        seat_id=data["seat_id"],
        cards=[Card.from_string(c) for c in data["cards"]],
        is_eliminated=data["is_eliminated"],
        has_stood=data["has_stood"],
    )


def _serialize_result(result: RoundResult | None) -> dict[str, Any] | None:
    """Serialize a round result to a dict."""
    if result is None:
        return None
    return {
        "outcome": result.outcome.value,
        "winner": result.winner,
        "score": result.score,
        "push_message": result.push_message,
        "summary": result.summary,
    }


def _deserialize_result(data: dict[str, Any] | None) -> RoundResult | None:
    """Deserialize a round result from a dict."""
    if data is None:
        return None
    return RoundResult(
        outcome=Outcome(data["outcome"]),
        winner=data["winner"],
        score=data["score"],
        push_message=data["push_message"],
        summary=data["summary"],
    )


def _serialize_game(game: SimpleJackGame) -> dict[str, Any]:
    """Serialize game state for session storage."""
    return {
        "state": game._machine_state,
        "player_name": game.player_name,
        "dealing_speed": game.dealing_speed.name,
        "interactive": game.interactive,
        "players": game.players,
        "deck": [str(c) for c in game.deck],
        "hands": [_serialize_hand(h) for h in game.hands],
        "current_seat": game.current_seat,
        "cards_dealt_on_turn": game.cards_dealt_on_turn,
        "commentary": list(game.commentary),
        "game_over": game.game_over,
        "high_score": game.high_score,
        "result": _serialize_result(game.result),
    }


def _deserialize_game(data: dict[str, Any]) -> SimpleJackGame:
    """Restore game from session data."""
    game = SimpleJackGame(
        player_name=data["player_name"],
        dealing_speed=DealingSpeed[data["dealing_speed"]],
        interactive=data["interactive"],
    )

    # Restore state machine state
    game._machine_state = data["state"]

    game.players = data["players"]
    game.deck = Deck.restore(data["deck"])
    game.hands = [_deserialize_hand(h) for h in data["hands"]]
    game.current_seat = data["current_seat"]
    game.cards_dealt_on_turn = data["cards_dealt_on_turn"]
    game.commentary = list(data["commentary"])
    game.game_over = data["game_over"]
    game.high_score = data["high_score"]
    game.result = _deserialize_result(data["result"])

    return game


async def _load_game(session_id: str) -> SimpleJackGame | None:
    """Load game from session store."""
    store = await get_session_store()
    session_data = await store.load(session_id)
    if session_data and SESSION_KEY_GAME in session_data:
        return _deserialize_game(session_data[SESSION_KEY_GAME])
    return None


async def _save_game(session_id: str, game: SimpleJackGame) -> None:
    """Save game to session store."""
    store = await get_session_store()
    session_data = await store.load(session_id) or {}
    session_data[SESSION_KEY_GAME] = _serialize_game(game)
    session_data[SESSION_KEY_LAST_ACTIVITY] = int(time.time())
    if SESSION_KEY_CREATED_AT not in session_data:
        session_data[SESSION_KEY_CREATED_AT] = int(time.time())
    await store.save(session_id, session_data)


async def _get_game(session_id: str) -> SimpleJackGame:
    """Get or create a game for the session."""
    # Check memory cache first
    if session_id in _games:
        return _games[session_id]

    # Try to load from session store
    game = await _load_game(session_id)
    if game is not None:
        _games[session_id] = game
        return game

    # Create new game
    game = SimpleJackGame()
    _games[session_id] = game
    await _save_game(session_id, game)
    return game


def _game_state_response(game: SimpleJackGame) -> GameStateResponse:
    """Convert game state to response."""
    snapshot = game.snapshot()
    return GameStateResponse(
        state=snapshot.state.name,
        players=snapshot.players,
        player_name=snapshot.player_name,
        dealing_speed_ms=snapshot.dealing_speed_ms,
        seats=[
            SeatResponse(
                seat_id=seat.seat_id,
                name=seat.name,
                cards=list(seat.cards),
                score=seat.score,
                is_eliminated=seat.is_eliminated,
                has_stood=seat.has_stood,
                is_human=seat.is_human,
            )
            for seat in snapshot.seats
        ],
        current_seat=snapshot.current_seat,
        cards_remaining=snapshot.cards_remaining,
        high_score=snapshot.high_score,
        game_over=snapshot.game_over,
        awaiting_decision=snapshot.awaiting_decision,
        can_hit=game.can_hit,
        can_stand=game.can_stand,
        commentary=list(snapshot.commentary),
        winner=snapshot.winner,
        outcome=snapshot.result.outcome.value if snapshot.result else None,
        push_message=snapshot.push_message,
        game_summary=snapshot.game_summary,
    )


async def _session_id(
    token: Annotated[str, Header(alias="X-Session-ID")],
) -> str:
    """Resolve the client's token to its session id."""
    session_id = get_session_signer().verify(token)
    if session_id is None:
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    return session_id


SessionId = Annotated[str, Depends(_session_id)]


async def _run_step(session_id: str, game: SimpleJackGame, step: Callable[[], Any]) -> Any:
    """Run an engine step and persist the game, including a round it aborted."""
    try:
        return step()
    except SimpleJackError as exc:
        logger.warning("Round aborted for session %s: %s", session_id, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    finally:
        await _save_game(session_id, game)


@router.post("/new")
async def new_game(
    token: Annotated[str | None, Header(alias="X-Session-ID")] = None,
) -> SessionResponse:
    """Create a game, reusing the caller's session when its token is still valid."""
    signer = get_session_signer()
    session_id = signer.verify(token) if token else None
    if session_id is None:
        session_id, token = signer.issue()
        logger.info("Created game session %s", session_id)

    game = SimpleJackGame()
    _games[session_id] = game
    await _save_game(session_id, game)

    return SessionResponse(session_id=token)


@router.get("/state")
async def get_state(session_id: SessionId) -> GameStateResponse:
    """Get current game state."""
    game = await _get_game(session_id)
    return _game_state_response(game)


@router.post("/start")
async def start_round(request: StartRequest, session_id: SessionId) -> GameStateResponse:
    """Start a round with the given seats and optional stacked deck."""
    game = await _get_game(session_id)

    if request.player_name is not None:
        game.player_name = request.player_name.strip() or game.player_name
    if request.dealing_speed is not None:
        game.dealing_speed = DealingSpeed.from_name(request.dealing_speed)

    players = config.game.default_players if request.players is None else request.players
    try:
        game.start_round(players, request.deck)
    except SimpleJackError as exc:
        logger.info("Rejected round start: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    await _save_game(session_id, game)
    return _game_state_response(game)


@router.post("/advance")
async def advance(session_id: SessionId) -> GameStateResponse:
    """Take one engine step (called by the client's dealing timer)."""
    game = await _get_game(session_id)
    await _run_step(session_id, game, game.advance)
    return _game_state_response(game)


@router.post("/advance-all")
async def advance_all(session_id: SessionId) -> GameStateResponse:
    """Advance until the human seat must decide or the round is over."""
    game = await _get_game(session_id)
    await _run_step(session_id, game, game.advance_until_blocked)
    return _game_state_response(game)


@router.post("/action")
async def player_action(request: ActionRequest, session_id: SessionId) -> GameStateResponse:
    """Execute a human seat decision."""
    game = await _get_game(session_id)

    action_fn = {"hit": game.hit, "stand": game.stand}[request.action]
    if not await _run_step(session_id, game, action_fn):
        logger.info("Rejected %s in state %s", request.action, game.state.name)
        raise HTTPException(status_code=400, detail=f"Cannot {request.action} now")

    return _game_state_response(game)


@router.post("/reset")
async def reset_round(session_id: SessionId) -> GameStateResponse:
    """Discard the round, keeping player name and dealing speed."""
    game = await _get_game(session_id)
    game.reset_round()
    await _save_game(session_id, game)
    return _game_state_response(game)
