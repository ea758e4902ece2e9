"""Simple Jack round engine with state machine."""

import logging
from random import Random
from typing import Callable, Sequence

from transitions import Machine

from config import DealingSpeed, config
from simplejack import commentary
from simplejack.cards import Card
from simplejack.deck import Deck
from simplejack.errors import DeckExhaustedError, InvalidCardError
from simplejack.game.events import EventEmitter, EventType, GameEvent
from simplejack.game.snapshot import RoundResult, RoundSnapshot, SeatView
from simplejack.game.state import RoundState
from simplejack.hand import TARGET_SCORE, Hand
from simplejack.validation import validate_card, validate_player_count

logger = logging.getLogger(__name__)

HUMAN_SEAT = 0


class SimpleJackGame:
    """
    Simple Jack round engine using a state machine.

    The engine owns the deck, the hands and the turn pointer. It never
    schedules itself: the caller invokes ``advance()`` once per tick, and
    ``hit()``/``stand()`` when the human seat is waiting for a decision.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_dealing", "source": "*", "dest": "dealing"},
        {"trigger": "pause_for_decision", "source": "dealing", "dest": "awaiting_decision"},
        {"trigger": "resume_dealing", "source": "awaiting_decision", "dest": "dealing"},
        {"trigger": "end_round", "source": ["dealing", "awaiting_decision"], "dest": "resolving"},
        {"trigger": "complete_round", "source": "resolving", "dest": "complete"},
        {"trigger": "abort_round", "source": ["dealing", "awaiting_decision"], "dest": "aborted"},
        {"trigger": "clear_round", "source": "*", "dest": "awaiting_players"},
    ]

    def __init__(
        self,
        player_name: str | None = None,
        dealing_speed: DealingSpeed | None = None,
        interactive: bool = True,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new engine with no round in progress.

        Args:
            player_name: Display name of the human seat
            dealing_speed: Delay the external scheduler should leave between ticks
            interactive: If False, no seat waits for decisions and every seat
                follows the forced-draw rule
            rng: Random number generator for reproducible default decks
        """
        self.player_name = player_name or config.game.default_player_name
        self.dealing_speed = dealing_speed or config.game.dealing_speed
        self.interactive = interactive
        self._rng = rng or Random()

        self.players: int | None = None
        self.deck = Deck.shuffled(self._rng)
        self.hands: list[Hand] = []
        self.current_seat = 0
        self.cards_dealt_on_turn = 0
        self.commentary: list[str] = []
        self.game_over = False
        self.high_score = 0
        self.result: RoundResult | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_players",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start_round(
        self,
        players: int,
        deck: Sequence[Card | str] | None = None,
    ) -> RoundState:
        """
        Start a new round, discarding any round in progress.

        Args:
            players: Number of seats, 2 to 6
            deck: 52 cards in deal order; a shuffled deck is used if omitted

        Returns:
            The new state (DEALING)

        Raises:
            InvalidPlayerCountError: if ``players`` is out of range
            InvalidDeckError: if ``deck`` is malformed
        """
        validate_player_count(players)
        new_deck = Deck(deck) if deck is not None else Deck.shuffled(self._rng)

        self.players = players
        self.deck = new_deck
        self.hands = [Hand(seat_id=i + 1) for i in range(players)]
        self._reset_counters()
        self.events.clear_history()

        self.begin_dealing()
        logger.info("Round started with %d players", players)
        self.events.emit_new(EventType.ROUND_STARTED, players=players)
        return self.state

    def reset_round(self) -> None:
        """
        Discard the round and return to waiting for players.

        Player name, dealing speed and the last player count are kept so the
        caller can carry them into the next round.
        """
        self.deck = Deck.shuffled(self._rng)
        self.hands = []
        self._reset_counters()
        self.clear_round()
        self.events.emit_new(EventType.ROUND_RESET)

    def _reset_counters(self) -> None:
        self.current_seat = 0
        self.cards_dealt_on_turn = 0
        self.commentary = []
        self.game_over = False
        self.high_score = 0
        self.result = None

    def display_name(self, seat_id: int) -> str:
        """Label a seat (1-based) for commentary and summaries."""
        name = self.player_name if self.interactive else None
        return commentary.display_name(seat_id, self.players or 0, name)

    @property
    def human_hand(self) -> Hand | None:
        """The human seat's hand, if a round is in progress."""
        if not self.interactive or not self.hands:
            return None
        return self.hands[HUMAN_SEAT]

    def _human_can_choose(self) -> bool:
        """Check if the turn is on the human seat and it may hit or stand."""
        hand = self.human_hand
        return (
            hand is not None
            and self.current_seat == HUMAN_SEAT
            and len(hand.cards) >= 2
            and not hand.has_stood
            and not hand.is_eliminated
        )

    def advance(self) -> bool:
        """
        Take one step of the round.

        Deals one card to the current seat if it must draw, otherwise moves the
        turn on. Pauses when the human seat may choose.

        Returns:
            True if the round state changed, False if the engine is paused,
            idle or finished

        Raises:
            InvalidCardError: if a corrupted card is drawn; the round is
                left ABORTED
        """
        if self.state not in (RoundState.DEALING, RoundState.AWAITING_DECISION):
            return False

        if self._human_can_choose():
            if self.state is RoundState.DEALING:
                self.pause_for_decision()
                self.events.emit_new(
                    EventType.AWAITING_DECISION,
                    seat=HUMAN_SEAT + 1,
                    score=self.hands[HUMAN_SEAT].score,
                )
            return False

        hand = self.hands[self.current_seat]
        if hand.must_draw:
            self._deal_to_current_seat()
        else:
            self._move_to_next_seat(dealt=False)
        return True

    def advance_until_blocked(self, max_steps: int | None = None) -> RoundState:
        """Advance until the engine pauses for a decision or the round completes."""
        limit = config.game.max_advance_steps if max_steps is None else max_steps
        steps = 0
        while steps < limit and self.advance():
            steps += 1
        return self.state

    def hit(self) -> bool:
        """Human seat takes another card."""
        if not self.can_hit:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot hit now",
                state=self.state.name,
            )
            return False

        self.resume_dealing()
        self.events.emit_new(EventType.PLAYER_HIT, seat=HUMAN_SEAT + 1)
        self._deal_to_current_seat()
        return True

    def stand(self) -> bool:
        """Human seat stops drawing for the rest of the round."""
        if not self.can_stand:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot stand now",
                state=self.state.name,
            )
            return False

        hand = self.hands[HUMAN_SEAT]
        hand.has_stood = True
        self._comment(commentary.stands(self.display_name(hand.seat_id), hand.score))
        self.events.emit_new(EventType.PLAYER_STAND, seat=hand.seat_id, score=hand.score)

        self.resume_dealing()
        self._move_to_next_seat(dealt=False)
        return True

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state is RoundState.AWAITING_DECISION and self._human_can_choose()

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.can_hit

    def _comment(self, line: str) -> None:
        """Add a commentary line; newest lines come first."""
        self.commentary.insert(0, line)

    def _deal_to_current_seat(self) -> None:
        """Deal one card to the current seat and apply the result."""
        hand = self.hands[self.current_seat]
        name = self.display_name(hand.seat_id)

        try:
            card = validate_card(self.deck.draw())
        except DeckExhaustedError:
            self._comment(commentary.deck_exhausted())
            self.events.emit_new(EventType.DECK_EXHAUSTED, seat=hand.seat_id)
            logger.info("Deck exhausted on seat %d's turn", hand.seat_id)
            self._finish()
            return
        except InvalidCardError as exc:
            logger.error("Invalid card drawn for seat %d: %s", hand.seat_id, exc)
            self._abort(str(exc))
            raise

        new_score = hand.add_card(card)
        self._comment(commentary.draws(name, card))
        self.events.emit_new(
            EventType.CARD_DEALT,
            seat=hand.seat_id,
            card=str(card),
            hand_value=new_score,
        )
        logger.debug("Seat %d draws %s (%d)", hand.seat_id, card, new_score)

        if new_score == TARGET_SCORE:
            self._comment(commentary.hits_target(name))
            self.events.emit_new(EventType.PLAYER_HITS_21, seat=hand.seat_id)
            self.high_score = TARGET_SCORE
            self._finish(winner=hand)
            return

        if new_score < TARGET_SCORE:
            self.high_score = max(self.high_score, new_score)
        else:
            hand.is_eliminated = True
            self._comment(commentary.busts(name, new_score))
            self.events.emit_new(EventType.PLAYER_BUSTS, seat=hand.seat_id, hand_value=new_score)

        self._move_to_next_seat(dealt=True)

    def _move_to_next_seat(self, dealt: bool) -> None:
        """Pass the turn on; a full circuit without a deal ends the round."""
        next_seat = (self.current_seat + 1) % len(self.hands)

        if next_seat == 0:
            if not dealt and self.cards_dealt_on_turn == 0:
                self._finish()
                return
            self.cards_dealt_on_turn = 0
        elif dealt:
            self.cards_dealt_on_turn += 1

        self.current_seat = next_seat

    def _abort(self, reason: str) -> None:
        """Stop the round without a result."""
        self.game_over = True
        self.abort_round()
        self.events.emit_new(EventType.ROUND_ABORTED, reason=reason)

    def _finish(self, winner: Hand | None = None) -> None:
        """Mark the round over and resolve it."""
        self.game_over = True
        self.end_round()
        self.result = self._resolve(winner)
        self.complete_round()

        logger.info(
            "Round complete: %s",
            self.result.summary or self.result.push_message,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            winner=self.result.winner_id,
            summary=self.result.summary,
            push_message=self.result.push_message,
        )

    def _resolve(self, winner: Hand | None) -> RoundResult:
        """Determine the winner among seats that have not busted."""
        if winner is None:
            active = [hand for hand in self.hands if hand.is_active]
            if not active:
                return self._push(commentary.push_all_busted())

            best = max(hand.score for hand in active)
            leaders = [hand for hand in active if hand.score == best]
            if len(leaders) > 1:
                names = [self.display_name(hand.seat_id) for hand in leaders]
                return self._push(commentary.push_tie(names, best), score=best)

            winner = leaders[0]
            self._comment(
                commentary.wins_highest(self.display_name(winner.seat_id), winner.score)
            )

        self.events.emit_new(EventType.PLAYER_WINS, seat=winner.seat_id, hand_value=winner.score)
        summary = commentary.game_summary(
            self.display_name(winner.seat_id),
            winner.cards_to_string(),
            winner.score,
        )
        return RoundResult.win(winner.seat_id, winner.score, summary)

    def _push(self, message: str, score: int | None = None) -> RoundResult:
        self._comment(message)
        self.events.emit_new(EventType.PUSH, message=message)
        return RoundResult.push(message, score=score)

    def snapshot(self) -> RoundSnapshot:
        """Return a read-only view of the round."""
        return RoundSnapshot(
            state=self.state,
            players=self.players,
            player_name=self.player_name,
            dealing_speed_ms=self.dealing_speed.value,
            seats=tuple(
                SeatView.from_hand(
                    hand,
                    self.display_name(hand.seat_id),
                    is_human=self.interactive and index == HUMAN_SEAT,
                )
                for index, hand in enumerate(self.hands)
            ),
            current_seat=self.current_seat,
            cards_remaining=self.deck.cards_remaining,
            high_score=self.high_score,
            game_over=self.game_over,
            commentary=tuple(self.commentary),
            result=self.result,
        )
