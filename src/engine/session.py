"""
Interactive game session.

GameSession is the single writer of the current round. It holds the current
GameState and replaces it wholesale on every action, together with the
per-round advice state: the stored suggestion (EMPTY until requested) and
whether help is still available this round (one request per round).

The UI layer talks only to GameSession; the rules stay in the pure
transition functions of game_state.
"""

from __future__ import annotations

import logging

from .advisor import Suggestion, suggest
from .cards import Card
from .game_state import (
    GameState,
    Turn,
    game_result,
    hit,
    setup_game,
    stand,
)
from .rules import GameResult

logger = logging.getLogger(__name__)


class GameSession:
    """Holds one round of blackjack and exposes the player-facing actions."""

    def __init__(self, state: GameState | None = None):
        self.state = state if state is not None else setup_game()
        self.suggestion = Suggestion.EMPTY
        self.help_available = True

    # ── Actions ───────────────────────────────────────────────────────────────

    def hit(self) -> GameState:
        if self.state.turn != Turn.PLAYER_TURN:
            logger.warning("Ignoring hit outside the player's turn")
            return self.state
        self.state = hit(self.state)
        self._log_if_finished()
        return self.state

    def stand(self) -> GameState:
        if self.state.turn != Turn.PLAYER_TURN:
            logger.warning("Ignoring stand outside the player's turn")
            return self.state
        self.state = stand(self.state)
        self._log_if_finished()
        return self.state

    def reset(self) -> GameState:
        """Start a new round and clear the advice state."""
        self.state = setup_game()
        self.suggestion = Suggestion.EMPTY
        self.help_available = True
        return self.state

    def request_help(self) -> Suggestion:
        """Compute the suggestion for the current state, once per round.

        Later calls in the same round return the stored suggestion.
        """
        if self.help_available:
            self.suggestion = suggest(self.state)
            self.help_available = False
            logger.debug("Suggestion for %s: %s", self.state, self.suggestion.value)
        return self.suggestion

    # ── Queries ───────────────────────────────────────────────────────────────

    @property
    def player_score(self) -> int:
        return self.state.player_score

    @property
    def dealer_score(self) -> int:
        return self.state.dealer_score

    @property
    def result(self) -> GameResult:
        return game_result(self.state)

    @property
    def cards_left(self) -> int:
        return len(self.state.card_deck)

    @property
    def is_player_turn(self) -> bool:
        return self.state.turn == Turn.PLAYER_TURN

    @property
    def visible_dealer_cards(self) -> tuple[Card | None, ...]:
        """Dealer cards as the player sees them.

        While the player is acting only the up-card is face up; the hole card
        is reported as None.
        """
        if self.is_player_turn:
            return (self.state.dealer_hand[0],) + (None,) * (len(self.state.dealer_hand) - 1)
        return self.state.dealer_hand

    @property
    def status_text(self) -> str:
        result = self.result
        if result != GameResult.NO_RESULT:
            return result.value
        return self.state.turn.value

    def _log_if_finished(self) -> None:
        if not self.is_player_turn:
            logger.info("Round finished: %s -> %s", self.state, self.result.value)
