"""
Game state and round transitions.

A round flows:
    DEAL → PLAYER_TURN (hit / stand) → DEALER_TURN (dealer draw-out) → SETTLEMENT

Every transition takes a GameState and returns a new one; nothing is mutated
in place. Cards only move from the top of the deck into a hand, so

    len(player_hand) + len(dealer_hand) + len(card_deck) == 52

holds for the whole round.

player_hits() and player_stands() do not check whose turn it is; the caller
gates them on state.turn. hit() and stand() layer the round flow on top:
a bust ends the player's turn without a dealer draw-out, and standing passes
control to the dealer immediately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .cards import Card, hand_to_str
from .dealer import dealer_draw_out
from .deck import Deck, new_deck, shuffle, take_card
from .hand import calculate_hand_score, is_bust
from .rules import GameResult, determine_game_result

logger = logging.getLogger(__name__)


# ─── Enumerations ─────────────────────────────────────────────────────────────

class Turn(Enum):
    PLAYER_TURN = "player_turn"
    DEALER_TURN = "dealer_turn"


# ─── State type ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a round in progress."""
    player_hand: tuple[Card, ...]
    dealer_hand: tuple[Card, ...]
    card_deck: Deck               # top of the deck is the last card
    turn: Turn = Turn.PLAYER_TURN

    @property
    def player_score(self) -> int:
        return calculate_hand_score(self.player_hand)

    @property
    def dealer_score(self) -> int:
        return calculate_hand_score(self.dealer_hand)

    def __str__(self) -> str:
        return (
            f"Player: {hand_to_str(self.player_hand)} ({self.player_score}) | "
            f"Dealer: {hand_to_str(self.dealer_hand)} ({self.dealer_score}) | "
            f"{len(self.card_deck)} left | {self.turn.value}"
        )


# ─── Setup ────────────────────────────────────────────────────────────────────

def setup_game() -> GameState:
    """Deal a fresh round from a newly shuffled deck.

    The player takes the top two cards and the dealer the next two.
    """
    deck = shuffle(new_deck())
    state = GameState(
        player_hand=deck[-2:],
        dealer_hand=deck[-4:-2],
        card_deck=deck[:-4],
        turn=Turn.PLAYER_TURN,
    )
    logger.debug("New round: %s", state)
    return state


# ─── Transitions ──────────────────────────────────────────────────────────────

def player_hits(state: GameState) -> GameState:
    """Move the top card of the deck into the player's hand."""
    card, remaining = take_card(state.card_deck)
    return replace(state, card_deck=remaining, player_hand=state.player_hand + (card,))


def player_stands(state: GameState) -> GameState:
    """Pass control to the dealer."""
    return replace(state, turn=Turn.DEALER_TURN)


def dealer_hits(state: GameState) -> GameState:
    """Move the top card of the deck into the dealer's hand."""
    card, remaining = take_card(state.card_deck)
    return replace(state, card_deck=remaining, dealer_hand=state.dealer_hand + (card,))


def dealers_turn(state: GameState) -> GameState:
    """Run the dealer policy to completion and return the final state."""
    dealer_hand, remaining = dealer_draw_out(state.dealer_hand, state.card_deck)
    return replace(state, dealer_hand=dealer_hand, card_deck=remaining)


# ─── Round flow ───────────────────────────────────────────────────────────────

def hit(state: GameState) -> GameState:
    """Player hits; a bust ends the player's turn straight away.

    The dealer does not draw out after a player bust since the round is
    already decided.
    """
    new_state = player_hits(state)
    if is_bust(new_state.player_score):
        logger.debug("Player busts with %d", new_state.player_score)
        new_state = player_stands(new_state)
    return new_state


def stand(state: GameState) -> GameState:
    """Player stands; the dealer then plays out unless the player is bust."""
    new_state = player_stands(state)
    if not is_bust(new_state.player_score):
        new_state = dealers_turn(new_state)
    return new_state


def game_result(state: GameState) -> GameResult:
    """Result of the round, or NO_RESULT while the player is still to act."""
    if state.turn == Turn.PLAYER_TURN:
        return GameResult.NO_RESULT
    return determine_game_result(
        state.player_hand,
        state.player_score,
        state.dealer_hand,
        state.dealer_score,
    )


def card_count(state: GameState) -> int:
    """Total cards across both hands and the deck."""
    return len(state.player_hand) + len(state.dealer_hand) + len(state.card_deck)
