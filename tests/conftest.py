"""
Shared pytest fixtures for blackjack engine tests.

Provides convenience wrappers around str_to_card for building known hands
and states.
"""

from __future__ import annotations

import pytest

from src.engine.cards import Card, str_to_card
from src.engine.deck import Deck, build_deck_without, new_deck
from src.engine.game_state import GameState, Turn


def hand(*card_strs: str) -> tuple[Card, ...]:
    """Build a hand tuple from short card strings.

    Examples:
        >>> hand('AS', 'KH')
        (Card(rank='A', suit='S'), Card(rank='K', suit='H'))
    """
    return tuple(str_to_card(s) for s in card_strs)


def make_state(
    player: tuple[Card, ...],
    dealer: tuple[Card, ...],
    top: tuple[Card, ...] = (),
    turn: Turn = Turn.PLAYER_TURN,
) -> GameState:
    """Build a 52-card GameState with known hands.

    Args:
        player: Player hand.
        dealer: Dealer hand.
        top:    Cards to deal next, in dealing order (top[0] is dealt first).
        turn:   Whose turn it is.
    """
    rest = build_deck_without(player, dealer, top)
    return GameState(
        player_hand=player,
        dealer_hand=dealer,
        card_deck=rest + tuple(reversed(top)),
        turn=turn,
    )


@pytest.fixture
def fresh_deck() -> Deck:
    """Return a full, ordered 52-card deck."""
    return new_deck()


@pytest.fixture
def h():
    """Expose the hand() helper as a fixture for convenience."""
    return hand
