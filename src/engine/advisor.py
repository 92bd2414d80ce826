"""
Basic-strategy advisor: a Hit/Stand suggestion for the player.

The lookup uses three inputs only:
    - the player's score,
    - whether the player holds any ace (a coarse soft-hand signal),
    - the dealer's up-card (the first dealer card) valued as if it opened a
      fresh hand, so an Ace counts 11 and a face card 10.

Two tables are consulted. The soft table applies only when the player holds
an ace; the hard table is always consulted. Either one firing means HIT.
"""

from __future__ import annotations

from enum import Enum

from .cards import card_value
from .game_state import GameState
from .hand import calculate_hand_score, has_ace


class Suggestion(Enum):
    HIT = "Hit"
    STAND = "Stand"
    EMPTY = ""   # not requested yet


def soft_hit_conditions(player_score: int, dealer_upcard: int) -> bool:
    """Soft-hand table: True when the player should hit."""
    return (
        (13 <= player_score <= 16 and 4 <= dealer_upcard <= 6)
        or (player_score == 17 and dealer_upcard <= 7)
        or (player_score == 18 and dealer_upcard in (9, 10))  # not >= 9: stands vs an Ace
        or (player_score == 19 and dealer_upcard == 6)
    )


def hard_hit_conditions(player_score: int, dealer_upcard: int) -> bool:
    """Hard-hand table: True when the player should hit."""
    return (
        5 <= player_score <= 7
        or (player_score == 8 and dealer_upcard in (5, 6))
        or (player_score == 9 and 2 <= dealer_upcard <= 6)
        or (player_score == 10 and dealer_upcard not in (10, 11))
        or (player_score in (13, 14) and 2 <= dealer_upcard <= 6)
        or (player_score == 16 and not 2 <= dealer_upcard <= 6)
    )


def suggest_action(player_score: int, dealer_upcard: int, player_has_ace: bool) -> Suggestion:
    """Look up the suggestion for a player score against a dealer up-card value.

    Examples:
        >>> suggest_action(13, 5, False)
        <Suggestion.HIT: 'Hit'>
        >>> suggest_action(19, 6, True)
        <Suggestion.HIT: 'Hit'>
        >>> suggest_action(19, 6, False)
        <Suggestion.STAND: 'Stand'>
    """
    if player_has_ace and soft_hit_conditions(player_score, dealer_upcard):
        return Suggestion.HIT
    if hard_hit_conditions(player_score, dealer_upcard):
        return Suggestion.HIT
    return Suggestion.STAND


def dealer_upcard_value(state: GameState) -> int:
    """Value of the dealer's up-card as the opening card of a hand."""
    return card_value(state.dealer_hand[0], 0)


def suggest(state: GameState) -> Suggestion:
    """Suggest HIT or STAND for the current game state.

    Pure function of the state: it never mutates the state and repeated
    calls return the same answer.
    """
    return suggest_action(
        calculate_hand_score(state.player_hand),
        dealer_upcard_value(state),
        has_ace(state.player_hand),
    )
