"""
Round settlement: compares final player and dealer hands.

Settlement priority (highest to lowest):
    1. Player bust              → dealer wins (dealer hand is not consulted)
    2. Dealer bust              → player wins
    3. Both blackjack, or equal
       scores with no blackjack → draw
    4. Player blackjack / higher score → player wins
    5. Dealer blackjack / higher score → dealer wins

Steps 3–5 cover every pair of non-bust hands; NO_RESULT is only returned
as a fallback and is the value of a round that has not been settled.
"""

from __future__ import annotations

from enum import Enum

from .cards import Card
from .hand import HandStatus, hand_status


class GameResult(Enum):
    NO_RESULT = "no_result"
    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    DRAW = "draw"


def is_draw(
    player_score: int,
    player_status: HandStatus,
    dealer_score: int,
    dealer_status: HandStatus,
) -> bool:
    """Return True if two non-bust hands tie.

    Two blackjacks tie. Otherwise equal scores tie unless either side holds
    a blackjack (a blackjack beats a multi-card 21).
    """
    if player_status == HandStatus.BLACKJACK and dealer_status == HandStatus.BLACKJACK:
        return True
    return (
        player_score == dealer_score
        and player_status != HandStatus.BLACKJACK
        and dealer_status != HandStatus.BLACKJACK
    )


def determine_game_result(
    player_hand: tuple[Card, ...],
    player_score: int,
    dealer_hand: tuple[Card, ...],
    dealer_score: int,
) -> GameResult:
    """Determine the result of a finished round.

    Args:
        player_hand: Player's final hand.
        player_score: Score of player_hand.
        dealer_hand: Dealer's final hand.
        dealer_score: Score of dealer_hand.

    Returns:
        GameResult from the settlement priority in the module docstring.
    """
    player_status = hand_status(player_hand, player_score)
    if player_status == HandStatus.BUST:
        return GameResult.DEALER_WIN

    dealer_status = hand_status(dealer_hand, dealer_score)
    if dealer_status == HandStatus.BUST:
        return GameResult.PLAYER_WIN

    if is_draw(player_score, player_status, dealer_score, dealer_status):
        return GameResult.DRAW

    if player_status == HandStatus.BLACKJACK or player_score > dealer_score:
        return GameResult.PLAYER_WIN

    if dealer_status == HandStatus.BLACKJACK or dealer_score > player_score:
        return GameResult.DEALER_WIN

    return GameResult.NO_RESULT
