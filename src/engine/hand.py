"""
Hand evaluation: score calculation and status classification.

Blackjack ace valuation is order dependent:
    An ace folded into a running total of 10 or less counts 11, otherwise 1.

After the fold, a hand holding two or more aces that has gone over 21 is
reduced by 10 exactly once (the second ace re-priced from 11 to 1). The
reduction is applied once regardless of how many aces are held.

All functions operate on tuples of Card values and never mutate them.
"""

from __future__ import annotations

from enum import Enum

from .cards import RANK_ACE, Card, card_value

BLACKJACK_SCORE: int = 21


class HandStatus(Enum):
    ACTIVE = "active"
    BLACKJACK = "blackjack"
    BUST = "bust"


def calculate_hand_score(hand: tuple[Card, ...]) -> int:
    """Calculate the score of a hand.

    Args:
        hand: Cards in the order they were dealt.

    Returns:
        The hand total. May exceed 21.

    Examples:
        >>> from src.engine.cards import str_to_card as c
        >>> calculate_hand_score((c('AS'), c('KH')))
        21
        >>> calculate_hand_score((c('AS'), c('AC'), c('9D')))   # 11 + 1 + 9
        21
        >>> calculate_hand_score((c('10C'), c('10D'), c('5H')))
        25
    """
    score = 0
    num_aces = 0
    for card in hand:
        if card.rank == RANK_ACE:
            num_aces += 1
        score += card_value(card, score)

    if num_aces > 1 and score > BLACKJACK_SCORE:
        score -= 10
    return score


def has_ace(hand: tuple[Card, ...]) -> bool:
    """Return True if the hand holds at least one ace."""
    return any(card.rank == RANK_ACE for card in hand)


def is_bust(score: int) -> bool:
    """Return True if a score exceeds 21."""
    return score > BLACKJACK_SCORE


def is_blackjack(hand: tuple[Card, ...], score: int) -> bool:
    """Return True for a two-card 21."""
    return len(hand) == 2 and score == BLACKJACK_SCORE


def hand_status(hand: tuple[Card, ...], score: int) -> HandStatus:
    """Classify a hand from its cards and score.

    A 21 made with three or more cards is ACTIVE, not BLACKJACK.

    Examples:
        >>> from src.engine.cards import str_to_card as c
        >>> hand_status((c('AS'), c('KH')), 21)
        <HandStatus.BLACKJACK: 'blackjack'>
        >>> hand_status((c('7S'), c('7H'), c('7D')), 21)
        <HandStatus.ACTIVE: 'active'>
        >>> hand_status((c('10S'), c('10H'), c('5D')), 25)
        <HandStatus.BUST: 'bust'>
    """
    if score == BLACKJACK_SCORE and is_blackjack(hand, score):
        return HandStatus.BLACKJACK
    if is_bust(score):
        return HandStatus.BUST
    return HandStatus.ACTIVE
