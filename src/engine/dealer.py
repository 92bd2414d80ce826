"""
Dealer policy: fixed-threshold draw-out.

The dealer has no decisions. Once the player stands, the dealer draws from
the top of the deck while the hand scores below 17 and stops at 17 or more.
There is no soft-17 rule and no peeking at the player's hand.

    DRAWING --(score < 17)--> draw one card --> DRAWING
    DRAWING --(score >= 17 or deck empty)--> DONE
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from .cards import Card
from .deck import Deck, take_card
from .hand import calculate_hand_score

logger = logging.getLogger(__name__)

DEALER_STAND_THRESHOLD: int = 17


class DealerPhase(Enum):
    DRAWING = auto()
    DONE = auto()


def dealer_phase(dealer_hand: tuple[Card, ...], deck: Deck) -> DealerPhase:
    """Return the dealer's current phase for this hand and deck."""
    if calculate_hand_score(dealer_hand) >= DEALER_STAND_THRESHOLD or not deck:
        return DealerPhase.DONE
    return DealerPhase.DRAWING


def dealer_draw_out(
    dealer_hand: tuple[Card, ...],
    deck: Deck,
) -> tuple[tuple[Card, ...], Deck]:
    """Run the dealer policy to completion.

    Args:
        dealer_hand: Dealer's hand when control passes to the dealer.
        deck: Remaining deck.

    Returns:
        (final_dealer_hand, remaining_deck). Cards are only ever moved from
        the deck to the hand, so the combined card count is unchanged.
    """
    while dealer_phase(dealer_hand, deck) == DealerPhase.DRAWING:
        card, deck = take_card(deck)
        dealer_hand = dealer_hand + (card,)
        logger.debug(
            "Dealer draws %s, score now %d", card, calculate_hand_score(dealer_hand)
        )
    return dealer_hand, deck
