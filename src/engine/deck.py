"""
Deck creation, shuffling, and dealing.

The deck is an immutable tuple of Card values. The top of the deck is the
LAST element; dealing returns the top card together with a new, shorter deck.
A single 52-card deck is used per round, so running out of cards is a logic
error rather than a game event.
"""

from __future__ import annotations

import logging

import numpy as np

from .cards import RANK_NAMES, SUIT_NAMES, Card

logger = logging.getLogger(__name__)

DECK_SIZE: int = len(RANK_NAMES) * len(SUIT_NAMES)

Deck = tuple[Card, ...]


def new_deck() -> Deck:
    """Create a fresh, ordered 52-card deck.

    Order is suit-major: every rank of clubs, then diamonds, hearts, spades.

    Examples:
        >>> deck = new_deck()
        >>> len(deck)
        52
        >>> deck[0], deck[-1]
        (Card(rank='A', suit='C'), Card(rank='K', suit='S'))
    """
    return tuple(Card(rank, suit) for suit in SUIT_NAMES for rank in RANK_NAMES)


def shuffle(deck: Deck) -> Deck:
    """Return a random permutation of the deck.

    Draws from NumPy's global random state; call np.random.seed() first
    for a reproducible order.
    """
    order = np.random.permutation(len(deck))
    return tuple(deck[i] for i in order)


def take_card(deck: Deck) -> tuple[Card, Deck]:
    """Remove the top card of the deck.

    Returns:
        (card, remaining) where remaining is the deck without that card.

    Raises:
        ValueError: If the deck is empty.

    Examples:
        >>> card, remaining = take_card(new_deck())
        >>> card
        Card(rank='K', suit='S')
        >>> len(remaining)
        51
    """
    if not deck:
        raise ValueError("Cannot deal from an empty deck.")
    card = deck[-1]
    logger.debug("Dealt %s, %d cards left", card, len(deck) - 1)
    return card, deck[:-1]


def cards_remaining(deck: Deck) -> int:
    """Return the number of cards left in the deck."""
    return len(deck)


def build_deck_without(*hands: tuple[Card, ...]) -> Deck:
    """Create an ordered deck with every card in the given hands removed.

    Useful for building states where specific hands have already been dealt.

    Raises:
        ValueError: If a card appears in more than one hand.

    Examples:
        >>> from src.engine.cards import str_to_card
        >>> player = (str_to_card('AS'), str_to_card('KS'))
        >>> len(build_deck_without(player))
        50
    """
    dealt: set[Card] = set()
    for hand in hands:
        for card in hand:
            if card in dealt:
                raise ValueError(f"Card {card} has already been dealt.")
            dealt.add(card)
    return tuple(c for c in new_deck() if c not in dealt)
