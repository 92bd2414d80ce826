"""
Card constants, the Card value type, and human-readable I/O helpers.

A card is an immutable (rank, suit) pair:
    rank in RANK_NAMES  ->  'A', '2', ..., '10', 'J', 'Q', 'K'
    suit in SUIT_NAMES  ->  'C', 'D', 'H', 'S'

String representations ('AS', '10H') are used at I/O boundaries and in tests.
"""

from __future__ import annotations

from typing import NamedTuple

RANK_NAMES: list[str] = ['A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K']
SUIT_NAMES: list[str] = ['C', 'D', 'H', 'S']

RANK_ACE: str = 'A'
FACE_RANKS: frozenset[str] = frozenset({'J', 'Q', 'K'})


class Card(NamedTuple):
    rank: str
    suit: str

    def __str__(self) -> str:
        return card_to_str(self)


def card_value(card: Card, running_total: int) -> int:
    """Return the point value of a card folded into a hand at running_total.

    Ace is worth 11 while the running total is 10 or less, otherwise 1.
    The value of an ace therefore depends on the cards already counted,
    so hands must be scored in order.

    Examples:
        >>> card_value(Card('K', 'S'), 0)
        10
        >>> card_value(Card('7', 'H'), 12)
        7
        >>> card_value(Card('A', 'C'), 10)
        11
        >>> card_value(Card('A', 'C'), 11)
        1
    """
    if card.rank == RANK_ACE:
        return 11 if running_total <= 10 else 1
    if card.rank in FACE_RANKS:
        return 10
    return int(card.rank)


def card_to_str(card: Card) -> str:
    """Convert a card to its short string form.

    Examples:
        >>> card_to_str(Card('A', 'S'))
        'AS'
        >>> card_to_str(Card('10', 'C'))
        '10C'
    """
    return card.rank + card.suit


def str_to_card(s: str) -> Card:
    """Parse a short card string.

    The format is <rank><suit> where suit is the last character.
    Rank can be 'A', '2'-'10', 'J', 'Q' or 'K'; suit 'C', 'D', 'H' or 'S'.

    Raises:
        ValueError: If the rank or suit is not recognised.

    Examples:
        >>> str_to_card('AS')
        Card(rank='A', suit='S')
        >>> str_to_card('10h')
        Card(rank='10', suit='H')
    """
    s = s.strip().upper()
    rank, suit = s[:-1], s[-1:]
    if rank not in RANK_NAMES or suit not in SUIT_NAMES:
        raise ValueError(f"Invalid card string: {s!r}")
    return Card(rank, suit)


def hand_to_str(cards: tuple[Card, ...]) -> str:
    """Convert a hand to a space-separated string.

    Examples:
        >>> hand_to_str((Card('A', 'C'), Card('K', 'S')))
        'AC KS'
    """
    return ' '.join(card_to_str(c) for c in cards)
