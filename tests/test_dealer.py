"""Tests for src/engine/dealer.py — dealer draw-out policy."""

from __future__ import annotations

import numpy as np
import pytest

from src.engine.deck import build_deck_without, new_deck, shuffle
from src.engine.dealer import (
    DEALER_STAND_THRESHOLD,
    DealerPhase,
    dealer_draw_out,
    dealer_phase,
)
from src.engine.hand import calculate_hand_score
from tests.conftest import hand


def deck_with_top(*top_strs: str, without=()):
    """Ordered deck whose next draws are top_strs, in that order."""
    top = hand(*top_strs)
    return build_deck_without(top, *without) + tuple(reversed(top))


class TestDealerPhase:
    def test_drawing_below_17(self, fresh_deck):
        assert dealer_phase(hand('10C', '6D'), fresh_deck) == DealerPhase.DRAWING

    def test_done_at_17(self, fresh_deck):
        assert dealer_phase(hand('10C', '7D'), fresh_deck) == DealerPhase.DONE

    def test_done_on_soft_17(self, fresh_deck):
        # No soft-17 rule: A-6 stands
        assert dealer_phase(hand('AC', '6D'), fresh_deck) == DealerPhase.DONE

    def test_done_when_deck_empty(self):
        assert dealer_phase(hand('2C', '3D'), ()) == DealerPhase.DONE

    def test_threshold(self):
        assert DEALER_STAND_THRESHOLD == 17


class TestDealerDrawOut:
    def test_stands_on_17_without_drawing(self):
        dealer = hand('10C', '7D')
        deck = build_deck_without(dealer)
        final, remaining = dealer_draw_out(dealer, deck)
        assert final == dealer
        assert remaining == deck

    def test_draws_from_12_until_17(self):
        dealer = hand('10C', '2D')
        deck = deck_with_top('3H', '4S', '9C', without=(dealer,))
        final, remaining = dealer_draw_out(dealer, deck)
        # 12 -> 15 -> 19
        assert final == dealer + hand('3H', '4S')
        assert calculate_hand_score(final) == 19
        assert len(final) + len(remaining) == 2 + len(deck)

    def test_draws_into_bust(self):
        dealer = hand('10C', '6D')
        deck = deck_with_top('KH', without=(dealer,))
        final, _ = dealer_draw_out(dealer, deck)
        assert calculate_hand_score(final) == 26

    def test_stops_when_deck_runs_out(self):
        dealer = hand('2C', '2D')
        final, remaining = dealer_draw_out(dealer, hand('3H'))
        assert final == dealer + hand('3H')
        assert remaining == ()

    @pytest.mark.parametrize("seed", range(20))
    def test_random_decks_terminate_at_17_or_more(self, seed):
        np.random.seed(seed)
        deck = shuffle(new_deck())
        dealer, deck = deck[-2:], deck[:-2]
        final, remaining = dealer_draw_out(dealer, deck)
        assert calculate_hand_score(final) >= 17
        assert len(final) + len(remaining) == 52
        assert set(final).isdisjoint(remaining)

    def test_input_not_mutated(self):
        dealer = hand('10C', '2D')
        deck = build_deck_without(dealer)
        dealer_draw_out(dealer, deck)
        assert dealer == hand('10C', '2D')
        assert len(deck) == 50
