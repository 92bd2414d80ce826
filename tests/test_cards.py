"""Tests for src/engine/cards.py — card values and string I/O."""

from __future__ import annotations

import pytest

from src.engine.cards import (
    RANK_NAMES,
    SUIT_NAMES,
    Card,
    card_to_str,
    card_value,
    hand_to_str,
    str_to_card,
)
from tests.conftest import hand


class TestConstants:
    def test_thirteen_ranks(self):
        assert len(RANK_NAMES) == 13
        assert len(set(RANK_NAMES)) == 13

    def test_four_suits(self):
        assert SUIT_NAMES == ['C', 'D', 'H', 'S']


class TestCardValue:
    @pytest.mark.parametrize("rank", ['J', 'Q', 'K'])
    def test_face_cards_are_ten(self, rank):
        assert card_value(Card(rank, 'H'), 0) == 10

    @pytest.mark.parametrize("rank", ['2', '3', '4', '5', '6', '7', '8', '9', '10'])
    def test_numerals_are_face_value(self, rank):
        assert card_value(Card(rank, 'D'), 0) == int(rank)

    def test_ace_is_eleven_on_empty_hand(self):
        assert card_value(Card('A', 'S'), 0) == 11

    def test_ace_is_eleven_at_ten(self):
        assert card_value(Card('A', 'S'), 10) == 11

    def test_ace_is_one_at_eleven(self):
        assert card_value(Card('A', 'S'), 11) == 1

    def test_ace_is_one_on_high_total(self):
        assert card_value(Card('A', 'S'), 20) == 1

    def test_numeral_ignores_running_total(self):
        assert card_value(Card('7', 'C'), 18) == 7


class TestCardStrings:
    def test_card_to_str(self):
        assert card_to_str(Card('A', 'S')) == 'AS'
        assert card_to_str(Card('10', 'C')) == '10C'

    def test_str_dunder(self):
        assert str(Card('Q', 'H')) == 'QH'

    def test_str_to_card(self):
        assert str_to_card('AS') == Card('A', 'S')
        assert str_to_card('10H') == Card('10', 'H')

    def test_str_to_card_is_case_insensitive(self):
        assert str_to_card('kd') == Card('K', 'D')

    def test_roundtrip_all_cards(self):
        for rank in RANK_NAMES:
            for suit in SUIT_NAMES:
                card = Card(rank, suit)
                assert str_to_card(card_to_str(card)) == card

    @pytest.mark.parametrize("bad", ['', 'A', '1S', '11H', 'AX', 'ZZ'])
    def test_invalid_strings_raise(self, bad):
        with pytest.raises(ValueError):
            str_to_card(bad)

    def test_hand_to_str(self):
        assert hand_to_str(hand('AC', 'KS', '10D')) == 'AC KS 10D'

    def test_empty_hand_to_str(self):
        assert hand_to_str(()) == ''


class TestCardValueType:
    def test_cards_are_hashable_and_equal_by_value(self):
        assert Card('A', 'S') == Card('A', 'S')
        assert len({Card('A', 'S'), Card('A', 'S')}) == 1

    def test_cards_are_immutable(self):
        card = Card('A', 'S')
        with pytest.raises(AttributeError):
            card.rank = 'K'
