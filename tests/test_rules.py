"""Tests for src/engine/rules.py — round settlement."""

from __future__ import annotations

from src.engine.hand import HandStatus, calculate_hand_score
from src.engine.rules import GameResult, determine_game_result, is_draw
from tests.conftest import hand


def settle(player, dealer) -> GameResult:
    return determine_game_result(
        player, calculate_hand_score(player), dealer, calculate_hand_score(dealer)
    )


class TestPlayerBust:
    """Rule 1: a bust player loses whatever the dealer holds."""

    def test_player_bust_loses(self):
        assert settle(hand('10C', 'KH', '5D'), hand('10D', '7S')) == GameResult.DEALER_WIN

    def test_player_bust_loses_even_on_dealer_bust(self):
        assert settle(hand('10C', 'KH', '5D'), hand('10D', 'KS', '5H')) == GameResult.DEALER_WIN

    def test_player_bust_loses_against_dealer_blackjack(self):
        assert settle(hand('10C', 'KH', '5D'), hand('AD', 'KS')) == GameResult.DEALER_WIN


class TestDealerBust:
    """Rule 2: a bust dealer loses to any non-bust player."""

    def test_dealer_bust_player_17(self):
        assert settle(hand('10C', '7H'), hand('10D', '5S', '9H')) == GameResult.PLAYER_WIN

    def test_dealer_bust_player_low_total(self):
        assert settle(hand('2C', '3H'), hand('10D', '6S', 'KH')) == GameResult.PLAYER_WIN


class TestDraw:
    """Rule 3: equal scores without blackjack, or two blackjacks."""

    def test_equal_19(self):
        assert settle(hand('10C', '9H'), hand('10D', '9S')) == GameResult.DRAW

    def test_both_blackjack(self):
        assert settle(hand('AC', 'KH'), hand('AD', 'QS')) == GameResult.DRAW

    def test_two_multi_card_21s(self):
        assert settle(hand('7C', '7H', '7D'), hand('5S', '6S', 'KS')) == GameResult.DRAW

    def test_blackjack_vs_multi_card_21_is_not_draw(self):
        assert settle(hand('AC', 'KH'), hand('7C', '7H', '7D')) == GameResult.PLAYER_WIN


class TestPlayerWin:
    """Rule 4: player blackjack, or higher score."""

    def test_blackjack_beats_17(self):
        assert settle(hand('AS', 'KS'), hand('9D', '8C')) == GameResult.PLAYER_WIN

    def test_higher_score(self):
        assert settle(hand('10S', '10H'), hand('10D', '8C')) == GameResult.PLAYER_WIN

    def test_multi_card_higher_score(self):
        assert settle(hand('5S', '5H', '9C'), hand('10D', '8C')) == GameResult.PLAYER_WIN


class TestDealerWin:
    """Rule 5: dealer blackjack, or higher score."""

    def test_dealer_blackjack_beats_multi_card_21(self):
        assert settle(hand('7C', '7H', '7D'), hand('AD', 'JS')) == GameResult.DEALER_WIN

    def test_dealer_blackjack_beats_20(self):
        assert settle(hand('KC', 'QH'), hand('AD', 'JS')) == GameResult.DEALER_WIN

    def test_dealer_higher_score(self):
        assert settle(hand('10S', '7H'), hand('10D', '9C')) == GameResult.DEALER_WIN


class TestIsDraw:
    def test_both_blackjack(self):
        assert is_draw(21, HandStatus.BLACKJACK, 21, HandStatus.BLACKJACK)

    def test_equal_active(self):
        assert is_draw(18, HandStatus.ACTIVE, 18, HandStatus.ACTIVE)

    def test_one_blackjack(self):
        assert not is_draw(21, HandStatus.BLACKJACK, 21, HandStatus.ACTIVE)
        assert not is_draw(21, HandStatus.ACTIVE, 21, HandStatus.BLACKJACK)

    def test_unequal(self):
        assert not is_draw(18, HandStatus.ACTIVE, 19, HandStatus.ACTIVE)


class TestGameResultValues:
    def test_values(self):
        assert GameResult.NO_RESULT.value == "no_result"
        assert GameResult.PLAYER_WIN.value == "player_win"
        assert GameResult.DEALER_WIN.value == "dealer_win"
        assert GameResult.DRAW.value == "draw"
