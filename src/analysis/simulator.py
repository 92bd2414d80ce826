"""
Monte Carlo simulator for blackjack player strategies.

Plays many independent rounds with the game engine, each from a freshly
shuffled 52-card deck, and tallies the results. Each round is scored +1 for a
player win, -1 for a dealer win and 0 for a draw; the mean of that score with
a 95% confidence interval gives a quick measure of how a strategy performs
against the fixed dealer policy.

Typical use: compare the basic-strategy advisor against naive threshold play.
    advisor   → follows suggest() on every decision
    threshold → stands on 17+ (mirrors the dealer)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

import numpy as np

from src.engine.advisor import Suggestion, suggest
from src.engine.game_state import GameState, Turn, game_result, hit, setup_game, stand
from src.engine.rules import GameResult

logger = logging.getLogger(__name__)


class PlayerAction(Enum):
    HIT = auto()
    STAND = auto()


# player_strategy(state) -> PlayerAction, called only during the player's turn
PlayerStrategy = Callable[[GameState], PlayerAction]

_ROUND_SCORES: dict[GameResult, float] = {
    GameResult.PLAYER_WIN: 1.0,
    GameResult.DEALER_WIN: -1.0,
    GameResult.DRAW: 0.0,
    GameResult.NO_RESULT: 0.0,
}


# ─── Result type ──────────────────────────────────────────────────────────────


@dataclass
class SimulationResult:
    """Aggregate statistics from a Monte Carlo simulation run.

    Attributes:
        n_rounds:      Number of rounds simulated.
        n_player_wins: Rounds won by the player.
        n_dealer_wins: Rounds won by the dealer.
        n_draws:       Rounds drawn.
        n_no_result:   Rounds that ended without a result (expected to be 0).
        mean_score:    Mean per-round score (+1 win, -1 loss, 0 draw).
        std_score:     Sample standard deviation of per-round scores.
        ci_95_low:     Lower bound of the 95% confidence interval for mean_score.
        ci_95_high:    Upper bound of the 95% confidence interval for mean_score.
        scores:        Raw per-round score array (float64, length n_rounds), or
                       None if simulate_rounds() was called with return_scores=False.
    """

    n_rounds: int
    n_player_wins: int
    n_dealer_wins: int
    n_draws: int
    n_no_result: int
    mean_score: float
    std_score: float
    ci_95_low: float
    ci_95_high: float
    scores: np.ndarray | None = None

    @property
    def win_rate(self) -> float:
        return self.n_player_wins / self.n_rounds if self.n_rounds else 0.0

    def __str__(self) -> str:
        return (
            f"Rounds: {self.n_rounds:,} | "
            f"W/L/D: {self.n_player_wins}/{self.n_dealer_wins}/{self.n_draws} | "
            f"Win rate: {self.win_rate * 100:.2f}% | "
            f"Score: {self.mean_score:+.4f} "
            f"[{self.ci_95_low:+.4f}, {self.ci_95_high:+.4f}]"
        )


# ─── Round simulation ─────────────────────────────────────────────────────────


def play_round(player_strategy: PlayerStrategy) -> GameState:
    """Play one full round and return the final state.

    The player acts until the strategy stands or the hand busts (hit() ends
    the player's turn on a bust). Standing runs the dealer policy.
    """
    state = setup_game()
    while state.turn == Turn.PLAYER_TURN:
        if player_strategy(state) == PlayerAction.STAND:
            state = stand(state)
        else:
            state = hit(state)
    return state


# ─── Core simulation loop ─────────────────────────────────────────────────────


def simulate_rounds(
    player_strategy: PlayerStrategy,
    n_rounds: int = 10_000,
    seed: int | None = 42,
    return_scores: bool = False,
) -> SimulationResult:
    """Simulate n_rounds of blackjack and return aggregate statistics.

    Args:
        player_strategy: Callable matching the PlayerStrategy signature.
        n_rounds:        Number of rounds to simulate. Must be positive.
        seed:            NumPy random seed for reproducibility. None for a
                         non-deterministic run.
        return_scores:   If True, attach the raw per-round score array to
                         SimulationResult.scores.

    Returns:
        SimulationResult for the run.

    Raises:
        ValueError: If n_rounds is not positive.
    """
    if n_rounds <= 0:
        raise ValueError(f"n_rounds must be positive, got {n_rounds}")
    if seed is not None:
        np.random.seed(seed)

    counts = {result: 0 for result in GameResult}
    scores = np.empty(n_rounds, dtype=np.float64)

    for i in range(n_rounds):
        result = game_result(play_round(player_strategy))
        counts[result] += 1
        scores[i] = _ROUND_SCORES[result]

    mean = float(np.mean(scores))
    std = float(np.std(scores, ddof=1)) if n_rounds > 1 else 0.0
    ci_margin = 1.96 * std / math.sqrt(n_rounds)

    sim = SimulationResult(
        n_rounds=n_rounds,
        n_player_wins=counts[GameResult.PLAYER_WIN],
        n_dealer_wins=counts[GameResult.DEALER_WIN],
        n_draws=counts[GameResult.DRAW],
        n_no_result=counts[GameResult.NO_RESULT],
        mean_score=mean,
        std_score=std,
        ci_95_low=mean - ci_margin,
        ci_95_high=mean + ci_margin,
        scores=scores if return_scores else None,
    )
    logger.info("Simulation finished: %s", sim)
    return sim


# ─── Strategy factories ───────────────────────────────────────────────────────


def make_advisor_player_strategy() -> PlayerStrategy:
    """Return a player strategy that always follows the basic-strategy advisor."""

    def _strategy(state: GameState) -> PlayerAction:
        return PlayerAction.HIT if suggest(state) == Suggestion.HIT else PlayerAction.STAND

    return _strategy


def make_simple_player_strategy(stand_threshold: int = 17) -> PlayerStrategy:
    """Return a simple threshold player strategy.

    Stand on score >= stand_threshold, hit otherwise.
    """

    def _strategy(state: GameState) -> PlayerAction:
        return PlayerAction.STAND if state.player_score >= stand_threshold else PlayerAction.HIT

    return _strategy


def compare_strategies(
    n_rounds: int = 10_000,
    seed: int | None = 42,
) -> dict[str, SimulationResult]:
    """Run the advisor and the stand-on-17 baseline with the same seed.

    Returns:
        {'advisor': SimulationResult, 'threshold_17': SimulationResult}
    """
    return {
        "advisor": simulate_rounds(make_advisor_player_strategy(), n_rounds, seed),
        "threshold_17": simulate_rounds(make_simple_player_strategy(17), n_rounds, seed),
    }


# ─── __main__ ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    from src.config import configure_logging, get_config

    configure_logging()
    cfg = get_config().simulation
    print(f"Blackjack Monte Carlo — {cfg.n_rounds:,} rounds per strategy\n")
    results = compare_strategies(n_rounds=cfg.n_rounds, seed=cfg.seed)
    for name, result in results.items():
        print(f"{name:>13}: {result}")
