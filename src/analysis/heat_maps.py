"""Strategy chart for the basic-strategy advisor.

One data builder returns NumPy matrices that can be used programmatically or
passed to the plot helper:

    build_advice_heatmap_data()  — (hard, soft) binary matrices from the advisor

One public plot function renders a matplotlib figure:

    plot_advice_heatmaps(hard, soft, ...)  — 1×2 figure (hard + soft)

Matrix convention:
    Shape  : (17, 10) — rows = player scores [5 .. 21],
                        cols = dealer up-card values [2 .. 11] (11 = Ace)
    Values : 1.0 = HIT, 0.0 = STAND, NaN = score cannot occur
The soft panel is the advice when the player holds an ace, the hard panel
when they do not. A hand holding an ace scores at least 12 (A-A), so the
soft rows below MIN_SOFT_SCORE are NaN and drawn grey.
"""

from __future__ import annotations

import matplotlib
import matplotlib.colors
import matplotlib.figure
import matplotlib.pyplot as plt
import numpy as np

from src.engine.advisor import Suggestion, suggest_action

# ─── Constants ────────────────────────────────────────────────────────────────

PLAYER_SCORES: list[int] = list(range(5, 22))
DEALER_UPCARDS: list[int] = list(range(2, 12))
MIN_SOFT_SCORE: int = 12
_ROW_LABELS: list[str] = [str(s) for s in PLAYER_SCORES]
_COL_LABELS: list[str] = [str(u) if u < 11 else "A" for u in DEALER_UPCARDS]

_BINARY_CMAP = matplotlib.colors.ListedColormap(["#d62728", "#2ca02c"]).with_extremes(
    bad="#d9d9d9"
)


# ─── Data builder ─────────────────────────────────────────────────────────────


def build_advice_heatmap_data() -> tuple[np.ndarray, np.ndarray]:
    """Return (hard_matrix, soft_matrix) of advisor decisions.

    Returns:
        (hard_matrix, soft_matrix) each of dtype float64, shape (17, 10).
        Soft rows below MIN_SOFT_SCORE are NaN.
    """
    shape = (len(PLAYER_SCORES), len(DEALER_UPCARDS))
    hard = np.zeros(shape)
    soft = np.zeros(shape)

    for r, score in enumerate(PLAYER_SCORES):
        for c, upcard in enumerate(DEALER_UPCARDS):
            hard[r, c] = 1.0 if suggest_action(score, upcard, False) == Suggestion.HIT else 0.0
            soft[r, c] = 1.0 if suggest_action(score, upcard, True) == Suggestion.HIT else 0.0

    soft[: PLAYER_SCORES.index(MIN_SOFT_SCORE)] = np.nan

    return hard, soft


# ─── Rendering ────────────────────────────────────────────────────────────────


def _render_panel(ax: matplotlib.axes.Axes, data: np.ndarray) -> None:
    ax.imshow(data, cmap=_BINARY_CMAP, vmin=0.0, vmax=1.0, aspect="auto")

    ax.set_xticks(range(len(DEALER_UPCARDS)))
    ax.set_xticklabels(_COL_LABELS, fontsize=9)
    ax.set_yticks(range(len(PLAYER_SCORES)))
    ax.set_yticklabels(_ROW_LABELS, fontsize=9)

    for r in range(data.shape[0]):
        for c in range(data.shape[1]):
            if np.isnan(data[r, c]):
                continue
            ax.text(
                c,
                r,
                "H" if data[r, c] >= 0.5 else "S",
                ha="center",
                va="center",
                fontsize=8,
                color="white",
                fontweight="bold",
            )


def plot_advice_heatmaps(
    hard_data: np.ndarray | None = None,
    soft_data: np.ndarray | None = None,
    title: str = "Basic Strategy Advisor",
    *,
    show: bool = True,
    save_path: str | None = None,
) -> matplotlib.figure.Figure:
    """Plot hard and soft advice charts as a 1×2 figure.

    Args:
        hard_data: (17, 10) array for hands without an ace. Built from the
                   advisor when None.
        soft_data: (17, 10) array for hands holding an ace. Built from the
                   advisor when None.
        title:     Figure suptitle.
        show:      If True, call plt.show() after rendering.
        save_path: If not None, save the figure to this path before showing.

    Returns:
        matplotlib.figure.Figure.
    """
    if hard_data is None or soft_data is None:
        hard_data, soft_data = build_advice_heatmap_data()

    fig, (ax_hard, ax_soft) = plt.subplots(1, 2, figsize=(12, 7))
    fig.suptitle(title, fontsize=13, fontweight="bold")

    _render_panel(ax_hard, hard_data)
    _render_panel(ax_soft, soft_data)

    ax_hard.set_title("No ace", fontsize=10)
    ax_soft.set_title("Holding an ace", fontsize=10)
    for ax in (ax_hard, ax_soft):
        ax.set_xlabel("Dealer up-card", fontsize=9)
        ax.set_ylabel("Player score", fontsize=9)

    plt.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, bbox_inches="tight", dpi=120)
    if show:
        plt.show()

    return fig


# ─── Entry point ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    matplotlib.use("Agg")
    plot_advice_heatmaps(show=False, save_path="advisor_strategy.png")
    print("Saved: advisor_strategy.png")
