"""Single-Deck Blackjack — Streamlit App.

Three-tab interactive app on top of the engine:
  Tab 1 — Play            (Hit / Stand / Reset / Help against the dealer)
  Tab 2 — Strategy Chart  (matplotlib, advisor hit/stand chart)
  Tab 3 — Simulation      (Monte Carlo comparison of player strategies)

Run:
    PYTHONPATH=. streamlit run app.py
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")  # must be set before any other matplotlib imports

import numpy as np
import pandas as pd
import streamlit as st

from src.analysis.heat_maps import plot_advice_heatmaps
from src.analysis.simulator import (
    make_advisor_player_strategy,
    make_simple_player_strategy,
    simulate_rounds,
)
from src.config import configure_logging, get_config
from src.engine.advisor import Suggestion
from src.engine.cards import card_to_str
from src.engine.session import GameSession

configure_logging()

# ─── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Single-Deck Blackjack",
    page_icon="🃏",
    layout="wide",
)


@st.cache_resource
def _strategy_figure():
    """Render the advisor chart once per process."""
    return plot_advice_heatmaps(show=False)


@st.cache_data
def _simulate(n_rounds: int, stand_threshold: int, seed: int | None):
    """Run both strategies, then hand the global random state back to the OS.

    simulate_rounds() seeds NumPy globally; without reseeding, every deal in
    the Play tab would follow the same seeded sequence.
    """
    results = {
        "Advisor": simulate_rounds(make_advisor_player_strategy(), n_rounds, seed),
        f"Stand on {stand_threshold}": simulate_rounds(
            make_simple_player_strategy(stand_threshold), n_rounds, seed
        ),
    }
    np.random.seed()
    return results


def _session() -> GameSession:
    if "session" not in st.session_state:
        st.session_state["session"] = GameSession()
    return st.session_state["session"]


def _cards_text(cards) -> str:
    return "  ".join("🂠" if c is None else card_to_str(c) for c in cards)


# ─── Sidebar controls ─────────────────────────────────────────────────────────

cfg = get_config().simulation

with st.sidebar:
    st.title("🃏 Single-Deck Blackjack")
    st.markdown("---")

    n_rounds = st.slider(
        "Simulated rounds",
        min_value=1_000,
        max_value=50_000,
        value=min(max(cfg.n_rounds, 1_000), 50_000),
        step=1_000,
    )
    stand_threshold = st.slider(
        "Baseline stands on",
        min_value=12,
        max_value=21,
        value=17,
    )

# ─── Tabs ─────────────────────────────────────────────────────────────────────

tab1, tab2, tab3 = st.tabs(["Play", "Strategy Chart", "Simulation"])

# ── Tab 1: Play ───────────────────────────────────────────────────────────────

with tab1:
    session = _session()

    # Callbacks run before the rerun renders, so the disabled flags below
    # reflect the state after the click.
    col1, col2, col3, col4 = st.columns(4)
    col1.button("Hit", on_click=session.hit, disabled=not session.is_player_turn)
    col2.button("Stand", on_click=session.stand, disabled=not session.is_player_turn)
    col3.button("Reset", on_click=session.reset)
    col4.button("Help", on_click=session.request_help, disabled=not session.help_available)

    st.caption(f"There are {session.cards_left} cards left in the deck")
    if session.suggestion != Suggestion.EMPTY:
        st.info(f"Suggestion: {session.suggestion.value}")

    st.subheader("Player Cards")
    st.markdown(f"### {_cards_text(session.state.player_hand)}")
    st.write(f"Player Score {session.player_score}")

    st.subheader("Dealer Cards")
    st.markdown(f"### {_cards_text(session.visible_dealer_cards)}")
    if not session.is_player_turn:
        st.write(f"Dealer Score {session.dealer_score}")

    st.markdown(f"**{session.status_text}**")

# ── Tab 2: Strategy Chart ─────────────────────────────────────────────────────

with tab2:
    st.header("Strategy Chart")
    st.caption(
        "Rows = player score | Cols = dealer up-card | "
        "Green = HIT, Red = STAND"
    )
    st.pyplot(_strategy_figure())

# ── Tab 3: Simulation ─────────────────────────────────────────────────────────

with tab3:
    st.header("Strategy Simulation")
    st.caption("Each round is dealt from a freshly shuffled single deck.")

    with st.spinner(f"Simulating {n_rounds:,} rounds …"):
        results = _simulate(n_rounds, stand_threshold, cfg.seed)

    rows = [
        {
            "Strategy": name,
            "Player wins": r.n_player_wins,
            "Dealer wins": r.n_dealer_wins,
            "Draws": r.n_draws,
            "Win rate": f"{r.win_rate * 100:.2f}%",
            "Mean score": f"{r.mean_score:+.4f}",
            "95% CI": f"[{r.ci_95_low:+.4f}, {r.ci_95_high:+.4f}]",
        }
        for name, r in results.items()
    ]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
