"""Configuration with environment variable support."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; an empty value means an unseeded run."""
    raw = os.getenv("BLACKJACK_SEED", "42").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class SimulationConfig:
    """Monte Carlo simulation defaults."""

    n_rounds: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_SIM_ROUNDS", "10000"))
    )
    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class LoggingConfig:
    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "INFO").upper()
    )


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


@functools.lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Return the process-wide configuration, read once from the environment."""
    return AppConfig()


def configure_logging(level: str | None = None) -> None:
    """Install a basic stderr handler for entry points (app, __main__ blocks).

    Library modules only create loggers; handlers are set up here.
    """
    logging.basicConfig(
        level=level or get_config().logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
