"""Stay/fold decisions from estimated equity."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .equity import KnownHand, SimulationStats, estimate_stats

logger = logging.getLogger(__name__)

SIMULATION_TIME_LIMIT_MS = 10000
WIN_PROBABILITY_THRESHOLD = 0.5


class Decision(Enum):
    """Recommendation for the current street."""
    STAY = "STAY"
    FOLD = "FOLD"
    UNDECIDED = "UNDECIDED"  # No trials finished inside the budget


@dataclass
class EstimateConfig:
    """Configuration for an equity estimate."""
    time_budget_ms: int = SIMULATION_TIME_LIMIT_MS
    win_probability_threshold: float = WIN_PROBABILITY_THRESHOLD
    num_workers: int = 1           # Worker processes for trials
    seed: Optional[int] = None     # Fixed seed for reproducible runs

    def __post_init__(self):
        if self.time_budget_ms < 0:
            raise ValueError(f"time_budget_ms must be >= 0, got {self.time_budget_ms}")
        if not 0.0 <= self.win_probability_threshold <= 1.0:
            raise ValueError(
                "win_probability_threshold must be in [0, 1], "
                f"got {self.win_probability_threshold}"
            )
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}")


@dataclass(frozen=True)
class EquityEstimate:
    """Result handed back to the caller."""
    win_probability: float
    decision: Decision
    trials_run: int
    wins: int = 0


def decide(
    win_probability: float,
    threshold: float = WIN_PROBABILITY_THRESHOLD,
) -> Decision:
    """STAY when the win probability reaches the threshold (inclusive)."""
    return Decision.STAY if win_probability >= threshold else Decision.FOLD


def decide_stats(
    stats: SimulationStats,
    threshold: float = WIN_PROBABILITY_THRESHOLD,
) -> Decision:
    """Like decide(), but UNDECIDED when no trials were run."""
    if stats.total_runs == 0:
        return Decision.UNDECIDED
    return decide(stats.win_probability, threshold)


def estimate(
    known_hand: KnownHand,
    config: Optional[EstimateConfig] = None,
) -> EquityEstimate:
    """
    Estimate equity for a known hand and recommend staying or folding.

    Args:
        known_hand: Hole cards and known community cards
        config: Budget, threshold and worker settings

    Returns:
        EquityEstimate with the win probability, decision and trial count
    """
    config = config or EstimateConfig()

    stats = estimate_stats(
        known_hand,
        config.time_budget_ms,
        num_workers=config.num_workers,
        seed=config.seed,
    )
    decision = decide_stats(stats, config.win_probability_threshold)

    logger.info(
        "%s: %.2f%% over %d trials -> %s",
        known_hand,
        stats.win_probability * 100.0,
        stats.total_runs,
        decision.value,
    )
    return EquityEstimate(
        win_probability=stats.win_probability,
        decision=decision,
        trials_run=stats.total_runs,
        wins=stats.winning_runs,
    )
