"""Monte Carlo equity estimation against a single random opponent."""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .cards import Card, Deck, parse_cards
from .evaluator import evaluate_complete

logger = logging.getLogger(__name__)

BOARD_SIZE = 5
VALID_BOARD_SIZES = (0, 3, 4, 5)


@dataclass(frozen=True)
class KnownHand:
    """
    The cards the decision maker can see.

    Two hole cards plus 0, 3, 4 or 5 community cards (preflop, flop,
    turn, river). All cards must be distinct.
    """
    hole: tuple[Card, ...]
    board: tuple[Card, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "hole", tuple(self.hole))
        object.__setattr__(self, "board", tuple(self.board))

        if len(self.hole) != 2:
            raise ValueError(f"Need exactly 2 hole cards, got {len(self.hole)}")
        if len(self.board) not in VALID_BOARD_SIZES:
            raise ValueError(
                f"Board must have 0, 3, 4 or 5 cards, got {len(self.board)}"
            )
        if len(set(self.cards)) != len(self.cards):
            raise ValueError("Duplicate cards detected")

    @property
    def cards(self) -> tuple[Card, ...]:
        return self.hole + self.board

    @classmethod
    def from_strings(cls, hole: str, board: str = "") -> "KnownHand":
        """Build from text like ('AsKh', '2c 7h Qs')."""
        return cls(hole=tuple(parse_cards(hole)), board=tuple(parse_cards(board)))

    def __str__(self) -> str:
        hole = " ".join(str(c) for c in self.hole)
        board = " ".join(str(c) for c in self.board) or "-"
        return f"{hole} | {board}"


@dataclass
class SimulationStats:
    """Win/total counters for one estimation call."""
    total_runs: int = 0
    winning_runs: int = 0

    @property
    def win_probability(self) -> float:
        if self.total_runs == 0:
            return 0.0
        return self.winning_runs / self.total_runs

    def record(self, won: bool) -> None:
        self.total_runs += 1
        if won:
            self.winning_runs += 1

    def merge(self, other: "SimulationStats") -> "SimulationStats":
        """Combine counters from another worker into a new object."""
        return SimulationStats(
            total_runs=self.total_runs + other.total_runs,
            winning_runs=self.winning_runs + other.winning_runs,
        )


class EquityEngine:
    """
    Runs showdown trials for a known hand against a random opponent.

    Every trial deals from its own freshly built deck, so nothing is shared
    between trials except the immutable known hand and the generator.
    A tie at showdown counts as a non-win, the same as a loss.
    """

    def __init__(
        self,
        known_hand: KnownHand,
        rng: Optional[np.random.Generator] = None,
    ):
        self.known_hand = known_hand
        self.rng = rng if rng is not None else np.random.default_rng()

    def run_trial(self) -> bool:
        """
        Play out one random opponent hand and board runout.

        Returns:
            True if the known hand strictly beats the opponent
        """
        deck = Deck.without(self.known_hand.cards, self.rng)
        deck.shuffle()

        opponent_hole = deck.deal(2)
        board = list(self.known_hand.board)
        board.extend(deck.deal(BOARD_SIZE - len(board)))

        ours = evaluate_complete(list(self.known_hand.hole) + board)
        theirs = evaluate_complete(opponent_hole + board)
        return ours > theirs

    def run(self, time_budget_ms: float) -> SimulationStats:
        """
        Run trials until the time budget is used up.

        The clock is checked between trials; a trial in progress always
        finishes. A budget of zero returns without running any trial.
        """
        return self.run_until(time.time() + time_budget_ms / 1000.0)

    def run_until(self, deadline: float) -> SimulationStats:
        """
        Run trials until the wall clock (time.time()) reaches deadline.

        The deadline is absolute so that worker processes started late
        still stop when the caller's budget ends.
        """
        stats = SimulationStats()
        start = time.time()

        while time.time() < deadline:
            stats.record(self.run_trial())

        logger.debug(
            "%s: %d trials in %.0f ms, %d wins",
            self.known_hand,
            stats.total_runs,
            (time.time() - start) * 1000.0,
            stats.winning_runs,
        )
        return stats

    def run_trials(self, num_trials: int) -> SimulationStats:
        """Run a fixed number of trials, ignoring the clock."""
        stats = SimulationStats()
        for _ in range(num_trials):
            stats.record(self.run_trial())
        return stats


def _run_worker(
    known_hand: KnownHand,
    deadline: float,
    seed: np.random.SeedSequence,
) -> SimulationStats:
    engine = EquityEngine(known_hand, np.random.default_rng(seed))
    return engine.run_until(deadline)


def estimate_stats(
    known_hand: KnownHand,
    time_budget_ms: float,
    num_workers: int = 1,
    seed: Optional[int] = None,
) -> SimulationStats:
    """
    Estimate win counts for a known hand within a time budget.

    Every worker stops at the same absolute deadline, so the time spent
    starting worker processes comes out of the budget.

    Args:
        known_hand: Hole cards and any known community cards
        time_budget_ms: Wall-clock budget in milliseconds
        num_workers: Worker processes; 1 runs in the calling process
        seed: Seed for reproducible sampling

    Returns:
        Counters accumulated over all workers
    """
    deadline = time.time() + time_budget_ms / 1000.0

    if num_workers <= 1:
        return EquityEngine(known_hand, np.random.default_rng(seed)).run_until(deadline)

    if time_budget_ms <= 0:
        return SimulationStats()

    children = np.random.SeedSequence(seed).spawn(num_workers)

    with ProcessPoolExecutor(max_workers=num_workers) as pool:
        futures = [
            pool.submit(_run_worker, known_hand, deadline, child)
            for child in children
        ]
        stats = SimulationStats()
        for future in futures:
            stats = stats.merge(future.result())

    logger.debug(
        "%s: %d workers ran %d trials", known_hand, num_workers, stats.total_runs
    )
    return stats


def calculate_equity(
    known_hand: KnownHand,
    num_simulations: int = 10000,
    seed: Optional[int] = None,
) -> float:
    """
    Win probability from a fixed number of trials.

    Ties count as non-wins.
    """
    engine = EquityEngine(known_hand, np.random.default_rng(seed))
    return engine.run_trials(num_simulations).win_probability
