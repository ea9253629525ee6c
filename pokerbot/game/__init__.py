"""Game representation module."""

from .cards import Card, Deck, Rank, Suit, parse_cards
from .evaluator import HandCategory, HandEvaluation, evaluate, evaluate_complete
from .equity import EquityEngine, KnownHand, SimulationStats, calculate_equity
from .decision import Decision, EquityEstimate, EstimateConfig, decide, estimate

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "parse_cards",
    "HandCategory",
    "HandEvaluation",
    "evaluate",
    "evaluate_complete",
    "EquityEngine",
    "KnownHand",
    "SimulationStats",
    "calculate_equity",
    "Decision",
    "EquityEstimate",
    "EstimateConfig",
    "decide",
    "estimate",
]
