"""
PokerBot: Heads-up Hold'em equity advisor

Estimates the chance that a known pair of hole cards beats a single random
opponent at showdown, using Monte Carlo runouts scored by a 7-card hand
evaluator, and turns that estimate into a stay/fold recommendation.
"""

__version__ = "0.1.0"
