"""
Seven-card hand evaluation.

Hands are scored from aggregate rank and suit counts rather than by
enumerating the 21 five-card subsets. The result is a HandEvaluation: a
category plus a tiebreaker sequence, most significant rank first.
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Optional, Sequence

import numpy as np

from .cards import Card, Deck, Rank


class HandCategory(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}

HAND_SIZE = 7
WHEEL = (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)


@total_ordering
@dataclass(frozen=True)
class HandEvaluation:
    """
    Strength of a hand.

    Ordering compares category first, then tiebreakers element by element
    over their common length. Sequences that agree on the common prefix
    are a tie.
    """
    category: HandCategory
    tiebreakers: tuple[int, ...]

    def _key(self, other: "HandEvaluation") -> tuple[tuple, tuple]:
        n = min(len(self.tiebreakers), len(other.tiebreakers))
        return (
            (self.category, self.tiebreakers[:n]),
            (other.category, other.tiebreakers[:n]),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine == theirs

    def __lt__(self, other: "HandEvaluation") -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        mine, theirs = self._key(other)
        return mine < theirs

    def __hash__(self) -> int:
        # Prefix-equal evaluations compare equal, so only the category is hashed
        return hash(self.category)

    def __str__(self) -> str:
        ranks = ", ".join(str(int(r)) for r in self.tiebreakers)
        return f"{self.category.display_name} [{ranks}]"


def _straight_high(present: Sequence[bool]) -> int:
    """
    High card of the best straight among present ranks, or 0.

    `present` is indexed by rank (2..14). Windows are scanned from the
    ace-high straight down; the wheel only counts when nothing higher is
    found and reports 5 as its high card.
    """
    for high in range(Rank.ACE, Rank.FIVE, -1):
        if all(present[high - k] for k in range(5)):
            return high
    if all(present[r] for r in WHEEL):
        return int(Rank.FIVE)
    return 0


def evaluate_complete(cards: Sequence[Card]) -> HandEvaluation:
    """
    Evaluate exactly seven distinct cards.

    Deterministic: the same cards always produce the same evaluation.

    Raises:
        ValueError: if not given seven distinct cards
    """
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Expected {HAND_SIZE} cards, got {len(cards)}")
    if len(set(cards)) != HAND_SIZE:
        raise ValueError("Duplicate cards detected")

    rank_counts = [0] * 15
    suit_counts = [0] * 4
    for card in cards:
        rank_counts[card.rank] += 1
        suit_counts[card.suit] += 1

    # Flush
    flush_suit: Optional[int] = None
    for suit, count in enumerate(suit_counts):
        if count >= 5:
            flush_suit = suit
            break

    flush_ranks: list[int] = []
    straight_flush_high = 0
    if flush_suit is not None:
        flush_ranks = sorted(
            (int(c.rank) for c in cards if c.suit == flush_suit), reverse=True
        )
        in_suit = [False] * 15
        for rank in flush_ranks:
            in_suit[rank] = True
        straight_flush_high = _straight_high(in_suit)

    straight_high = _straight_high([count > 0 for count in rank_counts])

    # Group ranks by multiplicity, highest rank first
    quads, trips, pairs, singles = [], [], [], []
    for rank in range(Rank.ACE, Rank.TWO - 1, -1):
        count = rank_counts[rank]
        if count == 4:
            quads.append(rank)
        elif count == 3:
            trips.append(rank)
        elif count == 2:
            pairs.append(rank)
        elif count == 1:
            singles.append(rank)

    if straight_flush_high == Rank.ACE:
        return HandEvaluation(HandCategory.ROYAL_FLUSH, (int(Rank.ACE),))

    if straight_flush_high:
        return HandEvaluation(HandCategory.STRAIGHT_FLUSH, (straight_flush_high,))

    if quads:
        kicker = next(
            r for r in range(Rank.ACE, Rank.TWO - 1, -1)
            if rank_counts[r] and r != quads[0]
        )
        return HandEvaluation(HandCategory.FOUR_OF_A_KIND, (quads[0], kicker))

    if trips and (pairs or len(trips) > 1):
        second = pairs[0] if pairs else trips[1]
        return HandEvaluation(HandCategory.FULL_HOUSE, (trips[0], second))

    if flush_suit is not None:
        return HandEvaluation(HandCategory.FLUSH, tuple(flush_ranks[:5]))

    if straight_high:
        return HandEvaluation(HandCategory.STRAIGHT, (straight_high,))

    if trips:
        return HandEvaluation(
            HandCategory.THREE_OF_A_KIND, (trips[0], *singles[:2])
        )

    if len(pairs) >= 2:
        return HandEvaluation(
            HandCategory.TWO_PAIR, (pairs[0], pairs[1], *singles[:1])
        )

    if pairs:
        return HandEvaluation(HandCategory.PAIR, (pairs[0], *singles[:3]))

    return HandEvaluation(HandCategory.HIGH_CARD, tuple(singles[:5]))


def evaluate(
    cards: Sequence[Card],
    rng: Optional[np.random.Generator] = None,
) -> HandEvaluation:
    """
    Evaluate 5 to 7 cards.

    Hands shorter than seven cards are filled out with random cards from
    the rest of the deck before scoring, so the result for a partial hand
    is a sample, not a fixed value. Pass a seeded generator to reproduce it.

    Args:
        cards: Known cards (5-7)
        rng: Generator used to complete partial hands

    Returns:
        HandEvaluation of the completed seven-card hand
    """
    if not 5 <= len(cards) <= HAND_SIZE:
        raise ValueError(f"Expected 5 to {HAND_SIZE} cards, got {len(cards)}")

    if len(cards) == HAND_SIZE:
        return evaluate_complete(cards)

    deck = Deck.without(cards, rng)
    deck.shuffle()
    return evaluate_complete(list(cards) + deck.deal(HAND_SIZE - len(cards)))


def compare(first: HandEvaluation, second: HandEvaluation) -> int:
    """Return 1 if first wins, -1 if second wins, 0 on a tie."""
    if first > second:
        return 1
    if first < second:
        return -1
    return 0
