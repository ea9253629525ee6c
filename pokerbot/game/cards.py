"""Card and deck representation utilities."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

import numpy as np
from treys import Card as TreysCard

from pokerbot.exceptions import DeckExhausted, InvalidCardSpec


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}
STR_RANK["10"] = 10

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: int  # 2-14
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'TH', '10h', '2c'."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise InvalidCardSpec(f"Invalid card string: {s!r}")
        rank_part = s[:-1].upper()
        suit_char = s[-1].lower()

        if rank_part not in STR_RANK:
            raise InvalidCardSpec(f"Invalid rank: {rank_part}")
        if suit_char not in STR_SUIT:
            raise InvalidCardSpec(f"Invalid suit: {suit_char}")

        return cls(rank=STR_RANK[rank_part], suit=STR_SUIT[suit_char])

    def to_int(self) -> int:
        """Dense index in [0, 51], suit-major."""
        return int(self.suit) * 13 + int(self.rank) - 2

    @classmethod
    def from_int(cls, index: int) -> "Card":
        """Inverse of to_int."""
        if not 0 <= index < DECK_SIZE:
            raise ValueError(f"Card index out of range: {index}")
        return cls(rank=Rank(index % 13 + 2), suit=Suit(index // 13))

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


def parse_cards(s: str) -> list[Card]:
    """
    Parse a run of cards like 'AsKh', 'As Kh' or '2C,7H,QS'.

    Whitespace and commas are treated as separators. Unseparated runs are
    split every two characters, so '10' is only accepted when separated.
    """
    cards = []
    for token in s.replace(",", " ").split():
        if len(token) == 2 or (len(token) == 3 and token.startswith("10")):
            cards.append(Card.from_string(token))
            continue
        if len(token) % 2:
            raise InvalidCardSpec(f"Invalid card string: {token!r}")
        for i in range(0, len(token), 2):
            cards.append(Card.from_string(token[i:i + 2]))
    return cards


_CANONICAL_DECK = tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def full_deck() -> list[Card]:
    """All 52 cards in canonical (to_int) order."""
    return list(_CANONICAL_DECK)


class Deck:
    """
    A pool of distinct cards drawn from the standard 52-card deck.

    Randomness comes from the generator passed in, so a seeded generator
    gives a reproducible sequence of shuffles.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cards: list[Card] = []
        self.reset()

    @classmethod
    def without(
        cls,
        known: Iterable[Card],
        rng: Optional[np.random.Generator] = None,
    ) -> "Deck":
        """Build a full deck with the known cards already removed."""
        deck = cls(rng)
        deck.remove_all(known)
        return deck

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self.cards = full_deck()

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self.rng.shuffle(self.cards)

    def draw(self) -> Card:
        """Remove and return the card at the end of the deck."""
        if not self.cards:
            raise DeckExhausted("No cards left in the deck")
        return self.cards.pop()

    def deal(self, n: int = 1) -> list[Card]:
        """Draw n cards from the deck."""
        if n > len(self.cards):
            raise DeckExhausted(
                f"Cannot deal {n} cards, only {len(self.cards)} remaining"
            )
        return [self.cards.pop() for _ in range(n)]

    def remove(self, card: Card) -> None:
        """Remove a specific card; absent cards are ignored."""
        if card in self.cards:
            self.cards.remove(card)

    def remove_all(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.remove(card)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __len__(self) -> int:
        return len(self.cards)
