"""Exception types raised by the equity engine and its card layer."""


class PokerBotError(Exception):
    """Base class for pokerbot errors."""
    pass


class InvalidCardSpec(PokerBotError, ValueError):
    """A card string could not be parsed (unknown rank or suit)."""
    pass


class DeckExhausted(PokerBotError, RuntimeError):
    """
    A draw was attempted on an empty deck.

    This only happens when the caller asked for more cards than the deck
    holds after known cards were removed, so it is never caught inside
    the engine.
    """
    pass
