"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from pokerbot.game.cards import parse_cards
from pokerbot.game.equity import KnownHand


@pytest.fixture
def rng():
    """A seeded generator so sampling tests are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def pocket_aces():
    return KnownHand(hole=tuple(parse_cards("As Ah")))


@pytest.fixture
def board_flop():
    return parse_cards("Ks 7d 2c")
