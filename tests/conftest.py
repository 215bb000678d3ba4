"""Pytest fixtures for count trainer tests."""

import pytest
from random import Random

from core.counting import HiLoSystem, Omega2System, WongHalvesSystem, ZenCountSystem
from core.hand import Hand
from core.shoe import ShoeConfig, create_shoe
from core.training import TrainingOptions, TrainingSession
from helpers import make_hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A shuffled 6-deck shoe."""
    return create_shoe(ShoeConfig(num_decks=6, penetration=0.75), rng)


@pytest.fixture
def single_deck_shoe(rng):
    """A shuffled 1-deck shoe."""
    return create_shoe(ShoeConfig(num_decks=1, penetration=0.75), rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    return make_hand("8S", "8H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def hilo():
    """Hi-Lo counting system."""
    return HiLoSystem()


@pytest.fixture
def zen():
    """Zen Count system."""
    return ZenCountSystem()


@pytest.fixture
def omega2():
    """Omega II counting system."""
    return Omega2System()


@pytest.fixture
def wong_halves():
    """Wong Halves counting system."""
    return WongHalvesSystem()


@pytest.fixture
def session(rng):
    """A training session on a seeded 6-deck shoe."""
    return TrainingSession(rng=rng)


@pytest.fixture
def total_session(rng):
    """A training session that also asks for the hand total."""
    return TrainingSession(options=TrainingOptions(ask_hand_total=True), rng=rng)

