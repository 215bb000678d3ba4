"""Abstract base class for card counting systems and the count arithmetic."""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Mapping

from core.cards import Card, Rank


class Difficulty(Enum):
    """How hard a counting system is to learn."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class CountOverlay(Enum):
    """Rendering hint for the sign of a count value."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class CountingSystem(ABC):
    """
    Abstract base class for card counting systems.

    A counting system is a stateless strategy: it maps each rank to a signed
    tag value. Running and true counts are computed by the module-level
    functions, so a new system only has to supply its tags and metadata.
    """

    description: str = ""
    is_premium: bool = False
    difficulty: Difficulty = Difficulty.BEGINNER

    @property
    @abstractmethod
    def id(self) -> str:
        """Return the stable identifier used to select this system."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the display name of the counting system."""
        ...

    @property
    @abstractmethod
    def tag_values(self) -> Mapping[Rank, int]:
        """
        Return the tag value mapping for this system.

        Maps each Rank to its count value.
        """
        ...

    @property
    def is_balanced(self) -> bool:
        """
        Return whether this is a balanced counting system.

        A balanced system sums to 0 over a complete deck.
        """
        return self.full_deck_sum == 0

    @property
    def full_deck_sum(self) -> int:
        """Calculate the sum of tag values for a full 52-card deck."""
        # Each rank appears 4 times in a deck (once per suit)
        return sum(self.tag_values[rank] * 4 for rank in Rank)

    def get_count_value(self, rank: Rank) -> int:
        """Return the count contribution of a rank."""
        return self.tag_values[rank]

    def count_value(self, card: Card) -> int:
        """Return the count contribution of a card."""
        return self.get_count_value(card.rank)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"


def calculate_running_count(cards: Iterable[Card], system: CountingSystem) -> int:
    """
    Calculate the running count for a set of dealt cards.

    Args:
        cards: Cards seen so far, in any order
        system: Counting system supplying the tag values

    Returns:
        The sum of the cards' tag values
    """
    return sum(system.get_count_value(card.rank) for card in cards)


def calculate_true_count(running_count: float, decks_remaining: float) -> float:
    """
    Calculate the true count (running count / decks remaining).

    Rounded to one decimal place with halves going up, so 0.25 becomes 0.3
    and -0.25 becomes -0.2. With no decks remaining the running count is
    returned as is.
    """
    if decks_remaining <= 0:
        return running_count
    return math.floor(running_count / decks_remaining * 10 + 0.5) / 10


def get_count_overlay(count_value: float) -> CountOverlay:
    """Classify a count value by sign."""
    if count_value > 0:
        return CountOverlay.POSITIVE
    if count_value < 0:
        return CountOverlay.NEGATIVE
    return CountOverlay.NEUTRAL
