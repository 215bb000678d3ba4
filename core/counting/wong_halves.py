"""Wong Halves card counting system."""

from typing import Mapping

from core.cards import Rank
from core.counting.base import CountingSystem, Difficulty


class WongHalvesSystem(CountingSystem):
    """
    Wong Halves counting system.

    A multi-level balanced system, one of the most accurate but difficult
    to use. Published with half-point tags (2, 7: +0.5; 5: +1.5; 9: -0.5);
    these are the doubled values players use to keep the count in whole
    numbers.

    Tag values (doubled):
        2, 7: +1
        3, 4, 6: +2
        5: +3
        8: 0
        9: -1
        10-K, A: -2

    Full deck sum: 0 (balanced)
    """

    description = "Fractional tags, doubled to whole numbers. Highly accurate."
    is_premium = True
    difficulty = Difficulty.ADVANCED

    _TAG_VALUES: Mapping[Rank, int] = {
        Rank.TWO: 1,
        Rank.THREE: 2,
        Rank.FOUR: 2,
        Rank.FIVE: 3,
        Rank.SIX: 2,
        Rank.SEVEN: 1,
        Rank.EIGHT: 0,
        Rank.NINE: -1,
        Rank.TEN: -2,
        Rank.JACK: -2,
        Rank.QUEEN: -2,
        Rank.KING: -2,
        Rank.ACE: -2,
    }

    @property
    def id(self) -> str:
        return "wong-halves"

    @property
    def name(self) -> str:
        return "Wong Halves"

    @property
    def tag_values(self) -> Mapping[Rank, int]:
        return self._TAG_VALUES
