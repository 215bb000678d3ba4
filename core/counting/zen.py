"""Zen Count card counting system."""

from typing import Mapping

from core.cards import Rank
from core.counting.base import CountingSystem, Difficulty


class ZenCountSystem(CountingSystem):
    """
    Zen Count system.

    A balanced level-two count. Unlike Omega II it tags the ace, so no side
    count is needed.

    Tag values:
        2, 3, 7: +1
        4, 5, 6: +2
        8, 9: 0
        10-K: -2
        A: -1

    Full deck sum: 0 (balanced)
    """

    description = "A level-two balanced count that tags the ace as -1."
    is_premium = True
    difficulty = Difficulty.INTERMEDIATE

    _TAG_VALUES: Mapping[Rank, int] = {
        Rank.TWO: 1,
        Rank.THREE: 1,
        Rank.FOUR: 2,
        Rank.FIVE: 2,
        Rank.SIX: 2,
        Rank.SEVEN: 1,
        Rank.EIGHT: 0,
        Rank.NINE: 0,
        Rank.TEN: -2,
        Rank.JACK: -2,
        Rank.QUEEN: -2,
        Rank.KING: -2,
        Rank.ACE: -1,
    }

    @property
    def id(self) -> str:
        return "zen"

    @property
    def name(self) -> str:
        return "Zen Count"

    @property
    def tag_values(self) -> Mapping[Rank, int]:
        return self._TAG_VALUES
