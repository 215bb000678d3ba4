"""Training session options."""

from dataclasses import dataclass, field

from core.errors import InvalidConfigurationError
from core.hand import BLACKJACK, DEFAULT_STAND_ON
from core.shoe import DEFAULT_SHOE_CONFIG, ShoeConfig

# Answer meaning "the hand busted", offered alongside the totals
BUST_ANSWER = 0
MIN_TOTAL_ANSWER = 4


@dataclass(frozen=True)
class TrainingOptions:
    """
    How a training session deals and quizzes.

    Attributes:
        shoe: Shoe to deal from, and to rebuild when it runs out
        stand_on: Dealing stops once the hand reaches this total (or busts)
        ask_hand_total: Also quiz the hand total after the count
        answer_min: Lowest count offered as an answer
        answer_max: Highest count offered as an answer
    """

    shoe: ShoeConfig = field(default=DEFAULT_SHOE_CONFIG)
    stand_on: int = DEFAULT_STAND_ON
    ask_hand_total: bool = False
    answer_min: int = -5
    answer_max: int = 5

    def __post_init__(self) -> None:
        if not 2 <= self.stand_on <= BLACKJACK:
            raise InvalidConfigurationError(
                f"Stand-on total must be between 2 and {BLACKJACK}, got {self.stand_on}"
            )
        if self.answer_min > self.answer_max:
            raise InvalidConfigurationError(
                f"Answer range is empty: {self.answer_min}..{self.answer_max}"
            )

    @property
    def answer_options(self) -> list[int]:
        """Return the fixed grid of count answers offered to the user."""
        return list(range(self.answer_min, self.answer_max + 1))

    @property
    def total_answer_options(self) -> list[int]:
        """Return the hand totals offered to the user, then the bust answer."""
        return list(range(MIN_TOTAL_ANSWER, BLACKJACK + 1)) + [BUST_ANSWER]
