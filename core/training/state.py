"""Training state enumeration."""

from enum import Enum, auto


class TrainingState(Enum):
    """
    Training session states.

    Flow: IDLE → DEALING → ASKING_COUNT → (ASKING_TOTAL) → FEEDBACK → DEALING ...
    """

    # Nothing dealt yet, or session reset
    IDLE = auto()

    # Cards being dealt to the hand
    DEALING = auto()

    # Hand frozen, waiting for the running count
    ASKING_COUNT = auto()

    # Waiting for the hand total (only when enabled)
    ASKING_TOTAL = auto()

    # Answers scored, ready for the next hand
    FEEDBACK = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
