"""Count training session and state management."""

from core.training.events import EventEmitter, EventType, TrainingEvent
from core.training.options import BUST_ANSWER, TrainingOptions
from core.training.session import TrainerStats, TrainingSession, is_total_answer_correct
from core.training.state import TrainingState

__all__ = [
    "BUST_ANSWER",
    "EventEmitter",
    "EventType",
    "TrainerStats",
    "TrainingEvent",
    "TrainingOptions",
    "TrainingSession",
    "TrainingState",
    "is_total_answer_correct",
]
