"""Single-hand count trainer driven by a state machine."""

import math
from dataclasses import dataclass, replace
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card
from core.counting import (
    CountingSystem,
    CountOverlay,
    HiLoSystem,
    calculate_running_count,
    calculate_true_count,
    get_count_overlay,
)
from core.hand import BLACKJACK, Hand, HandValue, create_hand, format_hand_value, should_stop_dealing
from core.shoe import create_shoe, deal_card, get_decks_remaining
from core.training.events import EventEmitter, EventType, TrainingEvent
from core.training.options import BUST_ANSWER, TrainingOptions
from core.training.state import TrainingState


def _percent(part: int, whole: int) -> int:
    """Return ``part`` as a whole percentage of ``whole``, halves rounded up."""
    if whole == 0:
        return 0
    return math.floor(part * 100 / whole + 0.5)


def is_total_answer_correct(answer: int, correct_total: int) -> bool:
    """Check a hand-total answer. Any bust total is matched by the bust answer."""
    if answer == BUST_ANSWER:
        return correct_total > BLACKJACK
    return answer == correct_total


@dataclass(frozen=True)
class TrainerStats:
    """Running score across completed hands."""

    count_correct: int = 0
    total_correct: int = 0
    hands_completed: int = 0

    def record(self, count_correct: bool, total_correct: bool = False) -> "TrainerStats":
        """Return new stats with one more completed hand."""
        return replace(
            self,
            count_correct=self.count_correct + int(count_correct),
            total_correct=self.total_correct + int(total_correct),
            hands_completed=self.hands_completed + 1,
        )

    @property
    def count_accuracy(self) -> int:
        """Return the percentage of hands with the count answered correctly."""
        return _percent(self.count_correct, self.hands_completed)

    @property
    def total_accuracy(self) -> int:
        """Return the percentage of hands with the total answered correctly."""
        return _percent(self.total_correct, self.hands_completed)


class TrainingSession:
    """
    Deals one hand at a time and quizzes the player on it.

    Cards are dealt until the hand busts or reaches the stand-on total. The
    hand is then frozen and the player is asked for its running count and,
    optionally, its total. Pacing and rendering belong to the caller; this
    class only advances when asked to.
    """

    # State machine states
    STATES = [s.name.lower() for s in TrainingState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_hand", "source": ["idle", "feedback"], "dest": "dealing"},
        {"trigger": "freeze_hand", "source": "dealing", "dest": "asking_count"},
        {"trigger": "ask_total", "source": "asking_count", "dest": "asking_total"},
        {"trigger": "give_feedback", "source": ["asking_count", "asking_total"], "dest": "feedback"},
        {"trigger": "return_to_idle", "source": "*", "dest": "idle"},
    ]

    def __init__(
        self,
        options: TrainingOptions | None = None,
        system: CountingSystem | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new training session.

        Args:
            options: Shoe and quiz options (uses defaults if not provided)
            system: Counting system to quiz on (Hi-Lo if not provided)
            rng: Random number generator for reproducible shoes
        """
        self.options = options or TrainingOptions()
        self.system = system or HiLoSystem()
        self._rng = rng
        self.shoe = create_shoe(self.options.shoe, rng)
        self.hand: Hand = create_hand()
        self.stats = TrainerStats()
        self.events = EventEmitter()

        self.correct_count: int | None = None
        self.correct_total: int | None = None
        self.count_answer: int | None = None
        self.total_answer: int | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> TrainingState:
        """Get current training state as enum."""
        return TrainingState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[TrainingEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to training events."""
        self.events.subscribe(handler, event_type)

    def _reject(self, action: str) -> bool:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            state=self.state.name,
        )
        return False

    def select_system(self, system: CountingSystem) -> bool:
        """Switch counting systems between hands."""
        if self.state not in (TrainingState.IDLE, TrainingState.FEEDBACK):
            return self._reject("change counting system")
        self.system = system
        return True

    def start_hand(self) -> bool:
        """Clear the table and start dealing a new hand."""
        if self.state not in (TrainingState.IDLE, TrainingState.FEEDBACK):
            return self._reject("start a hand")

        self.hand = create_hand()
        self.correct_count = None
        self.correct_total = None
        self.count_answer = None
        self.total_answer = None

        self.begin_hand()
        self.events.emit_new(EventType.HAND_STARTED, hand_number=self.stats.hands_completed + 1)
        return True

    def deal_next(self) -> Card | None:
        """
        Deal one card to the hand.

        An exhausted shoe is replaced with a brand-new one rather than
        reshuffled mid-hand. Once the hand is done the correct answers are
        frozen and the session starts asking for the count.

        Returns:
            The dealt card, or None if not currently dealing
        """
        if self.state != TrainingState.DEALING:
            self._reject("deal")
            return None

        result = deal_card(self.shoe)
        if result is None:
            self.shoe = create_shoe(self.options.shoe, self._rng)
            self.events.emit_new(EventType.SHOE_REPLACED, num_decks=self.shoe.num_decks)
            result = deal_card(self.shoe)

        card, self.shoe = result
        self.hand = self.hand.add_card(card)
        value = self.hand_value
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            card_id=card.id,
            count_value=self.system.count_value(card),
            hand_value=format_hand_value(value),
            cards_remaining=self.shoe.cards_remaining,
        )

        if len(self.hand) >= 2 and should_stop_dealing(value, self.options.stand_on):
            self._freeze(value)
        return card

    def deal_hand(self) -> list[Card]:
        """Deal until the hand is frozen and return the cards dealt."""
        dealt: list[Card] = []
        while self.state == TrainingState.DEALING:
            card = self.deal_next()
            if card is None:
                break
            dealt.append(card)
        return dealt

    def _freeze(self, value: HandValue) -> None:
        self.correct_count = self.running_count
        self.correct_total = value.best
        self.freeze_hand()
        self.events.emit_new(
            EventType.HAND_FROZEN,
            correct_count=self.correct_count,
            correct_total=self.correct_total,
            is_bust=value.is_bust,
        )

    def answer_count(self, answer: int) -> bool:
        """
        Submit the player's running count for the frozen hand.

        Args:
            answer: The count the player believes is correct

        Returns:
            True if the answer was accepted
        """
        if self.state != TrainingState.ASKING_COUNT:
            return self._reject("answer count")

        self.count_answer = answer
        self.events.emit_new(
            EventType.COUNT_ANSWERED,
            answer=answer,
            correct=self.correct_count,
            is_correct=self.is_count_correct,
        )

        if self.options.ask_hand_total:
            self.ask_total()
        else:
            self.stats = self.stats.record(self.is_count_correct)
            self.give_feedback()
        return True

    def answer_total(self, answer: int) -> bool:
        """Submit the player's hand total and score the hand."""
        if self.state != TrainingState.ASKING_TOTAL:
            return self._reject("answer total")

        self.total_answer = answer
        self.events.emit_new(
            EventType.TOTAL_ANSWERED,
            answer=answer,
            correct=self.correct_total,
            is_correct=self.is_total_correct,
        )

        self.stats = self.stats.record(self.is_count_correct, self.is_total_correct)
        self.give_feedback()
        return True

    def reset(self) -> None:
        """Return to idle and clear the hand, answers, and stats."""
        self.return_to_idle()
        self.hand = create_hand()
        self.correct_count = None
        self.correct_total = None
        self.count_answer = None
        self.total_answer = None
        self.stats = TrainerStats()
        self.events.emit_new(EventType.SESSION_RESET)

    @property
    def is_count_correct(self) -> bool:
        """Check the submitted count against the frozen one."""
        return self.count_answer is not None and self.count_answer == self.correct_count

    @property
    def is_total_correct(self) -> bool:
        """Check the submitted total against the frozen one."""
        if self.total_answer is None or self.correct_total is None:
            return False
        return is_total_answer_correct(self.total_answer, self.correct_total)

    @property
    def answer_options(self) -> list[int]:
        """Return the count answers offered to the player."""
        return self.options.answer_options

    @property
    def total_answer_options(self) -> list[int]:
        """Return the hand totals offered to the player, bust answer last."""
        return self.options.total_answer_options

    @property
    def hand_value(self) -> HandValue:
        """Evaluate the current hand."""
        return self.hand.value

    @property
    def running_count(self) -> int:
        """Return the running count of the current hand."""
        return calculate_running_count(self.hand.cards, self.system)

    @property
    def shoe_running_count(self) -> int:
        """Return the running count of every card dealt from the shoe."""
        return calculate_running_count(self.shoe.dealt, self.system)

    @property
    def true_count(self) -> float:
        """Return the shoe's true count."""
        return calculate_true_count(self.shoe_running_count, get_decks_remaining(self.shoe))

    @property
    def count_overlays(self) -> list[CountOverlay]:
        """Return a per-card sign hint for the current hand."""
        return [get_count_overlay(self.system.count_value(card)) for card in self.hand.cards]

    def __repr__(self) -> str:
        return (
            f"TrainingSession(state={self.state.name}, hand={self.hand}, "
            f"system={self.system.name!r})"
        )

