"""Training events for the event system."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of training events."""

    # Session flow events
    HAND_STARTED = auto()
    HAND_FROZEN = auto()
    SESSION_RESET = auto()

    # Card events
    CARD_DEALT = auto()
    SHOE_REPLACED = auto()

    # Answer events
    COUNT_ANSWERED = auto()
    TOTAL_ANSWERED = auto()

    # Error events
    INVALID_ACTION = auto()


@dataclass(frozen=True)
class TrainingEvent:
    """
    Immutable training event.

    Events are the primary communication mechanism between the training
    session and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Most recent events kept in an emitter's history
DEFAULT_HISTORY_LIMIT = 1000

# Type alias for event handlers
EventHandler = Callable[[TrainingEvent], None]


class EventEmitter:
    """
    Simple event emitter for training events.

    Allows subscribing to specific event types or all events.
    """

    def __init__(self, history_limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        """
        Initialize the event emitter.

        Args:
            history_limit: Number of most recent events to keep; older ones are dropped
        """
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: deque[TrainingEvent] = deque(maxlen=history_limit)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: TrainingEvent) -> None:
        """Record an event and pass it to type-specific, then catch-all, handlers."""
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> TrainingEvent:
        """Create and emit a new event."""
        event = TrainingEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[TrainingEvent]:
        """Return the event history."""
        return list(self._event_history)

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()
