"""Event bus for synchronous form notifications.

Components that render or record the form (the CLI, a future UI) subscribe
to the events the form controller publishes. Handlers run immediately, in
priority order.

Typical usage example:
    from navcharge.core.event_bus import EventBus, EventPriority
    from navcharge.form.events import ChargesCalculated

    bus = EventBus()
    bus.subscribe(ChargesCalculated, show_result, EventPriority.HIGH)
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventPriority(Enum):
    """Priority levels for event handlers.

    Handlers are executed in order from CRITICAL to LOW.
    """

    CRITICAL = auto()
    HIGH = auto()
    NORMAL = auto()
    LOW = auto()


@dataclass(frozen=True)
class Event:
    """Base class for all events.

    Attributes:
        timestamp: Unix timestamp when the event was created.
    """

    timestamp: float = field(default_factory=time.time, kw_only=True)


class EventBus:
    """Central event bus for synchronous event dispatch.

    Dispatch matches the exact event class; handlers subscribed to a base
    class do not receive subclasses.

    Examples:
        >>> bus = EventBus()
        >>> bus.subscribe(FormStateChanged, lambda event: print(event.state.route))
        >>> bus.publish(FormStateChanged(action=AddWaypoint("ALPHA"), state=state))
        ('ALPHA',)
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[tuple[Callable[[Any], None], EventPriority]]] = {}

    def subscribe(
        self,
        event_type: type[Event],
        handler: Callable[[Any], None],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The class of event to subscribe to.
            handler: Callable that accepts the event as its only parameter.
            priority: Priority level for this handler. Defaults to NORMAL.
        """
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append((handler, priority))

        # Stable sort keeps subscription order within a priority level.
        handlers.sort(key=lambda x: x[1].value)

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers.

        Handlers are called synchronously in priority order. If a handler
        raises, the exception propagates to the publisher and later handlers
        are not called.

        Args:
            event: The event to publish.
        """
        for handler, _ in list(self._handlers.get(type(event), [])):
            handler(event)
