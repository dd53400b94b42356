"""
In-process event publisher.

Delivers domain events synchronously to subscribed handlers, in the
order they were passed to ``publish``.
"""

import threading
from collections.abc import Callable, Sequence

import structlog

from ordering.domain.common.domain_event import DomainEvent
from ordering.exceptions import PublishFailureError

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventPublisher:
    """
    Ordered synchronous publish/subscribe.

    A handler may subscribe to every event or to one event class. Delivery
    stops at the first handler error, which is raised as PublishFailureError;
    events delivered before it stay in the history.
    """

    def __init__(self) -> None:
        self._subscriptions: list[tuple[type[DomainEvent] | None, EventHandler]] = []
        self._published: list[DomainEvent] = []
        self._lock = threading.Lock()

    def subscribe(
        self, handler: EventHandler, event_type: type[DomainEvent] | None = None
    ) -> None:
        """
        Register a handler.

        Args:
            handler: Callable receiving one event
            event_type: Only deliver events of this class (all events if None)
        """
        with self._lock:
            self._subscriptions.append((event_type, handler))

    def publish(self, events: Sequence[DomainEvent]) -> None:
        """
        Deliver events to handlers in the given order.

        Raises:
            PublishFailureError: If a handler raises
        """
        with self._lock:
            subscriptions = list(self._subscriptions)

        for event in events:
            for event_type, handler in subscriptions:
                if event_type is not None and not isinstance(event, event_type):
                    continue
                try:
                    handler(event)
                except Exception as err:
                    logger.error(
                        "event_handler_failed",
                        event_type=event.event_type,
                        event_id=str(event.event_id),
                        error=str(err),
                    )
                    raise PublishFailureError(
                        f"Handler failed for {event.event_type}: {err}"
                    ) from err

            with self._lock:
                self._published.append(event)
            logger.debug("event_published", event_type=event.event_type)

    @property
    def published(self) -> list[DomainEvent]:
        """Events delivered so far, oldest first."""
        with self._lock:
            return list(self._published)

    def history(self, event_type: type[DomainEvent] | None = None) -> list[DomainEvent]:
        """Delivered events, optionally filtered by class."""
        return [
            event
            for event in self.published
            if event_type is None or isinstance(event, event_type)
        ]

    def clear(self) -> None:
        with self._lock:
            self._published.clear()
