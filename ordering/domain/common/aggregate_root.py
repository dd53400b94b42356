"""
Aggregate root base.

An aggregate is one consistency and transaction unit, reached only
through its root. The root buffers the domain events its methods raise;
the application layer drains them after the aggregate has been saved.
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Root of an aggregate: holds the event buffer and the concurrency token.

    The event buffer is the one intentionally mutable, non-thread-safe
    part of an aggregate. ``version`` is 0 until the first save and only
    repositories advance it. Neither takes part in equality.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )
    version: int = field(default=0, compare=False, kw_only=True)

    def _record_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def drain_events(self) -> list[DomainEvent]:
        """
        Return buffered events in the order they were raised, and clear the buffer.

        Single consumer only: draining the same instance from two threads
        may lose or duplicate events.
        """
        drained, self._events = self._events, []
        return drained

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Buffered events, without clearing them."""
        return list(self._events)
