from collections.abc import Sequence
from typing import Protocol

from ordering.domain.common.domain_event import DomainEvent


class EventPublisherProtocol(Protocol):
    def publish(self, events: Sequence[DomainEvent]) -> None:
        """
        Deliver events to downstream consumers in the given order.

        Ordering is only guaranteed within one call.

        Raises:
            PublishFailureError: If delivery fails
        """
        ...
