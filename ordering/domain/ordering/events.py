"""
Domain events raised by the Order aggregate.

Events are produced only as a side effect of an Order method and are
buffered on the aggregate until the application layer drains them
after a successful save.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from ordering.domain.common.domain_event import DomainEvent
from ordering.domain.common.value_objects import CustomerId, Money, OrderId

if TYPE_CHECKING:
    from ordering.domain.ordering.entities.order_status import OrderStatus


class OrderEventKind(Enum):
    CREATED = "Created"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class OrderEvent(DomainEvent):
    """Base class for every event about one order."""

    kind: ClassVar[OrderEventKind]

    order_id: OrderId

    def to_dict(self) -> dict[str, object]:
        result = super().to_dict()
        result["kind"] = self.kind.value
        return result


@dataclass(frozen=True)
class OrderCreatedEvent(OrderEvent):
    kind: ClassVar[OrderEventKind] = OrderEventKind.CREATED

    customer_id: CustomerId
    total: Money
    item_count: int


@dataclass(frozen=True)
class OrderConfirmedEvent(OrderEvent):
    kind: ClassVar[OrderEventKind] = OrderEventKind.CONFIRMED

    confirmed_at: datetime


@dataclass(frozen=True)
class OrderShippedEvent(OrderEvent):
    kind: ClassVar[OrderEventKind] = OrderEventKind.SHIPPED

    shipped_at: datetime


@dataclass(frozen=True)
class OrderCancelledEvent(OrderEvent):
    kind: ClassVar[OrderEventKind] = OrderEventKind.CANCELLED

    previous_status: "OrderStatus"
    reason: str | None = None
