"""
Order aggregate root.

Encapsulates all business rules for the purchase order lifecycle:
creation, item changes, confirmation, shipping and cancellation.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ordering.domain.common.aggregate_root import AggregateRoot
from ordering.domain.common.exceptions import (
    CurrencyMismatchError,
    InvalidStateTransitionError,
    InvariantViolationError,
)
from ordering.domain.common.value_objects import CustomerId, Money, OrderId
from ordering.domain.ordering.entities.order_item import OrderItem
from ordering.domain.ordering.entities.order_status import OrderStatus
from ordering.domain.ordering.events import (
    OrderCancelledEvent,
    OrderConfirmedEvent,
    OrderCreatedEvent,
    OrderShippedEvent,
)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _check_items(items: list[OrderItem]) -> None:
    if not items:
        raise InvariantViolationError("Order", "an order must have at least one item")
    for item in items:
        if not isinstance(item, OrderItem):
            raise InvariantViolationError("Order", "items must be OrderItem instances")
    currency = items[0].currency
    for item in items[1:]:
        if item.currency != currency:
            raise CurrencyMismatchError("Order", currency, item.currency)


@dataclass
class Order(AggregateRoot[OrderId]):
    """
    Order aggregate root.

    Business Rules:
    - Always has at least one item
    - All items share one currency
    - Items can only be added while the order is Created
    - Status moves Created → Confirmed → Shipped, or to Cancelled from
      Created/Confirmed; Shipped and Cancelled are terminal
    - A failing method leaves the order unchanged
    """

    # Identity
    id: OrderId
    customer_id: CustomerId

    # Lines (private; read through `items`)
    _items: list[OrderItem]

    status: OrderStatus = OrderStatus.CREATED

    # Lifecycle timestamps
    created_at: datetime = field(default_factory=_utcnow)
    confirmed_at: datetime | None = None
    shipped_at: datetime | None = None
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self._items = list(self._items)
        _check_items(self._items)

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def currency(self) -> str:
        return self._items[0].currency

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self._items)

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    def total(self) -> Money:
        """
        Sum of item subtotals.

        Raises:
            InvariantViolationError: If item currencies are inconsistent
        """
        total = Money.zero(self.currency)
        for item in self._items:
            total = total.add(item.subtotal)
        return total

    def _assert_can_transition(self, target: OrderStatus, action: str) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidStateTransitionError(self.id, self.status.value, action)

    def add_item(self, item: OrderItem) -> None:
        """
        Add a line to the order. Only allowed in Created state.

        Raises:
            InvalidStateTransitionError: If the order is no longer Created
            InvariantViolationError: If the item currency differs from the order's
        """
        if self.status is not OrderStatus.CREATED:
            raise InvalidStateTransitionError(self.id, self.status.value, "add item to")
        if not isinstance(item, OrderItem):
            raise InvariantViolationError("Order", "items must be OrderItem instances")
        if item.currency != self.currency:
            raise CurrencyMismatchError("Order", self.currency, item.currency)

        self._items.append(item)

    def confirm(self) -> None:
        """Confirm the order. Only allowed from Created."""
        self._assert_can_transition(OrderStatus.CONFIRMED, "confirm")

        now = _utcnow()
        self.status = OrderStatus.CONFIRMED
        self.confirmed_at = now
        self._record_event(OrderConfirmedEvent(order_id=self.id, confirmed_at=now, occurred_at=now))

    def ship(self) -> None:
        """Ship the order. Only allowed from Confirmed."""
        self._assert_can_transition(OrderStatus.SHIPPED, "ship")

        now = _utcnow()
        self.status = OrderStatus.SHIPPED
        self.shipped_at = now
        self._record_event(OrderShippedEvent(order_id=self.id, shipped_at=now, occurred_at=now))

    def cancel(self, reason: str | None = None) -> None:
        """Cancel the order. Only allowed from Created or Confirmed."""
        self._assert_can_transition(OrderStatus.CANCELLED, "cancel")

        if reason is not None:
            reason = reason.strip() or None
        now = _utcnow()
        previous_status = self.status
        self.status = OrderStatus.CANCELLED
        self.cancelled_at = now
        self.cancellation_reason = reason
        self._record_event(
            OrderCancelledEvent(
                order_id=self.id,
                previous_status=previous_status,
                reason=reason,
                occurred_at=now,
            )
        )

    @classmethod
    def create(
        cls,
        customer_id: CustomerId,
        items: Iterable[OrderItem],
        *,
        order_id: OrderId | None = None,
    ) -> "Order":
        """
        Factory method for placing a new order.

        Args:
            customer_id: Owner of the order
            items: At least one item, all in the same currency
            order_id: Optional pre-assigned identity (generated otherwise)

        Returns:
            New Order in Created state with an OrderCreatedEvent buffered

        Raises:
            InvariantViolationError: If items are empty or mix currencies
        """
        now = _utcnow()
        order = cls(
            id=order_id if order_id is not None else OrderId.generate(),
            customer_id=customer_id,
            _items=list(items),
            status=OrderStatus.CREATED,
            created_at=now,
        )
        order._record_event(
            OrderCreatedEvent(
                order_id=order.id,
                customer_id=customer_id,
                total=order.total(),
                item_count=order.item_count,
                occurred_at=now,
            )
        )
        return order

    @classmethod
    def create_with_id(
        cls,
        id: OrderId,
        customer_id: CustomerId,
        items: Iterable[OrderItem],
        status: OrderStatus,
        created_at: datetime,
        version: int,
        confirmed_at: datetime | None = None,
        shipped_at: datetime | None = None,
        cancelled_at: datetime | None = None,
        cancellation_reason: str | None = None,
    ) -> "Order":
        """Reconstitute an order from persistence (records no events)."""
        return cls(
            id=id,
            customer_id=customer_id,
            _items=list(items),
            status=status,
            created_at=created_at,
            confirmed_at=confirmed_at,
            shipped_at=shipped_at,
            cancelled_at=cancelled_at,
            cancellation_reason=cancellation_reason,
            version=version,
        )
