"""
Steps shared by the order use cases.

Every write use case follows the same sequence: check the input's shape,
load or construct the aggregate, call one aggregate method, then
``persist_and_publish``. Events are only published once the save has
returned; if the save raises, nothing is published.
"""

from decimal import Decimal
from typing import TypeVar
from uuid import UUID

import structlog

from ordering.application.common.cancellation import CancellationSignal, raise_if_cancelled
from ordering.application.ordering.protocols import (
    EventPublisherProtocol,
    OrderRepositoryProtocol,
)
from ordering.application.ordering.use_cases.dtos import OrderItemInput
from ordering.domain.common.entity import EntityId
from ordering.domain.common.value_objects import Money, OrderId, ProductId
from ordering.domain.ordering.entities.order import Order
from ordering.domain.ordering.entities.order_item import OrderItem
from ordering.exceptions import OrderNotFoundError, PublishFailureError, ValidationError

logger = structlog.get_logger(__name__)

IdT = TypeVar("IdT", bound=EntityId)


def parse_id(id_type: type[IdT], raw: object, field: str) -> IdT:
    """
    Convert a raw identifier into its value object.

    Raises:
        ValidationError: If the value is neither a UUID nor a string
        InvariantViolationError: If the value is empty, nil or malformed
    """
    if not isinstance(raw, UUID | str):
        raise ValidationError(f"{field} must be a UUID or a UUID string", field=field)
    return id_type.parse(raw)


def build_order_item(item: OrderItemInput) -> OrderItem:
    """
    Build an OrderItem from plain input values.

    Raises:
        ValidationError: If a value has the wrong type
        InvariantViolationError: If the domain rejects the values
    """
    if isinstance(item.quantity, bool) or not isinstance(item.quantity, int):
        raise ValidationError("quantity must be an integer", field="quantity")
    if isinstance(item.unit_price, bool) or not isinstance(item.unit_price, Decimal | int | str):
        raise ValidationError("unit_price must be a decimal, integer or string", field="unit_price")
    if not isinstance(item.currency, str):
        raise ValidationError("currency must be a string", field="currency")

    return OrderItem(
        product_id=parse_id(ProductId, item.product_id, "product_id"),
        quantity=item.quantity,
        unit_price=Money(item.unit_price, item.currency),  # type: ignore[arg-type]
    )


def load_order(repository: OrderRepositoryProtocol, order_id: OrderId) -> Order:
    """Fetch an order or raise OrderNotFoundError."""
    order = repository.find_by_id(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


def persist_and_publish(
    order: Order,
    repository: OrderRepositoryProtocol,
    publisher: EventPublisherProtocol,
    cancel: CancellationSignal | None,
    operation: str,
) -> Order:
    """
    Save the order, then drain and publish its events.

    Cancellation is honoured up to the save; after the save returns the
    operation completes. A publish failure leaves the saved state in
    place and propagates to the caller.

    Returns:
        The saved order (with its new version)
    """
    raise_if_cancelled(cancel, operation)

    saved = repository.save(order)

    events = order.drain_events()
    if events:
        try:
            publisher.publish(events)
        except PublishFailureError:
            logger.error(
                "order_events_not_published",
                order_id=str(order.id),
                operation=operation,
                event_types=[event.event_type for event in events],
            )
            raise

    return saved
