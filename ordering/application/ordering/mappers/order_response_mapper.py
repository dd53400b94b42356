"""
Mapper for projecting Order aggregates onto response DTOs.

One-directional: responses are never converted back into aggregates.
"""

from datetime import datetime

from ordering.application.ordering.use_cases.dtos import (
    MoneyResponse,
    OrderItemResponse,
    OrderResponse,
)
from ordering.domain.common.value_objects import Money
from ordering.domain.ordering.entities.order import Order
from ordering.domain.ordering.entities.order_item import OrderItem


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


class OrderResponseMapper:
    """Mapper for Order Domain → Response conversion."""

    def to_money(self, money: Money) -> MoneyResponse:
        return MoneyResponse(amount=str(money.amount), currency=money.currency)

    def to_item(self, item: OrderItem) -> OrderItemResponse:
        return OrderItemResponse(
            product_id=str(item.product_id),
            quantity=item.quantity,
            unit_price=self.to_money(item.unit_price),
            subtotal=self.to_money(item.subtotal),
        )

    def to_response(self, order: Order) -> OrderResponse:
        """Convert domain aggregate to response DTO."""
        return OrderResponse(
            id=str(order.id),
            customer_id=str(order.customer_id),
            status=order.status.value,
            items=[self.to_item(item) for item in order.items],
            item_count=order.item_count,
            total=self.to_money(order.total()),
            created_at=order.created_at.isoformat(),
            confirmed_at=_isoformat(order.confirmed_at),
            shipped_at=_isoformat(order.shipped_at),
            cancelled_at=_isoformat(order.cancelled_at),
            cancellation_reason=order.cancellation_reason,
            version=order.version,
        )
