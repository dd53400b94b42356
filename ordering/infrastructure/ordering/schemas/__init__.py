"""Ordering context schemas."""

from ordering.infrastructure.ordering.schemas.order_schemas import (
    AddOrderItemRequest,
    CancelOrderRequest,
    CreateOrderRequest,
    OrderItemRequest,
)

__all__ = [
    "AddOrderItemRequest",
    "CancelOrderRequest",
    "CreateOrderRequest",
    "OrderItemRequest",
]
