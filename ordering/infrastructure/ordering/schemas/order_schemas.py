"""Pydantic schemas for order request validation.

Requests only check shape; business rules (positive quantities, supported
currencies, one currency per order) are enforced by the Order aggregate.
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from ordering.application.ordering.use_cases.dtos import (
    AddOrderItemCommand,
    CancelOrderCommand,
    CreateOrderCommand,
    OrderItemInput,
)


class OrderItemRequest(BaseModel):
    """Schema for one requested order line."""

    product_id: UUID = Field(..., description="Product being ordered")
    quantity: int = Field(..., strict=True, description="Number of units")
    unit_price: Decimal = Field(..., allow_inf_nan=False, description="Price of one unit")
    currency: str = Field(..., min_length=3, max_length=3, description="ISO-4217 currency code")

    @field_validator("currency", mode="after")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        return value.strip().upper()

    def to_input(self) -> OrderItemInput:
        return OrderItemInput(
            product_id=self.product_id,
            quantity=self.quantity,
            unit_price=self.unit_price,
            currency=self.currency,
        )


class CreateOrderRequest(BaseModel):
    """Schema for placing an order."""

    customer_id: UUID = Field(..., description="Customer placing the order")
    items: list[OrderItemRequest] = Field(..., description="Requested order lines")
    order_id: UUID | None = Field(
        None, description="Client-chosen order ID, makes retried creates detectable"
    )

    def to_command(self) -> CreateOrderCommand:
        return CreateOrderCommand(
            customer_id=self.customer_id,
            items=[item.to_input() for item in self.items],
            order_id=self.order_id,
        )


class AddOrderItemRequest(BaseModel):
    """Schema for adding a line to an existing order."""

    item: OrderItemRequest

    def to_command(self, order_id: UUID | str) -> AddOrderItemCommand:
        return AddOrderItemCommand(order_id=order_id, item=self.item.to_input())


class CancelOrderRequest(BaseModel):
    """Schema for cancelling an order."""

    reason: str | None = Field(None, max_length=500, description="Why the order was cancelled")

    def to_command(self, order_id: UUID | str) -> CancelOrderCommand:
        return CancelOrderCommand(order_id=order_id, reason=self.reason)
