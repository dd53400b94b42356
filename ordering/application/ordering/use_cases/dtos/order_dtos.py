"""Commands, queries and response DTOs for order use cases."""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ordering.application.common.command import Command
from ordering.application.common.query import Query


@dataclass(frozen=True)
class OrderItemInput:
    """One requested order line, as plain values."""

    product_id: UUID | str
    quantity: int
    unit_price: Decimal | str | int
    currency: str


@dataclass(frozen=True)
class CreateOrderCommand(Command):
    customer_id: UUID | str
    items: list[OrderItemInput] = field(default_factory=list)
    order_id: UUID | str | None = None


@dataclass(frozen=True)
class AddOrderItemCommand(Command):
    order_id: UUID | str
    item: OrderItemInput


@dataclass(frozen=True)
class ConfirmOrderCommand(Command):
    order_id: UUID | str


@dataclass(frozen=True)
class ShipOrderCommand(Command):
    order_id: UUID | str


@dataclass(frozen=True)
class CancelOrderCommand(Command):
    order_id: UUID | str
    reason: str | None = None


@dataclass(frozen=True)
class GetOrderQuery(Query):
    order_id: UUID | str


class MoneyResponse(BaseModel):
    """Schema for a monetary amount."""

    model_config = ConfigDict(frozen=True)

    amount: str = Field(..., description="Exact decimal amount as text")
    currency: str = Field(..., description="ISO-4217 currency code")


class OrderItemResponse(BaseModel):
    """Schema for an order line."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int
    unit_price: MoneyResponse
    subtotal: MoneyResponse


class OrderResponse(BaseModel):
    """Schema for Order response."""

    model_config = ConfigDict(frozen=True)

    id: str
    customer_id: str
    status: str
    items: list[OrderItemResponse]
    item_count: int
    total: MoneyResponse
    created_at: str
    confirmed_at: str | None = None
    shipped_at: str | None = None
    cancelled_at: str | None = None
    cancellation_reason: str | None = None
    version: int = Field(..., description="Concurrency token to send back on retries")
