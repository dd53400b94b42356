from .order_dtos import (
    AddOrderItemCommand,
    CancelOrderCommand,
    ConfirmOrderCommand,
    CreateOrderCommand,
    GetOrderQuery,
    MoneyResponse,
    OrderItemInput,
    OrderItemResponse,
    OrderResponse,
    ShipOrderCommand,
)

__all__ = [
    "AddOrderItemCommand",
    "CancelOrderCommand",
    "ConfirmOrderCommand",
    "CreateOrderCommand",
    "GetOrderQuery",
    "MoneyResponse",
    "OrderItemInput",
    "OrderItemResponse",
    "OrderResponse",
    "ShipOrderCommand",
]
