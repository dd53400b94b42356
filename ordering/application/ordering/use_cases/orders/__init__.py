from .add_order_item_use_case import AddOrderItemUseCase
from .cancel_order_use_case import CancelOrderUseCase
from .confirm_order_use_case import ConfirmOrderUseCase
from .create_order_use_case import CreateOrderUseCase
from .get_order_use_case import GetOrderUseCase
from .ship_order_use_case import ShipOrderUseCase

__all__ = [
    "AddOrderItemUseCase",
    "CancelOrderUseCase",
    "ConfirmOrderUseCase",
    "CreateOrderUseCase",
    "GetOrderUseCase",
    "ShipOrderUseCase",
]
