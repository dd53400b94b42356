from .order import Order
from .order_item import OrderItem
from .order_status import VALID_TRANSITIONS, OrderStatus

__all__ = ["VALID_TRANSITIONS", "Order", "OrderItem", "OrderStatus"]
