"""
OrderItem - a line of a purchase order.
"""

from dataclasses import dataclass

from ordering.domain.common.exceptions import InvariantViolationError
from ordering.domain.common.value_objects import Money, ProductId


@dataclass(frozen=True)
class OrderItem:
    """
    A product reference, a quantity and the unit price agreed for it.

    Owned exclusively by an Order and immutable, so the order's item
    sequence can only change through the aggregate root.

    Business Rules:
    - Quantity is a positive whole number
    """

    product_id: ProductId
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvariantViolationError("OrderItem", "quantity must be an integer")
        if self.quantity <= 0:
            raise InvariantViolationError("OrderItem", "quantity must be positive")

    @property
    def currency(self) -> str:
        return self.unit_price.currency

    @property
    def subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity)
