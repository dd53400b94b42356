"""Common value objects shared across all domain modules."""

from .ids import CustomerId, OrderId, ProductId
from .money import SUPPORTED_CURRENCIES, Money

__all__ = [
    # IDs
    "CustomerId",
    "OrderId",
    "ProductId",
    # Money
    "SUPPORTED_CURRENCIES",
    "Money",
]
