from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class OrderId(EntityId):
    """Strongly-typed purchase order identifier."""


@dataclass(frozen=True)
class CustomerId(EntityId):
    """Strongly-typed customer identifier (the order owner)."""


@dataclass(frozen=True)
class ProductId(EntityId):
    """Strongly-typed product reference carried by an order line."""
