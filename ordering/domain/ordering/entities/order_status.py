"""
Order lifecycle states.

State Machine:
    CREATED → CONFIRMED → SHIPPED
    CANCELLED (from CREATED, CONFIRMED)

SHIPPED and CANCELLED are terminal; no transition is reversible.
"""

from enum import Enum


class OrderStatus(Enum):
    CREATED = "Created"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"

    @property
    def is_terminal(self) -> bool:
        return not VALID_TRANSITIONS[self]

    def can_transition_to(self, target: "OrderStatus") -> bool:
        return target in VALID_TRANSITIONS[self]


VALID_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.CREATED: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset(),  # Terminal
    OrderStatus.CANCELLED: frozenset(),  # Terminal
}
