"""Tests for OrderItem."""

import pytest

from ordering.domain.common.exceptions import InvariantViolationError
from ordering.domain.common.value_objects import Money, ProductId
from ordering.domain.ordering.entities import OrderItem


def test_subtotal_is_unit_price_times_quantity() -> None:
    item = OrderItem(product_id=ProductId.generate(), quantity=3, unit_price=Money("2.50", "EUR"))
    assert item.subtotal == Money("7.50", "EUR")
    assert item.currency == "EUR"


@pytest.mark.parametrize("quantity", [0, -1])
def test_non_positive_quantity_fails(quantity: int) -> None:
    with pytest.raises(InvariantViolationError, match="quantity must be positive"):
        OrderItem(product_id=ProductId.generate(), quantity=quantity, unit_price=Money("1", "USD"))


@pytest.mark.parametrize("quantity", [1.0, "2", True])
def test_non_integer_quantity_fails(quantity: object) -> None:
    with pytest.raises(InvariantViolationError, match="quantity must be an integer"):
        OrderItem(
            product_id=ProductId.generate(),
            quantity=quantity,  # type: ignore[arg-type]
            unit_price=Money("1", "USD"),
        )


def test_is_frozen() -> None:
    item = OrderItem(product_id=ProductId.generate(), quantity=1, unit_price=Money("1", "USD"))
    with pytest.raises(AttributeError):
        item.quantity = 5  # type: ignore[misc]
