"""Tests for the Order aggregate and its state machine."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from ordering.domain.common.exceptions import (
    CurrencyMismatchError,
    InvalidStateTransitionError,
    InvariantViolationError,
)
from ordering.domain.common.value_objects import CustomerId, Money, OrderId
from ordering.domain.ordering.entities import VALID_TRANSITIONS, Order, OrderItem, OrderStatus
from ordering.domain.ordering.events import (
    OrderCancelledEvent,
    OrderConfirmedEvent,
    OrderCreatedEvent,
    OrderEventKind,
    OrderShippedEvent,
)

MakeItem = Callable[..., OrderItem]


def _confirmed(order: Order) -> Order:
    order.confirm()
    order.drain_events()
    return order


def _shipped(order: Order) -> Order:
    order.confirm()
    order.ship()
    order.drain_events()
    return order


def _cancelled(order: Order) -> Order:
    order.cancel()
    order.drain_events()
    return order


class TestCreate:
    def test_scenario_single_item(self, customer_id: CustomerId, make_item: MakeItem) -> None:
        """C1 orders 2 x 10.00 USD: total 20.00 USD, state Created."""
        order = Order.create(customer_id=customer_id, items=[make_item(2, "10.00", "USD")])

        assert order.total() == Money("20.00", "USD")
        assert order.status is OrderStatus.CREATED
        assert order.customer_id == customer_id
        assert order.version == 0

    @pytest.mark.parametrize(
        ("lines", "expected"),
        [
            ([(1, "0.10"), (1, "0.20")], Decimal("0.30")),
            ([(3, "19.99"), (2, "0.01"), (10, "5")], Decimal("109.99")),
            ([(7, "1.234")], Decimal("8.638")),
        ],
    )
    def test_total_is_exact_sum_of_subtotals(
        self,
        customer_id: CustomerId,
        make_item: MakeItem,
        lines: list[tuple[int, str]],
        expected: Decimal,
    ) -> None:
        items = [make_item(quantity, price, "EUR") for quantity, price in lines]
        order = Order.create(customer_id=customer_id, items=items)

        assert order.total() == Money(expected, "EUR")
        assert order.total() == sum(
            (item.subtotal for item in items), start=Money.zero("EUR")
        )

    def test_empty_items_fail(self, customer_id: CustomerId) -> None:
        with pytest.raises(InvariantViolationError, match="at least one item"):
            Order.create(customer_id=customer_id, items=[])

    def test_mixed_currencies_fail(self, customer_id: CustomerId, make_item: MakeItem) -> None:
        with pytest.raises(CurrencyMismatchError):
            Order.create(
                customer_id=customer_id,
                items=[make_item(currency="USD"), make_item(currency="EUR")],
            )

    def test_non_item_fails(self, customer_id: CustomerId) -> None:
        with pytest.raises(InvariantViolationError):
            Order.create(customer_id=customer_id, items=["not an item"])  # type: ignore[list-item]

    def test_records_created_event(self, customer_id: CustomerId, make_item: MakeItem) -> None:
        order = Order.create(customer_id=customer_id, items=[make_item(2, "10.00")])

        events = order.pending_events
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, OrderCreatedEvent)
        assert event.kind is OrderEventKind.CREATED
        assert event.order_id == order.id
        assert event.customer_id == customer_id
        assert event.total == Money("20.00", "USD")
        assert event.item_count == 2

    def test_uses_given_order_id(self, customer_id: CustomerId, make_item: MakeItem) -> None:
        order_id = OrderId.generate()
        order = Order.create(customer_id=customer_id, items=[make_item()], order_id=order_id)
        assert order.id == order_id

    def test_items_are_copied_from_input(
        self, customer_id: CustomerId, make_item: MakeItem
    ) -> None:
        items = [make_item()]
        order = Order.create(customer_id=customer_id, items=items)

        items.append(make_item())

        assert len(order.items) == 1
        assert isinstance(order.items, tuple)

    def test_item_count_sums_quantities(
        self, customer_id: CustomerId, make_item: MakeItem
    ) -> None:
        order = Order.create(customer_id=customer_id, items=[make_item(2), make_item(3)])
        assert order.item_count == 5


class TestAddItem:
    def test_add_item_in_created(self, new_order: Order, make_item: MakeItem) -> None:
        new_order.add_item(make_item(1, "5.00"))

        assert len(new_order.items) == 2
        assert new_order.total() == Money("25.00", "USD")

    def test_add_item_records_no_event(self, new_order: Order, make_item: MakeItem) -> None:
        new_order.drain_events()
        new_order.add_item(make_item())
        assert new_order.pending_events == []

    def test_currency_mismatch_leaves_order_unchanged(
        self, new_order: Order, make_item: MakeItem
    ) -> None:
        with pytest.raises(CurrencyMismatchError):
            new_order.add_item(make_item(currency="GBP"))

        assert len(new_order.items) == 1
        assert new_order.total() == Money("20.00", "USD")

    @pytest.mark.parametrize("transition", [_confirmed, _shipped, _cancelled])
    def test_add_item_after_created_fails(
        self,
        new_order: Order,
        make_item: MakeItem,
        transition: Callable[[Order], Order],
    ) -> None:
        order = transition(new_order)
        status = order.status

        with pytest.raises(InvalidStateTransitionError):
            order.add_item(make_item())

        assert order.status is status
        assert len(order.items) == 1

    def test_items_cannot_be_replaced_from_outside(self, new_order: Order) -> None:
        with pytest.raises(AttributeError):
            new_order.items = ()  # type: ignore[misc]


class TestConfirm:
    def test_confirm_from_created(self, new_order: Order) -> None:
        new_order.drain_events()

        new_order.confirm()

        assert new_order.status is OrderStatus.CONFIRMED
        assert new_order.confirmed_at is not None
        events = new_order.pending_events
        assert len(events) == 1
        assert isinstance(events[0], OrderConfirmedEvent)
        assert events[0].confirmed_at == new_order.confirmed_at

    def test_confirm_twice_fails(self, new_order: Order) -> None:
        new_order.confirm()
        confirmed_at = new_order.confirmed_at
        pending = len(new_order.pending_events)

        with pytest.raises(InvalidStateTransitionError) as exc_info:
            new_order.confirm()

        assert exc_info.value.current_status == "Confirmed"
        assert exc_info.value.attempted == "confirm"
        assert new_order.status is OrderStatus.CONFIRMED
        assert new_order.confirmed_at == confirmed_at
        assert len(new_order.pending_events) == pending

    @pytest.mark.parametrize("transition", [_shipped, _cancelled])
    def test_confirm_from_terminal_fails(
        self, new_order: Order, transition: Callable[[Order], Order]
    ) -> None:
        order = transition(new_order)
        with pytest.raises(InvalidStateTransitionError):
            order.confirm()
        assert order.pending_events == []


class TestShip:
    def test_ship_unconfirmed_order_fails(self, new_order: Order) -> None:
        """Shipping a fresh order fails and leaves it Created with no new event."""
        new_order.drain_events()

        with pytest.raises(InvalidStateTransitionError):
            new_order.ship()

        assert new_order.status is OrderStatus.CREATED
        assert new_order.shipped_at is None
        assert new_order.pending_events == []

    def test_ship_from_confirmed(self, new_order: Order) -> None:
        new_order.confirm()
        new_order.ship()

        assert new_order.status is OrderStatus.SHIPPED
        assert new_order.shipped_at is not None
        assert new_order.is_terminal

    @pytest.mark.parametrize("transition", [_shipped, _cancelled])
    def test_ship_from_terminal_fails(
        self, new_order: Order, transition: Callable[[Order], Order]
    ) -> None:
        order = transition(new_order)
        with pytest.raises(InvalidStateTransitionError):
            order.ship()


class TestCancel:
    def test_cancel_from_created(self, new_order: Order) -> None:
        new_order.drain_events()

        new_order.cancel("  customer changed their mind  ")

        assert new_order.status is OrderStatus.CANCELLED
        assert new_order.cancelled_at is not None
        assert new_order.cancellation_reason == "customer changed their mind"
        (event,) = new_order.pending_events
        assert isinstance(event, OrderCancelledEvent)
        assert event.previous_status is OrderStatus.CREATED
        assert event.reason == "customer changed their mind"

    def test_cancel_from_confirmed(self, new_order: Order) -> None:
        order = _confirmed(new_order)

        order.cancel()

        assert order.status is OrderStatus.CANCELLED
        assert order.cancellation_reason is None
        (event,) = order.pending_events
        assert isinstance(event, OrderCancelledEvent)
        assert event.previous_status is OrderStatus.CONFIRMED

    def test_blank_reason_is_stored_as_none(self, new_order: Order) -> None:
        new_order.cancel("   ")
        assert new_order.cancellation_reason is None

    @pytest.mark.parametrize("transition", [_shipped, _cancelled])
    def test_cancel_from_terminal_fails(
        self, new_order: Order, transition: Callable[[Order], Order]
    ) -> None:
        order = transition(new_order)
        status = order.status

        with pytest.raises(InvalidStateTransitionError):
            order.cancel("too late")

        assert order.status is status
        assert order.pending_events == []


class TestEventLog:
    def test_drain_yields_events_in_order_then_nothing(self, new_order: Order) -> None:
        new_order.confirm()
        new_order.ship()

        events = new_order.drain_events()

        assert [event.kind for event in events] == [
            OrderEventKind.CREATED,
            OrderEventKind.CONFIRMED,
            OrderEventKind.SHIPPED,
        ]
        assert new_order.drain_events() == []

    def test_scenario_confirm_then_ship_before_drain(
        self, customer_id: CustomerId, make_item: MakeItem
    ) -> None:
        """Create, drain, confirm (one event), ship (two events), drained as one batch."""
        order = Order.create(customer_id=customer_id, items=[make_item(2, "10.00", "USD")])
        order.drain_events()

        order.confirm()
        assert order.status is OrderStatus.CONFIRMED
        assert [type(event) for event in order.pending_events] == [OrderConfirmedEvent]

        order.ship()
        assert order.status is OrderStatus.SHIPPED
        assert [type(event) for event in order.pending_events] == [
            OrderConfirmedEvent,
            OrderShippedEvent,
        ]

        batch = order.drain_events()
        assert [type(event) for event in batch] == [OrderConfirmedEvent, OrderShippedEvent]
        assert order.pending_events == []

    def test_pending_events_is_a_copy(self, new_order: Order) -> None:
        new_order.pending_events.clear()
        assert len(new_order.pending_events) == 1


class TestReconstitution:
    def test_create_with_id_records_no_events(
        self, customer_id: CustomerId, make_item: MakeItem, new_order: Order
    ) -> None:
        order = Order.create_with_id(
            id=new_order.id,
            customer_id=customer_id,
            items=[make_item()],
            status=OrderStatus.CONFIRMED,
            created_at=new_order.created_at,
            version=3,
            confirmed_at=new_order.created_at,
        )

        assert order.pending_events == []
        assert order.version == 3
        assert order.status is OrderStatus.CONFIRMED

    def test_create_with_id_still_checks_items(
        self, customer_id: CustomerId, new_order: Order
    ) -> None:
        with pytest.raises(InvariantViolationError):
            Order.create_with_id(
                id=new_order.id,
                customer_id=customer_id,
                items=[],
                status=OrderStatus.CREATED,
                created_at=new_order.created_at,
                version=1,
            )

    def test_equality_ignores_version_and_events(self, new_order: Order) -> None:
        copy = Order.create_with_id(
            id=new_order.id,
            customer_id=new_order.customer_id,
            items=new_order.items,
            status=new_order.status,
            created_at=new_order.created_at,
            version=7,
        )
        assert copy == new_order

    def test_diverged_copies_with_the_same_id_differ(self, new_order: Order) -> None:
        copy = Order.create_with_id(
            id=new_order.id,
            customer_id=new_order.customer_id,
            items=new_order.items,
            status=new_order.status,
            created_at=new_order.created_at,
            version=1,
        )
        copy.confirm()

        assert copy.id == new_order.id
        assert copy != new_order

    def test_orders_are_not_hashable(self, new_order: Order) -> None:
        with pytest.raises(TypeError):
            hash(new_order)


def test_transition_table_matches_lifecycle() -> None:
    assert VALID_TRANSITIONS[OrderStatus.CREATED] == {
        OrderStatus.CONFIRMED,
        OrderStatus.CANCELLED,
    }
    assert VALID_TRANSITIONS[OrderStatus.CONFIRMED] == {
        OrderStatus.SHIPPED,
        OrderStatus.CANCELLED,
    }
    assert OrderStatus.SHIPPED.is_terminal
    assert OrderStatus.CANCELLED.is_terminal
    assert not OrderStatus.CREATED.is_terminal
