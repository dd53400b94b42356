"""Tests for OrderMapper (domain ⇄ persistence)."""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from ordering.domain.common.value_objects import CustomerId
from ordering.domain.ordering.entities import Order, OrderItem, OrderStatus
from ordering.infrastructure.ordering.mappers import OrderMapper
from ordering.models import Order as OrderORM

MakeItem = Callable[..., OrderItem]


@pytest.fixture
def mapper() -> OrderMapper:
    return OrderMapper()


class TestOrderMapper:
    def test_round_trip_created(self, mapper: OrderMapper, new_order: Order) -> None:
        restored = mapper.to_domain(mapper.to_orm(new_order))

        assert restored == new_order
        assert restored.total() == new_order.total()

    def test_round_trip_keeps_item_order_and_exact_amounts(
        self, mapper: OrderMapper, customer_id: CustomerId, make_item: MakeItem
    ) -> None:
        items = [make_item(1, "0.10"), make_item(3, "19.999"), make_item(2, "5")]
        order = Order.create(customer_id=customer_id, items=items)

        record = mapper.to_orm(order)
        restored = mapper.to_domain(record)

        assert [item.product_id for item in restored.items] == [i.product_id for i in items]
        assert [item.unit_price for item in restored.items] == [i.unit_price for i in items]
        assert [r.unit_price for r in record.items] == ["0.10", "19.999", "5"]
        assert [r.position for r in record.items] == [0, 1, 2]

    @pytest.mark.parametrize("action", ["confirm", "ship", "cancel"])
    def test_round_trip_each_status(
        self, mapper: OrderMapper, new_order: Order, action: str
    ) -> None:
        if action in ("confirm", "ship"):
            new_order.confirm()
        if action == "ship":
            new_order.ship()
        if action == "cancel":
            new_order.cancel("out of stock")

        restored = mapper.to_domain(mapper.to_orm(new_order))

        assert restored == new_order
        assert restored.status is new_order.status
        assert restored.cancellation_reason == new_order.cancellation_reason

    def test_to_domain_records_no_events(self, mapper: OrderMapper, new_order: Order) -> None:
        restored = mapper.to_domain(mapper.to_orm(new_order))
        assert restored.pending_events == []

    def test_version_is_carried(self, mapper: OrderMapper, new_order: Order) -> None:
        new_order.version = 4
        record = mapper.to_orm(new_order)

        assert record.version == 4
        assert mapper.to_domain(record).version == 4

    def test_items_sorted_by_position(
        self, mapper: OrderMapper, customer_id: CustomerId, make_item: MakeItem
    ) -> None:
        order = Order.create(customer_id=customer_id, items=[make_item(1), make_item(2)])
        record = mapper.to_orm(order)
        record.items.reverse()

        restored = mapper.to_domain(record)

        assert [item.quantity for item in restored.items] == [1, 2]

    def test_naive_datetimes_are_read_as_utc(self, mapper: OrderMapper, new_order: Order) -> None:
        record = mapper.to_orm(new_order)
        record.created_at = datetime(2024, 1, 2, 3, 4, 5, 123456)

        restored = mapper.to_domain(record)

        assert restored.created_at == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=UTC)

    def test_storage_only_columns_are_ignored(
        self, mapper: OrderMapper, new_order: Order
    ) -> None:
        record = mapper.to_orm(new_order)
        record.row_created_at = datetime(2000, 1, 1, tzinfo=UTC)
        record.row_updated_at = datetime(2001, 1, 1, tzinfo=UTC)

        assert mapper.to_domain(record) == new_order

    def test_to_orm_updates_existing_record(
        self, mapper: OrderMapper, new_order: Order, make_item: MakeItem
    ) -> None:
        record = mapper.to_orm(new_order)
        new_order.add_item(make_item(1, "1.00"))
        new_order.confirm()

        updated = mapper.to_orm(new_order, record)

        assert updated is record
        assert isinstance(updated, OrderORM)
        assert updated.status == OrderStatus.CONFIRMED.value
        assert len(updated.items) == 2
        assert mapper.to_domain(updated) == new_order
