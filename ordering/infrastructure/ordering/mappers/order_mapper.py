"""Mapper for Order ORM ↔ Domain conversion."""

from datetime import UTC, datetime
from decimal import Decimal

from ordering.domain.common.value_objects import CustomerId, Money, OrderId, ProductId
from ordering.domain.ordering.entities.order import Order
from ordering.domain.ordering.entities.order_item import OrderItem
from ordering.domain.ordering.entities.order_status import OrderStatus
from ordering.models import Order as OrderORM
from ordering.models import OrderItem as OrderItemORM


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _optional_utc(value: datetime | None) -> datetime | None:
    return _as_utc(value) if value is not None else None


class OrderMapper:
    """Mapper for Order ORM ↔ Domain conversion."""

    def item_to_domain(self, orm_model: OrderItemORM) -> OrderItem:
        return OrderItem(
            product_id=ProductId.parse(orm_model.product_id),
            quantity=orm_model.quantity,
            unit_price=Money(Decimal(orm_model.unit_price), orm_model.currency),
        )

    def item_to_orm(self, item: OrderItem, position: int) -> OrderItemORM:
        return OrderItemORM(
            position=position,
            product_id=str(item.product_id),
            quantity=item.quantity,
            unit_price=str(item.unit_price.amount),
            currency=item.currency,
        )

    def to_domain(self, orm_model: OrderORM) -> Order:
        """Convert ORM model to domain entity. Storage-only columns are ignored."""
        items = sorted(orm_model.items, key=lambda record: record.position)
        return Order.create_with_id(
            id=OrderId.parse(orm_model.id),
            customer_id=CustomerId.parse(orm_model.customer_id),
            items=[self.item_to_domain(record) for record in items],
            status=OrderStatus(orm_model.status),
            created_at=_as_utc(orm_model.created_at),
            version=orm_model.version,
            confirmed_at=_optional_utc(orm_model.confirmed_at),
            shipped_at=_optional_utc(orm_model.shipped_at),
            cancelled_at=_optional_utc(orm_model.cancelled_at),
            cancellation_reason=orm_model.cancellation_reason,
        )

    def to_orm(self, domain_entity: Order, orm_model: OrderORM | None = None) -> OrderORM:
        """Convert domain entity to ORM model."""
        items = [
            self.item_to_orm(item, position) for position, item in enumerate(domain_entity.items)
        ]

        if orm_model is not None:
            # Update existing; replaced lines are removed by the delete-orphan cascade
            orm_model.customer_id = str(domain_entity.customer_id)
            orm_model.status = domain_entity.status.value
            orm_model.created_at = domain_entity.created_at
            orm_model.confirmed_at = domain_entity.confirmed_at
            orm_model.shipped_at = domain_entity.shipped_at
            orm_model.cancelled_at = domain_entity.cancelled_at
            orm_model.cancellation_reason = domain_entity.cancellation_reason
            orm_model.version = domain_entity.version
            orm_model.items = items
            return orm_model

        # Create new
        return OrderORM(
            id=str(domain_entity.id),
            customer_id=str(domain_entity.customer_id),
            status=domain_entity.status.value,
            created_at=domain_entity.created_at,
            confirmed_at=domain_entity.confirmed_at,
            shipped_at=domain_entity.shipped_at,
            cancelled_at=domain_entity.cancelled_at,
            cancellation_reason=domain_entity.cancellation_reason,
            version=domain_entity.version,
            items=items,
        )
