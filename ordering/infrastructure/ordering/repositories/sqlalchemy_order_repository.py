"""Repository for Order aggregates backed by SQLAlchemy."""

import structlog
from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ordering.domain.common.value_objects import OrderId
from ordering.domain.ordering.entities.order import Order
from ordering.exceptions import ConcurrencyConflictError, StorageFailureError
from ordering.infrastructure.ordering.mappers import OrderMapper
from ordering.models import Order as OrderORM

logger = structlog.get_logger(__name__)


class SqlAlchemyOrderRepository:
    """Repository for Order aggregates."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = OrderMapper()

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID.

        Args:
            order_id: The order ID

        Returns:
            A fresh Order aggregate if found, None otherwise
        """
        stmt = (
            select(OrderORM)
            .where(OrderORM.id == str(order_id))
            .options(selectinload(OrderORM.items))
            .execution_options(populate_existing=True)
        )
        try:
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as err:
            self.db.rollback()
            raise StorageFailureError(f"Failed to load order {order_id}: {err}") from err
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, order: Order) -> Order:
        """
        Save an order (create or update) under an optimistic version check.

        Args:
            order: The order to save; ``order.version`` is the version it was loaded at

        Returns:
            The persisted order carrying its new version

        Raises:
            ConcurrencyConflictError: If another writer saved the order first
            StorageFailureError: If the database reports any other error
        """
        try:
            if order.version == 0:
                orm_model = self._insert(order)
            else:
                orm_model = self._update(order)
            self.db.commit()
        except ConcurrencyConflictError:
            self.db.rollback()
            logger.warning(
                "order_version_conflict", order_id=str(order.id), expected_version=order.version
            )
            raise
        except SQLAlchemyError as err:
            self.db.rollback()
            raise StorageFailureError(f"Failed to save order {order.id}: {err}") from err

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def _insert(self, order: Order) -> OrderORM:
        if self.db.get(OrderORM, str(order.id)) is not None:
            raise ConcurrencyConflictError(order.id, order.version)

        orm_model = self.mapper.to_orm(order)
        orm_model.version = 1
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError as err:
            # Another writer created the same identity first
            raise ConcurrencyConflictError(order.id, order.version) from err
        return orm_model

    def _update(self, order: Order) -> OrderORM:
        expected_version = order.version
        result = self.db.execute(
            update(OrderORM)
            .where(OrderORM.id == str(order.id), OrderORM.version == expected_version)
            .values(version=expected_version + 1, row_updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise ConcurrencyConflictError(order.id, expected_version)

        orm_model = self.db.get(OrderORM, str(order.id), populate_existing=True)
        if orm_model is None:
            raise ConcurrencyConflictError(order.id, expected_version)
        self.mapper.to_orm(order, orm_model)
        orm_model.version = expected_version + 1
        self.db.flush()
        return orm_model
