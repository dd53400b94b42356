"""In-process repository for Order aggregates."""

import threading

import structlog

from ordering.domain.common.value_objects import OrderId
from ordering.domain.ordering.entities.order import Order
from ordering.exceptions import ConcurrencyConflictError
from ordering.infrastructure.ordering.mappers import OrderMapper
from ordering.models import Order as OrderORM

logger = structlog.get_logger(__name__)


class InMemoryOrderRepository:
    """
    Repository keeping persistence records in a dict.

    Records go through the same mapper as the SQLAlchemy repository, so
    every load returns a fresh aggregate that shares nothing with the
    caller's copy. Saves are compare-and-swap on ``version`` under a lock.
    """

    def __init__(self) -> None:
        self.mapper = OrderMapper()
        self._records: dict[str, OrderORM] = {}
        self._lock = threading.Lock()

    def find_by_id(self, order_id: OrderId) -> Order | None:
        with self._lock:
            orm_model = self._records.get(str(order_id))
            return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, order: Order) -> Order:
        """
        Store the order if nobody saved it since it was loaded.

        Raises:
            ConcurrencyConflictError: If the stored version differs from ``order.version``
        """
        key = str(order.id)
        with self._lock:
            current = self._records.get(key)
            current_version = current.version if current else 0
            if current_version != order.version:
                logger.warning(
                    "order_version_conflict",
                    order_id=key,
                    expected_version=order.version,
                    stored_version=current_version,
                )
                raise ConcurrencyConflictError(order.id, order.version)

            orm_model = self.mapper.to_orm(order)
            orm_model.version = order.version + 1
            self._records[key] = orm_model
            return self.mapper.to_domain(orm_model)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
