"""Protocol for the Order repository (persistence gateway)."""

from typing import Protocol

from ordering.domain.common.value_objects import OrderId
from ordering.domain.ordering.entities.order import Order


class OrderRepositoryProtocol(Protocol):
    """Protocol for Order repository operations in ordering context."""

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """
        Find an order by ID.

        Args:
            order_id: The order ID

        Returns:
            Order aggregate if found, None otherwise

        Raises:
            StorageFailureError: If the store cannot be read
        """
        ...

    def save(self, order: Order) -> Order:
        """
        Save an order aggregate (create or update) in one transaction.

        The write only succeeds if the stored version still equals
        ``order.version``; the returned order carries the new version.

        Args:
            order: The order aggregate to save

        Returns:
            Saved order as reloaded from the store

        Raises:
            ConcurrencyConflictError: If the order changed since it was read
            StorageFailureError: If the store cannot be written
        """
        ...
