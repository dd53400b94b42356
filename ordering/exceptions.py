"""Custom exception hierarchy for the ordering application.

Domain errors (invariant violations, invalid state transitions) live in
``ordering.domain.common.exceptions``. The errors here are raised by the
application layer and by infrastructure adapters.
"""


class OrderingError(Exception):
    """Base exception for all application and infrastructure errors."""

    retryable: bool = False

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class ValidationError(OrderingError):
    """Input payload has the wrong shape (bad UUID, non-integer quantity, ...)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and the offending field."""
        self.field = field
        super().__init__(message)


class NotFoundError(OrderingError):
    """Resource not found error."""


class OrderNotFoundError(NotFoundError):
    """Order not found error."""

    def __init__(self, order_id: object) -> None:
        """Initialize with the missing order ID."""
        self.order_id = order_id
        super().__init__(f"Order with id {order_id} not found")


class ConcurrencyConflictError(OrderingError):
    """Optimistic concurrency check failed; re-read the order and retry."""

    retryable = True

    def __init__(self, order_id: object, expected_version: int | None = None) -> None:
        """Initialize with the order ID and the version the writer expected."""
        self.order_id = order_id
        self.expected_version = expected_version
        message = f"Order {order_id} was modified concurrently"
        if expected_version is not None:
            message += f" (expected version {expected_version})"
        super().__init__(message)


class StorageFailureError(OrderingError):
    """The persistence gateway could not complete the operation."""


class PublishFailureError(OrderingError):
    """The event publisher could not deliver the events."""


class OperationCancelledError(OrderingError):
    """The caller cancelled the operation before anything was persisted."""
