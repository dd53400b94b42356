"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They propagate unchanged through the application layer; callers
decide how to present them.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvariantViolationError(DomainError):
    """
    Raised when a constructor or mutation receives malformed input.

    Invariants are rules that must always be true for a value object
    or an aggregate to be in a valid state. Never retried: the caller
    must fix the input.

    Example: An order must always have at least one item.
    """

    def __init__(self, subject: str, invariant: str) -> None:
        message = f"Invariant violation in {subject}: {invariant}"
        super().__init__(message, {"subject": subject, "invariant": invariant})
        self.subject = subject
        self.invariant = invariant


class CurrencyMismatchError(InvariantViolationError):
    """Raised when amounts in different currencies are combined."""

    def __init__(self, subject: str, expected: str, actual: str) -> None:
        super().__init__(subject, f"currency mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidStateTransitionError(DomainError):
    """
    Raised when an operation is attempted from a disallowed state.

    Never retried blindly: the caller must re-fetch the current state.

    Example: Shipping an order that has not been confirmed.
    """

    def __init__(self, aggregate_id: object, current_status: str, attempted: str) -> None:
        message = f"Cannot {attempted} {aggregate_id} while it is {current_status}"
        super().__init__(
            message,
            {
                "aggregate_id": str(aggregate_id),
                "current_status": current_status,
                "attempted": attempted,
            },
        )
        self.aggregate_id = aggregate_id
        self.current_status = current_status
        self.attempted = attempted
