"""
Money value object.

An exact decimal amount paired with an ISO-4217 currency code. Amounts
are never negative; arithmetic only combines amounts of one currency.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self

from ..exceptions import CurrencyMismatchError, InvariantViolationError

SUPPORTED_CURRENCIES = frozenset(
    {"USD", "EUR", "GBP", "JPY", "CHF", "CAD", "AUD", "SEK", "NOK", "DKK", "PLN", "CZK"}
)


def _to_decimal(amount: object) -> Decimal:
    if isinstance(amount, bool):
        raise InvariantViolationError("Money", "amount must be numeric")
    if isinstance(amount, float):
        # Go through str() so 0.1 stays 0.1 rather than its binary expansion
        amount = str(amount)
    try:
        value = Decimal(amount)  # type: ignore[arg-type]
    except (InvalidOperation, TypeError, ValueError) as err:
        raise InvariantViolationError("Money", f"amount {amount!r} is not a number") from err
    if not value.is_finite():
        raise InvariantViolationError("Money", "amount must be finite")
    return value


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Business Rules:
    - Amount is an exact Decimal and cannot be negative
    - Currency must be one of SUPPORTED_CURRENCIES
    - Adding amounts in different currencies fails
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        amount = _to_decimal(self.amount)
        if amount < 0:
            raise InvariantViolationError("Money", "amount cannot be negative")
        if self.currency not in SUPPORTED_CURRENCIES:
            raise InvariantViolationError("Money", f"unsupported currency {self.currency!r}")
        object.__setattr__(self, "amount", amount)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    @classmethod
    def zero(cls, currency: str) -> Self:
        return cls(Decimal(0), currency)

    def add(self, other: "Money") -> "Money":
        """
        Add two amounts of the same currency.

        Raises:
            CurrencyMismatchError: If the currencies differ
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError("Money", self.currency, other.currency)
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, quantity: int) -> "Money":
        """Scale by a non-negative whole quantity (e.g. unit price to subtotal)."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvariantViolationError("Money", "multiplier must be an integer")
        if quantity < 0:
            raise InvariantViolationError("Money", "multiplier cannot be negative")
        return Money(self.amount * quantity, self.currency)

    def to_primitive(self) -> dict[str, str]:
        """Convert to primitive for serialization."""
        return {"amount": str(self.amount), "currency": self.currency}
