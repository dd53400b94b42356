"""
Domain common module.

Building blocks shared by every aggregate: typed UUID identifiers,
the aggregate root with its event buffer, the domain event base and
the domain exception hierarchy.
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import (
    CurrencyMismatchError,
    DomainError,
    InvalidStateTransitionError,
    InvariantViolationError,
)

__all__ = [
    "AggregateRoot",
    "CurrencyMismatchError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "InvalidStateTransitionError",
    "InvariantViolationError",
]
