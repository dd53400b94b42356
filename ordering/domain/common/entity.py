"""
Identifiers and the Entity base.

An entity keeps its identity while its state changes. Ids are frozen
dataclasses around a UUID, one subclass per entity type, so an OrderId
can never be passed where a CustomerId is expected.

Entities themselves are dataclasses and compare by state: a reloaded
aggregate equals the one that was saved, while two copies of the same
order that diverged do not. Look entities up by ``id``, not by hash.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import InvariantViolationError


@dataclass(frozen=True)
class EntityId:
    """
    Strongly-typed identifier wrapping a non-nil UUID.

    Equality is structural and includes the concrete class:
    ``OrderId(u) != CustomerId(u)``.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise InvariantViolationError(self.__class__.__name__, "value must be a UUID")
        if self.value.int == 0:
            raise InvariantViolationError(self.__class__.__name__, "value cannot be the nil UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: UUID | str) -> Self:
        """
        Build an identifier from a UUID or its string form.

        Raises:
            InvariantViolationError: If the value is empty or not a UUID
        """
        if isinstance(raw, UUID):
            return cls(raw)
        if not isinstance(raw, str):
            raise InvariantViolationError(cls.__name__, "value must be a UUID or a string")
        if not raw.strip():
            raise InvariantViolationError(cls.__name__, "value cannot be empty")
        try:
            return cls(UUID(raw.strip()))
        except ValueError as err:
            raise InvariantViolationError(cls.__name__, f"{raw!r} is not a valid UUID") from err

    def to_primitive(self) -> str:
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Base for objects defined by identity; subclasses declare ``id: IdType``."""

    id: IdType
