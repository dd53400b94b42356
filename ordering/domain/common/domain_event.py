"""
Domain event base.

An event records a state change that already happened (past tense:
OrderShipped). Events are frozen, carry their own id and UTC timestamp,
and are only created by aggregate methods.
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID, uuid4


def _primitive(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_primitive"):
        return value.to_primitive()
    return value


@dataclass(frozen=True)
class DomainEvent:
    """
    Base for domain events.

    ``event_id`` and ``occurred_at`` are keyword-only so subclasses can
    declare required payload fields.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Flatten the event into JSON-friendly primitives."""
        result = {f.name: _primitive(getattr(self, f.name)) for f in fields(self)}
        result["event_type"] = self.event_type
        return result
