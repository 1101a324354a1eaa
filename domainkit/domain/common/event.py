"""
Base class shared by every kind of event.

Domain events and integration events both derive from ``Event``. The two
differ only in who consumes them: domain events stay inside the service,
integration events are published to other services.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Event:
    """
    Base class for events.

    Events are:
    - Immutable (frozen dataclass)
    - Named in past tense (UserCreated, not CreateUser)
    - Self-contained (carry all data needed to understand what happened)
    - Timestamped (when the event occurred)

    The generated fields are keyword-only so subclasses can declare
    their own fields without defaults.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result
