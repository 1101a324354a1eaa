"""
Domain Events and the notifications that carry them.

Domain Events represent something significant that happened in the domain.
A notification wraps one domain event together with context that is only
needed when mapping it to integration events, such as a one-time token
generated during the operation.

Example:
    @dataclass(frozen=True)
    class UserCreated(DomainEvent):
        user_id: UserId
        email: str

    class UserCreatedNotification(DomainEventNotification[UserCreated]):
        def __init__(self, domain_event: UserCreated, activation_token: str) -> None:
            super().__init__(domain_event)
            self.activation_token = activation_token
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from .event import Event
from .exceptions import ArgumentError


@dataclass(frozen=True)
class DomainEvent(Event):
    """
    Base class for Domain Events.

    Subclasses should be decorated with @dataclass(frozen=True)
    and define their specific attributes.
    """


TDomainEvent = TypeVar("TDomainEvent", bound=Event, covariant=True)


@runtime_checkable
class HasDomainEvent(Protocol[TDomainEvent]):
    """Anything that exposes the domain event it was raised for."""

    @property
    def domain_event(self) -> TDomainEvent: ...


class DomainEventNotification(ABC, Generic[TDomainEvent]):
    """
    Base class for notifications wrapping a single domain event.

    The wrapped event is set once at construction and is never None.
    Subclasses add whatever extra context their mappers need.
    """

    __slots__ = ("_domain_event",)

    def __init__(self, domain_event: TDomainEvent) -> None:
        if type(self) is DomainEventNotification:
            raise TypeError("DomainEventNotification must be subclassed")
        if domain_event is None:
            raise ArgumentError("domain_event")
        self._domain_event = domain_event

    @property
    def domain_event(self) -> TDomainEvent:
        """The domain event that triggered this notification."""
        return self._domain_event

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(domain_event={self._domain_event!r})"
