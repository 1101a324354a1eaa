"""Event mappers scanned by the registration tests."""

from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from domainkit.domain.common import DomainEvent, DomainEventNotification
from domainkit.integration.events import EventMapper, FlexibleEventMapper, IntegrationEvent
from tests.unit.infrastructure.sample_mapper_package.orders import OrderShippedEventMapper

TNotification = TypeVar("TNotification")

__all__ = ["OrderShippedEventMapper"]


@dataclass(frozen=True)
class UserCreated(DomainEvent):
    user_id: str
    email: str
    first_name: str
    last_name: str


class UserCreatedNotification(DomainEventNotification[UserCreated]):
    def __init__(self, domain_event: UserCreated, activation_token: str) -> None:
        super().__init__(domain_event)
        self.activation_token = activation_token


@dataclass(frozen=True)
class PasswordReset(DomainEvent):
    user_id: str
    email: str


class PasswordResetNotification(DomainEventNotification[PasswordReset]):
    def __init__(self, domain_event: PasswordReset, reset_token: str) -> None:
        super().__init__(domain_event)
        self.reset_token = reset_token


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    order_id: str
    total: int


class OrderPlacedNotification(DomainEventNotification[OrderPlaced]):
    pass


@dataclass(frozen=True)
class UserRegistered(IntegrationEvent):
    user_id: str
    email: str
    full_name: str


@dataclass(frozen=True)
class WelcomeEmailRequested(IntegrationEvent):
    email: str
    first_name: str
    activation_token: str


@dataclass(frozen=True)
class PasswordResetRequested(IntegrationEvent):
    email: str
    reset_token: str


@dataclass(frozen=True)
class OrderAudited(IntegrationEvent):
    source: str


@dataclass(frozen=True)
class OrderConfirmed(IntegrationEvent):
    order_id: str
    total: int


class UserCreatedEventMapper(EventMapper[UserCreatedNotification]):
    async def create_events(
        self, notification: UserCreatedNotification
    ) -> Sequence[IntegrationEvent]:
        event = notification.domain_event
        return [
            UserRegistered(event.user_id, event.email, f"{event.first_name} {event.last_name}"),
            WelcomeEmailRequested(event.email, event.first_name, notification.activation_token),
        ]


class UserCreatedFlexibleEventMapper(FlexibleEventMapper[UserCreatedNotification]):
    async def create_events(self, notification: UserCreatedNotification) -> Sequence[object]:
        event = notification.domain_event
        return [
            UserRegistered(event.user_id, event.email, f"{event.first_name} {event.last_name}"),
            {"event_type": "UserCreated", "user_id": event.user_id},
        ]


class PasswordResetMapper(
    EventMapper[PasswordResetNotification], FlexibleEventMapper[PasswordResetNotification]
):
    async def create_events(
        self, notification: PasswordResetNotification
    ) -> Sequence[IntegrationEvent]:
        return [
            PasswordResetRequested(notification.domain_event.email, notification.reset_token)
        ]


class AuditedEventMapper(EventMapper[TNotification]):
    """Adds an audit event after the events built by subclasses."""

    async def create_events(self, notification: TNotification) -> Sequence[IntegrationEvent]:
        return [*self._build_events(notification), OrderAudited(source=type(self).__name__)]

    @abstractmethod
    def _build_events(self, notification: TNotification) -> list[IntegrationEvent]: ...


class OrderPlacedAuditMapper(AuditedEventMapper[OrderPlacedNotification]):
    def _build_events(self, notification: OrderPlacedNotification) -> list[IntegrationEvent]:
        event = notification.domain_event
        return [OrderConfirmed(event.order_id, event.total)]


class PassThroughEventMapper(EventMapper[TNotification]):
    """Concrete, but never bound to a notification type."""

    async def create_events(self, notification: TNotification) -> Sequence[IntegrationEvent]:
        return []


class NotAMapper:
    async def create_events(self, notification: object) -> Sequence[object]:
        return []
