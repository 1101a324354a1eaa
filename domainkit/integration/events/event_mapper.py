"""
Event mapper capabilities.

An event mapper turns one domain event notification into zero or more
outbound events. Two capabilities exist:

- ``EventMapper[N]`` produces ``IntegrationEvent`` instances.
- ``FlexibleEventMapper[N]`` produces arbitrary objects, for frameworks
  that bring their own event types.

A class may implement both, for the same or different notifications.
Concrete mappers are discovered and registered by
``domainkit.infrastructure.event_mapper_registration``.

Example:
    class UserCreatedEventMapper(EventMapper[UserCreatedNotification]):
        async def create_events(
            self, notification: UserCreatedNotification
        ) -> Sequence[IntegrationEvent]:
            event = notification.domain_event
            return [WelcomeEmailRequested(event.email, notification.activation_token)]
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from .integration_event import IntegrationEvent

TNotification = TypeVar("TNotification", contravariant=True)


class EventMapper(ABC, Generic[TNotification]):
    """Maps a notification to strongly-typed integration events."""

    @abstractmethod
    async def create_events(self, notification: TNotification) -> Sequence[IntegrationEvent]:
        """
        Create integration events from a domain notification.

        Cancellation follows the awaiting task. Errors raised here
        propagate unchanged to the caller.

        Args:
            notification: The notification carrying the domain event and extra context

        Returns:
            The integration events to publish, possibly empty
        """


class FlexibleEventMapper(ABC, Generic[TNotification]):
    """Maps a notification to outbound events of any type."""

    @abstractmethod
    async def create_events(self, notification: TNotification) -> Sequence[object]:
        """
        Create outbound events from a domain notification.

        Args:
            notification: The notification carrying the domain event and extra context

        Returns:
            The events to publish, typically but not necessarily IntegrationEvent instances
        """


EVENT_MAPPER_INTERFACES: tuple[type, ...] = (EventMapper, FlexibleEventMapper)
