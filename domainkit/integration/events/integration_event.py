"""
Base class for Integration Events.

Integration Events are the contract a service publishes to other services.
They are usually built from a domain event by an event mapper, and may
carry less (or differently shaped) data than the domain event itself.

Example:
    @dataclass(frozen=True)
    class UserRegistered(IntegrationEvent):
        user_id: str
        email: str
        full_name: str
"""

from dataclasses import dataclass

from domainkit.domain.common.event import Event


@dataclass(frozen=True)
class IntegrationEvent(Event):
    """
    Base class for Integration Events.

    Subclasses should be decorated with @dataclass(frozen=True)
    and define their specific attributes.
    """
