"""
domainkit - Domain-Driven Design building blocks.

Base classes for entities, aggregate roots, value objects and events,
the equality helpers they are built on, and event mapping from domain
event notifications to integration events.
"""

from domainkit.domain.common import (
    AggregateRoot,
    ArgumentError,
    DomainError,
    DomainEvent,
    DomainEventNotification,
    Entity,
    EntityId,
    Event,
    HasEqualityComponents,
    ValidationError,
    ValueObject,
    entity_equals,
    entity_hash,
    value_object_equals,
    value_object_hash,
)
from domainkit.integration.events import EventMapper, FlexibleEventMapper, IntegrationEvent

__version__ = "0.1.0"

__all__ = [
    "AggregateRoot",
    "ArgumentError",
    "DomainError",
    "DomainEvent",
    "DomainEventNotification",
    "Entity",
    "EntityId",
    "Event",
    "EventMapper",
    "FlexibleEventMapper",
    "HasEqualityComponents",
    "IntegrationEvent",
    "ValidationError",
    "ValueObject",
    "entity_equals",
    "entity_hash",
    "value_object_equals",
    "value_object_hash",
]
