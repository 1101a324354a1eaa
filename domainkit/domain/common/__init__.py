"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their equality components
- Entity: Objects with identity and lifecycle
- AggregateRoot: Consistency boundaries with domain events
- DomainEvent: Notifications of significant domain occurrences
- DomainEventNotification: A domain event plus mapping-only context

and the equality helpers the base classes are built on, for classes
that cannot inherit from them.
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent, DomainEventNotification, HasDomainEvent
from .entity import Entity, EntityId, entity_equals, entity_hash
from .event import Event
from .exceptions import ArgumentError, DomainError, ValidationError
from .value_object import (
    HasEqualityComponents,
    ValueObject,
    value_object_equals,
    value_object_hash,
)

__all__ = [
    "AggregateRoot",
    "ArgumentError",
    "DomainError",
    "DomainEvent",
    "DomainEventNotification",
    "Entity",
    "EntityId",
    "Event",
    "HasDomainEvent",
    "HasEqualityComponents",
    "ValidationError",
    "ValueObject",
    "entity_equals",
    "entity_hash",
    "value_object_equals",
    "value_object_hash",
]
