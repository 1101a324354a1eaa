"""Integration events and the mappers that produce them."""

from .event_mapper import EVENT_MAPPER_INTERFACES, EventMapper, FlexibleEventMapper
from .integration_event import IntegrationEvent

__all__ = [
    "EVENT_MAPPER_INTERFACES",
    "EventMapper",
    "FlexibleEventMapper",
    "IntegrationEvent",
]
