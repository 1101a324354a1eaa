"""
Base class for Aggregate Roots.

An aggregate root marks the consistency boundary of a cluster of entities.
It compares like any other entity and additionally buffers the domain
events raised while its state changes, until the caller collects them.

Example:
    @dataclass(eq=False)
    class ShoppingCart(AggregateRoot[CartId]):
        id: CartId
        items: list[CartItem] = field(default_factory=list)

        def add_item(self, item: CartItem) -> None:
            self.items.append(item)
            self._record_event(ItemAddedToCart(cart_id=self.id, sku=item.sku))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Entity that owns a consistency boundary and records domain events.

    Equality is the same as for any entity: concrete type and id.
    Recorded events never take part in it.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Buffer ``event`` until the next ``collect_events`` call."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """Return the buffered events in recording order and empty the buffer."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """A copy of the buffered events; the buffer is left as is."""
        return self._events.copy()
