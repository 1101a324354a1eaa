"""
Base class and equality helpers for Entities.

Two entities are equal when they have the same concrete type and the same
id; their other attributes are ignored. The module-level helpers let classes
that do not inherit from ``Entity`` opt into the same rules.

Example:
    @dataclass(eq=False)
    class User(Entity[UserId]):
        id: UserId
        name: str

        def rename(self, name: str) -> None:
            self.name = name

Dataclass entities must be declared with ``eq=False``; otherwise the
dataclass replaces the identity-based ``__eq__`` with field-by-field equality.
"""

from abc import ABC
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import ArgumentError, ValidationError
from .value_object import ValueObject


def entity_equals(self: object, other: object) -> bool:
    """
    Compare two entities by identity.

    Returns:
        False if ``other`` is None or of a different concrete type,
        True if ``other`` is the same instance, otherwise whether
        both ids are equal
    """
    if self is None:
        raise ArgumentError("self", "Cannot compare a missing entity")
    if other is None:
        return False
    if other is self:
        return True
    if type(other) is not type(self):
        return False
    return bool(self.id == other.id)  # type: ignore[attr-defined]


def entity_hash(self: object) -> int:
    """Hash an entity by its id only."""
    return hash(self.id)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Identifier value object wrapping an integer, string or UUID.

    Each entity gets its own subclass; ids of different subclasses never
    compare equal even when they wrap the same value. Non-positive integers
    and empty strings fail validation.

    Example:
        @dataclass(frozen=True)
        class UserId(EntityId):
            pass

        user_id = UserId(42)
        cart_id = CartId(42)
        # These are different types, so they never compare equal
    """

    value: int | str | UUID

    def validate(self) -> None:
        if self.value is None:
            raise ArgumentError("value", f"{self.__class__.__name__} requires a value")
        if isinstance(self.value, int) and self.value <= 0:
            raise ValidationError(
                f"{self.__class__.__name__} must be positive", field="value", value=self.value
            )
        if isinstance(self.value, str) and not self.value:
            raise ValidationError(
                f"{self.__class__.__name__} cannot be empty", field="value", value=self.value
            )

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a new random UUID-based identifier."""
        return cls(uuid4())

    def to_primitive(self) -> int | str:
        """Convert to primitive for serialization."""
        if isinstance(self.value, int):
            return self.value
        return str(self.value)


IdType = TypeVar("IdType", bound=Hashable)


class Entity(ABC, Generic[IdType]):
    """
    Identity-compared base for domain objects.

    Subclasses declare an ``id`` of type ``IdType`` that stays fixed for the
    lifetime of the instance. Equality and hashing go through
    ``entity_equals`` and ``entity_hash``.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return entity_equals(self, other)

    def __hash__(self) -> int:
        return entity_hash(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
