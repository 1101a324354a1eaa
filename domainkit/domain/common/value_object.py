"""
Base class and equality helpers for Value Objects.

A value object has no identity of its own: two instances of the same
concrete type are equal when their equality components are pairwise equal,
in order.

Example:
    @dataclass(frozen=True, eq=False)
    class Address(ValueObject):
        street: str
        city: str

        def validate(self) -> None:
            if not self.street:
                raise ValidationError("Street cannot be empty", field="street")

Declaring the dataclass with ``eq=False`` keeps the component-based equality
defined here. A plain ``@dataclass(frozen=True)`` subclass gets the
dataclass-generated structural equality instead, which compares the same
fields in the same order.
"""

import dataclasses
from collections.abc import Callable, Iterable
from functools import reduce
from operator import xor
from typing import Protocol, runtime_checkable

from .exceptions import ArgumentError

ComponentsAccessor = Callable[[object], Iterable[object | None]]


@runtime_checkable
class HasEqualityComponents(Protocol):
    """Anything that can list the components its equality is based on."""

    def get_equality_components(self) -> Iterable[object | None]: ...


def value_object_equals(
    self: object,
    other: object,
    get_components: ComponentsAccessor,
) -> bool:
    """
    Compare two value objects by their ordered equality components.

    ``get_components`` is applied to ``self``. When ``other`` exposes its own
    ``get_equality_components`` that accessor is used for ``other``; otherwise
    ``get_components`` is applied to ``other`` as well.

    Args:
        self: The value object on the left-hand side
        other: The object to compare with
        get_components: Returns the ordered equality components of an instance

    Returns:
        True if both sides are the same concrete type and their component
        sequences have the same length and are pairwise equal
    """
    if self is None:
        raise ArgumentError("self", "Cannot compare a missing value object")
    if other is None:
        return False
    if other is self:
        return True
    if type(other) is not type(self):
        return False

    self_components = list(get_components(self))
    if isinstance(other, HasEqualityComponents):
        other_components = list(other.get_equality_components())
    else:
        other_components = list(get_components(other))

    return self_components == other_components


def value_object_hash(self: object, get_components: ComponentsAccessor) -> int:
    """
    Hash a value object by XOR-folding the hashes of its equality components.

    ``None`` components contribute 0. An object with no components hashes to 0.
    """
    return reduce(
        xor,
        (0 if component is None else hash(component) for component in get_components(self)),
        0,
    )


def _attribute_items(value: object) -> list[tuple[str, object | None]]:
    if dataclasses.is_dataclass(value):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value) if f.compare]
    return list(vars(value).items())


def default_equality_components(value: object) -> tuple[object | None, ...]:
    """Dataclass fields in declaration order, or the instance ``__dict__``."""
    return tuple(v for _, v in _attribute_items(value))


def _components_of(value: object) -> Iterable[object | None]:
    if isinstance(value, HasEqualityComponents):
        return value.get_equality_components()
    return default_equality_components(value)


class ValueObject:
    """
    Base for objects compared by their ordered equality components.

    Dataclass subclasses should be frozen; ``validate`` runs from
    ``__post_init__``. Plain subclasses call ``validate`` themselves.

    Override ``get_equality_components`` to choose which attributes take part
    in equality. The default uses every dataclass field in declaration order.
    """

    __slots__ = ()

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check the invariants of this value object.

        Raises:
            ValidationError: If the current state is invalid
        """

    def get_equality_components(self) -> Iterable[object | None]:
        return default_equality_components(self)

    def __eq__(self, other: object) -> bool:
        return value_object_equals(self, other, _components_of)

    def __hash__(self) -> int:
        return value_object_hash(self, _components_of)

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in _attribute_items(self))
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Override in subclasses if needed. A value object with a single
        attribute returns that value, otherwise a dict of attribute names
        to values. Dataclasses contribute the same fields as equality does.
        """
        items = _attribute_items(self)
        if len(items) == 1:
            return items[0][1]
        return dict(items)
