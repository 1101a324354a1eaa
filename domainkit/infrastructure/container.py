"""
In-process service registry.

Maps interface keys to implementations and builds instances on demand,
filling constructor parameters from other registrations. Keys can be plain
classes or parametrised generics such as ``EventMapper[UserCreatedNotification]``,
which is how event mappers are looked up.

Usage:
    container = Container()
    container.register(EventMapper[UserCreatedNotification], UserCreatedEventMapper)
    container.register_factory(Clock, lambda c: SystemClock(), singleton=True)

    mapper = container.resolve(EventMapper[UserCreatedNotification])
"""

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, Union, get_args, get_origin, get_type_hints, overload

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


def type_name(interface: object) -> str:
    """Readable name for a class or a parametrised generic."""
    if isinstance(interface, type):
        return interface.__name__
    return repr(interface).replace(f"{getattr(interface, '__module__', '')}.", "")


class DependencyNotFoundError(Exception):
    """Raised when nothing is registered for a requested key."""

    def __init__(self, dependency_type: Any) -> None:
        self.dependency_type = dependency_type
        super().__init__(f"No registration found for {type_name(dependency_type)}")


class CircularDependencyError(Exception):
    """Raised when building an instance needs that same instance."""

    def __init__(self, chain: list[Any]) -> None:
        self.chain = chain
        names = " -> ".join(type_name(t) for t in chain)
        super().__init__(f"Circular dependency detected: {names}")


class ConfigurationError(Exception):
    """Raised when registrations cannot be set up as requested."""


class ServiceRegistry(Protocol):
    """The registration surface used to wire implementations at startup."""

    def register(
        self,
        interface: Any,
        implementation: type | None = None,
        *,
        singleton: bool = False,
    ) -> None: ...


@dataclass(frozen=True, slots=True)
class _Registration:
    implementation: type | None
    factory: Callable[["Container"], object] | None
    singleton: bool


def _optional_target(annotation: Any) -> Any:
    """The wrapped type of ``X | None``, or ``_MISSING`` for anything else."""
    if get_origin(annotation) not in (Union, types.UnionType):
        return _MISSING
    args = get_args(annotation)
    if type(None) not in args:
        return _MISSING
    rest = [arg for arg in args if arg is not type(None)]
    return rest[0] if len(rest) == 1 else annotation


class Container:
    """
    Registry of implementations keyed by interface.

    Registrations are transient unless ``singleton=True`` is given, in which
    case the first resolved instance is cached. Registering a key again
    replaces the earlier registration and drops any cached instance, so the
    last registration wins.
    """

    def __init__(self) -> None:
        self._registrations: dict[Any, _Registration] = {}
        self._singletons: dict[Any, object] = {}
        self._resolving: list[Any] = []

    def _store(self, interface: Any, registration: _Registration) -> None:
        if interface in self._registrations:
            logger.debug("container.registration_replaced", interface=type_name(interface))
        self._registrations[interface] = registration
        self._singletons.pop(interface, None)

    def register(
        self,
        interface: Any,
        implementation: type | None = None,
        *,
        singleton: bool = False,
    ) -> None:
        """
        Register ``implementation`` under ``interface``.

        Args:
            interface: The key callers resolve
            implementation: The class to build; defaults to ``interface`` itself
            singleton: Cache the first built instance
        """
        self._store(interface, _Registration(implementation or interface, None, singleton))

    def register_factory(
        self,
        interface: Any,
        factory: Callable[["Container"], object],
        *,
        singleton: bool = False,
    ) -> None:
        """Register a callable that receives the container and returns an instance."""
        self._store(interface, _Registration(None, factory, singleton))

    def register_instance(self, interface: Any, instance: object) -> None:
        """Register an already built instance."""
        self._store(interface, _Registration(None, None, True))
        self._singletons[interface] = instance

    @overload
    def resolve(self, interface: type[T]) -> T: ...

    @overload
    def resolve(self, interface: type[T], default: T) -> T: ...

    @overload
    def resolve(self, interface: Any, default: Any = ...) -> Any: ...

    def resolve(self, interface: Any, default: object = _MISSING) -> Any:
        """
        Return an instance registered under ``interface``.

        Raises:
            DependencyNotFoundError: If nothing is registered and no default is given
            CircularDependencyError: If building the instance requires itself
        """
        if interface in self._resolving:
            raise CircularDependencyError([*self._resolving, interface])
        if interface in self._singletons:
            return self._singletons[interface]

        registration = self._registrations.get(interface)
        if registration is None:
            if default is not _MISSING:
                return default
            raise DependencyNotFoundError(interface)

        self._resolving.append(interface)
        try:
            instance = self._build(registration)
        finally:
            self._resolving.pop()

        if registration.singleton:
            self._singletons[interface] = instance
        return instance

    def _build(self, registration: _Registration) -> object:
        if registration.factory is not None:
            return registration.factory(self)
        if registration.implementation is None:
            raise ConfigurationError("Registration has neither a factory nor an implementation")
        return self._auto_wire(registration.implementation)

    def _auto_wire(self, cls: type[T]) -> T:
        """
        Build ``cls``, resolving annotated constructor parameters.

        Unannotated parameters and ``*args``/``**kwargs`` are left to their
        defaults. An optional parameter falls back to its default, or None,
        when nothing is registered for it.
        """
        try:
            hints = get_type_hints(cls.__init__)
        except (NameError, TypeError):
            hints = {}

        kwargs: dict[str, object] = {}
        for name, param in inspect.signature(cls.__init__).parameters.items():
            if name == "self" or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            annotation = hints.get(name, param.annotation)
            if annotation is inspect.Parameter.empty:
                continue
            has_default = param.default is not inspect.Parameter.empty
            target = _optional_target(annotation)
            if target is not _MISSING:
                kwargs[name] = self.resolve(target, param.default if has_default else None)
            elif has_default:
                kwargs[name] = self.resolve(annotation, param.default)
            else:
                kwargs[name] = self.resolve(annotation)
        return cls(**kwargs)

    def has(self, interface: Any) -> bool:
        """Whether anything is registered under ``interface``."""
        return interface in self._registrations

    def registrations(self) -> dict[Any, type | None]:
        """Map every registered interface to its implementation class, if any."""
        return {
            interface: registration.implementation
            for interface, registration in self._registrations.items()
        }
