"""
Service registry backed by ``dependency_injector``.

Lets applications that wire their services with a ``dependency_injector``
container receive event mapper registrations the same way the built-in
``Container`` does. Each interface becomes a named provider:

    di = containers.DynamicContainer()
    registry = DependencyInjectorRegistry(di)
    add_event_mappers(registry, "myapp.mappers")

    di.event_mapper__user_created_notification()  # new UserCreatedEventMapper
"""

import re
from typing import Any, get_args, get_origin

import structlog
from dependency_injector import containers, providers

from .container import DependencyNotFoundError, type_name

logger = structlog.get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def provider_name(interface: Any) -> str:
    """
    Derive a provider attribute name from an interface.

    ``EventMapper[UserCreatedNotification]`` becomes
    ``event_mapper__user_created_notification``.
    """
    origin = get_origin(interface)
    if origin is None:
        return _snake(type_name(interface))
    parts = [_snake(type_name(origin))]
    parts.extend(_snake(type_name(arg)) for arg in get_args(interface))
    return "__".join(parts)


class DependencyInjectorRegistry:
    """
    Adapter writing registrations into a ``DynamicContainer``.

    Transient registrations become ``providers.Factory`` and singletons
    become ``providers.Singleton``. A later registration for the same
    interface overrides the earlier provider.
    """

    def __init__(self, container: containers.DynamicContainer | None = None) -> None:
        self.container = container if container is not None else containers.DynamicContainer()
        self._names: dict[Any, str] = {}

    def register(
        self,
        interface: Any,
        implementation: type | None = None,
        *,
        singleton: bool = False,
    ) -> None:
        impl = implementation or interface
        name = provider_name(interface)
        provider_cls = providers.Singleton if singleton else providers.Factory
        self.container.set_provider(name, provider_cls(impl))
        self._names[interface] = name
        logger.debug(
            "dependency_injector_registry.registered",
            interface=type_name(interface),
            provider=name,
            singleton=singleton,
        )

    def has(self, interface: Any) -> bool:
        return interface in self._names

    def resolve(self, interface: Any) -> Any:
        """Call the provider registered for ``interface``."""
        name = self._names.get(interface)
        if name is None:
            raise DependencyNotFoundError(interface)
        return getattr(self.container, name)()
