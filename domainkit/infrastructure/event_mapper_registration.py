"""
Startup registration of event mappers.

Scans modules for concrete classes implementing ``EventMapper[N]`` or
``FlexibleEventMapper[N]`` and registers every ``(capability, class)`` pair
in a service registry with a transient lifetime, so each resolution
builds a new mapper.

Usage:
    container = Container()

    # Scan the calling module
    add_event_mappers(container)

    # Scan specific modules or packages (packages include their submodules)
    add_event_mappers(container, "myapp.integration.mappers", other_module)

    # Scan the module that defines a class
    add_event_mappers_from_module_of(container, UserCreatedEventMapper)

    # Scan the modules listed in DOMAINKIT_EVENT_MAPPER_MODULES
    add_event_mappers_from_settings(container)

    mapper = container.resolve(EventMapper[UserCreatedNotification])
"""

import importlib
import inspect
import pkgutil
import sys
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import ModuleType
from typing import Any, TypeVar, get_args, get_origin

import structlog

from domainkit.config import Settings, get_settings
from domainkit.domain.common.exceptions import ArgumentError
from domainkit.integration.events.event_mapper import EVENT_MAPPER_INTERFACES

from .container import ConfigurationError, ServiceRegistry, type_name

logger = structlog.get_logger(__name__)

RegistryT = TypeVar("RegistryT", bound=ServiceRegistry)
ModuleRef = ModuleType | str


@dataclass(frozen=True)
class MapperRegistration:
    """One capability instantiation and the class implementing it."""

    interface: Any
    implementation: type

    def __str__(self) -> str:
        return f"{type_name(self.interface)} -> {self.implementation.__qualname__}"


def _is_concrete_class(candidate: object) -> bool:
    return (
        inspect.isclass(candidate)
        and not inspect.isabstract(candidate)
        and candidate not in EVENT_MAPPER_INTERFACES
        and not getattr(candidate, "_is_protocol", False)
    )


def _mapper_interfaces(cls: type, substitutions: Mapping[Any, Any]) -> list[Any]:
    """
    Collect the mapper capabilities ``cls`` implements.

    Walks the parametrised bases of the class hierarchy, substituting type
    variables bound by intermediate generic bases along the way. Capabilities
    whose notification type is still a type variable are not concrete and
    are left out.
    """
    found: list[Any] = []
    for base in cls.__dict__.get("__orig_bases__", cls.__bases__):
        origin = get_origin(base) or base
        args = tuple(
            substitutions.get(arg, arg) if isinstance(arg, TypeVar) else arg
            for arg in get_args(base)
        )
        if origin in EVENT_MAPPER_INTERFACES:
            if len(args) == 1 and not isinstance(args[0], TypeVar):
                found.append(origin[args[0]])
        elif isinstance(origin, type) and origin is not object:
            parameters = getattr(origin, "__parameters__", ())
            found.extend(_mapper_interfaces(origin, dict(zip(parameters, args, strict=False))))
    return found


def find_event_mapper_registrations(candidates: Iterable[object]) -> list[MapperRegistration]:
    """
    Discover event mapper registrations among candidate classes.

    Abstract classes, protocols and the capability interfaces themselves
    are skipped. A class implementing several capabilities yields one
    registration per capability.
    """
    registrations: list[MapperRegistration] = []
    for candidate in candidates:
        if not _is_concrete_class(candidate):
            continue
        for interface in dict.fromkeys(_mapper_interfaces(candidate, {})):
            registrations.append(MapperRegistration(interface, candidate))
    return registrations


def _defined_classes(module: ModuleType) -> list[type]:
    return [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__
    ]


def iter_module_classes(module: ModuleType) -> Iterator[type]:
    """
    Yield the classes defined in a module.

    Classes merely imported into the module are not yielded. For a package,
    every submodule is imported and its classes are yielded as well.
    """
    yield from _defined_classes(module)
    if hasattr(module, "__path__"):
        for info in pkgutil.walk_packages(module.__path__, prefix=f"{module.__name__}."):
            yield from _defined_classes(importlib.import_module(info.name))


def _import_module(module: ModuleRef) -> ModuleType:
    if isinstance(module, ModuleType):
        return module
    try:
        return importlib.import_module(module)
    except ImportError as err:
        raise ConfigurationError(f"Cannot import module '{module}' to scan for event mappers") from err


def _caller_module(depth: int) -> ModuleType:
    module_name = sys._getframe(depth).f_globals.get("__name__")
    module = sys.modules.get(module_name) if module_name else None
    if module is None:
        raise ConfigurationError("Cannot determine the calling module to scan for event mappers")
    return module


def add_event_mappers_from_modules(
    registry: RegistryT, modules: Iterable[ModuleRef]
) -> RegistryT:
    """
    Register the event mappers found in the given modules.

    Args:
        registry: The registry to add transient registrations to
        modules: Module objects or dotted module names; at least one is required

    Returns:
        The registry, for chaining

    Raises:
        ArgumentError: If ``modules`` or one of its entries is None
        ConfigurationError: If no modules are given or one cannot be imported
    """
    if modules is None:
        raise ArgumentError("modules")
    if isinstance(modules, str | ModuleType):
        modules = [modules]
    modules = list(modules)
    if any(module is None for module in modules):
        raise ArgumentError("modules", "Module list cannot contain None")
    resolved = [_import_module(module) for module in modules]
    if not resolved:
        raise ConfigurationError("At least one module must be provided to scan for event mappers")

    for module in resolved:
        registrations = find_event_mapper_registrations(iter_module_classes(module))
        for registration in registrations:
            registry.register(registration.interface, registration.implementation)
            logger.debug("event_mappers.registered", registration=str(registration))
        logger.info(
            "event_mappers.module_scanned",
            module=module.__name__,
            registrations=len(registrations),
        )
    return registry


def add_event_mappers(registry: RegistryT, *modules: ModuleRef) -> RegistryT:
    """
    Register the event mappers found in ``modules``, or in the calling module.

    Args:
        registry: The registry to add transient registrations to
        *modules: Module objects or dotted module names to scan

    Returns:
        The registry, for chaining
    """
    if not modules:
        return add_event_mappers_from_modules(registry, [_caller_module(depth=2)])
    return add_event_mappers_from_modules(registry, modules)


def add_event_mappers_from_module_of(registry: RegistryT, marker: type) -> RegistryT:
    """Register the event mappers found in the module that defines ``marker``."""
    return add_event_mappers_from_modules(registry, [marker.__module__])


def add_event_mappers_from_settings(
    registry: RegistryT, settings: Settings | None = None
) -> RegistryT:
    """
    Register the event mappers found in the configured modules.

    Raises:
        ConfigurationError: If ``EVENT_MAPPER_MODULES`` is empty
    """
    settings = settings or get_settings()
    return add_event_mappers_from_modules(registry, settings.EVENT_MAPPER_MODULES)
