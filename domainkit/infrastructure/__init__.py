"""
Infrastructure layer.

Service registries and the startup routine that registers event mappers in them.
"""

from .container import (
    CircularDependencyError,
    ConfigurationError,
    Container,
    DependencyNotFoundError,
    ServiceRegistry,
)
from .dependency_injector_registry import DependencyInjectorRegistry
from .event_mapper_registration import (
    MapperRegistration,
    add_event_mappers,
    add_event_mappers_from_module_of,
    add_event_mappers_from_modules,
    add_event_mappers_from_settings,
    find_event_mapper_registrations,
)

__all__ = [
    "CircularDependencyError",
    "ConfigurationError",
    "Container",
    "DependencyInjectorRegistry",
    "DependencyNotFoundError",
    "MapperRegistration",
    "ServiceRegistry",
    "add_event_mappers",
    "add_event_mappers_from_module_of",
    "add_event_mappers_from_modules",
    "add_event_mappers_from_settings",
    "find_event_mapper_registrations",
]
