"""Tests for the dependency injection container."""

import pytest

from domainkit.infrastructure.container import (
    CircularDependencyError,
    Container,
    DependencyNotFoundError,
)
from domainkit.integration.events import EventMapper
from tests.unit.infrastructure.sample_mappers import (
    PasswordResetMapper,
    UserCreatedEventMapper,
    UserCreatedNotification,
)


class Repository:
    pass


class InMemoryRepository(Repository):
    pass


class Service:
    def __init__(self, repository: Repository, retries: int = 3) -> None:
        self.repository = repository
        self.retries = retries


class OptionalService:
    def __init__(self, repository: Repository | None) -> None:
        self.repository = repository


class Chicken:
    def __init__(self, egg: "Egg") -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken


class TestRegistration:
    def test_transient_creates_new_instance_each_time(self, container: Container) -> None:
        container.register(Repository, InMemoryRepository)
        first = container.resolve(Repository)
        assert isinstance(first, InMemoryRepository)
        assert container.resolve(Repository) is not first

    def test_singleton_returns_same_instance(self, container: Container) -> None:
        container.register(Repository, InMemoryRepository, singleton=True)
        assert container.resolve(Repository) is container.resolve(Repository)

    def test_register_without_implementation(self, container: Container) -> None:
        container.register(InMemoryRepository)
        assert isinstance(container.resolve(InMemoryRepository), InMemoryRepository)

    def test_register_factory(self, container: Container) -> None:
        repository = InMemoryRepository()
        container.register_factory(Repository, lambda c: repository)
        assert container.resolve(Repository) is repository

    def test_register_instance(self, container: Container) -> None:
        repository = InMemoryRepository()
        container.register_instance(Repository, repository)
        assert container.resolve(Repository) is repository

    def test_last_registration_wins(self, container: Container) -> None:
        container.register(Repository, Repository, singleton=True)
        container.resolve(Repository)
        container.register(Repository, InMemoryRepository)
        assert isinstance(container.resolve(Repository), InMemoryRepository)
        assert container.registrations() == {Repository: InMemoryRepository}

    def test_generic_interface_keys(self, container: Container) -> None:
        container.register(EventMapper[UserCreatedNotification], UserCreatedEventMapper)
        mapper = container.resolve(EventMapper[UserCreatedNotification])
        assert isinstance(mapper, UserCreatedEventMapper)
        assert container.has(EventMapper[UserCreatedNotification])
        assert not container.has(EventMapper[PasswordResetMapper])


class TestResolution:
    def test_missing_registration_raises(self, container: Container) -> None:
        with pytest.raises(DependencyNotFoundError, match="No registration found for Repository"):
            container.resolve(Repository)

    def test_missing_generic_registration_names_interface(self, container: Container) -> None:
        with pytest.raises(DependencyNotFoundError, match="EventMapper"):
            container.resolve(EventMapper[UserCreatedNotification])

    def test_default_when_missing(self, container: Container) -> None:
        assert container.resolve(Repository, None) is None

    def test_auto_wires_constructor(self, container: Container) -> None:
        container.register(Repository, InMemoryRepository)
        container.register(Service)
        service = container.resolve(Service)
        assert isinstance(service.repository, InMemoryRepository)
        assert service.retries == 3

    def test_optional_dependency_defaults_to_none(self, container: Container) -> None:
        container.register(OptionalService)
        assert container.resolve(OptionalService).repository is None

    def test_circular_dependency(self, container: Container) -> None:
        container.register(Chicken)
        container.register(Egg)
        with pytest.raises(CircularDependencyError) as exc_info:
            container.resolve(Chicken)
        assert exc_info.value.chain == [Chicken, Egg, Chicken]

    def test_optional_dependency_resolves_wrapped_type(self, container: Container) -> None:
        container.register(Repository, InMemoryRepository)
        container.register(OptionalService)
        assert isinstance(container.resolve(OptionalService).repository, InMemoryRepository)

    def test_failed_resolution_leaves_container_usable(self, container: Container) -> None:
        container.register(Service)
        with pytest.raises(DependencyNotFoundError):
            container.resolve(Service)
        container.register(Repository, InMemoryRepository)
        assert isinstance(container.resolve(Service).repository, InMemoryRepository)

