"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from domainkit.config import get_settings
from domainkit.infrastructure.container import Container
from tests.unit.infrastructure.sample_mappers import UserCreated, UserCreatedNotification


@pytest.fixture
def container() -> Container:
    """Create an empty container for each test."""
    return Container()


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings after each test."""
    yield
    get_settings.cache_clear()


@pytest.fixture
def user_created_notification() -> UserCreatedNotification:
    """A notification for a freshly registered user."""
    event = UserCreated(
        user_id="u1",
        email="alice@example.com",
        first_name="Alice",
        last_name="Liddell",
    )
    return UserCreatedNotification(event, activation_token="tok-123")
