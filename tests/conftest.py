"""Pytest configuration and fixtures."""

import pytest

from user_registry.models.user import User
from user_registry.services.user_manager import UserManager


@pytest.fixture
def amir() -> User:
    """Admin user."""
    return User(name="Amir", email="amir@example.com", role="Admin")


@pytest.fixture
def mikhail() -> User:
    """Regular user."""
    return User(name="Mikhail", email="mikhail@example.com", role="User")


@pytest.fixture
def manager() -> UserManager:
    """Empty manager."""
    return UserManager()


@pytest.fixture
def populated_manager(amir: User, mikhail: User) -> UserManager:
    """Manager holding Amir then Mikhail."""
    manager = UserManager()
    manager.add_user(amir)
    manager.add_user(mikhail)
    return manager
