"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
from fastapi.testclient import TestClient

from bandstand.players import PlayerStore


@pytest.fixture
def store() -> PlayerStore:
    """A player store built from the seed roster."""
    return PlayerStore.from_seed()


@pytest.fixture
def mock_info(store: PlayerStore) -> MagicMock:
    """Create a mock GraphQL info object with the store in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture
def client() -> TestClient:
    """HTTP client for a freshly created application."""
    from bandstand.api.app import create_app

    return TestClient(create_app())


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
