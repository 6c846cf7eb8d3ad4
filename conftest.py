"""
Pytest configuration and fixtures for the Pagination Links Service tests.
"""

import pytest
from typing import AsyncGenerator, Generator
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core.config import Settings, PaginationSettings, get_settings
from app.core.pagination import PaginationState
from app.services.links import LinkService


# Test settings
@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings."""
    return Settings(
        app_name="Pagination Links Service Test",
        app_version="0.1.0",
        environment="test",
        log_level="DEBUG",
        log_format="console",
        pagination=PaginationSettings(max_distance=10),
    )


# Override settings dependency
@pytest.fixture
def override_settings(test_settings: Settings):
    """Override the settings dependency."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def link_service(test_settings: Settings) -> LinkService:
    """Provide a link service built on the test settings."""
    return LinkService(test_settings)


# Synchronous test client
@pytest.fixture
def client(override_settings) -> Generator[TestClient, None, None]:
    """Provide a synchronous test client."""
    with TestClient(app) as test_client:
        yield test_client


# Async test client
@pytest.fixture
async def async_client(override_settings) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# Sample data fixtures
@pytest.fixture
def middle_page_state() -> PaginationState:
    """Page 10 of 20, far enough from both ends to show every control."""
    return PaginationState(page_number=10, total_pages=20)


@pytest.fixture
def custom_edge_options():
    """Options with custom first/last labels."""
    return {"first": ["←"], "last": ["→"]}
