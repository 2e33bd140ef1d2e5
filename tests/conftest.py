"""Pytest configuration for the Story Spoiler suite.

Provides:
1. Marker registration (unit, integration, smoke)
2. Settings built for mocked and in-process runs (no real credentials)
3. An in-process fake of the Story Spoiler API behind Starlette's TestClient
"""

from collections.abc import Iterator

import pytest
import structlog
from fastapi.testclient import TestClient

from storyspoiler.core.config import Settings
from storyspoiler.core.enums import Environment
from tests.fakes.story_spoiler_app import (
    FAKE_PASSWORD,
    FAKE_USERNAME,
    create_story_spoiler_app,
)
from tests.utils.utils import FAKE_BASE_URL, MOCK_BASE_URL


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no HTTP traffic")
    config.addinivalue_line(
        "markers", "integration: HTTP clients against mocks or the in-process fake API"
    )
    config.addinivalue_line("markers", "smoke: End-to-end tests against the live API")


@pytest.fixture
def mock_settings() -> Settings:
    """Settings pointing at the pytest-httpx mocked base URL."""
    return Settings(
        environment=Environment.TESTING,
        api_base_url=MOCK_BASE_URL,
        username=FAKE_USERNAME,
        password=FAKE_PASSWORD,
        _env_file=None,
    )


@pytest.fixture
def fake_settings() -> Settings:
    """Settings pointing at the in-process fake API."""
    return Settings(
        environment=Environment.TESTING,
        api_base_url=FAKE_BASE_URL,
        username=FAKE_USERNAME,
        password=FAKE_PASSWORD,
        _env_file=None,
    )


@pytest.fixture
def fake_api_client() -> Iterator[TestClient]:
    """TestClient (an httpx.Client) wired to a fresh in-memory fake API."""
    with TestClient(create_story_spoiler_app()) as client:
        yield client


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test that configured logging."""
    yield
    structlog.reset_defaults()
