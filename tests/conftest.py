"""Shared fixtures for swift_news tests."""

import pytest

from swift_news.config import ServerConfig


@pytest.fixture
def anyio_backend():
    # Feed controllers schedule fetches as asyncio tasks
    return "asyncio"


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(api_key="test-key", api_base_url="https://gnews.test/api/v4")
