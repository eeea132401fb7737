"""Fixtures for MCP round-trip tests.

The server runs in-process and talks to a real MCP client session over
memory streams; the headlines API is answered by an httpx mock transport.
"""

import json
from typing import Any, Dict, List

import httpx
import pytest
from mcp import types
from mcp.shared.memory import create_connected_server_and_client_session

from swift_news.config import ServerConfig
from swift_news.server.app import create_mcp_server

from tests.helpers import paged_handler


@pytest.fixture
def api_calls() -> List[httpx.Request]:
    return []


@pytest.fixture
def opened_urls() -> List[str]:
    return []


@pytest.fixture
async def mcp_session(api_calls, opened_urls):
    """Connected client session against a freshly built server."""
    config = ServerConfig(api_key="test-key", api_base_url="https://gnews.test/api/v4")
    handler = paged_handler({1: 10, 2: 5}, api_calls)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        server = create_mcp_server(config, http_client=http, open_url=opened_urls.append)
        async with create_connected_server_and_client_session(server._mcp_server) as session:
            yield session


def extract_text_content(result: types.CallToolResult) -> str:
    for item in result.content:
        if isinstance(item, types.TextContent):
            return item.text
    raise AssertionError(f"No text content in {result.content}")


def tool_json(result: types.CallToolResult) -> Dict[str, Any]:
    assert not result.isError, extract_text_content(result)
    return json.loads(extract_text_content(result))
