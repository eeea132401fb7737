"""swift_news - MCP Server

This module builds the MCP server that hosts the news screen, with
multi-transport support (STDIO, SSE, and Streamable HTTP).
"""

import asyncio
import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

import click
import httpx
from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from swift_news.config import ServerConfig, get_config
from swift_news.logging_config import setup_logging, logger
from swift_news.screen.navigation import Navigator
from swift_news.screen.news_screen import NewsScreen
from swift_news.services.headlines import HeadlinesClient, create_http_client
from swift_news.services.launcher import UrlOpener, open_in_browser
from swift_news.tools.news_tools import create_news_tools


def create_mcp_server(
    config: Optional[ServerConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    open_url: UrlOpener = open_in_browser,
) -> FastMCP:
    """Create and configure the MCP server.

    Args:
        config: Optional server configuration
        http_client: Shared HTTP client; one is created (and closed on
            shutdown) when not given
        open_url: How article links are opened

    Returns:
        Configured FastMCP server instance
    """
    if config is None:
        config = get_config()

    setup_logging(config)
    logger.info(f"Server config: {config.name} at log level {config.log_level}")
    if not config.api_key:
        logger.warning("GNEWS_API_KEY is not set; headline requests will be rejected")

    owns_client = http_client is None
    client = http_client or create_http_client(config)

    screen = NewsScreen(HeadlinesClient(client, config), config, open_url=open_url)
    navigator = Navigator()

    @asynccontextmanager
    async def lifespan(_server: FastMCP):
        try:
            yield {}
        finally:
            screen.close()
            if owns_client:
                await client.aclose()

    # Configure DNS rebinding protection (disabled by default for development)
    dns_protection = os.getenv("MCP_DNS_REBINDING_PROTECTION", "false").lower() == "true"
    allowed_hosts_env = os.getenv("MCP_ALLOWED_HOSTS", "")
    allowed_hosts = [h.strip() for h in allowed_hosts_env.split(",") if h.strip()] if allowed_hosts_env else []

    logger.info(f"DNS rebinding protection: {'enabled' if dns_protection else 'disabled'}")

    mcp_server = FastMCP(
        config.name or "swift_news",
        lifespan=lifespan,
        transport_security=TransportSecuritySettings(
            enable_dns_rebinding_protection=dns_protection,
            allowed_hosts=allowed_hosts
        )
    )

    register_tools(mcp_server, screen, navigator, client)

    logger.info("Server initialization complete")
    return mcp_server


def register_tools(
    mcp_server: FastMCP,
    screen: NewsScreen,
    navigator: Navigator,
    http_client: Optional[httpx.AsyncClient] = None,
) -> None:
    """Register the news tools with the server."""
    for tool_func in create_news_tools(screen, navigator, http_client):
        tool_name = tool_func.__name__

        mcp_server.tool(
            name=tool_name
        )(tool_func)

        logger.info(f"Registered news tool: {tool_name}")

    logger.info(f"Server '{mcp_server.name}' initialized")


@click.command()
@click.option(
    "--port",
    default=3001,
    help="Port to listen on for SSE or Streamable HTTP transport"
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (use 0.0.0.0 for Docker)"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse, or streamable-http)"
)
def main(port: int, host: str, transport: str) -> int:
    """Run the swift_news server with specified transport."""
    server = create_mcp_server()

    async def run_server():
        if transport == "stdio":
            logger.info("Starting server with STDIO transport")
            await server.run_stdio_async()
        elif transport == "sse":
            logger.info(f"Starting server with SSE transport on {host}:{port}")
            server.settings.host = host
            server.settings.port = port
            await server.run_sse_async()
        elif transport == "streamable-http":
            logger.info(f"Starting server with Streamable HTTP transport on {host}:{port}")
            server.settings.host = host
            server.settings.port = port
            server.settings.streamable_http_path = "/mcp"
            await server.run_streamable_http_async()
        else:
            raise ValueError(f"Unknown transport: {transport}")

    try:
        asyncio.run(run_server())
        return 0
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        return 1


def main_stdio() -> int:
    """Entry point for STDIO transport (convenience wrapper)."""
    return main.callback(port=3001, host="127.0.0.1", transport="stdio")


def main_http() -> int:
    """Entry point for Streamable HTTP transport (convenience wrapper)."""
    return main.callback(port=3001, host="127.0.0.1", transport="streamable-http")


if __name__ == "__main__":
    sys.exit(main())
