"""MCP server package initialization"""

from swift_news.server.app import create_mcp_server, main

__all__ = ["create_mcp_server", "main"]
