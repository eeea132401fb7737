"""MCP tools for swift_news."""

from .news_tools import create_news_tools

__all__ = ["create_news_tools"]
