"""Screens for swift_news."""

from .navigation import GreetingScreen, Navigator
from .news_screen import Header, NewsScreen, Tab

__all__ = ["GreetingScreen", "Navigator", "Header", "NewsScreen", "Tab"]
