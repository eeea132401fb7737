"""Paginated feed for swift_news."""

from .controller import FeedController
from .projection import ArticleRow, FeedView, LoadingRow, is_near_end, project, render_text
from .store import FeedStore

__all__ = [
    "FeedController",
    "FeedStore",
    "ArticleRow",
    "FeedView",
    "LoadingRow",
    "is_near_end",
    "project",
    "render_text",
]
