"""Data models for swift_news."""

from .schemas import Article, FeedState, FeedStatus, HeadlinesPage, Source

__all__ = ["Article", "FeedState", "FeedStatus", "HeadlinesPage", "Source"]
