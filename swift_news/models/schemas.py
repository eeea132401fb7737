"""Data models for swift_news.

This module defines the articles received from the headlines API and the
per-category feed state built from them.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


def _optional_str(data: Dict[str, Any], key: str, label: Optional[str] = None) -> Optional[str]:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{label or key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Source:
    """News outlet an article was published by."""

    name: str
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Source":
        return cls(name=str(data.get("name") or ""), url=_optional_str(data, "url", "source.url"))


@dataclass(frozen=True)
class Article:
    """A single headline as returned by the API."""

    title: str
    url: str
    description: Optional[str] = None
    image: Optional[str] = None
    source: Optional[Source] = None
    published_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Article":
        """Build an Article from one entry of the `articles` array.

        Raises:
            ValueError: If the entry is not an object, has no url, or has a
                non-string text field
        """
        if not isinstance(data, dict):
            raise ValueError(f"article entry must be an object, got {type(data).__name__}")

        url = data.get("url")
        if not isinstance(url, str) or not url.strip():
            raise ValueError("article entry is missing 'url'")

        source_data = data.get("source")
        source = Source.from_dict(source_data) if isinstance(source_data, dict) else None

        return cls(
            title=str(data.get("title") or ""),
            url=url.strip(),
            description=_optional_str(data, "description"),
            image=_optional_str(data, "image"),
            source=source,
            published_at=_optional_str(data, "publishedAt"),
        )


@dataclass(frozen=True)
class HeadlinesPage:
    """One decoded response from the top-headlines endpoint."""

    total_articles: int
    articles: Tuple[Article, ...]

    @classmethod
    def from_dict(cls, data: Any) -> "HeadlinesPage":
        """Decode a response body.

        Raises:
            ValueError: If the payload does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError("response body must be a JSON object")

        raw_articles = data.get("articles")
        if not isinstance(raw_articles, list):
            raise ValueError("response is missing the 'articles' array")

        try:
            total = int(data.get("totalArticles", len(raw_articles)))
        except (TypeError, ValueError) as e:
            raise ValueError("'totalArticles' is not an integer") from e

        return cls(
            total_articles=total,
            articles=tuple(Article.from_dict(item) for item in raw_articles),
        )


class FeedStatus(str, Enum):
    """Where a category feed is in its fetch cycle."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class FeedState:
    """Snapshot of one category's feed.

    `articles` only ever grows, in arrival order. `page` is the page the
    next fetch will request.
    """

    category: str
    topic: str
    articles: Tuple[Article, ...] = field(default_factory=tuple)
    page: int = 1
    status: FeedStatus = FeedStatus.IDLE
    error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.status is FeedStatus.LOADING

    def evolve(self, **changes: Any) -> "FeedState":
        return replace(self, **changes)
