"""Services for swift_news."""

from .categories import CATEGORIES, find_category, topic_for
from .headlines import HeadlinesClient, create_http_client
from .launcher import open_in_browser
from .thumbnails import ThumbnailRequest, load_thumbnail, thumbnail_for

__all__ = [
    "CATEGORIES",
    "find_category",
    "topic_for",
    "HeadlinesClient",
    "create_http_client",
    "open_in_browser",
    "ThumbnailRequest",
    "load_thumbnail",
    "thumbnail_for",
]
