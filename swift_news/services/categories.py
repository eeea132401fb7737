"""Category routing.

Maps the tab labels shown on the news screen to GNews topic values.
"""

from typing import Dict, Optional, Tuple


DEFAULT_TOPIC = "breaking-news"

# Tab order on screen
CATEGORIES: Tuple[str, ...] = ("General", "Business", "Sports", "Technology")

CATEGORY_TOPICS: Dict[str, str] = {
    "General": "breaking-news",
    "Business": "business",
    "Sports": "sports",
    "Technology": "technology",
}


def topic_for(label: str) -> str:
    """Return the API topic for a category label.

    Unknown labels fall back to breaking news.
    """
    return CATEGORY_TOPICS.get(label, DEFAULT_TOPIC)


def find_category(label: str) -> Optional[str]:
    """Resolve user input to a canonical category label (case-insensitive)."""
    wanted = label.strip().lower()
    for category in CATEGORIES:
        if category.lower() == wanted:
            return category
    return None
