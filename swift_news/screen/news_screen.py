"""The news screen.

Holds the header, the category tab row and one FeedController per mounted
tab. Like a pager, only the selected tab (plus `beyond_viewport_tabs`
neighbours on each side) stays mounted; other tabs are disposed and start
from scratch when selected again.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from swift_news.config import ServerConfig
from swift_news.feed.controller import FeedController
from swift_news.feed.projection import FeedView, project
from swift_news.models.schemas import Article, FeedState
from swift_news.services.categories import CATEGORIES, topic_for
from swift_news.services.headlines import HeadlinesClient
from swift_news.services.launcher import UrlOpener, open_in_browser


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    title: str = "Swift News Network"
    subtitle: str = "Your trusted source"
    badge: str = "SNN"
    search_enabled: bool = False


@dataclass(frozen=True)
class Tab:
    label: str
    selected: bool


class NewsScreen:
    """Category tabs over independent paginated feeds."""

    def __init__(
        self,
        headlines: HeadlinesClient,
        config: ServerConfig,
        open_url: UrlOpener = open_in_browser,
        categories: Sequence[str] = CATEGORIES,
    ):
        self.header = Header()
        self._headlines = headlines
        self._config = config
        self._open_url = open_url
        self._categories: List[str] = list(categories)
        self._controllers: Dict[str, FeedController] = {}
        self._current_index = 0

    @property
    def categories(self) -> List[str]:
        return list(self._categories)

    @property
    def current_category(self) -> str:
        return self._categories[self._current_index]

    @property
    def tabs(self) -> List[Tab]:
        return [Tab(label=c, selected=(i == self._current_index)) for i, c in enumerate(self._categories)]

    @property
    def mounted(self) -> List[str]:
        return list(self._controllers)

    def controller(self, category: Optional[str] = None) -> Optional[FeedController]:
        """Return the mounted controller for a category (current tab by default)."""
        return self._controllers.get(category or self.current_category)

    def mount(self, category: str) -> FeedController:
        if category not in self._categories:
            raise ValueError(f"Unknown category: {category}")

        controller = self._controllers.get(category)
        if controller is None:
            controller = FeedController(
                category,
                self._headlines,
                near_end_threshold=self._config.near_end_threshold,
            )
            self._controllers[category] = controller
            logger.debug(f"Mounted {category} tab")
        return controller

    def unmount(self, category: str) -> None:
        controller = self._controllers.pop(category, None)
        if controller is not None:
            controller.dispose()
            logger.debug(f"Unmounted {category} tab")

    def select(self, category: str) -> FeedController:
        """Switch to a category tab and start its first fetch if needed.

        Any fetch still running on the previously selected tab is cancelled.

        Raises:
            ValueError: If the category is not one of the screen's tabs
        """
        if category not in self._categories:
            raise ValueError(f"Unknown category: {category}")

        previous = self.current_category
        self._current_index = self._categories.index(category)

        if previous != category:
            old = self._controllers.get(previous)
            if old is not None:
                old.cancel()

        self._unmount_offscreen()
        controller = self.mount(category)
        controller.activate()
        return controller

    def view(self, category: Optional[str] = None) -> FeedView:
        """Current view of a tab; an unmounted tab shows its initial state."""
        label = category or self.current_category
        controller = self.controller(label)
        if controller is None:
            return project(FeedState(category=label, topic=topic_for(label)))
        return controller.view

    def scroll_to(self, last_visible_index: int, category: Optional[str] = None) -> Optional[asyncio.Task]:
        """Report the last visible row of a tab's list."""
        controller = self.controller(category)
        if controller is None:
            return None
        return controller.on_near_end(last_visible_index)

    def scroll_to_end(self, category: Optional[str] = None) -> Optional[asyncio.Task]:
        controller = self.controller(category)
        if controller is None:
            return None
        return controller.on_near_end(len(controller.state.articles) - 1)

    def article_at(self, index: int, category: Optional[str] = None) -> Article:
        """The article at `index` of a tab's list.

        Raises:
            IndexError: If no article is loaded at that position
        """
        controller = self.controller(category)
        articles = controller.state.articles if controller else ()
        if index < 0 or index >= len(articles):
            raise IndexError(f"No article at position {index}")
        return articles[index]

    def open_article(self, index: int, category: Optional[str] = None) -> Article:
        """Open the article at `index` of a tab's list externally."""
        article = self.article_at(index, category)
        self._open_url(article.url)
        return article

    def on_search(self) -> None:
        # Search is not implemented; the header action is inert
        logger.info("Search requested but not available")

    def close(self) -> None:
        for category in list(self._controllers):
            self.unmount(category)

    def _unmount_offscreen(self) -> None:
        keep = self._config.beyond_viewport_tabs
        for category in list(self._controllers):
            if abs(self._categories.index(category) - self._current_index) > keep:
                self.unmount(category)
