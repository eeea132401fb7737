"""Paginated feed controller.

One controller drives one category tab: it owns the tab's FeedStore,
decides when the next page should be requested and applies the result.
"""

import asyncio
import logging
from typing import Optional

from swift_news.exceptions import FetchFailure
from swift_news.feed.projection import FeedView, is_near_end, project
from swift_news.feed.store import FeedStore
from swift_news.models.schemas import FeedState, FeedStatus
from swift_news.services.categories import topic_for
from swift_news.services.headlines import HeadlinesClient


logger = logging.getLogger(__name__)


class FeedController:
    """Fetch trigger and state owner for a single category.

    At most one fetch is in flight at a time. The near-end trigger fires
    once per loaded-article count, so an empty page does not cause a
    request loop; a failed fetch re-arms it.
    """

    def __init__(self, category: str, headlines: HeadlinesClient, near_end_threshold: int = 1):
        self.category = category
        self.near_end_threshold = near_end_threshold
        self.store = FeedStore(FeedState(category=category, topic=topic_for(category)))
        self._headlines = headlines
        self._task: Optional[asyncio.Task] = None
        self._before_fetch: Optional[FeedState] = None
        self._fired_at: Optional[int] = None
        self._disposed = False

    @property
    def state(self) -> FeedState:
        return self.store.state

    @property
    def view(self) -> FeedView:
        return project(self.state)

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def disposed(self) -> bool:
        return self._disposed

    def activate(self) -> Optional[asyncio.Task]:
        """Called when the tab is selected.

        Starts the first fetch if nothing has been loaded yet.
        """
        state = self.state
        if state.status is FeedStatus.IDLE or (state.status is FeedStatus.ERROR and not state.articles):
            return self._start()
        return None

    def on_near_end(self, last_visible_index: int, threshold_from_end: Optional[int] = None) -> Optional[asyncio.Task]:
        """Signal from the list view that `last_visible_index` is on screen.

        Returns:
            The fetch task if one was started, else None
        """
        threshold = self.near_end_threshold if threshold_from_end is None else threshold_from_end
        count = len(self.state.articles)

        if not is_near_end(count, last_visible_index, threshold):
            return None
        if self._fired_at == count:
            return None
        return self._start()

    async def load_next(self) -> FeedState:
        """Fetch the next page and wait for it.

        If a fetch is already running this waits for that one instead of
        starting another.
        """
        if not self.in_flight:
            self._start()
        return await self.settle()

    async def settle(self) -> FeedState:
        """Wait for the in-flight fetch (if any) and return the state."""
        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})
        return self.state

    def cancel(self) -> None:
        """Abandon the in-flight fetch; its response will not be applied."""
        if not self.in_flight:
            return

        logger.info(f"Cancelling {self.category} page {self.state.page} fetch")
        self._task.cancel()
        self._fired_at = None
        if self._before_fetch is not None:
            self.store.set(self._before_fetch)
        self._before_fetch = None

    def dispose(self) -> None:
        """Tear down when the tab is unmounted."""
        self.cancel()
        self.store.close()
        self._disposed = True

    def _start(self) -> Optional[asyncio.Task]:
        if self._disposed or self.in_flight:
            return None

        self._before_fetch = self.state
        self._fired_at = len(self.state.articles)
        self.store.update(status=FeedStatus.LOADING)
        self._task = asyncio.get_running_loop().create_task(self._fetch())
        return self._task

    async def _fetch(self) -> None:
        state = self.state
        try:
            result = await self._headlines.get_top_headlines(state.topic, state.page)
        except FetchFailure as e:
            logger.error(f"Failed to fetch {self.category} page {state.page}: {e.message}")
            self._fail(e.message)
            return
        except Exception as e:
            logger.error(f"Unexpected error fetching {self.category} page {state.page}: {e}", exc_info=True)
            self._fail(FetchFailure(str(e), topic=state.topic, page=state.page).message)
            return

        self._before_fetch = None
        self.store.update(
            articles=state.articles + result.articles,
            page=state.page + 1,
            status=FeedStatus.LOADED,
            error=None,
        )
        logger.info(f"{self.category}: {len(self.state.articles)} articles loaded, next page {self.state.page}")

    def _fail(self, message: str) -> None:
        self._before_fetch = None
        self._fired_at = None
        self.store.update(status=FeedStatus.ERROR, error=message)
