"""Observable holder for a category's FeedState."""

import logging
from typing import Any, Callable, List

from swift_news.models.schemas import FeedState


logger = logging.getLogger(__name__)

Subscriber = Callable[[FeedState], None]


class FeedStore:
    """Holds the current FeedState and notifies subscribers on change.

    A store lives as long as its tab is mounted; `close()` drops all
    subscribers and ignores any later writes.
    """

    def __init__(self, initial: FeedState):
        self._state = initial
        self._subscribers: List[Subscriber] = []
        self._closed = False

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for state changes.

        Returns:
            A callable that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set(self, state: FeedState) -> None:
        if self._closed:
            logger.debug(f"Ignoring update to closed store for {state.category}")
            return
        self._state = state
        for callback in list(self._subscribers):
            callback(state)

    def update(self, **changes: Any) -> FeedState:
        self.set(self._state.evolve(**changes))
        return self._state

    def close(self) -> None:
        self._closed = True
        self._subscribers.clear()
