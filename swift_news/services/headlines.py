"""Headlines API client.

This module fetches pages of top headlines from the GNews API. The HTTP
client is passed in so callers (and tests) decide how it is configured.
"""

import logging

import httpx

from swift_news.config import ServerConfig
from swift_news.exceptions import FetchFailure
from swift_news.models.schemas import HeadlinesPage


logger = logging.getLogger(__name__)


def create_http_client(config: ServerConfig) -> httpx.AsyncClient:
    """Create the shared HTTP client for API and image requests.

    Args:
        config: Server configuration (timeout and user agent)

    Returns:
        A new AsyncClient; the caller owns it and must close it
    """
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=config.request_timeout,
        headers={"User-Agent": config.user_agent},
    )


class HeadlinesClient:
    """Client for the `top-headlines` endpoint."""

    def __init__(self, http_client: httpx.AsyncClient, config: ServerConfig):
        self._http = http_client
        self._config = config

    @property
    def endpoint(self) -> str:
        return f"{self._config.api_base_url.rstrip('/')}/top-headlines"

    def build_params(self, topic: str, page: int) -> dict:
        return {
            "topic": topic,
            "lang": self._config.language,
            "max": self._config.page_size,
            "page": page,
            "token": self._config.api_key,
        }

    async def get_top_headlines(self, topic: str, page: int) -> HeadlinesPage:
        """Fetch one page of headlines for a topic.

        Args:
            topic: GNews topic (e.g. "technology")
            page: 1-based page number

        Returns:
            The decoded page

        Raises:
            FetchFailure: On network errors, non-2xx statuses or bad payloads
        """
        logger.info(f"Fetching headlines: topic={topic}, page={page}")

        try:
            response = await self._http.get(self.endpoint, params=self.build_params(topic, page))
        except httpx.TimeoutException as e:
            raise FetchFailure(f"request timed out ({e.__class__.__name__})", topic=topic, page=page) from e
        except httpx.HTTPError as e:
            raise FetchFailure(str(e) or e.__class__.__name__, topic=topic, page=page) from e

        if not response.is_success:
            raise FetchFailure(
                f"HTTP {response.status_code}",
                topic=topic,
                page=page,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchFailure("malformed JSON response", topic=topic, page=page) from e

        try:
            result = HeadlinesPage.from_dict(payload)
        except ValueError as e:
            raise FetchFailure(f"unexpected response shape: {e}", topic=topic, page=page) from e

        logger.info(f"Fetched {len(result.articles)} articles for {topic} page {page}")
        return result
