"""Test helpers: fake API payloads and HTTP transports."""

import asyncio
import json
from typing import Callable, Dict, List, Optional

import httpx

from swift_news.models.schemas import Article, HeadlinesPage, Source


def article_payload(n: int, topic: str = "technology", **overrides) -> Dict:
    """One entry of the API's `articles` array."""
    payload = {
        "title": f"{topic.title()} headline {n}",
        "description": f"Description of {topic} story {n}",
        "url": f"https://news.example.com/{topic}/{n}",
        "image": f"https://img.example.com/{topic}/{n}.jpg",
        "source": {"name": "Example Wire", "url": "https://news.example.com"},
        "publishedAt": "2024-03-15T10:00:00Z",
    }
    payload.update(overrides)
    return payload


def make_page(count: int, start: int = 0, topic: str = "technology") -> HeadlinesPage:
    return HeadlinesPage(
        total_articles=100,
        articles=tuple(
            Article(
                title=f"{topic} {i}",
                url=f"https://news.example.com/{topic}/{i}",
                source=Source(name="Example Wire"),
                published_at="2024-03-15T10:00:00Z",
            )
            for i in range(start, start + count)
        ),
    )


class GatedHeadlines:
    """Fake headlines client whose responses wait for `release()`."""

    def __init__(self, pages: Optional[List[HeadlinesPage]] = None):
        self.pages = list(pages or [])
        self.calls: List[tuple] = []
        self._gate = asyncio.Event()

    def release(self) -> None:
        self._gate.set()

    def hold(self) -> None:
        self._gate.clear()

    async def get_top_headlines(self, topic: str, page: int) -> HeadlinesPage:
        self.calls.append((topic, page))
        await self._gate.wait()
        return self.pages.pop(0)


def mock_api(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """An AsyncClient whose requests are answered by `handler`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def paged_handler(pages: Dict[int, int], calls: Optional[List[httpx.Request]] = None):
    """Answer top-headlines requests with `pages[page]` articles for each page."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        topic = request.url.params["topic"]
        page = int(request.url.params["page"])
        count = pages.get(page, 0)
        start = sum(c for p, c in pages.items() if p < page)
        body = {
            "totalArticles": sum(pages.values()),
            "articles": [article_payload(start + i, topic) for i in range(count)],
        }
        return httpx.Response(200, content=json.dumps(body), headers={"Content-Type": "application/json"})

    return handler
