"""Unit tests for the news screen: tabs, mounting and article opening."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock

from swift_news.config import ServerConfig
from swift_news.models.schemas import FeedStatus
from swift_news.screen.news_screen import NewsScreen

from tests.helpers import GatedHeadlines, make_page


pytestmark = pytest.mark.anyio


def _headlines_by_topic(sizes):
    """AsyncMock client returning `sizes[topic]` articles per page."""
    headlines = AsyncMock()

    async def get_top_headlines(topic, page):
        return make_page(sizes.get(topic, 0), start=(page - 1) * 10, topic=topic)

    headlines.get_top_headlines.side_effect = get_top_headlines
    return headlines


class TestTabs:
    """Tests for the header and tab row."""

    async def test_header(self, config):
        screen = NewsScreen(AsyncMock(), config)

        assert screen.header.title == "Swift News Network"
        assert screen.header.subtitle == "Your trusted source"
        assert screen.header.badge == "SNN"
        assert screen.header.search_enabled is False

    async def test_first_tab_selected_initially(self, config):
        screen = NewsScreen(AsyncMock(), config)

        assert [t.label for t in screen.tabs] == ["General", "Business", "Sports", "Technology"]
        assert [t.selected for t in screen.tabs] == [True, False, False, False]
        assert screen.mounted == []

    async def test_select_marks_tab_and_fetches(self, config):
        headlines = _headlines_by_topic({"technology": 10})
        screen = NewsScreen(headlines, config)

        controller = screen.select("Technology")
        state = await controller.settle()

        assert screen.current_category == "Technology"
        assert [t.selected for t in screen.tabs] == [False, False, False, True]
        assert state.status is FeedStatus.LOADED
        assert len(state.articles) == 10
        headlines.get_top_headlines.assert_awaited_once_with("technology", 1)

    async def test_unknown_category(self, config):
        screen = NewsScreen(AsyncMock(), config)

        with pytest.raises(ValueError, match="Politics"):
            screen.select("Politics")

    async def test_reselecting_loaded_tab_does_not_refetch(self, config):
        headlines = _headlines_by_topic({"business": 10})
        screen = NewsScreen(headlines, config)

        await screen.select("Business").settle()
        await screen.select("Business").settle()

        assert headlines.get_top_headlines.await_count == 1

    async def test_search_is_a_stub(self, config):
        headlines = AsyncMock()
        screen = NewsScreen(headlines, config)

        screen.on_search()

        headlines.get_top_headlines.assert_not_called()


class TestIndependentFeeds:
    """Categories never share articles."""

    async def test_switching_keeps_feeds_separate(self):
        config = ServerConfig(beyond_viewport_tabs=3)
        screen = NewsScreen(_headlines_by_topic({"sports": 10, "technology": 4}), config)

        await screen.select("Sports").settle()
        await screen.select("Technology").settle()
        sports = screen.controller("Sports").state
        technology = screen.controller("Technology").state

        assert len(sports.articles) == 10
        assert len(technology.articles) == 4
        assert all(a.url.split("/")[-2] == "sports" for a in sports.articles)
        assert all(a.url.split("/")[-2] == "technology" for a in technology.articles)

        await screen.select("Sports").settle()
        assert len(screen.controller("Sports").state.articles) == 10

    async def test_offscreen_tabs_are_unmounted(self, config):
        screen = NewsScreen(_headlines_by_topic({"sports": 10, "business": 10}), config)

        await screen.select("Sports").settle()
        sports = screen.controller("Sports")
        await screen.select("Business").settle()

        assert screen.mounted == ["Business"]
        assert sports.disposed

        # Coming back starts from an empty feed
        controller = screen.select("Sports")
        assert controller is not sports
        state = await controller.settle()
        assert len(state.articles) == 10
        assert state.page == 2

    async def test_neighbouring_tabs_stay_mounted(self):
        config = ServerConfig(beyond_viewport_tabs=1)
        screen = NewsScreen(_headlines_by_topic({"breaking-news": 10, "business": 10, "sports": 10}), config)

        await screen.select("General").settle()
        await screen.select("Business").settle()
        assert screen.mounted == ["General", "Business"]

        await screen.select("Sports").settle()
        assert screen.mounted == ["Business", "Sports"]

    async def test_view_of_unmounted_tab(self, config):
        screen = NewsScreen(AsyncMock(), config)

        view = screen.view("Sports")

        assert view.category == "Sports"
        assert view.status is FeedStatus.IDLE
        assert view.rows == ()
        assert screen.mounted == []


class TestTabSwitchCancellation:
    """A tab switch abandons the old tab's fetch."""

    async def test_switch_cancels_in_flight_fetch(self):
        config = ServerConfig(beyond_viewport_tabs=3)
        headlines = GatedHeadlines([make_page(10), make_page(10)])
        screen = NewsScreen(headlines, config)

        sports = screen.select("Sports")
        await asyncio.sleep(0)
        assert sports.state.loading

        technology = screen.select("Technology")
        headlines.release()
        await technology.settle()
        await asyncio.sleep(0)

        assert sports.state.status is FeedStatus.IDLE
        assert sports.state.articles == ()
        assert len(technology.state.articles) == 10

    async def test_switch_with_default_config_disposes_old_tab(self, config):
        headlines = GatedHeadlines([make_page(10), make_page(10)])
        screen = NewsScreen(headlines, config)

        sports = screen.select("Sports")
        await asyncio.sleep(0)
        screen.select("Technology")

        assert sports.disposed
        assert screen.mounted == ["Technology"]
        headlines.release()
        await screen.controller("Technology").settle()


class TestScrolling:
    async def test_scroll_to_end_loads_next_page(self, config):
        headlines = _headlines_by_topic({"technology": 10})
        screen = NewsScreen(headlines, config)
        await screen.select("Technology").settle()

        task = screen.scroll_to_end()
        assert task is not None
        state = await screen.controller().settle()

        assert len(state.articles) == 20
        assert state.page == 3

    async def test_scroll_to_middle_does_nothing(self, config):
        screen = NewsScreen(_headlines_by_topic({"technology": 10}), config)
        await screen.select("Technology").settle()

        assert screen.scroll_to(4) is None

    async def test_scroll_on_unmounted_tab(self, config):
        screen = NewsScreen(AsyncMock(), config)

        assert screen.scroll_to_end("Business") is None


class TestOpenArticle:
    async def test_opens_article_url(self, config):
        opener = MagicMock()
        screen = NewsScreen(_headlines_by_topic({"technology": 3}), config, open_url=opener)
        await screen.select("Technology").settle()

        article = screen.open_article(1)

        opener.assert_called_once_with("https://news.example.com/technology/1")
        assert article.title == "technology 1"

    async def test_bad_index(self, config):
        opener = MagicMock()
        screen = NewsScreen(_headlines_by_topic({"technology": 3}), config, open_url=opener)
        await screen.select("Technology").settle()

        with pytest.raises(IndexError):
            screen.open_article(3)
        with pytest.raises(IndexError):
            screen.open_article(-1)
        opener.assert_not_called()

    async def test_nothing_loaded(self, config):
        screen = NewsScreen(AsyncMock(), config, open_url=MagicMock())

        with pytest.raises(IndexError):
            screen.open_article(0, "Sports")


async def test_close_disposes_every_tab():
    config = ServerConfig(beyond_viewport_tabs=3)
    screen = NewsScreen(_headlines_by_topic({"sports": 1, "business": 1}), config)
    await screen.select("Sports").settle()
    await screen.select("Business").settle()
    controllers = [screen.controller("Sports"), screen.controller("Business")]

    screen.close()

    assert screen.mounted == []
    assert all(c.disposed for c in controllers)
