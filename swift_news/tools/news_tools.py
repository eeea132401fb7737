"""News screen MCP tools.

This module exposes the news screen to MCP clients: choosing a category
tab, scrolling for more headlines, reading the rendered list, opening
an article and loading its thumbnail. The greeting screen round trip is
exposed as well.

NOTE: Never use Optional parameters in MCP tools - they break MCP clients.
Use empty string "" for optional strings.
"""

import base64
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from mcp.server.fastmcp import Context

from swift_news.feed.projection import FeedView, render_text
from swift_news.screen.navigation import Navigator
from swift_news.screen.news_screen import NewsScreen
from swift_news.services.categories import find_category
from swift_news.services.thumbnails import load_thumbnail, thumbnail_for


logger = logging.getLogger(__name__)


def view_to_dict(view: FeedView, page: int) -> Dict[str, Any]:
    """Serialize a feed view for a tool response."""
    return {
        "category": view.category,
        "status": view.status.value,
        "page": page,
        "loading": view.show_spinner,
        "article_count": len(view.article_rows),
        "error": view.error_banner,
        "empty_message": view.empty_message,
        "articles": [
            {
                "index": row.index,
                "title": row.title,
                "description": row.description,
                "source": row.source_label,
                "date": row.date_text,
                "url": row.url,
                "thumbnail": {
                    "url": row.thumbnail.url,
                    "placeholder": row.thumbnail.is_placeholder,
                    "size": row.thumbnail.size,
                    "corner_radius": row.thumbnail.corner_radius,
                },
            }
            for row in view.article_rows
        ],
        "text": render_text(view),
    }


def create_news_tools(
    screen: NewsScreen,
    navigator: Navigator,
    http_client: Optional[httpx.AsyncClient] = None,
) -> List[Callable]:
    """Build the tool functions bound to one screen.

    Args:
        screen: The news screen the tools drive
        navigator: Navigation stack for the greeting screen
        http_client: Shared client used to load thumbnail images

    Returns:
        List of async tool functions, in registration order
    """

    def _resolve(category: str) -> str:
        if not category:
            return screen.current_category
        resolved = find_category(category)
        if resolved is None:
            raise ValueError(f"Unknown category '{category}'. Choose one of: {', '.join(screen.categories)}")
        return resolved

    async def list_categories(ctx: Context = None) -> Dict[str, Any]:
        """List the category tabs of the news screen.

        Args:
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - header: title, subtitle and badge of the screen
            - categories: list of {label, selected}
        """
        logger.info("list_categories called")

        return {
            "success": True,
            "header": {
                "title": screen.header.title,
                "subtitle": screen.header.subtitle,
                "badge": screen.header.badge,
            },
            "categories": [{"label": tab.label, "selected": tab.selected} for tab in screen.tabs],
        }

    async def select_category(category: str, ctx: Context = None) -> Dict[str, Any]:
        """Switch to a category tab and show its headlines.

        The first page is fetched the first time a tab is shown. Switching
        away from a tab cancels any fetch still running on it.

        Args:
            category: One of General, Business, Sports, Technology (case-insensitive)
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - feed: the rendered feed (status, page, articles, error, text)
            - error: string if the category is unknown
        """
        logger.info(f"select_category called: category={category}")

        try:
            label = _resolve(category)
        except ValueError as e:
            return {"success": False, "error": str(e)}

        controller = screen.select(label)
        state = await controller.settle()

        return {
            "success": True,
            "feed": view_to_dict(controller.view, state.page),
        }

    async def load_more(category: str = "", ctx: Context = None) -> Dict[str, Any]:
        """Scroll to the end of a tab's list, loading the next page of headlines.

        Args:
            category: Category tab to scroll (empty string for the selected tab)
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - requested: whether a new page was requested
            - feed: the rendered feed after the fetch completes
            - error: string if the category is unknown or not open
        """
        logger.info(f"load_more called: category={category}")

        try:
            label = _resolve(category)
        except ValueError as e:
            return {"success": False, "error": str(e)}

        controller = screen.controller(label)
        if controller is None:
            return {
                "success": False,
                "error": f"Category '{label}' is not open. Call select_category first.",
            }

        task = screen.scroll_to_end(label)
        state = await controller.settle()

        return {
            "success": True,
            "requested": task is not None,
            "feed": view_to_dict(controller.view, state.page),
        }

    async def show_feed(category: str = "", ctx: Context = None) -> Dict[str, Any]:
        """Show the headlines currently loaded for a tab without fetching.

        Args:
            category: Category tab to show (empty string for the selected tab)
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - feed: the rendered feed
            - error: string if the category is unknown
        """
        logger.info(f"show_feed called: category={category}")

        try:
            label = _resolve(category)
        except ValueError as e:
            return {"success": False, "error": str(e)}

        controller = screen.controller(label)
        if controller is None:
            view = screen.view(label)
            return {"success": True, "feed": view_to_dict(view, 1)}

        return {
            "success": True,
            "feed": view_to_dict(controller.view, controller.state.page),
        }

    async def open_article(index: int, category: str = "", ctx: Context = None) -> Dict[str, Any]:
        """Open an article in the external browser.

        Args:
            index: Position of the article in the list (from the feed's articles)
            category: Category tab the article belongs to (empty string for the selected tab)
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - article: object with title and url
            - error: string if there is no article at that position
        """
        logger.info(f"open_article called: index={index}, category={category}")

        try:
            label = _resolve(category)
            article = screen.open_article(index, label)
        except (ValueError, IndexError) as e:
            return {"success": False, "error": str(e)}

        return {
            "success": True,
            "article": {"title": article.title, "url": article.url},
        }

    async def load_article_thumbnail(index: int, category: str = "", ctx: Context = None) -> Dict[str, Any]:
        """Load the thumbnail image of an article.

        Articles without an image get the placeholder and no request is made.

        Args:
            index: Position of the article in the list (from the feed's articles)
            category: Category tab the article belongs to (empty string for the selected tab)
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - placeholder: whether the placeholder is shown instead of an image
            - size, corner_radius: how the thumbnail is drawn
            - image_base64: the image bytes, base64 encoded (absent for the placeholder)
            - error: string if there is no article at that position
        """
        logger.info(f"load_article_thumbnail called: index={index}, category={category}")

        if http_client is None:
            return {"success": False, "error": "Thumbnail loading is not available"}

        try:
            label = _resolve(category)
            article = screen.article_at(index, label)
        except (ValueError, IndexError) as e:
            return {"success": False, "error": str(e)}

        request = thumbnail_for(article.image)
        data = await load_thumbnail(http_client, request)

        result = {
            "success": True,
            "url": request.url,
            "placeholder": data is None,
            "size": request.size,
            "corner_radius": request.corner_radius,
        }
        if data is not None:
            result["image_base64"] = base64.b64encode(data).decode("ascii")
        return result

    async def show_greeting(name: str, ctx: Context = None) -> Dict[str, Any]:
        """Show the greeting screen for a reader.

        Args:
            name: Name to greet
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - route: the route now on screen
            - lines: the text shown
            - button: label of the button that returns to the news screen
        """
        logger.info(f"show_greeting called: name={name}")

        greeting = navigator.show_greeting(name)

        return {
            "success": True,
            "route": navigator.current_route,
            "lines": list(greeting.lines),
            "button": greeting.button_label,
        }

    async def go_to_news(name: str, ctx: Context = None) -> Dict[str, Any]:
        """Press the greeting screen's button and return to the news screen.

        Args:
            name: Name carried back to the news screen
            ctx: MCP Context object (injected automatically)

        Returns:
            Dictionary with:
            - success: bool
            - route: the route now on screen
            - args: navigation arguments of that route
            - selected_category: the news tab that is showing
        """
        logger.info(f"go_to_news called: name={name}")

        navigator.back_to_news(name)

        return {
            "success": True,
            "route": navigator.current_route,
            "args": navigator.current_args,
            "selected_category": screen.current_category,
        }

    return [
        list_categories,
        select_category,
        load_more,
        show_feed,
        open_article,
        load_article_thumbnail,
        show_greeting,
        go_to_news,
    ]
