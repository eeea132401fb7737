"""Opening article links outside the app."""

import logging
import webbrowser
from typing import Callable


logger = logging.getLogger(__name__)

UrlOpener = Callable[[str], object]


def open_in_browser(url: str) -> None:
    """Ask the host to open a URL in an external browser.

    The result of the launch is not consumed.
    """
    logger.info(f"Opening article in browser: {url}")
    webbrowser.open(url, new=2)
