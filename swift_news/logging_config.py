"""Logging setup for swift_news."""

import logging
import sys
from typing import Optional

from swift_news.config import ServerConfig


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("swift_news")


def setup_logging(config: Optional[ServerConfig] = None) -> logging.Logger:
    """Configure the package logger.

    Logs go to stderr so they never interleave with the STDIO transport.

    Args:
        config: Server configuration (only log_level is used)

    Returns:
        The configured package logger
    """
    level_name = config.log_level if config else "INFO"
    level = getattr(logging, level_name.upper(), logging.INFO)

    if not any(getattr(h, "_swift_news", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._swift_news = True
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger
