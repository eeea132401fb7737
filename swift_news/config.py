"""Configuration for swift_news.

Settings are read from environment variables so the server can be
configured by whatever launches it (MCP client config, Docker, shell).
"""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_BASE_URL = "https://gnews.io/api/v4"


@dataclass
class ServerConfig:
    """Runtime configuration for the news screen and its server."""

    name: str = "swift_news"
    log_level: str = "INFO"

    # Headlines API
    api_key: str = ""
    api_base_url: str = DEFAULT_BASE_URL
    language: str = "en"
    page_size: int = 10
    request_timeout: float = 30.0
    user_agent: str = "SwiftNews/1.0 (Headlines Reader)"

    # Feed behaviour
    near_end_threshold: int = 1
    beyond_viewport_tabs: int = 0


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_config() -> ServerConfig:
    """Build a ServerConfig from the environment.

    Returns:
        ServerConfig with defaults for every unset variable

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    return ServerConfig(
        name=os.environ.get("SWIFT_NEWS_NAME", "swift_news"),
        log_level=os.environ.get("SWIFT_NEWS_LOG_LEVEL", "INFO").upper(),
        api_key=os.environ.get("GNEWS_API_KEY", ""),
        api_base_url=os.environ.get("GNEWS_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        language=os.environ.get("GNEWS_LANG", "en"),
        page_size=_int_env("GNEWS_PAGE_SIZE", 10, minimum=1),
        request_timeout=_float_env("SWIFT_NEWS_TIMEOUT", 30.0),
        near_end_threshold=_int_env("SWIFT_NEWS_NEAR_END", 1, minimum=1),
        beyond_viewport_tabs=_int_env("SWIFT_NEWS_KEEP_TABS", 0),
    )


_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Return the process configuration, loading it on first use."""
    global _config

    if _config is None:
        _config = load_config()
    return _config
