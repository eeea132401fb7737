"""swift_news - a paginated headlines reader."""

__version__ = "0.1.0"
