"""Exception types for swift_news."""

from typing import Any, Dict, Optional


class SwiftNewsError(Exception):
    """Base exception for all swift_news errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class FetchFailure(SwiftNewsError):
    """A headlines page could not be fetched.

    Network errors, non-success statuses and undecodable payloads all
    collapse into this one kind; `message` is the text shown to the user.
    """

    def __init__(self, detail: str, topic: str = "", page: int = 0, status_code: Optional[int] = None):
        context: Dict[str, Any] = {"topic": topic, "page": page}
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(f"Error fetching news: {detail}", context=context)
        self.detail = detail
        self.status_code = status_code
