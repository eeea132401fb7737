"""Article thumbnails.

The view layer draws thumbnails; this module only describes what to draw
and fetches the image bytes through the shared HTTP client.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx


logger = logging.getLogger(__name__)

THUMBNAIL_SIZE = 100
CORNER_RADIUS = 4


@dataclass(frozen=True)
class ThumbnailRequest:
    """A cropped, rounded-corner thumbnail for an article row."""

    url: Optional[str]
    size: int = THUMBNAIL_SIZE
    corner_radius: int = CORNER_RADIUS
    crop: bool = True

    @property
    def is_placeholder(self) -> bool:
        return not self.url


def thumbnail_for(image_url: Optional[str]) -> ThumbnailRequest:
    return ThumbnailRequest(url=image_url or None)


async def load_thumbnail(client: httpx.AsyncClient, request: ThumbnailRequest) -> Optional[bytes]:
    """Fetch the image bytes for a thumbnail.

    Args:
        client: Shared HTTP client
        request: Thumbnail to load

    Returns:
        Raw image bytes, or None when the placeholder should be shown
    """
    if request.is_placeholder:
        return None

    try:
        response = await client.get(request.url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning(f"Failed to load thumbnail {request.url}: {e}")
        return None

    return response.content
