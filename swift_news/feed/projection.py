"""Render projection.

Turns a FeedState into the rows the list view should draw. Everything
here is a pure function of the state.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from swift_news.models.schemas import Article, FeedState, FeedStatus
from swift_news.services.thumbnails import ThumbnailRequest, thumbnail_for


TITLE_MAX_LINES = 2
DESCRIPTION_MAX_LINES = 3
DATE_LENGTH = 10


@dataclass(frozen=True)
class ArticleRow:
    """One article in the list."""

    index: int
    title: str
    url: str
    thumbnail: ThumbnailRequest
    description: Optional[str] = None
    source_label: Optional[str] = None
    date_text: Optional[str] = None
    title_max_lines: int = TITLE_MAX_LINES
    description_max_lines: int = DESCRIPTION_MAX_LINES


@dataclass(frozen=True)
class LoadingRow:
    """Spinner shown below the list while a page is loading."""


Row = Union[ArticleRow, LoadingRow]


@dataclass(frozen=True)
class FeedView:
    """Everything the list view needs to draw one category."""

    category: str
    status: FeedStatus
    rows: Tuple[Row, ...]
    error_banner: Optional[str] = None
    empty_message: Optional[str] = None

    @property
    def article_rows(self) -> List[ArticleRow]:
        return [row for row in self.rows if isinstance(row, ArticleRow)]

    @property
    def show_spinner(self) -> bool:
        return any(isinstance(row, LoadingRow) for row in self.rows)


def date_text(published_at: Optional[str]) -> Optional[str]:
    """Shorten an ISO-8601 timestamp to its date part."""
    if not published_at:
        return None
    return published_at[:DATE_LENGTH]


def source_label(article: Article) -> Optional[str]:
    if article.source is None or not article.source.name:
        return None
    return f"Source: {article.source.name}"


def article_row(index: int, article: Article) -> ArticleRow:
    return ArticleRow(
        index=index,
        title=article.title,
        url=article.url,
        thumbnail=thumbnail_for(article.image),
        description=article.description,
        source_label=source_label(article),
        date_text=date_text(article.published_at),
    )


def project(state: FeedState) -> FeedView:
    """Derive the view for a category from its state."""
    rows: List[Row] = [article_row(i, article) for i, article in enumerate(state.articles)]
    if state.status is FeedStatus.LOADING:
        rows.append(LoadingRow())

    error_banner = state.error if state.status is FeedStatus.ERROR else None

    empty_message = None
    if not state.articles and state.status in (FeedStatus.IDLE, FeedStatus.LOADED):
        empty_message = f"No content for {state.category} yet"

    return FeedView(
        category=state.category,
        status=state.status,
        rows=tuple(rows),
        error_banner=error_banner,
        empty_message=empty_message,
    )


def is_near_end(article_count: int, last_visible_index: int, threshold_from_end: int = 1) -> bool:
    """Whether the last visible row is within `threshold_from_end` rows of the end.

    With a threshold of 1 this is true only once the last article is visible.
    """
    if article_count <= 0:
        return False
    return last_visible_index >= article_count - max(threshold_from_end, 1)


def _truncate_lines(text: str, max_lines: int, width: int = 80) -> str:
    # Approximates line clamping at `width` characters per line
    limit = max_lines * width
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def render_text(view: FeedView) -> str:
    """Plain-text rendering of a feed view."""
    lines: List[str] = [f"{view.category} News"]

    if view.error_banner:
        lines.append(f"! {view.error_banner}")

    for row in view.rows:
        if isinstance(row, LoadingRow):
            lines.append("  … loading")
            continue

        lines.append(f"[{row.index}] {_truncate_lines(row.title, row.title_max_lines)}")
        if row.description:
            lines.append(f"    {_truncate_lines(row.description, row.description_max_lines)}")
        meta = [part for part in (row.source_label, row.date_text) if part]
        if meta:
            lines.append("    " + "  |  ".join(meta))
        if row.thumbnail.is_placeholder:
            lines.append("    (no image)")

    if view.empty_message:
        lines.append(view.empty_message)

    return "\n".join(lines)
