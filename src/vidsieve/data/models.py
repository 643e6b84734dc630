"""Core data models for vidsieve."""

from dataclasses import dataclass
from enum import StrEnum

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


class SearchStatus(StrEnum):
    """Lifecycle of a single search session request."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ResultItem:
    """A video returned by the search endpoint."""

    video_id: str
    title: str
    description: str = ""
    channel_title: str = ""
    published_at: str | None = None
    thumbnail_url: str | None = None

    @property
    def url(self) -> str:
        return WATCH_URL.format(video_id=self.video_id)


@dataclass(frozen=True)
class SearchPage:
    """One page of filtered results plus the endpoint's continuation token.

    ``next_page_token`` is passed back verbatim to fetch the following page;
    ``None`` means there are no more results. ``filtered_out`` counts the
    received items dropped by client-side filtering.
    """

    items: tuple[ResultItem, ...] = ()
    next_page_token: str | None = None
    filtered_out: int = 0

    @property
    def has_more(self) -> bool:
        return self.next_page_token is not None


@dataclass(frozen=True)
class FavoriteEntry:
    """A saved result bound to the query and term lists active when it was saved."""

    item: ResultItem
    search_term: str
    included_terms: tuple[str, ...] = ()
    excluded_terms: tuple[str, ...] = ()

    @property
    def video_id(self) -> str:
        return self.item.video_id


@dataclass(frozen=True)
class HistoryEntry:
    """A past query and when it was issued (ISO 8601, UTC)."""

    query: str
    timestamp: str
