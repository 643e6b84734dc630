"""YouTube search using the Data API v3 ``search`` endpoint."""

import logging
import os
from collections.abc import Sequence
from typing import Any

import httpx

from vidsieve.data import ResultItem, SearchPage
from vidsieve.errors import FetchError
from vidsieve.terms import build_search_query, has_included_term, is_recent, should_exclude

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"

logger = logging.getLogger(__name__)


class YouTubeSearcher:
    """Fetch pages of video results from the YouTube Data API.

    Include terms are sent to the API as an OR group inside ``q``; exclude
    terms are applied locally to each returned title.

    Args:
        api_key: YouTube Data API key (defaults to YOUTUBE_API_KEY env var).
        max_results: Page size (1-50, default 50).
        order: Sort order (default: "date", most recent first).
        region_code: Optional ISO 3166-1 region hint, e.g. "MA".
        relevance_language: Optional ISO 639-1 language hint.
        case_sensitive: Match terms case-sensitively (default False).
        max_age_years: Drop items published more than this many years ago.
        strict_include: Also require an include term in each returned title.
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        max_results: int = 50,
        order: str = "date",
        region_code: str | None = None,
        relevance_language: str | None = None,
        case_sensitive: bool = False,
        max_age_years: int | None = None,
        strict_include: bool = False,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("YOUTUBE_API_KEY")
        if not self._api_key:
            raise ValueError(
                "YouTube API key required. Pass api_key or set YOUTUBE_API_KEY env var."
            )
        self._max_results = min(max(max_results, 1), 50)
        self._order = order
        self._region_code = region_code
        self._relevance_language = relevance_language
        self._case_sensitive = case_sensitive
        self._max_age_years = max_age_years
        self._strict_include = strict_include
        self._timeout = timeout

    async def fetch_page(
        self,
        query: str,
        *,
        page_token: str | None = None,
        included_terms: Sequence[str] = (),
        excluded_terms: Sequence[str] = (),
    ) -> SearchPage:
        """Fetch and filter one page of results.

        Args:
            query: Free-text search query.
            page_token: Continuation token from the previous page, if any.
            included_terms: Terms merged into the query as an OR group.
            excluded_terms: Terms whose matching titles are dropped.

        Returns:
            Filtered page with the endpoint's ``nextPageToken`` verbatim.

        Raises:
            FetchError: On a non-success status, a transport failure, or a body
                that is not a JSON search response.
        """
        params = self._build_params(query, page_token=page_token, included_terms=included_terms)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(YOUTUBE_SEARCH_URL, params=params)
                response.raise_for_status()
            data = response.json()
            if not isinstance(data, dict) or not isinstance(data.get("items", []), list):
                raise ValueError(f"Unexpected response shape: {type(data).__name__}")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"YouTube search failed for {params['q']!r}. Error: {e}")
            raise FetchError("Failed to fetch videos") from e

        raw_items = data.get("items", [])

        items: list[ResultItem] = []
        for raw in raw_items:
            item = _parse_item(raw)
            if item is None:
                continue
            if self._keep(item, included_terms, excluded_terms):
                items.append(item)

        next_token = data.get("nextPageToken")
        logger.debug(
            f"Fetched page for {params['q']!r}: {len(raw_items)} received, "
            f"{len(items)} kept, next token {next_token!r}"
        )
        return SearchPage(
            items=tuple(items),
            next_page_token=next_token,
            filtered_out=len(raw_items) - len(items),
        )

    def _build_params(
        self,
        query: str,
        *,
        page_token: str | None,
        included_terms: Sequence[str],
    ) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "part": "snippet",
            "q": build_search_query(query, included_terms),
            "type": "video",
            "maxResults": self._max_results,
            "order": self._order,
            "key": self._api_key,  # type: ignore[dict-item]
        }
        if self._region_code:
            params["regionCode"] = self._region_code
        if self._relevance_language:
            params["relevanceLanguage"] = self._relevance_language
        if page_token is not None:
            params["pageToken"] = page_token
        return params

    def _keep(
        self,
        item: ResultItem,
        included_terms: Sequence[str],
        excluded_terms: Sequence[str],
    ) -> bool:
        if should_exclude(item.title, excluded_terms, case_sensitive=self._case_sensitive):
            return False
        if self._strict_include and not has_included_term(
            item.title, included_terms, case_sensitive=self._case_sensitive
        ):
            return False
        return is_recent(item.published_at, max_age_years=self._max_age_years)


def _parse_item(raw: dict[str, Any]) -> ResultItem | None:
    """Parse a search result resource into a ResultItem, skipping non-videos."""
    if not isinstance(raw, dict):
        return None
    video_id = (raw.get("id") or {}).get("videoId")
    if not video_id:
        return None
    snippet = raw.get("snippet") or {}
    thumbnail = (snippet.get("thumbnails") or {}).get("medium") or {}
    return ResultItem(
        video_id=video_id,
        title=snippet.get("title") or "",
        description=snippet.get("description") or "",
        channel_title=snippet.get("channelTitle") or "",
        published_at=snippet.get("publishedAt"),
        thumbnail_url=thumbnail.get("url"),
    )
