"""Search session: one query, its accumulated results and its pagination state."""

import logging
import time

from vidsieve.data import ResultItem, SearchPage, SearchStatus
from vidsieve.errors import FetchError
from vidsieve.run_logger import RunLogger
from vidsieve.search.base import VideoSearcher
from vidsieve.state import AppState
from vidsieve.terms import build_search_query

FETCH_ERROR_MESSAGE = "Failed to load videos. Please try again later."

logger = logging.getLogger(__name__)


class SearchSession:
    """Drives searches and "load more" requests against a searcher.

    Status moves ``idle -> loading -> (ready | failed)``. A new search resets
    the accumulated results; "load more" appends the next page and is only
    honored while no request is outstanding and a continuation token exists.

    There is no cancellation: a new search does not stop a request already in
    flight, and a late response from an older search overwrites the newer
    results.

    Args:
        searcher: Page fetcher to query.
        state: Application state supplying term lists, favorites and history.
        run_logger: Optional RunLogger for per-session JSON logs.
    """

    def __init__(
        self,
        searcher: VideoSearcher,
        state: AppState,
        *,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._searcher = searcher
        self._state = state
        self._run_logger = run_logger
        self._status = SearchStatus.IDLE
        self._query: str | None = None
        self._items: list[ResultItem] = []
        self._next_page_token: str | None = None
        self._error: str | None = None

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def query(self) -> str | None:
        return self._query

    @property
    def items(self) -> list[ResultItem]:
        return list(self._items)

    @property
    def next_page_token(self) -> str | None:
        return self._next_page_token

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def loading(self) -> bool:
        return self._status is SearchStatus.LOADING

    @property
    def can_load_more(self) -> bool:
        return not self.loading and self._query is not None and self._next_page_token is not None

    async def search(self, query: str) -> list[ResultItem]:
        """Start a fresh search, discarding any previous results.

        Returns:
            The first page's surviving items (empty if the request failed).
        """
        if self._run_logger and self._run_logger.active:
            self._run_logger.finish_session(len(self._items))

        self._query = query
        self._items = []
        self._next_page_token = None
        self._error = None
        self._status = SearchStatus.LOADING

        self._state.record_search(query)
        if self._run_logger:
            self._run_logger.start_session(
                query,
                self._state.included_terms.to_list(),
                self._state.excluded_terms.to_list(),
            )

        logger.info(f"Searching for: {query}")
        page = await self._fetch(query, page_token=None)
        if page is None:
            self._items = []
            return []

        self._items = list(page.items)
        self._next_page_token = page.next_page_token
        self._status = SearchStatus.READY
        return list(page.items)

    async def load_more(self) -> list[ResultItem]:
        """Fetch the next page and append its surviving items.

        Does nothing while a request is outstanding or when there is no
        continuation token. On failure the existing results are kept.

        Returns:
            The newly appended items.
        """
        query = self._query
        if query is None or not self.can_load_more:
            return []

        self._error = None
        self._status = SearchStatus.LOADING

        logger.info(f"Loading more results for: {query}")
        page = await self._fetch(query, page_token=self._next_page_token)
        if page is None:
            return []

        self._items.extend(page.items)
        self._next_page_token = page.next_page_token
        self._status = SearchStatus.READY
        return list(page.items)

    def toggle_favorite(self, item: ResultItem) -> bool:
        """Favorite or unfavorite an item under the current query.

        Returns:
            True if the item is a favorite afterwards.
        """
        return self._state.toggle_favorite(item, self._query or "")

    def finish(self) -> None:
        """Flush the session log, if one is being recorded."""
        if self._run_logger:
            self._run_logger.finish_session(len(self._items))

    async def _fetch(self, query: str, *, page_token: str | None) -> SearchPage | None:
        """Fetch one page, moving to ``failed`` and returning None on FetchError."""
        included = self._state.included_terms.to_list()
        excluded = self._state.excluded_terms.to_list()

        t0 = time.monotonic()
        try:
            page = await self._searcher.fetch_page(
                query,
                page_token=page_token,
                included_terms=included,
                excluded_terms=excluded,
            )
        except FetchError as e:
            duration = time.monotonic() - t0
            logger.error(f"Search request failed: {e.__cause__ or e}")
            self._error = FETCH_ERROR_MESSAGE
            self._status = SearchStatus.FAILED
            if self._run_logger:
                self._run_logger.log_page(
                    page_token=page_token,
                    request_query=build_search_query(query, included),
                    page=None,
                    duration_seconds=duration,
                    error=str(e.__cause__ or e),
                )
            return None

        duration = time.monotonic() - t0
        logger.info(
            f"Got {len(page.items)} results ({page.filtered_out} filtered out)"
            f"{', more available' if page.has_more else ''}"
        )
        if self._run_logger:
            self._run_logger.log_page(
                page_token=page_token,
                request_query=build_search_query(query, included),
                page=page,
                duration_seconds=duration,
            )
        return page
