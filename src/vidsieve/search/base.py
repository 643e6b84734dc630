from collections.abc import Sequence
from typing import Protocol

from vidsieve.data import SearchPage


class VideoSearcher(Protocol):
    """Interface for fetching one page of video results."""

    async def fetch_page(
        self,
        query: str,
        *,
        page_token: str | None = None,
        included_terms: Sequence[str] = (),
        excluded_terms: Sequence[str] = (),
    ) -> SearchPage:
        """Fetch a single page of results for a query.

        Args:
            query: Free-text search query.
            page_token: Continuation token from the previous page, if any.
            included_terms: Terms merged into the query as an OR group.
            excluded_terms: Terms whose matching titles are dropped from the page.

        Returns:
            The filtered page and the endpoint's continuation token.

        Raises:
            FetchError: If the endpoint fails or cannot be reached.
        """
        ...
