"""vidsieve: YouTube search with include/exclude title filters, favorites and history."""

from vidsieve.config import VidsieveConfig, create_from_config, load_config
from vidsieve.data import FavoriteEntry, HistoryEntry, ResultItem, SearchPage, SearchStatus
from vidsieve.errors import FetchError
from vidsieve.run_logger import RunLogger
from vidsieve.search.base import VideoSearcher
from vidsieve.search.youtube import YouTubeSearcher
from vidsieve.session import FETCH_ERROR_MESSAGE, SearchSession
from vidsieve.state import AppState, Favorites, SearchHistory
from vidsieve.store import LocalStore
from vidsieve.terms import (
    TermSet,
    build_search_query,
    has_included_term,
    is_recent,
    should_exclude,
)

__all__ = [
    # Models
    "FavoriteEntry",
    "HistoryEntry",
    "ResultItem",
    "SearchPage",
    "SearchStatus",
    # Errors
    "FETCH_ERROR_MESSAGE",
    "FetchError",
    # Term filtering
    "TermSet",
    "build_search_query",
    "has_included_term",
    "is_recent",
    "should_exclude",
    # Protocols
    "VideoSearcher",
    # Searchers
    "YouTubeSearcher",
    # State
    "AppState",
    "Favorites",
    "LocalStore",
    "SearchHistory",
    "SearchSession",
    # Logging
    "RunLogger",
    # Config
    "VidsieveConfig",
    "create_from_config",
    "load_config",
]
