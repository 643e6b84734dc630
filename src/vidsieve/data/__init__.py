"""Data models for vidsieve."""

from vidsieve.data.models import (
    FavoriteEntry,
    HistoryEntry,
    ResultItem,
    SearchPage,
    SearchStatus,
)

__all__ = [
    "FavoriteEntry",
    "HistoryEntry",
    "ResultItem",
    "SearchPage",
    "SearchStatus",
]
