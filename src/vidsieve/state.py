"""Application state: term lists, favorites and search history.

``AppState`` is passed explicitly to the session and the CLI. Every mutation
goes through its methods, which call ``on_change(key, state)`` once per
effective change so the persistence layer can rewrite that entry.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime

from vidsieve.data import FavoriteEntry, HistoryEntry, ResultItem
from vidsieve.terms import TermSet

EXCLUDED_TERMS_KEY = "excludedTerms"
INCLUDED_TERMS_KEY = "includedTerms"
FAVORITES_KEY = "favorites"
HISTORY_KEY = "searchHistory"

MAX_HISTORY_ENTRIES = 10

logger = logging.getLogger(__name__)


class Favorites:
    """Saved results keyed by video id, in the order they were saved."""

    def __init__(self, entries: Iterable[FavoriteEntry] = ()) -> None:
        self._entries: dict[str, FavoriteEntry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: FavoriteEntry) -> bool:
        """Save an entry. An id that is already saved keeps its existing entry."""
        if entry.video_id in self._entries:
            return False
        self._entries[entry.video_id] = entry
        return True

    def remove(self, video_id: str) -> bool:
        return self._entries.pop(video_id, None) is not None

    def get(self, video_id: str) -> FavoriteEntry | None:
        return self._entries.get(video_id)

    def to_list(self) -> list[FavoriteEntry]:
        return list(self._entries.values())

    def __contains__(self, video_id: object) -> bool:
        return video_id in self._entries

    def __iter__(self) -> Iterator[FavoriteEntry]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._entries)


class SearchHistory:
    """Most-recent-first list of distinct past queries, capped at 10."""

    def __init__(self, entries: Iterable[HistoryEntry] = ()) -> None:
        self._entries: list[HistoryEntry] = []
        for entry in entries:
            if entry.query.strip() and not any(e.query == entry.query for e in self._entries):
                self._entries.append(entry)
        del self._entries[MAX_HISTORY_ENTRIES:]

    def record(self, query: str, *, now: datetime | None = None) -> bool:
        """Push a query to the front, collapsing any earlier occurrence.

        Blank queries are ignored.

        Returns:
            True if the history changed.
        """
        cleaned = query.strip()
        if not cleaned:
            return False
        timestamp = (now or datetime.now(tz=UTC)).isoformat()
        self._entries = [e for e in self._entries if e.query != cleaned]
        self._entries.insert(0, HistoryEntry(query=cleaned, timestamp=timestamp))
        del self._entries[MAX_HISTORY_ENTRIES:]
        return True

    def clear(self) -> bool:
        if not self._entries:
            return False
        self._entries.clear()
        return True

    def queries(self) -> list[str]:
        return [e.query for e in self._entries]

    def to_list(self) -> list[HistoryEntry]:
        return list(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._entries)


ChangeHook = Callable[[str, "AppState"], None]


@dataclass
class AppState:
    """Everything the user has configured or saved."""

    included_terms: TermSet = field(default_factory=TermSet)
    excluded_terms: TermSet = field(default_factory=TermSet)
    favorites: Favorites = field(default_factory=Favorites)
    history: SearchHistory = field(default_factory=SearchHistory)
    on_change: ChangeHook | None = field(default=None, repr=False, compare=False)

    def _changed(self, key: str, changed: bool) -> bool:
        if changed:
            logger.debug(f"State entry changed: {key}")
            if self.on_change is not None:
                self.on_change(key, self)
        return changed

    # Term lists

    def add_included_term(self, term: str) -> bool:
        return self._changed(INCLUDED_TERMS_KEY, self.included_terms.add(term))

    def remove_included_term(self, term: str) -> bool:
        return self._changed(INCLUDED_TERMS_KEY, self.included_terms.remove(term))

    def add_excluded_term(self, term: str) -> bool:
        return self._changed(EXCLUDED_TERMS_KEY, self.excluded_terms.add(term))

    def remove_excluded_term(self, term: str) -> bool:
        return self._changed(EXCLUDED_TERMS_KEY, self.excluded_terms.remove(term))

    # Favorites

    def add_favorite(self, item: ResultItem, search_term: str) -> bool:
        """Save an item with the current query and term lists."""
        entry = FavoriteEntry(
            item=item,
            search_term=search_term,
            included_terms=tuple(self.included_terms),
            excluded_terms=tuple(self.excluded_terms),
        )
        return self._changed(FAVORITES_KEY, self.favorites.add(entry))

    def remove_favorite(self, video_id: str) -> bool:
        return self._changed(FAVORITES_KEY, self.favorites.remove(video_id))

    def toggle_favorite(self, item: ResultItem, search_term: str) -> bool:
        """Save the item if it is not saved, otherwise remove it.

        Returns:
            True if the item is a favorite afterwards.
        """
        if item.video_id in self.favorites:
            self.remove_favorite(item.video_id)
            return False
        self.add_favorite(item, search_term)
        return True

    # History

    def record_search(self, query: str, *, now: datetime | None = None) -> bool:
        return self._changed(HISTORY_KEY, self.history.record(query, now=now))

    def clear_history(self) -> bool:
        return self._changed(HISTORY_KEY, self.history.clear())
