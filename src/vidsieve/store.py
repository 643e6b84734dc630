"""Local JSON persistence for the application state.

Four independent entries live under a data directory, one ``<key>.json`` file
each. They are read once at startup and rewritten in full whenever the
matching part of the state changes.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from vidsieve.data import FavoriteEntry, HistoryEntry
from vidsieve.state import (
    EXCLUDED_TERMS_KEY,
    FAVORITES_KEY,
    HISTORY_KEY,
    INCLUDED_TERMS_KEY,
    AppState,
    Favorites,
    SearchHistory,
)
from vidsieve.terms import TermSet

DEFAULT_INCLUDED_TERMS = ("method", "مشكلة", "شرح")
DEFAULT_EXCLUDED_TERMS = ("paypal.me",)

_TERMS_ADAPTER = TypeAdapter(list[str])
_FAVORITES_ADAPTER = TypeAdapter(list[FavoriteEntry])
_HISTORY_ADAPTER = TypeAdapter(list[HistoryEntry])

_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    EXCLUDED_TERMS_KEY: _TERMS_ADAPTER,
    INCLUDED_TERMS_KEY: _TERMS_ADAPTER,
    FAVORITES_KEY: _FAVORITES_ADAPTER,
    HISTORY_KEY: _HISTORY_ADAPTER,
}

logger = logging.getLogger(__name__)


def _entry_value(key: str, state: AppState) -> list[Any]:
    """Return the serializable value of one state entry."""
    if key == EXCLUDED_TERMS_KEY:
        return state.excluded_terms.to_list()
    if key == INCLUDED_TERMS_KEY:
        return state.included_terms.to_list()
    if key == FAVORITES_KEY:
        return state.favorites.to_list()
    if key == HISTORY_KEY:
        return state.history.to_list()
    msg = f"Unknown storage key: {key}"
    raise ValueError(msg)


class LocalStore:
    """Key-value JSON store backing an ``AppState``.

    Args:
        data_dir: Directory holding the entry files (created on first write).
        default_included_terms: Include terms used when none are stored.
        default_excluded_terms: Exclude terms used when none are stored.
    """

    def __init__(
        self,
        data_dir: Path,
        *,
        default_included_terms: tuple[str, ...] | list[str] = DEFAULT_INCLUDED_TERMS,
        default_excluded_terms: tuple[str, ...] | list[str] = DEFAULT_EXCLUDED_TERMS,
    ) -> None:
        self._data_dir = data_dir
        self._default_included = list(default_included_terms)
        self._default_excluded = list(default_excluded_terms)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def read(self, key: str, default: list[Any]) -> list[Any]:
        """Read one entry, falling back to ``default`` when absent or unreadable."""
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            return _ADAPTERS[key].validate_json(path.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable entry {path}. Error: {e}")
            return default

    def write(self, key: str, value: list[Any]) -> Path:
        """Rewrite one entry in full."""
        self._data_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        path.write_bytes(_ADAPTERS[key].dump_json(value, indent=2))
        return path

    def save(self, key: str, state: AppState) -> None:
        """Save-on-change hook: persist the entry that changed."""
        path = self.write(key, _entry_value(key, state))
        logger.debug(f"Saved {key} to {path}")

    def load_state(self) -> AppState:
        """Read all entries and return a state wired to save itself on change."""
        return AppState(
            included_terms=TermSet(self.read(INCLUDED_TERMS_KEY, self._default_included)),
            excluded_terms=TermSet(self.read(EXCLUDED_TERMS_KEY, self._default_excluded)),
            favorites=Favorites(self.read(FAVORITES_KEY, [])),
            history=SearchHistory(self.read(HISTORY_KEY, [])),
            on_change=self.save,
        )
