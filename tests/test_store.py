"""Tests for LocalStore persistence."""

import json
from pathlib import Path

from vidsieve.data import ResultItem
from vidsieve.state import EXCLUDED_TERMS_KEY, FAVORITES_KEY, HISTORY_KEY, INCLUDED_TERMS_KEY
from vidsieve.store import DEFAULT_EXCLUDED_TERMS, DEFAULT_INCLUDED_TERMS, LocalStore


def test_load_state_uses_defaults_when_absent(tmp_path: Path) -> None:
    state = LocalStore(tmp_path / "data").load_state()
    assert state.included_terms.to_list() == list(DEFAULT_INCLUDED_TERMS)
    assert state.excluded_terms.to_list() == list(DEFAULT_EXCLUDED_TERMS)
    assert len(state.favorites) == 0
    assert len(state.history) == 0


def test_load_state_custom_defaults(tmp_path: Path) -> None:
    store = LocalStore(tmp_path, default_included_terms=[], default_excluded_terms=["spam"])
    state = store.load_state()
    assert state.included_terms.to_list() == []
    assert state.excluded_terms.to_list() == ["spam"]


def test_loading_does_not_write(tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    LocalStore(data_dir).load_state()
    assert not data_dir.exists()


def test_term_change_rewrites_entry(tmp_path: Path) -> None:
    store = LocalStore(tmp_path)
    state = store.load_state()

    state.add_excluded_term("spam")

    raw = json.loads(store.path_for(EXCLUDED_TERMS_KEY).read_text(encoding="utf-8"))
    assert raw == ["paypal.me", "spam"]
    # Other entries are independent and untouched
    assert not store.path_for(INCLUDED_TERMS_KEY).exists()


def test_state_survives_reload(tmp_path: Path) -> None:
    store = LocalStore(tmp_path)
    state = store.load_state()
    state.remove_included_term("method")
    state.add_favorite(
        ResultItem(
            video_id="v1",
            title="شرح",
            channel_title="Channel",
            published_at="2026-02-01T10:00:00Z",
        ),
        "fix",
    )
    state.record_search("fix")

    reloaded = LocalStore(tmp_path).load_state()

    assert reloaded.included_terms.to_list() == ["مشكلة", "شرح"]
    entry = reloaded.favorites.get("v1")
    assert entry is not None
    assert entry.item.title == "شرح"
    assert entry.search_term == "fix"
    assert entry.included_terms == ("مشكلة", "شرح")
    assert entry.excluded_terms == ("paypal.me",)
    assert reloaded.history.queries() == ["fix"]


def test_favorites_file_is_flat_json(tmp_path: Path) -> None:
    store = LocalStore(tmp_path)
    state = store.load_state()
    state.add_favorite(ResultItem(video_id="v1", title="t"), "q")

    raw = json.loads(store.path_for(FAVORITES_KEY).read_text(encoding="utf-8"))
    assert raw[0]["item"]["video_id"] == "v1"
    assert raw[0]["search_term"] == "q"
    assert raw[0]["excluded_terms"] == ["paypal.me"]


def test_empty_history_is_persisted_after_clear(tmp_path: Path) -> None:
    store = LocalStore(tmp_path)
    state = store.load_state()
    state.record_search("a")
    state.clear_history()
    assert json.loads(store.path_for(HISTORY_KEY).read_text(encoding="utf-8")) == []


def test_unreadable_entry_falls_back_to_default(tmp_path: Path) -> None:
    store = LocalStore(tmp_path)
    store.path_for(EXCLUDED_TERMS_KEY).write_text("{not json", encoding="utf-8")
    store.path_for(HISTORY_KEY).write_text('{"unexpected": "shape"}', encoding="utf-8")

    state = store.load_state()

    assert state.excluded_terms.to_list() == list(DEFAULT_EXCLUDED_TERMS)
    assert len(state.history) == 0


def test_stored_terms_are_normalized(tmp_path: Path) -> None:
    store = LocalStore(tmp_path)
    store.path_for(INCLUDED_TERMS_KEY).write_text('[" a", "a", "", "b"]', encoding="utf-8")
    state = store.load_state()
    assert state.included_terms.to_list() == ["a", "b"]
