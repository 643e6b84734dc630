"""Tests for data models."""

import pytest

from vidsieve.data import FavoriteEntry, HistoryEntry, ResultItem, SearchPage, SearchStatus


def test_result_item_minimal() -> None:
    item = ResultItem(video_id="abc123", title="A video")
    assert item.video_id == "abc123"
    assert item.title == "A video"
    assert item.description == ""
    assert item.channel_title == ""
    assert item.published_at is None
    assert item.thumbnail_url is None


def test_result_item_url() -> None:
    item = ResultItem(video_id="abc123", title="A video")
    assert item.url == "https://www.youtube.com/watch?v=abc123"


def test_result_item_is_frozen() -> None:
    item = ResultItem(video_id="abc123", title="A video")
    with pytest.raises(AttributeError):
        item.title = "changed"  # type: ignore[misc]


def test_search_page_defaults() -> None:
    page = SearchPage()
    assert page.items == ()
    assert page.next_page_token is None
    assert page.filtered_out == 0
    assert not page.has_more


def test_search_page_has_more() -> None:
    page = SearchPage(items=(ResultItem(video_id="1", title="t"),), next_page_token="CAUQAA")
    assert page.has_more


def test_favorite_entry_keyed_by_video_id() -> None:
    entry = FavoriteEntry(
        item=ResultItem(video_id="xyz", title="Saved"),
        search_term="query",
        included_terms=("method",),
        excluded_terms=("paypal.me",),
    )
    assert entry.video_id == "xyz"
    assert entry.included_terms == ("method",)


def test_history_entry() -> None:
    entry = HistoryEntry(query="cats", timestamp="2026-02-01T10:00:00+00:00")
    assert entry.query == "cats"


def test_search_status_values() -> None:
    assert SearchStatus.IDLE == "idle"
    assert SearchStatus.LOADING == "loading"
    assert SearchStatus.READY == "ready"
    assert SearchStatus.FAILED == "failed"
