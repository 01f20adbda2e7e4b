"""Tests for domain models."""

import pytest

from tabtree.models.tab import (
    NO_SELECTION,
    BookmarkRecord,
    EntryKind,
    SearchSuggestion,
    TabRecord,
    TabStatus,
    search_url,
)


def test_tab_record_is_frozen() -> None:
    tab = TabRecord(id=1, title="Test")
    with pytest.raises(AttributeError):
        tab.title = "changed"  # type: ignore[misc]


def test_records_carry_their_kind() -> None:
    assert TabRecord(id=1).kind is EntryKind.TAB
    assert BookmarkRecord(id="b", title="B", url="https://b").kind is EntryKind.BOOKMARK
    assert SearchSuggestion(id="s", title="q").kind is EntryKind.SEARCH_SUGGESTION


def test_tab_record_defaults() -> None:
    tab = TabRecord(id=7)
    assert tab.status is TabStatus.COMPLETE
    assert tab.fav_icon_url is None


def test_no_selection_uses_sentinel_id() -> None:
    assert NO_SELECTION.id == -1


def test_search_url_quotes_query() -> None:
    assert search_url("a&b c") == "https://www.google.com/search?q=a%26b+c"
