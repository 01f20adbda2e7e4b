"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from tabtree.models.tab import BookmarkRecord, TabRecord, TabStatus
from tests.unit.fakes import SNAPSHOT_DATA

# root
#   1 News
#     2 Article (opened from 1)
#       4 Comments (opened from 2)
#     3 Another article (opened from 1)
#   5 Mail
TABS = [
    TabRecord(id=1, title="News", url="https://news.example.com"),
    TabRecord(id=2, title="Article", url="https://news.example.com/a"),
    TabRecord(id=3, title="Another article", url="https://news.example.com/b"),
    TabRecord(id=4, title="Comments", url="https://news.example.com/a#c", status=TabStatus.LOADING),
    TabRecord(id=5, title="Mail", url="https://mail.example.com"),
]

TAB_PARENT_MAP = {2: 1, 3: 1, 4: 2}

BOOKMARKS = [
    BookmarkRecord(id="b1", title="Python docs", url="https://docs.python.org"),
    BookmarkRecord(id="b2", title="Mail archive", url="https://mail.example.com/archive"),
]


@pytest.fixture
def tabs() -> list[TabRecord]:
    return list(TABS)


@pytest.fixture
def tab_parent_map() -> dict[int, int]:
    return dict(TAB_PARENT_MAP)


@pytest.fixture
def bookmarks() -> list[BookmarkRecord]:
    return list(BOOKMARKS)


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    """Write SNAPSHOT_DATA to a temporary JSON file."""
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT_DATA))
    return path
