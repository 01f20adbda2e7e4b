"""Domain models for tab, bookmark and suggestion records."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar
from urllib.parse import quote_plus

from tabtree.config import NO_SELECTION_ID, SEARCH_URL_PREFIX

EntryId = int | str


class EntryKind(StrEnum):
    """Which kind of selectable entry a node stands for."""

    ROOT = "root"
    TAB = "tab"
    BOOKMARK = "bookmark"
    SEARCH_SUGGESTION = "search_suggestion"


class TabStatus(StrEnum):
    """Loading status reported by the host for a tab."""

    LOADING = "loading"
    COMPLETE = "complete"
    UNLOADED = "unloaded"


@dataclass(frozen=True)
class TabRecord:
    """A single open browser tab."""

    kind: ClassVar[EntryKind] = EntryKind.TAB

    id: int
    title: str = ""
    url: str = ""
    fav_icon_url: str | None = None
    status: TabStatus = TabStatus.COMPLETE


@dataclass(frozen=True)
class BookmarkRecord:
    """A bookmark matching the current keyword."""

    kind: ClassVar[EntryKind] = EntryKind.BOOKMARK

    id: str
    title: str
    url: str


@dataclass(frozen=True)
class SearchSuggestion:
    """A suggested web search query."""

    kind: ClassVar[EntryKind] = EntryKind.SEARCH_SUGGESTION

    id: str
    title: str

    @property
    def url(self) -> str:
        return search_url(self.title)


Record = TabRecord | BookmarkRecord | SearchSuggestion


@dataclass(frozen=True)
class Selection:
    """Descriptor of the currently selected entry."""

    id: EntryId


NO_SELECTION = Selection(id=NO_SELECTION_ID)


def search_url(query: str) -> str:
    """Build the web search URL for a query."""
    return SEARCH_URL_PREFIX + quote_plus(query)
