"""Protocols for the host integration layer."""

from typing import Protocol, runtime_checkable

from tabtree.models.tab import BookmarkRecord, EntryId, TabRecord


@runtime_checkable
class HasId(Protocol):
    """Anything that identifies a selectable entry by id."""

    @property
    def id(self) -> EntryId: ...


@runtime_checkable
class HostProtocol(Protocol):
    """Protocol for the browser host that owns tabs and bookmarks."""

    def query_tabs(self, keyword: str | None) -> list[TabRecord]:
        """Return open tabs, already filtered on keyword when one is given."""
        ...

    def get_tab_parent_map(self) -> dict[int, int]:
        """Return the child-tab-id to parent-tab-id map."""
        ...

    def get_active_tab(self) -> TabRecord | None:
        """Return the tab that is active in the current window."""
        ...

    def search_bookmarks(self, keyword: str | None) -> list[BookmarkRecord]:
        """Return bookmarks matching keyword."""
        ...

    def activate_tab(self, tab_id: int) -> None:
        """Switch to an existing tab."""
        ...

    def create_tab(self, url: str) -> None:
        """Open url in a new tab."""
        ...

    def remove_tabs(self, tab_ids: list[int]) -> None:
        """Close the given tabs."""
        ...
