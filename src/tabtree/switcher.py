"""Popup controller: keyword refreshes, keyboard selection and tab actions."""

from collections.abc import Sequence

from loguru import logger

from tabtree.config import MAX_SHOW_BOOKMARK_COUNT, MAX_SHOW_SUGGESTION_COUNT, NO_SELECTION_ID
from tabtree.core.tree.generator import TreeGenerator
from tabtree.core.tree.navigation import NavigationSequencer
from tabtree.core.tree.node import TabTreeNode
from tabtree.core.tree.results import build_result_tree, suggestions_from_queries
from tabtree.models.tab import (
    NO_SELECTION,
    BookmarkRecord,
    Selection,
    TabRecord,
    TabStatus,
    search_url,
)
from tabtree.protocols import HasId, HostProtocol


def normalize_keyword(raw: str) -> str:
    """Escape backslashes so the host's pattern matching sees them literally."""
    return raw.replace("\\", "\\\\")


class TabSwitcher:
    """State behind the tab-switcher popup.

    The host integration layer forwards its change notifications to
    ``on_tab_updated`` / ``on_tab_removed`` and key presses to the
    ``select_*`` / ``activate`` / ``close_*`` methods. Hierarchies are rebuilt
    wholesale on every refresh; ``on_tab_updated`` is the one place that
    patches the current tab tree in place.
    """

    def __init__(self, host: HostProtocol) -> None:
        self.host = host
        self.keyword: str | None = None
        self.selected: HasId = NO_SELECTION
        self.root_node = TabTreeNode()
        self.bookmark_root_node = TabTreeNode()
        self.suggestion_root_node = TabTreeNode()
        self.sequencer = NavigationSequencer()
        self._generation = 0

    @property
    def roots(self) -> tuple[TabTreeNode, TabTreeNode, TabTreeNode]:
        """Hierarchies in navigation order: tabs, bookmarks, suggestions."""
        return self.root_node, self.bookmark_root_node, self.suggestion_root_node

    def begin_refresh(self) -> int:
        """Start a refresh and return its generation number."""
        self._generation += 1
        return self._generation

    def apply_refresh(
        self,
        generation: int,
        *,
        tabs: Sequence[TabRecord],
        tab_parent_map: dict[int, int],
        active_tab: TabRecord | None,
        bookmarks: Sequence[BookmarkRecord],
    ) -> bool:
        """Install fetched results unless a newer refresh has started since.

        Returns:
            True if the results were applied, False if they were stale.
        """
        if generation != self._generation:
            logger.debug("Discarding stale refresh {} (latest is {})", generation, self._generation)
            return False

        self.root_node = TreeGenerator(tabs, tab_parent_map).get_tree()
        self.bookmark_root_node = build_result_tree(bookmarks, limit=MAX_SHOW_BOOKMARK_COUNT)
        if self.keyword:
            self.selected = NO_SELECTION
        else:
            self.selected = Selection(active_tab.id) if active_tab is not None else NO_SELECTION
        logger.debug(
            "Refreshed: {} tabs, {} bookmarks, keyword {!r}",
            len(tabs), len(self.bookmark_root_node.children), self.keyword,
        )
        return True

    def refresh(self, keyword: str | None = None) -> None:
        """Fetch tabs and bookmarks from the host and rebuild every hierarchy."""
        self.keyword = keyword
        generation = self.begin_refresh()
        self.apply_refresh(
            generation,
            tabs=self.host.query_tabs(keyword),
            tab_parent_map=self.host.get_tab_parent_map(),
            active_tab=self.host.get_active_tab(),
            bookmarks=self.host.search_bookmarks(keyword),
        )

    def set_keyword(self, raw: str) -> None:
        """Handle a change of the search field."""
        keyword = normalize_keyword(raw)
        self.suggestion_root_node = TabTreeNode()
        self.refresh(keyword or None)

    def set_suggestions(self, queries: Sequence[str]) -> None:
        """Install search suggestions fetched by the host for the current keyword."""
        self.suggestion_root_node = build_result_tree(
            suggestions_from_queries(queries), limit=MAX_SHOW_SUGGESTION_COUNT
        )

    def on_tab_updated(
        self,
        tab_id: int,
        *,
        title: str | None = None,
        fav_icon_url: str | None = None,
        status: TabStatus | str | None = None,
    ) -> None:
        """Patch a tab's fields in the current tree without rebuilding it."""
        if title:
            self.root_node.set_title_by_id(tab_id, title)
        if fav_icon_url:
            self.root_node.set_fav_icon_url_by_id(tab_id, fav_icon_url)
        if status:
            self.root_node.set_status_by_id(tab_id, TabStatus(status))

    def on_tab_removed(self, tab_id: int) -> None:
        logger.debug("Tab {} removed, refreshing", tab_id)
        self.refresh(self.keyword)

    def update_sequence(self) -> None:
        """Re-flatten the current hierarchies and re-locate the selection."""
        self.sequencer.refresh_queue(*self.roots)
        self.sequencer.set_current_idx(self.selected)

    def select_next(self) -> TabTreeNode | None:
        self.update_sequence()
        node = self.sequencer.get_next_tab()
        if node is not None:
            self.selected = node
        return node

    def select_previous(self) -> TabTreeNode | None:
        self.update_sequence()
        node = self.sequencer.get_previous_tab()
        if node is not None:
            self.selected = node
        return node

    def activate(self, entry: HasId | None = None) -> None:
        """Act on an entry (the selection by default), as Enter or a click does."""
        if entry is None:
            entry = self.selected
        if entry.id == NO_SELECTION_ID:
            self.host.create_tab(search_url(self.keyword or ""))
            return

        node = entry if isinstance(entry, TabTreeNode) else self._find_entry(entry.id)
        if node is None:
            logger.debug("Entry {} is no longer listed, nothing to activate", entry.id)
            return

        if node.is_bookmark:
            self.host.create_tab(node.url)
        elif node.is_search_suggestion:
            self.host.create_tab(search_url(node.title))
        else:
            self.host.activate_tab(int(node.id))

    def _find_entry(self, entry_id: int | str) -> TabTreeNode | None:
        for root in self.roots:
            node = root.find(entry_id)
            if node is not None:
                return node
        return None

    def close_tab(self, tab_id: int) -> None:
        self.host.remove_tabs([tab_id])

    def close_selected_subtree(self) -> list[int]:
        """Close the selected tab together with every tab opened from it.

        Returns:
            The ids passed to the host, empty when nothing was closed.
        """
        if self.selected.id == NO_SELECTION_ID:
            return []
        node = self.sequencer.get_node_by_tab_id(self.selected.id, self.root_node)
        if node is None:
            return []
        tab_ids = [int(i) for i in node.get_all_tab_ids()]
        self.host.remove_tabs(tab_ids)
        return tab_ids
