"""Build a tab hierarchy from a flat tab list and a parent map."""

from collections.abc import Iterable, Mapping

from loguru import logger

from tabtree.core.tree.node import TabTreeNode
from tabtree.models.tab import TabRecord


class TreeGenerator:
    """Reconstruct the opener hierarchy of the open tabs.

    ``tab_parent_map`` maps a child tab id to the id of the tab it was opened
    from. It may be stale: parents that have since closed are skipped by
    walking further up the map, and tabs with no live ancestor hang from the
    root.
    """

    def __init__(self, tabs: Iterable[TabRecord], tab_parent_map: Mapping[int, int]) -> None:
        self.tab_parent_map = tab_parent_map
        self.node_map: dict[int, TabTreeNode] = {}
        self.tab_map: dict[int, TabRecord] = {}
        self.root_node = TabTreeNode()

        # Duplicate ids: last record wins, first position is kept.
        for tab in tabs:
            self.tab_map[tab.id] = tab

    def get_tree(self) -> TabTreeNode:
        """Attach every tab under its nearest live ancestor and return the root."""
        for tab in self.tab_map.values():
            node = self.get_node(tab)
            parent_node = self.get_node(self.get_parent_tab(tab.id))
            if node.is_ancestor_of(parent_node):
                logger.debug("Tab {} would become its own ancestor, attaching to root", tab.id)
                parent_node = self.root_node
            parent_node.add_child(node)
        return self.root_node

    def get_parent_tab(self, tab_id: int) -> TabRecord | None:
        """Return the nearest ancestor of tab_id that is still open.

        Closed parents are skipped by following the parent map. A chain that
        loops back on itself is treated as having no parent.
        """
        visited = {tab_id}
        parent_id = self.tab_parent_map.get(tab_id)
        while parent_id is not None:
            if parent_id in visited:
                logger.debug("Cycle in tab parent map at {}, treating {} as top-level", parent_id, tab_id)
                return None
            parent = self.tab_map.get(parent_id)
            if parent is not None:
                return parent
            visited.add(parent_id)
            parent_id = self.tab_parent_map.get(parent_id)
        return None

    def get_node(self, tab: TabRecord | None) -> TabTreeNode:
        """Return the node for tab, creating it on first reference. None is the root."""
        if tab is None:
            return self.root_node
        node = self.node_map.get(tab.id)
        if node is None:
            node = TabTreeNode(tab)
            self.node_map[tab.id] = node
        return node


def clean_tab_parent_map(
    tabs: Iterable[TabRecord], tab_parent_map: Mapping[int, int]
) -> dict[int, int]:
    """Return a copy of tab_parent_map keeping only keys of tabs still open."""
    current_ids = {tab.id for tab in tabs}
    return {child: parent for child, parent in tab_parent_map.items() if child in current_ids}
