"""Keyboard navigation over one or more flattened tab hierarchies."""

from collections.abc import Iterator

from tabtree.core.tree.node import TabTreeNode
from tabtree.models.tab import EntryId
from tabtree.protocols import HasId

UNSET_INDEX = -1


class NavigationSequencer:
    """Linear arrow-key order over a primary hierarchy and its secondary result sets.

    The sequence is the pre-order flattening of every hierarchy passed to
    ``refresh_queue``, concatenated in call order. ``current_index`` is either
    UNSET_INDEX or a valid index into the sequence.
    """

    def __init__(self, *roots: TabTreeNode) -> None:
        self.sequence: list[TabTreeNode] = []
        self.current_index = UNSET_INDEX
        self.refresh_queue(*roots)

    def __len__(self) -> int:
        return len(self.sequence)

    def __iter__(self) -> Iterator[TabTreeNode]:
        return iter(self.sequence)

    @property
    def current(self) -> TabTreeNode | None:
        if self.current_index == UNSET_INDEX:
            return None
        return self.sequence[self.current_index]

    def refresh_queue(self, *roots: TabTreeNode) -> None:
        """Re-flatten the hierarchies, primary first, then secondaries in order.

        The current entry keeps its position by id when it survives the
        refresh; otherwise the index becomes unset.
        """
        previous = self.current
        self.sequence = [node for root in roots for node in root.iter_preorder()]
        self.current_index = UNSET_INDEX
        if previous is not None:
            self._select_id(previous.id)

    def set_current_idx(self, selected: HasId | None) -> None:
        """Point at the entry whose id matches selected, or unset the index."""
        self.current_index = UNSET_INDEX
        if selected is not None:
            self._select_id(selected.id)

    def _select_id(self, entry_id: EntryId) -> None:
        for i, node in enumerate(self.sequence):
            if node.id == entry_id:
                self.current_index = i
                return

    def get_next_tab(self) -> TabTreeNode | None:
        """Move one entry forward, stopping at the last one."""
        if not self.sequence:
            return None
        if self.current_index == UNSET_INDEX:
            self.current_index = 0
        else:
            self.current_index = min(self.current_index + 1, len(self.sequence) - 1)
        return self.sequence[self.current_index]

    def get_previous_tab(self) -> TabTreeNode | None:
        """Move one entry back, stopping at the first one."""
        if not self.sequence:
            return None
        if self.current_index == UNSET_INDEX:
            self.current_index = 0
        else:
            self.current_index = max(self.current_index - 1, 0)
        return self.sequence[self.current_index]

    @staticmethod
    def get_node_by_tab_id(tab_id: EntryId, root: TabTreeNode) -> TabTreeNode | None:
        """Find the node for tab_id in root's hierarchy, with its whole subtree."""
        return root.find(tab_id)
