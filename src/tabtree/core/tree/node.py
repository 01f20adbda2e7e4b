"""Mutable tree node for one tab, bookmark or suggestion."""

from collections.abc import Iterator

from tabtree.config import ROOT_ID
from tabtree.models.tab import EntryId, EntryKind, Record, TabStatus


class TabTreeNode:
    """A node in a tab hierarchy.

    A node built without a record is a root: it carries ROOT_ID and exists only
    as an attachment point. Children are owned by the node and kept in
    insertion order; ``parent`` is a back-reference used for upward queries.

    Between rebuilds the title, favicon and status fields may be patched in
    place through the ``set_*_by_id`` methods. No other mutation happens
    outside of a build pass.
    """

    def __init__(self, record: Record | None = None) -> None:
        self.record = record
        self.children: list[TabTreeNode] = []
        self.parent: TabTreeNode | None = None

        if record is None:
            self.id: EntryId = ROOT_ID
            self.kind = EntryKind.ROOT
            self.title = ""
            self.url = ""
            self.fav_icon_url: str | None = None
            self.status: TabStatus | None = None
            return

        self.id = record.id
        self.kind = record.kind
        self.title = record.title
        self.url = record.url
        self.fav_icon_url = getattr(record, "fav_icon_url", None)
        self.status = getattr(record, "status", None)

    def __repr__(self) -> str:
        return f"TabTreeNode(id={self.id!r}, kind={self.kind.value}, children={len(self.children)})"

    @property
    def is_root(self) -> bool:
        return self.kind is EntryKind.ROOT

    @property
    def is_bookmark(self) -> bool:
        return self.kind is EntryKind.BOOKMARK

    @property
    def is_search_suggestion(self) -> bool:
        return self.kind is EntryKind.SEARCH_SUGGESTION

    def add_child(self, node: "TabTreeNode") -> None:
        """Append node as the last child. Callers guarantee it is not attached yet."""
        self.children.append(node)
        node.parent = self

    def is_ancestor_of(self, node: "TabTreeNode") -> bool:
        """Return True if self is node or one of node's ancestors."""
        current: TabTreeNode | None = node
        while current is not None:
            if current is self:
                return True
            current = current.parent
        return False

    def iter_preorder(self) -> Iterator["TabTreeNode"]:
        """Yield the subtree depth-first, pre-order, skipping root nodes."""
        stack: list[TabTreeNode] = [self]
        while stack:
            node = stack.pop()
            if not node.is_root:
                yield node
            stack.extend(reversed(node.children))

    def find(self, entry_id: EntryId) -> "TabTreeNode | None":
        """Depth-first search for the node with entry_id. Roots never match."""
        for node in self.iter_preorder():
            if node.id == entry_id:
                return node
        return None

    def set_title_by_id(self, entry_id: EntryId, title: str) -> None:
        node = self.find(entry_id)
        if node is not None:
            node.title = title

    def set_fav_icon_url_by_id(self, entry_id: EntryId, fav_icon_url: str) -> None:
        node = self.find(entry_id)
        if node is not None:
            node.fav_icon_url = fav_icon_url

    def set_status_by_id(self, entry_id: EntryId, status: TabStatus) -> None:
        node = self.find(entry_id)
        if node is not None:
            node.status = status

    def get_all_tab_ids(self) -> list[EntryId]:
        """Return every id in the subtree, pre-order, starting with this node."""
        return [node.id for node in self.iter_preorder()]
