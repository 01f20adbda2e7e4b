"""Tab tree construction and keyboard navigation for a tab-switcher popup."""

from tabtree.core.tree.generator import TreeGenerator, clean_tab_parent_map
from tabtree.core.tree.navigation import NavigationSequencer
from tabtree.core.tree.node import TabTreeNode
from tabtree.protocols import HasId, HostProtocol
from tabtree.switcher import TabSwitcher

__all__ = [
    "HasId",
    "HostProtocol",
    "NavigationSequencer",
    "TabSwitcher",
    "TabTreeNode",
    "TreeGenerator",
    "clean_tab_parent_map",
]
