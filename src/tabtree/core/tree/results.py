"""Flat result hierarchies for bookmarks and search suggestions."""

from collections.abc import Sequence
from typing import TypeVar

from tabtree.core.tree.node import TabTreeNode
from tabtree.models.tab import Record, SearchSuggestion

T = TypeVar("T")


def get_top_n(records: Sequence[T], count: int) -> list[T]:
    """Return the first count records, keeping their order."""
    return list(records[: max(count, 0)])


def build_result_tree(records: Sequence[Record], *, limit: int | None = None) -> TabTreeNode:
    """Hang one node per record directly under a fresh root.

    Args:
        records: Bookmarks, suggestions or tabs, in display order.
        limit: Keep at most this many records (None = all).

    Returns:
        Root node whose children follow the input order.
    """
    root = TabTreeNode()
    kept = records if limit is None else get_top_n(records, limit)
    for record in kept:
        root.add_child(TabTreeNode(record))
    return root


def suggestions_from_queries(queries: Sequence[str]) -> list[SearchSuggestion]:
    """Wrap raw query strings as suggestion records with positional ids."""
    return [SearchSuggestion(id=f"suggestion-{i}", title=q) for i, q in enumerate(queries)]
