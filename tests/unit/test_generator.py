"""Tests for building tab hierarchies from a flat tab list and parent map."""

import pytest

from tabtree.core.tree.generator import TreeGenerator, clean_tab_parent_map
from tabtree.core.tree.node import TabTreeNode
from tabtree.models.tab import TabRecord


def _tabs(*ids: int) -> list[TabRecord]:
    return [TabRecord(id=i, title=f"tab {i}") for i in ids]


def _shape(node: TabTreeNode) -> dict:
    """Nested {id: {child_id: ...}} view of a hierarchy."""
    return {c.id: _shape(c) for c in node.children}


def _assert_acyclic_and_complete(root: TabTreeNode, ids: list[int]) -> None:
    seen = [n.id for n in root.iter_preorder()]
    assert sorted(seen) == sorted(ids)
    for node in root.iter_preorder():
        ancestor = node.parent
        while ancestor is not None:
            assert ancestor is not node
            ancestor = ancestor.parent


def test_builds_nested_tree(tabs: list[TabRecord], tab_parent_map: dict[int, int]) -> None:
    root = TreeGenerator(tabs, tab_parent_map).get_tree()
    assert _shape(root) == {1: {2: {4: {}}, 3: {}}, 5: {}}
    assert root.find(4).parent is root.find(2)


def test_empty_tab_list_yields_empty_root() -> None:
    root = TreeGenerator([], {1: 2}).get_tree()
    assert root.is_root
    assert root.children == []


def test_stale_parent_is_skipped_through_chain() -> None:
    """B's parent C has closed; C was opened from A, so B hangs under A."""
    root = TreeGenerator(_tabs(1, 2), {2: 3, 3: 1}).get_tree()
    assert _shape(root) == {1: {2: {}}}


def test_long_chain_of_closed_parents() -> None:
    root = TreeGenerator(_tabs(1, 2), {2: 10, 10: 11, 11: 12, 12: 1}).get_tree()
    assert _shape(root) == {1: {2: {}}}


def test_missing_parent_chain_attaches_to_root() -> None:
    root = TreeGenerator(_tabs(1, 2), {2: 3, 3: 4}).get_tree()
    assert _shape(root) == {1: {}, 2: {}}


def test_child_listed_before_parent() -> None:
    root = TreeGenerator(_tabs(2, 1), {2: 1}).get_tree()
    assert _shape(root) == {1: {2: {}}}


def test_children_keep_discovery_order() -> None:
    root = TreeGenerator(_tabs(1, 4, 2, 3), {2: 1, 3: 1, 4: 1}).get_tree()
    assert [c.id for c in root.find(1).children] == [4, 2, 3]


def test_one_node_per_tab_id() -> None:
    generator = TreeGenerator(_tabs(1, 2, 3), {2: 1, 3: 1})
    generator.get_tree()
    assert set(generator.node_map) == {1, 2, 3}
    assert generator.get_node(generator.tab_map[1]) is generator.node_map[1]
    assert generator.get_node(None) is generator.root_node


def test_duplicate_ids_last_record_wins_first_position_kept() -> None:
    tabs = [
        TabRecord(id=1, title="old"),
        TabRecord(id=2, title="other"),
        TabRecord(id=1, title="new"),
    ]
    root = TreeGenerator(tabs, {}).get_tree()
    assert [c.id for c in root.children] == [1, 2]
    assert root.children[0].title == "new"


@pytest.mark.parametrize(
    "parent_map",
    [
        {1: 1},  # live self-reference
        {1: 2, 2: 1},  # two live tabs naming each other
        {1: 9, 9: 1},  # loop through a closed tab
        {1: 8, 8: 9, 9: 8},  # loop among closed tabs only
        {1: 2, 2: 3, 3: 1},  # three-way live cycle
    ],
)
def test_cyclic_parent_maps_stay_acyclic(parent_map: dict[int, int]) -> None:
    ids = [1, 2, 3]
    root = TreeGenerator(_tabs(*ids), parent_map).get_tree()
    _assert_acyclic_and_complete(root, ids)


def test_live_cycle_breaks_at_last_attached_tab() -> None:
    root = TreeGenerator(_tabs(1, 2), {1: 2, 2: 1}).get_tree()
    assert _shape(root) == {2: {1: {}}}


def test_get_parent_tab_returns_none_on_closed_loop() -> None:
    generator = TreeGenerator(_tabs(1), {1: 8, 8: 9, 9: 8})
    assert generator.get_parent_tab(1) is None


def test_clean_tab_parent_map_drops_closed_keys() -> None:
    original = {2: 1, 3: 1, 7: 2}
    cleaned = clean_tab_parent_map(_tabs(1, 2, 3), original)
    assert cleaned == {2: 1, 3: 1}
    assert original == {2: 1, 3: 1, 7: 2}
    assert cleaned is not original
