"""Render tab hierarchies as markdown."""

import io

from tabtree.core.tree.node import TabTreeNode
from tabtree.models.tab import EntryId, TabStatus


def render_tree_as_markdown(
    root: TabTreeNode,
    *,
    max_depth: int | None = None,
    selected_id: EntryId | None = None,
) -> str:
    """Render a hierarchy as an indented markdown bullet list.

    Args:
        root: Node to start rendering from. A root sentinel itself is not printed.
        max_depth: Max levels below the start node to include (None = unlimited).
            Top-level tabs are one level below a root sentinel, so 0 from a
            root renders nothing.
        selected_id: Entry to mark with a leading ``>``.

    Returns:
        Markdown string with bullet-list hierarchy.
    """
    out = io.StringIO()
    # The root sentinel is not printed, so its children start unindented
    offset = 1 if root.is_root else 0

    # (node, levels below the start node)
    todo: list[tuple[TabTreeNode, int]] = [(root, 0)]
    while todo:
        node, depth = todo.pop()
        if not node.is_root:
            indent = "    " * (depth - offset)
            marker = "> " if selected_id is not None and node.id == selected_id else ""
            title = node.title or node.url or str(node.id)
            line = f"{indent}- {marker}{title}"
            if node.url and node.url != title:
                line += f" <{node.url}>"
            if node.status == TabStatus.LOADING:
                line += " (loading)"
            out.write(line + "\n")

        # Truncation indicator when children are cut off by max_depth
        if max_depth is not None and depth == max_depth:
            if node.children and not node.is_root:
                child_indent = "    " * (depth + 1 - offset)
                count = len(node.children)
                noun = "child" if count == 1 else "children"
                out.write(f"{child_indent}- ... ({count} more {noun}, id={node.id})\n")
            continue

        for child in reversed(node.children):
            todo.append((child, depth + 1))

    return out.getvalue()
