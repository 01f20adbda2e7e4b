"""CLI for inspecting tab trees from a host snapshot file."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from tabtree.config import MAX_SHOW_BOOKMARK_COUNT, resolve_snapshot_file
from tabtree.core.importer.json_reader import Snapshot, parse_snapshot
from tabtree.core.tree.generator import TreeGenerator, clean_tab_parent_map
from tabtree.core.tree.markdown import render_tree_as_markdown
from tabtree.core.tree.navigation import NavigationSequencer
from tabtree.core.tree.node import TabTreeNode
from tabtree.core.tree.results import build_result_tree
from tabtree.logging_config import configure_logging
from tabtree.models.tab import NO_SELECTION, Selection

app = typer.Typer(help="tabtree: browse and navigate the tab tree of a browser snapshot.")

SnapshotOption = Annotated[
    Path | None,
    typer.Option("--snapshot", "-s", help="Snapshot JSON file (tabs, tabParentMap, bookmarks)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load_snapshot(snapshot: Path | None) -> Snapshot:
    """Read and parse the snapshot, exiting with an error if unusable."""
    path = snapshot or resolve_snapshot_file()
    if path is None or not path.is_file():
        logger.error("Snapshot file not found: {}", path)
        raise typer.Exit(1)
    try:
        return parse_snapshot(json.loads(path.read_text(encoding="utf-8")))
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        logger.error("Invalid snapshot {}: {}", path, e)
        raise typer.Exit(1) from e


def _build_roots(snap: Snapshot) -> tuple[TabTreeNode, TabTreeNode, TabTreeNode]:
    return (
        TreeGenerator(snap.tabs, snap.tab_parent_map).get_tree(),
        build_result_tree(snap.bookmarks, limit=MAX_SHOW_BOOKMARK_COUNT),
        build_result_tree(snap.suggestions),
    )


@app.command()
def tree(
    snapshot: SnapshotOption = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render"),
    ] = None,
) -> None:
    """Print the tab tree and bookmark results as markdown."""
    snap = _load_snapshot(snapshot)
    root, bookmark_root, suggestion_root = _build_roots(snap)

    typer.echo(render_tree_as_markdown(root, max_depth=max_depth, selected_id=snap.active_tab_id), nl=False)
    if bookmark_root.children:
        typer.echo("\n## Bookmarks\n")
        typer.echo(render_tree_as_markdown(bookmark_root), nl=False)
    if suggestion_root.children:
        typer.echo("\n## Search\n")
        typer.echo(render_tree_as_markdown(suggestion_root), nl=False)


@app.command()
def sequence(
    snapshot: SnapshotOption = None,
    selected: Annotated[
        int | None,
        typer.Option("--selected", help="Selected tab id (default: active tab)"),
    ] = None,
    next_steps: int = typer.Option(0, "--next", "-n", help="Press down this many times"),
    prev_steps: int = typer.Option(0, "--prev", "-p", help="Press up this many times"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the keyboard navigation order and where the selection ends up."""
    snap = _load_snapshot(snapshot)
    sequencer = NavigationSequencer(*_build_roots(snap))

    start_id = selected if selected is not None else snap.active_tab_id
    sequencer.set_current_idx(Selection(start_id) if start_id is not None else NO_SELECTION)
    for _ in range(next_steps):
        sequencer.get_next_tab()
    for _ in range(prev_steps):
        sequencer.get_previous_tab()

    current = sequencer.current
    if output_json:
        data = {
            "sequence": [
                {"id": node.id, "kind": node.kind.value, "title": node.title, "url": node.url}
                for node in sequencer
            ],
            "current_index": sequencer.current_index,
            "current_id": current.id if current is not None else None,
        }
        typer.echo(json.dumps(data, indent=2))
        return

    for i, node in enumerate(sequencer):
        marker = ">" if i == sequencer.current_index else " "
        typer.echo(f"{marker} {i:3d}  [{node.kind.value}] {node.title[:80]}  id={node.id}")


@app.command()
def subtree(
    tab_id: int = typer.Argument(..., help="Tab whose subtree would be closed"),
    snapshot: SnapshotOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List the tab ids that closing a tab together with its subtree removes."""
    snap = _load_snapshot(snapshot)
    root = TreeGenerator(snap.tabs, snap.tab_parent_map).get_tree()
    node = NavigationSequencer.get_node_by_tab_id(tab_id, root)
    if node is None:
        typer.echo(f"Tab '{tab_id}' not found.")
        raise typer.Exit(1)

    tab_ids = node.get_all_tab_ids()
    if output_json:
        typer.echo(json.dumps({"tab_id": tab_id, "tab_ids": tab_ids}))
    else:
        typer.echo(" ".join(str(i) for i in tab_ids))


@app.command(name="clean-map")
def clean_map(snapshot: SnapshotOption = None) -> None:
    """Print the tab parent map without entries for closed tabs, as JSON."""
    snap = _load_snapshot(snapshot)
    cleaned = clean_tab_parent_map(snap.tabs, snap.tab_parent_map)
    logger.debug("Dropped {} stale entries", len(snap.tab_parent_map) - len(cleaned))
    typer.echo(json.dumps({str(k): v for k, v in cleaned.items()}, indent=2))
