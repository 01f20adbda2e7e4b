"""Parse host snapshot JSON into domain models."""

from dataclasses import dataclass
from typing import Any

from tabtree.core.tree.results import suggestions_from_queries
from tabtree.models.tab import BookmarkRecord, SearchSuggestion, TabRecord, TabStatus


@dataclass(frozen=True)
class Snapshot:
    """Everything the host hands over for one popup refresh."""

    tabs: tuple[TabRecord, ...]
    tab_parent_map: dict[int, int]
    bookmarks: tuple[BookmarkRecord, ...] = ()
    suggestions: tuple[SearchSuggestion, ...] = ()
    active_tab_id: int | None = None


def parse_tab(raw: dict[str, Any]) -> TabRecord:
    """Parse one host tab object (``favIconUrl`` naming) into a TabRecord."""
    if not isinstance(raw, dict):
        msg = f"Tab must be an object: {raw!r}"
        raise ValueError(msg)
    try:
        tab_id = int(raw["id"])
    except (KeyError, TypeError, ValueError) as e:
        msg = f"Tab without a valid id: {raw!r}"
        raise ValueError(msg) from e

    status = raw.get("status") or TabStatus.COMPLETE
    try:
        status = TabStatus(status)
    except ValueError as e:
        msg = f"Tab {tab_id} has unknown status {status!r}"
        raise ValueError(msg) from e

    # Hosts send null for tabs that have no title or url yet
    return TabRecord(
        id=tab_id,
        title=raw.get("title") or "",
        url=raw.get("url") or "",
        fav_icon_url=raw.get("favIconUrl") or None,
        status=status,
    )


def parse_tab_parent_map(raw: dict[str, Any]) -> dict[int, int]:
    """Convert the JSON parent map (string keys) into an int -> int map."""
    if not isinstance(raw, dict):
        msg = f"Tab parent map must be an object: {raw!r}"
        raise ValueError(msg)
    try:
        return {int(child): int(parent) for child, parent in raw.items()}
    except (TypeError, ValueError) as e:
        msg = f"Tab parent map must map tab ids to tab ids: {raw!r}"
        raise ValueError(msg) from e


def parse_bookmark(raw: dict[str, Any]) -> BookmarkRecord:
    """Parse one host bookmark object. The url doubles as id when none is given."""
    if not isinstance(raw, dict) or not raw.get("url"):
        msg = f"Bookmark without url: {raw!r}"
        raise ValueError(msg)
    return BookmarkRecord(
        id=str(raw.get("id") or raw["url"]),
        title=raw.get("title") or "",
        url=raw["url"],
    )


def _get_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        msg = f"Snapshot '{key}' must be a list, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def parse_snapshot(data: dict[str, Any]) -> Snapshot:
    """Parse a snapshot dict into a Snapshot.

    Args:
        data: Raw snapshot with ``tabs`` and optional ``tabParentMap``,
            ``bookmarks``, ``suggestions`` and ``activeTabId`` keys.

    Returns:
        Snapshot with records in input order.

    Raises:
        ValueError: If any section has the wrong shape.
    """
    if not isinstance(data, dict):
        msg = f"Snapshot must be an object, got {type(data).__name__}"
        raise ValueError(msg)
    if "tabs" not in data:
        msg = "Snapshot has no 'tabs' list"
        raise ValueError(msg)

    tabs = tuple(parse_tab(t) for t in _get_list(data, "tabs"))
    tab_parent_map = parse_tab_parent_map(data.get("tabParentMap", {}))
    bookmarks = tuple(parse_bookmark(b) for b in _get_list(data, "bookmarks"))

    queries = _get_list(data, "suggestions")
    if not all(isinstance(q, str) for q in queries):
        msg = f"Snapshot 'suggestions' must be a list of strings: {queries!r}"
        raise ValueError(msg)

    active = data.get("activeTabId")
    try:
        active_tab_id = int(active) if active is not None else None
    except (TypeError, ValueError) as e:
        msg = f"Invalid activeTabId: {active!r}"
        raise ValueError(msg) from e

    return Snapshot(
        tabs=tabs,
        tab_parent_map=tab_parent_map,
        bookmarks=bookmarks,
        suggestions=tuple(suggestions_from_queries(queries)),
        active_tab_id=active_tab_id,
    )
