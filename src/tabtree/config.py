"""Configuration constants for tabtree."""

import os
from pathlib import Path

# Id of the synthetic root node every hierarchy hangs from.
ROOT_ID: int = -1

# Selection id meaning "nothing selected".
NO_SELECTION_ID: int = -1

# Result caps applied before secondary hierarchies are built.
MAX_SHOW_BOOKMARK_COUNT: int = 30
MAX_SHOW_SUGGESTION_COUNT: int = 10

SEARCH_URL_PREFIX: str = "https://www.google.com/search?q="

SNAPSHOT_ENV_VAR: str = "TABTREE_SNAPSHOT"

# Host snapshot location. First file found is used.
SNAPSHOT_FILES: list[Path] = [
    Path("~/.config/tabtree/snapshot.json").expanduser(),
    Path("~/.local/share/tabtree/snapshot.json").expanduser(),
    Path("/tmp/tabtree-snapshot.json"),
]


def resolve_snapshot_file() -> Path | None:
    """Return the snapshot file to read, or None if none exists.

    The TABTREE_SNAPSHOT environment variable wins over SNAPSHOT_FILES.
    """
    override = os.environ.get(SNAPSHOT_ENV_VAR)
    if override:
        return Path(override).expanduser()
    for candidate in SNAPSHOT_FILES:
        if candidate.is_file():
            return candidate
    return None
