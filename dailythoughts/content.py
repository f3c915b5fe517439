import logging
import re
from pathlib import Path

from dailythoughts.exceptions import EntryNotFound, StorageError

logger = logging.getLogger(__name__)

# Matches entry ids like "2025-01-02"
ENTRY_ID_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_entry_id(value: str) -> bool:
    """Check that `value` has the YYYY-MM-DD shape used for entry ids and URLs."""
    return ENTRY_ID_RE.fullmatch(value) is not None


def list_entries(content_root: Path, order: str = "reverse"):
    """
    Enumerate the entry ids available under `content_root`.

    Every `<date>.md` file is one entry; anything else in the directory is
    skipped. With order="reverse" the ids are sorted newest first, which is
    what the prev/next navigation expects. order="filesystem" keeps whatever
    order the directory listing yields.

    Raises StorageError if the directory cannot be listed.
    """
    content_root = Path(content_root)

    try:
        paths = list(content_root.iterdir())
    except OSError as e:
        raise StorageError(f"Cannot list entries in {content_root}: {e}") from e

    entries = []
    for path in paths:
        if path.suffix != ".md":
            continue
        if not is_entry_id(path.stem):
            logger.debug("Skipping %s: not named after a date", path.name)
            continue
        entries.append(path.stem)

    if order == "reverse":
        entries.sort(reverse=True)

    return entries


def load_entry(content_root: Path, entry_id: str) -> str:
    """
    Read the markdown source of one entry.

    Raises EntryNotFound if there is no `<entry_id>.md`, StorageError if the
    file exists but cannot be read or decoded.
    """
    if not is_entry_id(entry_id):
        raise StorageError(f"Refusing to load malformed entry id {entry_id!r}")

    path = Path(content_root) / f"{entry_id}.md"

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise EntryNotFound(entry_id) from e
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Cannot read {path}: {e}") from e
