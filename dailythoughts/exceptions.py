"""
Exceptions raised while reading entries from the content directory.

    Exception (built-in)
    └── ContentError
        ├── StorageError  - content directory or entry file unreadable (500)
        └── EntryNotFound - no markdown source for a requested date (404)
"""


class ContentError(Exception):
    """Base class for failures of the entry repository."""

    pass


class StorageError(ContentError):
    """
    The backing store could not be listed or read.

    Fatal to the current request. The message may contain paths and OS
    detail, so it is logged but never sent to the client.
    """

    pass


class EntryNotFound(ContentError):
    """No `<date>.md` exists for the requested entry id."""

    def __init__(self, entry_id: str):
        super().__init__(f"No daily thought for {entry_id}")
        self.entry_id = entry_id
