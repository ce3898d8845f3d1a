"""Protocol for the primary content stream of an item or file."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ContentProvider(Protocol):
    """Lazy access to raw bytes and their modification time.

    Implementations may raise any exception on read failure; the parser
    reports it as a content read error for the item.
    """

    def data(self) -> bytes:
        """Return the raw content bytes."""
        ...

    def last_modified(self) -> datetime:
        """Return the time the content was last changed."""
        ...
