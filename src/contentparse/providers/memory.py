"""In-memory content provider."""

from datetime import datetime, timezone
from typing import Optional


class MemoryContentProvider:
    """Content held in memory, for generated items and tests."""

    def __init__(self, data: bytes | str, last_modified: Optional[datetime] = None):
        self._data = data.encode("utf-8") if isinstance(data, str) else data
        self._last_modified = last_modified or datetime.now(timezone.utc)

    def data(self) -> bytes:
        return self._data

    def last_modified(self) -> datetime:
        return self._last_modified
