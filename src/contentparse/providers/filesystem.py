"""Content provider backed by a file on disk."""

from datetime import datetime, timezone
from pathlib import Path


class FileContentProvider:
    """Reads a file lazily; nothing is touched until data is requested."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def data(self) -> bytes:
        return self.path.read_bytes()

    def last_modified(self) -> datetime:
        return datetime.fromtimestamp(self.path.stat().st_mtime, tz=timezone.utc)

    def __repr__(self) -> str:
        return f"FileContentProvider({str(self.path)!r})"
