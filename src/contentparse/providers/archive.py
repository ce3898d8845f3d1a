"""Content provider backed by a ZIP archive member."""

import zipfile
from datetime import datetime, timezone
from pathlib import Path


class ZipContentProvider:
    """Reads one member of a ZIP archive, opening the archive per call."""

    def __init__(self, archive: Path | str, member: str):
        self.archive = Path(archive)
        self.member = member

    def data(self) -> bytes:
        with zipfile.ZipFile(self.archive, "r") as zf:
            return zf.read(self.member)

    def last_modified(self) -> datetime:
        with zipfile.ZipFile(self.archive, "r") as zf:
            info = zf.getinfo(self.member)
        # ZIP timestamps carry no zone
        return datetime(*info.date_time, tzinfo=timezone.utc)

    def __repr__(self) -> str:
        return f"ZipContentProvider({str(self.archive)!r}, {self.member!r})"
