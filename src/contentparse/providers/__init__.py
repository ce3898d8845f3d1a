"""Content providers for items and files."""

from contentparse.providers.archive import ZipContentProvider
from contentparse.providers.filesystem import FileContentProvider
from contentparse.providers.memory import MemoryContentProvider

__all__ = ["FileContentProvider", "MemoryContentProvider", "ZipContentProvider"]
