"""Content tree ingesters: turn a folder or zip into source items."""

from pathlib import Path
from typing import Optional

from contentparse.ingesters.folder_ingester import FolderIngester
from contentparse.ingesters.zip_ingester import ZipIngester
from contentparse.protocols import Ingester

# First match wins, so more specific ingesters go first
_INGESTERS: list[Ingester] = [
    ZipIngester(),
    FolderIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find the first registered ingester that accepts the source.

    Args:
        source: Path to the content tree (folder or zip file)

    Returns:
        The matching Ingester, or None when the source is unsupported
    """
    source_path = Path(source)
    return next((i for i in _INGESTERS if i.can_handle(source_path)), None)


def register_ingester(ingester: Ingester, first: bool = False) -> None:
    """Add an ingester to the registry.

    Args:
        ingester: An object implementing the Ingester protocol
        first: Try it before the built-in ingesters
    """
    if first:
        _INGESTERS.insert(0, ingester)
    else:
        _INGESTERS.append(ingester)


def unregister_ingester(source_type: str) -> None:
    """Remove every registered ingester with the given source type."""
    _INGESTERS[:] = [i for i in _INGESTERS if i.source_type != source_type]


def supported_sources() -> list[str]:
    """Source types of the registered ingesters, in lookup order."""
    return [i.source_type for i in _INGESTERS]


__all__ = [
    "get_ingester",
    "register_ingester",
    "unregister_ingester",
    "supported_sources",
    "ZipIngester",
    "FolderIngester",
]
