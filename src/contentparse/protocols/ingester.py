"""Protocol for content source handlers."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contentparse.models import SourceItem


@runtime_checkable
class Ingester(Protocol):
    """Protocol for content source handlers.

    Implementations discover items in different source formats (folder, zip).
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[SourceItem]:
        """Yield one source item per content item found in the source."""
        ...
