"""Protocol for type-specific structural parsers."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from contentparse.models import Item


class StructureParser(Protocol):
    """Callable that fills the structural fields of a typed item.

    Parsers mutate the item in place and raise StructureError when the
    lines do not have the shape their type requires. They never change the
    item type or its files.
    """

    def __call__(
        self, item: Item, last_modified: Optional[datetime], lines: list[str]
    ) -> None: ...
