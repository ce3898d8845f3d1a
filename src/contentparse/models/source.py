"""Descriptors of raw content as delivered by an ingester."""

from dataclasses import dataclass, field
from typing import Optional

from contentparse.protocols.content_provider import ContentProvider


@dataclass
class SourceFile:
    """A raw file attached to a source item."""

    route: str
    content_provider: Optional[ContentProvider]


@dataclass
class SourceItem:
    """A raw content item: route, attached files and the primary content stream."""

    route: str
    content_provider: ContentProvider
    files: list[SourceFile] = field(default_factory=list)

    def __str__(self) -> str:
        return self.route or "/"
