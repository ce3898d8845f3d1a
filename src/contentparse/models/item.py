"""Core data model for parsed content items."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from contentparse.errors import ModelError
from contentparse.models.file import File
from contentparse.models.route import Route


class ItemType(str, Enum):
    DOCUMENT = "document"
    LOCATION = "location"
    REPOSITORY = "repository"
    PRESENTATION = "presentation"
    MESSAGE = "message"


# Types rendered as containers of other items
CONTAINER_TYPES = frozenset({ItemType.REPOSITORY, ItemType.LOCATION})

# Types sharing the document grammar
DOCUMENT_TYPES = frozenset({ItemType.DOCUMENT, ItemType.LOCATION, ItemType.REPOSITORY})


@dataclass
class MetaData:
    """Item metadata taken from the trailing metadata block."""

    tags: list[str] = field(default_factory=list)
    author: Optional[str] = None
    language: Optional[str] = None
    alias: Optional[str] = None
    creation_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None


@dataclass
class Section:
    """A headed section of a document body."""

    title: str
    level: int
    text: str


@dataclass
class DocumentContent:
    text: str
    sections: list[Section] = field(default_factory=list)


@dataclass
class Slide:
    index: int
    title: str
    text: str


@dataclass
class PresentationContent:
    slides: list[Slide] = field(default_factory=list)


@dataclass
class MessageContent:
    text: str


Content = Union[DocumentContent, PresentationContent, MessageContent]


@dataclass
class Item:
    """A content item: identity, type, structural fields and child files."""

    route: Route
    files: list[File] = field(default_factory=list)
    type: Optional[ItemType] = None
    title: str = ""
    description: str = ""
    content: Optional[Content] = None
    last_modified_date: Optional[datetime] = None
    meta_data: MetaData = field(default_factory=MetaData)

    @classmethod
    def new(cls, route: Route, files: list[File]) -> "Item":
        """Create an untyped item.

        Raises:
            ModelError: if the route is not a Route, a file entry is not a
                File, or two files share a route.
        """
        if not isinstance(route, Route):
            raise ModelError(f"Invalid route {route!r}")

        seen: set[Route] = set()
        for file in files:
            if not isinstance(file, File):
                raise ModelError(f"Invalid file {file!r} for item {route.value!r}")
            if file.route in seen:
                raise ModelError(
                    f"Duplicate file {file.route.value!r} for item {route.value!r}"
                )
            seen.add(file.route)

        return cls(route=route, files=list(files))

    def assign_type(self, item_type: ItemType) -> None:
        """Set the item type. A type can only be assigned once."""
        if self.type is not None:
            raise ModelError(
                f"Item {self.route.value!r} is already typed as {self.type.value}",
                route=self.route.value,
            )
        try:
            self.type = ItemType(item_type)
        except ValueError as err:
            raise ModelError(
                f"Unknown item type {item_type!r}", route=self.route.value
            ) from err

    def to_dict(self) -> dict:
        """Return a JSON serializable view of the item."""
        content: Optional[dict] = None
        if isinstance(self.content, DocumentContent):
            content = {
                "text": self.content.text,
                "sections": [
                    {"title": s.title, "level": s.level, "text": s.text}
                    for s in self.content.sections
                ],
            }
        elif isinstance(self.content, PresentationContent):
            content = {
                "slides": [
                    {"index": s.index, "title": s.title, "text": s.text}
                    for s in self.content.slides
                ]
            }
        elif isinstance(self.content, MessageContent):
            content = {"text": self.content.text}

        meta = self.meta_data
        return {
            "route": self.route.value,
            "type": self.type.value if self.type else None,
            "title": self.title,
            "description": self.description,
            "content": content,
            "last_modified_date": _isoformat(self.last_modified_date),
            "meta_data": {
                "tags": list(meta.tags),
                "author": meta.author,
                "language": meta.language,
                "alias": meta.alias,
                "creation_date": _isoformat(meta.creation_date),
                "last_modified_date": _isoformat(meta.last_modified_date),
            },
            "files": [f.to_dict() for f in self.files],
        }


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
