"""Data models for contentparse."""

from contentparse.models.file import File
from contentparse.models.item import (
    CONTAINER_TYPES,
    DOCUMENT_TYPES,
    Content,
    DocumentContent,
    Item,
    ItemType,
    MessageContent,
    MetaData,
    PresentationContent,
    Section,
    Slide,
)
from contentparse.models.route import Route
from contentparse.models.source import SourceFile, SourceItem

__all__ = [
    "CONTAINER_TYPES",
    "DOCUMENT_TYPES",
    "Content",
    "DocumentContent",
    "File",
    "Item",
    "ItemType",
    "MessageContent",
    "MetaData",
    "PresentationContent",
    "Route",
    "Section",
    "Slide",
    "SourceFile",
    "SourceItem",
]
