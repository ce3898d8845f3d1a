"""contentparse - classify and parse content items into a typed document model."""

from contentparse.errors import (
    ContentParseError,
    ContentReadError,
    FileConversionError,
    ModelError,
    StructureError,
    UnknownTypeError,
)
from contentparse.models import File, Item, ItemType, Route, SourceFile, SourceItem
from contentparse.parsing import Parser

__all__ = [
    "ContentParseError",
    "ContentReadError",
    "File",
    "FileConversionError",
    "Item",
    "ItemType",
    "ModelError",
    "Parser",
    "Route",
    "SourceFile",
    "SourceItem",
    "StructureError",
    "UnknownTypeError",
]
