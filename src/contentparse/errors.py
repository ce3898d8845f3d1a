"""Exception hierarchy for the parsing pipeline."""

from typing import Optional


class ContentParseError(Exception):
    """Base class for all errors raised while parsing an item.

    Carries the route of the item and, once known, the detected type so a
    failure can be diagnosed without re-running the pipeline.
    """

    def __init__(
        self,
        message: str,
        route: Optional[str] = None,
        item_type: Optional[str] = None,
    ):
        super().__init__(message)
        self.route = route
        self.item_type = item_type


class ModelError(ContentParseError):
    """An item or file model could not be constructed."""


class ContentReadError(ContentParseError):
    """The content provider failed to deliver data or a timestamp."""


class StructureError(ContentParseError):
    """The cleaned lines do not have the shape required by the item type."""


class UnknownTypeError(ContentParseError):
    """No structural parser is registered for the detected type."""


class FileConversionError(ContentParseError):
    """A single source file could not be converted into a File record."""
