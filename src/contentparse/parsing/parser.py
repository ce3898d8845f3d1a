"""Parser orchestrating normalization, cleanup, detection and parsing."""

import logging
from datetime import datetime
from typing import Mapping, Optional

from contentparse.errors import (
    ContentReadError,
    ModelError,
    StructureError,
    UnknownTypeError,
)
from contentparse.models import Item, ItemType, Route, SourceItem
from contentparse.parsing import document, message, presentation
from contentparse.parsing.cleanup import cleanup
from contentparse.parsing.files import convert_files
from contentparse.parsing.lines import get_lines
from contentparse.parsing.typedetection import detect_type
from contentparse.protocols import StructureParser

# One structural parser per item type
DEFAULT_PARSERS: dict[ItemType, StructureParser] = {
    ItemType.DOCUMENT: document.parse,
    ItemType.LOCATION: document.parse,
    ItemType.REPOSITORY: document.parse,
    ItemType.PRESENTATION: presentation.parse,
    ItemType.MESSAGE: message.parse,
}


class Parser:
    """Turns source items into typed, structured items.

    The parser is stateless between calls. Each call builds and returns a
    fresh Item, so one parser can be shared by concurrent callers.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        parsers: Optional[Mapping[ItemType, StructureParser]] = None,
    ):
        """Initialize the parser.

        Args:
            logger: Receives parse tracing and file conversion warnings.
                    Defaults to this module's logger.
            parsers: Structural parser per item type. Defaults to
                     DEFAULT_PARSERS.
        """
        self.logger = logger or logging.getLogger(__name__)
        self._parsers = dict(DEFAULT_PARSERS if parsers is None else parsers)

    @property
    def registered_types(self) -> frozenset[ItemType]:
        return frozenset(self._parsers)

    def register(self, item_type: ItemType, parser: StructureParser) -> None:
        """Register (or replace) the structural parser for a type."""
        self._parsers[ItemType(item_type)] = parser

    def unregister(self, item_type: ItemType) -> None:
        """Remove the structural parser for a type."""
        self._parsers.pop(ItemType(item_type), None)

    def parse(self, source: SourceItem) -> Item:
        """Parse a source item.

        Raises:
            ModelError: the route or the file set is invalid
            ContentReadError: the content provider failed
            StructureError: the content does not fit the detected type
            UnknownTypeError: no parser is registered for the detected type
        """
        self.logger.debug("Parsing item %r", str(source))

        files = convert_files(source.files, self.logger)

        try:
            item = Item.new(Route.parse(source.route), files)
        except ModelError as err:
            raise ModelError(
                f"Unable to convert item {str(source)!r}: {err}", route=source.route
            ) from err

        last_modified, data = self._read(source)
        lines = cleanup(get_lines(data))

        item.assign_type(detect_type(lines))
        item_type = item.type.value

        structure_parser = self._parsers.get(item.type)
        if structure_parser is None:
            raise UnknownTypeError(
                f"Cannot parse item {str(source)!r}: unknown item type {item_type!r}",
                route=source.route,
                item_type=item_type,
            )

        try:
            structure_parser(item, last_modified, lines)
        except StructureError as err:
            raise StructureError(
                f"Unable to parse item {str(source)!r} (type: {item_type}): {err}",
                route=source.route,
                item_type=item_type,
            ) from err

        return item

    def _read(self, source: SourceItem) -> tuple[datetime, bytes]:
        provider = source.content_provider
        try:
            last_modified = provider.last_modified()
            data = provider.data()
        except Exception as err:
            raise ContentReadError(
                f"Unable to read content of item {str(source)!r}: {err}",
                route=source.route,
            ) from err
        return last_modified, data
