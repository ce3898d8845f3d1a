"""Conversion of source files into File records."""

import logging
from typing import Iterable, Optional

from contentparse.errors import FileConversionError
from contentparse.models import File, Route, SourceFile

logger = logging.getLogger(__name__)


def convert_files(
    sources: Iterable[SourceFile], log: Optional[logging.Logger] = None
) -> list[File]:
    """Convert source files in order, skipping failures and duplicate routes.

    Args:
        sources: Source files as supplied by the ingester
        log: Logger receiving a warning per skipped file

    Returns:
        File records in the order of their sources; the first file wins
        when several sources share a route
    """
    log = log or logger
    files: list[File] = []
    seen: set[Route] = set()

    for source in sources:
        try:
            file = File.from_source(source)
        except FileConversionError as err:
            log.warning("Unable to convert file %r: %s", source.route, err)
            continue
        if file.route in seen:
            log.warning(
                "Skipping duplicate file %r: route %r is already taken",
                source.route,
                file.route.value,
            )
            continue
        seen.add(file.route)
        files.append(file)

    return files
