"""Trailing metadata block of an item.

An item may close with a block of ``key: value`` lines introduced by a
``---`` line::

    # Title

    Body text.

    ---
    tags: python, parsing
    date: 2013-05-07
    type: location
"""

import re
from datetime import datetime
from typing import Optional

from contentparse.models import Item, ItemType, MetaData
from contentparse.parsing.markup import SLIDE_BOUNDARY, fence_mask, trim_blank

META_KEYS = frozenset({"type", "tags", "date", "author", "language", "alias"})

META_LINE_PATTERN = re.compile(r"^([A-Za-z][\w-]*)\s*:\s*(.*)$")


def split_meta(lines: list[str]) -> tuple[list[str], dict[str, str]]:
    """Separate the body of an item from its metadata block.

    The block starts at the last ``---`` outside a code fence and is only
    recognized when every non-blank line after it is a known ``key: value``
    pair. Later keys override earlier ones.

    Returns:
        The body lines (trailing blank lines removed) and the metadata
        values keyed by lower-case key; the lines are returned unchanged
        with an empty dict when there is no metadata block.
    """
    mask = fence_mask(lines)
    separator = None
    for index in range(len(lines) - 1, -1, -1):
        if lines[index] == SLIDE_BOUNDARY and not mask[index]:
            separator = index
            break

    if separator is None:
        return lines, {}

    meta: dict[str, str] = {}
    for line in lines[separator + 1:]:
        if not line.strip():
            continue
        match = META_LINE_PATTERN.match(line.strip())
        if match is None or match.group(1).lower() not in META_KEYS:
            return lines, {}
        meta[match.group(1).lower()] = match.group(2).strip()

    if not meta:
        return lines, {}

    return trim_blank(lines[:separator]), meta


def declared_type(meta: dict[str, str]) -> Optional[ItemType]:
    """Return the item type named by the ``type`` key, if it is a known one."""
    value = meta.get("type", "").strip().lower()
    try:
        return ItemType(value)
    except ValueError:
        return None


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 date; malformed values yield None."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def apply_meta(
    item: Item, meta: dict[str, str], last_modified: Optional[datetime]
) -> None:
    """Fill the item metadata and modification date."""
    tags = [tag.strip() for tag in meta.get("tags", "").split(",") if tag.strip()]
    item.meta_data = MetaData(
        tags=tags,
        author=meta.get("author") or None,
        language=meta.get("language") or None,
        alias=meta.get("alias") or None,
        creation_date=parse_date(meta.get("date")),
        last_modified_date=last_modified,
    )
    item.last_modified_date = last_modified
