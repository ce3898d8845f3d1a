"""Structural parser for short messages."""

import textwrap
from datetime import datetime
from typing import Optional

from contentparse.errors import StructureError
from contentparse.models import Item, ItemType, MessageContent
from contentparse.parsing.markup import require_type, trim_blank
from contentparse.parsing.metadata import apply_meta, split_meta

TITLE_WIDTH = 60
PLACEHOLDER = "..."


def parse(item: Item, last_modified: Optional[datetime], lines: list[str]) -> None:
    """Use the message body as content and its first line as description.

    Raises:
        StructureError: if the message has no text
    """
    require_type(item, frozenset({ItemType.MESSAGE}))

    body, meta = split_meta(lines)
    body = trim_blank(body)
    if not body:
        raise StructureError(
            f"Message {item.route.value!r} has no text",
            route=item.route.value,
            item_type=ItemType.MESSAGE.value,
        )

    first_line = body[0].strip()
    item.title = shorten(first_line)
    item.description = first_line
    item.content = MessageContent(text="\n".join(body))
    apply_meta(item, meta, last_modified)


def shorten(text: str, width: int = TITLE_WIDTH) -> str:
    """Shorten text on a word boundary, cutting words longer than the width."""
    short = textwrap.shorten(text, width=width, placeholder=PLACEHOLDER)
    if short == PLACEHOLDER.strip():
        return text[: width - len(PLACEHOLDER)] + PLACEHOLDER
    return short
