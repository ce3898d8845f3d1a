"""Structural parser for presentations."""

from datetime import datetime
from typing import Optional

from contentparse.errors import StructureError
from contentparse.models import Item, ItemType, PresentationContent, Slide
from contentparse.parsing.markup import (
    SLIDE_BOUNDARY,
    fence_mask,
    first_paragraph,
    parse_heading,
    require_type,
    split_title,
    trim_blank,
)
from contentparse.parsing.metadata import apply_meta, split_meta


def parse(item: Item, last_modified: Optional[datetime], lines: list[str]) -> None:
    """Split a presentation into slides on ``---`` boundaries.

    Raises:
        StructureError: if there is no slide boundary or every slide is empty
    """
    require_type(item, frozenset({ItemType.PRESENTATION}))

    body, meta = split_meta(lines)
    chunks = split_slides(body)
    if len(chunks) < 2:
        raise StructureError(
            f"Presentation {item.route.value!r} has no slide boundaries",
            route=item.route.value,
            item_type=ItemType.PRESENTATION.value,
        )

    slides = []
    for chunk in chunks:
        chunk = trim_blank(chunk)
        if not chunk:
            continue
        heading = parse_heading(chunk[0])
        slides.append(
            Slide(
                index=len(slides),
                title=heading[1] if heading else "",
                text="\n".join(chunk),
            )
        )

    if not slides:
        raise StructureError(
            f"Presentation {item.route.value!r} has only empty slides",
            route=item.route.value,
            item_type=ItemType.PRESENTATION.value,
        )

    title, _, after = split_title(item, chunks[0])
    item.title = title
    item.description = first_paragraph(after)
    item.content = PresentationContent(slides=slides)
    apply_meta(item, meta, last_modified)


def split_slides(lines: list[str]) -> list[list[str]]:
    """Split lines on slide boundaries outside code fences."""
    chunks: list[list[str]] = [[]]
    for line, fenced in zip(lines, fence_mask(lines)):
        if line == SLIDE_BOUNDARY and not fenced:
            chunks.append([])
        else:
            chunks[-1].append(line)
    return chunks
