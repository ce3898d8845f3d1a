"""Structural parser for documents, locations and repositories."""

from datetime import datetime
from typing import Optional

from contentparse.models import DOCUMENT_TYPES, DocumentContent, Item, Section
from contentparse.parsing.markup import (
    fence_mask,
    first_paragraph,
    join_blocks,
    parse_heading,
    require_type,
    split_title,
    trim_blank,
)
from contentparse.parsing.metadata import apply_meta, split_meta


def parse(item: Item, last_modified: Optional[datetime], lines: list[str]) -> None:
    """Populate title, description and sectioned content of a container item.

    The first level 1 heading is the title. The first paragraph after it
    becomes the description and stays part of the content text, along with
    any text that precedes the title.
    """
    require_type(item, DOCUMENT_TYPES)

    body, meta = split_meta(lines)
    title, before, after = split_title(item, body)
    rest = join_blocks(before, after)

    item.title = title
    item.description = first_paragraph(after)
    item.content = DocumentContent(text="\n".join(rest), sections=split_sections(rest))
    apply_meta(item, meta, last_modified)


def split_sections(lines: list[str]) -> list[Section]:
    """Split body lines on headings of level 2 and deeper.

    Text before the first such heading forms a level 0 section without
    title. Empty untitled sections are dropped.
    """
    sections: list[Section] = []
    title, level, buffer = "", 0, []

    def flush() -> None:
        text = "\n".join(trim_blank(buffer))
        if title or text:
            sections.append(Section(title=title, level=level, text=text))

    for line, fenced in zip(lines, fence_mask(lines)):
        heading = None if fenced else parse_heading(line)
        if heading is None or heading[0] < 2:
            buffer.append(line)
            continue
        flush()
        level, title = heading
        buffer = []

    flush()
    return sections
