"""Markup primitives shared by the cleanup stage, classifier and parsers.

All helpers expect lines that went through cleanup, where headings have the
canonical ``# Title`` form and thematic breaks are ``---``.
"""

import re
from typing import Optional

from contentparse.errors import StructureError
from contentparse.models import Item, ItemType

SLIDE_BOUNDARY = "---"

FENCE_PATTERN = re.compile(r"^ {0,3}(```|~~~)")
HEADING_PATTERN = re.compile(r"^(#{1,6}) (\S.*)$")


def fence_mask(lines: list[str]) -> list[bool]:
    """Flag every line that belongs to a fenced code block.

    Fence delimiters are flagged too. A fence is closed by a delimiter of the
    same kind; an unclosed fence runs to the end of the input.
    """
    mask = []
    open_marker: Optional[str] = None

    for line in lines:
        match = FENCE_PATTERN.match(line)
        if match:
            mask.append(True)
            if open_marker is None:
                open_marker = match.group(1)
            elif match.group(1) == open_marker:
                open_marker = None
        else:
            mask.append(open_marker is not None)

    return mask


def parse_heading(line: str) -> Optional[tuple[int, str]]:
    """Return ``(level, text)`` for a heading line, None otherwise."""
    match = HEADING_PATTERN.match(line)
    if match is None:
        return None
    return len(match.group(1)), match.group(2)


def trim_blank(lines: list[str]) -> list[str]:
    """Drop leading and trailing blank lines."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def split_title(item: Item, lines: list[str]) -> tuple[str, list[str], list[str]]:
    """Take the title from the first level 1 heading outside code fences.

    Returns the title, the lines before the heading and the lines after it.
    Without such a heading the item's route name is used and every line
    counts as following the title.
    """
    lines = trim_blank(lines)
    for index, (line, fenced) in enumerate(zip(lines, fence_mask(lines))):
        heading = None if fenced else parse_heading(line)
        if heading is not None and heading[0] == 1:
            return heading[1], trim_blank(lines[:index]), trim_blank(lines[index + 1 :])
    return item.route.name, [], lines


def join_blocks(*blocks: list[str]) -> list[str]:
    """Concatenate non-empty line blocks, separated by one blank line."""
    joined: list[str] = []
    for block in blocks:
        if not block:
            continue
        if joined:
            joined.append("")
        joined.extend(block)
    return joined


def first_paragraph(lines: list[str]) -> str:
    """Join the leading paragraph of plain text into a single line.

    Stops at the first blank line, heading, fence or slide boundary.
    """
    parts = []
    for line in trim_blank(lines):
        stripped = line.strip()
        if (
            not stripped
            or stripped == SLIDE_BOUNDARY
            or parse_heading(line) is not None
            or FENCE_PATTERN.match(line)
        ):
            break
        parts.append(stripped)
    return " ".join(parts)


def require_type(item: Item, allowed: frozenset[ItemType]) -> None:
    """Refuse to parse an item whose type belongs to another grammar."""
    if item.type not in allowed:
        found = item.type.value if item.type else "untyped"
        raise StructureError(
            f"Item {item.route.value!r} is {found}, expected one of "
            f"{', '.join(sorted(t.value for t in allowed))}",
            route=item.route.value,
            item_type=item.type.value if item.type else None,
        )
