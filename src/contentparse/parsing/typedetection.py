"""Type detection for cleaned item lines."""

from contentparse.models import ItemType
from contentparse.parsing.markup import SLIDE_BOUNDARY, fence_mask, parse_heading
from contentparse.parsing.metadata import declared_type, split_meta

# Highest priority first; the first type with a signal wins
PRECEDENCE: tuple[ItemType, ...] = (
    ItemType.REPOSITORY,
    ItemType.LOCATION,
    ItemType.PRESENTATION,
    ItemType.MESSAGE,
    ItemType.DOCUMENT,
)


def detect_type(lines: list[str]) -> ItemType:
    """Detect the item type of cleaned lines.

    Signals:
        - a ``type`` entry in the metadata block names its type
        - a slide boundary in the body marks a presentation
        - a body with text but without any heading marks a message

    When several types are signalled the one listed first in PRECEDENCE
    wins. Input without signals, including empty input, is a document.
    """
    signals = _collect_signals(lines)
    for item_type in PRECEDENCE:
        if item_type in signals:
            return item_type
    return ItemType.DOCUMENT


def _collect_signals(lines: list[str]) -> set[ItemType]:
    body, meta = split_meta(lines)
    signals = set()

    declared = declared_type(meta)
    if declared is not None:
        signals.add(declared)

    if has_slide_boundary(body):
        signals.add(ItemType.PRESENTATION)

    if is_message_shaped(body):
        signals.add(ItemType.MESSAGE)

    return signals


def has_slide_boundary(lines: list[str]) -> bool:
    return any(
        line == SLIDE_BOUNDARY and not fenced
        for line, fenced in zip(lines, fence_mask(lines))
    )


def is_message_shaped(lines: list[str]) -> bool:
    """Plain text without any heading."""
    has_text = False
    for line, fenced in zip(lines, fence_mask(lines)):
        if not fenced and parse_heading(line) is not None:
            return False
        has_text = has_text or bool(line.strip())
    return has_text
