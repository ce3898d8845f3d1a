"""Markup cleanup applied before type detection.

The cleanup stage is a fixed chain of rewrite rules. Every rule is a pure
function from lines to lines, and running the chain on its own output does
not change it again. Markup rules leave fenced code blocks alone.
"""

import re
from typing import Callable

from contentparse.parsing.markup import SLIDE_BOUNDARY, fence_mask

CleanupRule = Callable[[list[str]], list[str]]

TAB_SIZE = 4

ATX_HEADING_PATTERN = re.compile(r"^(#{1,6})(?!#) *(\S.*)$")
CLOSING_HASHES_PATTERN = re.compile(r"(?:\s+#+)+\s*$")
SETEXT_UNDERLINE_PATTERN = re.compile(r"^ {0,3}={3,}$")
THEMATIC_BREAK_PATTERN = re.compile(r"^ {0,3}([-*_])(?: *\1){2,}$")

# Lines that cannot carry a setext underline
_BLOCK_PREFIXES = ("#", "-", "*", "+", ">")


def _heading(level: int, text: str) -> str:
    text = CLOSING_HASHES_PATTERN.sub("", text.strip())
    return "#" * level + " " + text


def expand_tabs(lines: list[str]) -> list[str]:
    return [line.expandtabs(TAB_SIZE) for line in lines]


def strip_trailing_whitespace(lines: list[str]) -> list[str]:
    return [line.rstrip() for line in lines]


def normalize_headings(lines: list[str]) -> list[str]:
    """Rewrite ATX headings to ``#`` markers, one space, no closing hashes."""
    result = []
    for line, fenced in zip(lines, fence_mask(lines)):
        match = None if fenced else ATX_HEADING_PATTERN.match(line)
        if match:
            line = _heading(len(match.group(1)), match.group(2))
        result.append(line)
    return result


def convert_setext_headings(lines: list[str]) -> list[str]:
    """Turn a text line underlined with ``===`` into a level 1 heading."""
    result: list[str] = []
    result_fenced: list[bool] = []

    for line, fenced in zip(lines, fence_mask(lines)):
        if not fenced and SETEXT_UNDERLINE_PATTERN.match(line) and result:
            previous = result[-1]
            if (
                not result_fenced[-1]
                and previous.strip()
                and not previous.lstrip().startswith(_BLOCK_PREFIXES)
                and not THEMATIC_BREAK_PATTERN.match(previous)
                and not SETEXT_UNDERLINE_PATTERN.match(previous)
            ):
                result[-1] = _heading(1, previous)
                continue

        result.append(line)
        result_fenced.append(fenced)

    return result


def normalize_thematic_breaks(lines: list[str]) -> list[str]:
    """Rewrite ``***``, ``___``, ``- - -`` and longer rules to ``---``."""
    return [
        SLIDE_BOUNDARY if not fenced and THEMATIC_BREAK_PATTERN.match(line) else line
        for line, fenced in zip(lines, fence_mask(lines))
    ]


def collapse_blank_lines(lines: list[str]) -> list[str]:
    """Collapse runs of blank lines and drop blank lines at both ends."""
    result: list[str] = []
    for line, fenced in zip(lines, fence_mask(lines)):
        if not line.strip() and not fenced:
            if not result or not result[-1].strip():
                continue
            line = ""
        result.append(line)

    while result and not result[-1].strip():
        result.pop()
    return result


RULES: tuple[CleanupRule, ...] = (
    expand_tabs,
    strip_trailing_whitespace,
    normalize_headings,
    convert_setext_headings,
    normalize_thematic_breaks,
    collapse_blank_lines,
)


def cleanup(lines: list[str]) -> list[str]:
    """Apply every cleanup rule in order and return the new lines."""
    for rule in RULES:
        lines = rule(lines)
    return lines
