"""Content parsing pipeline: lines, cleanup, type detection and parsers."""

from contentparse.parsing.cleanup import cleanup
from contentparse.parsing.files import convert_files
from contentparse.parsing.lines import get_lines
from contentparse.parsing.parser import DEFAULT_PARSERS, Parser
from contentparse.parsing.typedetection import detect_type

__all__ = [
    "DEFAULT_PARSERS",
    "Parser",
    "cleanup",
    "convert_files",
    "detect_type",
    "get_lines",
]
