"""Utility functions for contentparse."""

from contentparse.utils.binary import BINARY_EXTENSIONS, is_binary_extension

__all__ = ["BINARY_EXTENSIONS", "is_binary_extension"]
