"""Binary file detection for item attachments."""

from pathlib import PurePath

# Extensions of attachments that are served as-is and never rendered as text
BINARY_EXTENSIONS = {
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp", ".svg", ".tiff",
    # Documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods",
    # Archives
    ".zip", ".tar", ".gz", ".rar", ".7z", ".bz2", ".xz",
    # Executables
    ".exe", ".dll", ".so", ".dylib", ".bin",
    # Media
    ".mp3", ".mp4", ".avi", ".mov", ".wav", ".flac", ".mkv", ".webm",
    # Fonts
    ".ttf", ".otf", ".woff", ".woff2", ".eot",
    # Other
    ".db", ".sqlite", ".sqlite3",
}


def is_binary_extension(path: str | PurePath) -> bool:
    """Check if file extension indicates binary content."""
    return PurePath(path).suffix.lower() in BINARY_EXTENSIONS
