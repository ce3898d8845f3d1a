"""Ingester for local content folders."""

import os
from pathlib import Path
from typing import Iterator, Optional

from contentparse.models import SourceFile, SourceItem
from contentparse.providers import FileContentProvider

# Directories and files never treated as content
SKIP_PATTERNS = {
    "__pycache__",
    "node_modules",
    ".git",
    ".svn",
    ".hg",
    "venv",
    ".venv",
    "env",
    ".env",
    "dist",
    "build",
    ".tox",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
}

CONTENT_EXTENSIONS = (".md", ".markdown")
FILES_DIRECTORY = "files"


def should_skip(path: Path) -> bool:
    """Check if a path should be skipped.

    Skips hidden files, common build artifacts, and version control.
    """
    return any(part.startswith(".") or part in SKIP_PATTERNS for part in path.parts)


def pick_content_file(names: list[str], extensions: tuple[str, ...]) -> Optional[str]:
    """Return the first name (sorted) with a content extension."""
    candidates = sorted(
        name
        for name in names
        if Path(name).suffix.lower() in extensions and not name.startswith(".")
    )
    return candidates[0] if candidates else None


class FolderIngester:
    """Ingester for content trees on the local filesystem.

    Every directory holding a content file is an item. Files stored below
    the item's ``files`` directory are attached to it.
    """

    source_type = "folder"

    def __init__(
        self,
        content_extensions: tuple[str, ...] = CONTENT_EXTENSIONS,
        files_directory: str = FILES_DIRECTORY,
    ):
        self.content_extensions = tuple(ext.lower() for ext in content_extensions)
        self.files_directory = files_directory

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[SourceItem]:
        """Yield one source item per content directory, parents first.

        Args:
            source: Path to the content root

        Yields:
            SourceItem objects with lazy file-backed providers
        """
        for root, dirs, filenames in os.walk(source):
            root_path = Path(root)
            rel_path = root_path.relative_to(source)

            # Prune in place so os.walk skips these subtrees
            dirs[:] = sorted(
                d for d in dirs if d != self.files_directory and not should_skip(Path(d))
            )

            content_file = pick_content_file(filenames, self.content_extensions)
            if content_file is None:
                continue

            yield SourceItem(
                route="" if rel_path == Path(".") else rel_path.as_posix(),
                content_provider=FileContentProvider(root_path / content_file),
                files=self._collect_files(source, root_path / self.files_directory),
            )

    def _collect_files(self, source: Path, files_root: Path) -> list[SourceFile]:
        if not files_root.is_dir():
            return []

        files = []
        for path in sorted(files_root.rglob("*")):
            if not path.is_file() or should_skip(path.relative_to(files_root)):
                continue
            files.append(
                SourceFile(
                    route=path.relative_to(source).as_posix(),
                    content_provider=FileContentProvider(path),
                )
            )
        return files
