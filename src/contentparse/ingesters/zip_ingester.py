"""Ingester for ZIP archives of content trees."""

import zipfile
from pathlib import Path, PurePosixPath
from typing import Iterator

from contentparse.ingesters.folder_ingester import (
    CONTENT_EXTENSIONS,
    FILES_DIRECTORY,
    pick_content_file,
    should_skip,
)
from contentparse.models import SourceFile, SourceItem
from contentparse.providers import ZipContentProvider


class ZipIngester:
    """Ingester for ZIP archive files laid out like a content folder."""

    source_type = "zip"

    def __init__(
        self,
        content_extensions: tuple[str, ...] = CONTENT_EXTENSIONS,
        files_directory: str = FILES_DIRECTORY,
    ):
        self.content_extensions = tuple(ext.lower() for ext in content_extensions)
        self.files_directory = files_directory

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.exists()

    def ingest(self, source: Path) -> Iterator[SourceItem]:
        """Yield one source item per content directory in the archive.

        Args:
            source: Path to the ZIP file

        Yields:
            SourceItem objects reading their members on demand
        """
        with zipfile.ZipFile(source, "r") as zf:
            members = sorted(info.filename for info in zf.infolist() if not info.is_dir())

        # Group file names by their directory, leaving out attachments
        directories: dict[PurePosixPath, list[str]] = {}
        for member in members:
            path = PurePosixPath(member)
            if should_skip(Path(member)) or self.files_directory in path.parent.parts:
                continue
            directories.setdefault(path.parent, []).append(path.name)

        for directory in sorted(directories):
            content_file = pick_content_file(directories[directory], self.content_extensions)
            if content_file is None:
                continue

            route = "" if directory == PurePosixPath(".") else directory.as_posix()
            yield SourceItem(
                route=route,
                content_provider=ZipContentProvider(
                    source, (directory / content_file).as_posix()
                ),
                files=self._collect_files(source, members, directory / self.files_directory),
            )

    def _collect_files(
        self, source: Path, members: list[str], files_root: PurePosixPath
    ) -> list[SourceFile]:
        prefix = files_root.as_posix() + "/"
        files = []
        for member in members:
            if not member.startswith(prefix) or should_skip(Path(member[len(prefix):])):
                continue
            files.append(
                SourceFile(route=member, content_provider=ZipContentProvider(source, member))
            )
        return files
