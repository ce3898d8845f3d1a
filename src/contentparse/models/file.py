"""File records attached to items."""

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from contentparse.errors import FileConversionError, ModelError
from contentparse.models.route import Route
from contentparse.models.source import SourceFile
from contentparse.protocols.content_provider import ContentProvider
from contentparse.utils.binary import is_binary_extension


@dataclass(frozen=True)
class File:
    """A child resource of an item (image, attachment, download)."""

    route: Route
    name: str
    extension: str
    is_binary: bool
    content_provider: ContentProvider = field(compare=False, repr=False)

    @classmethod
    def from_source(cls, source: SourceFile) -> "File":
        """Convert a raw source file into a File record.

        Raises:
            FileConversionError: if the source has no content provider or
                its route is invalid or empty.
        """
        if source.content_provider is None:
            raise FileConversionError(
                f"File {source.route!r} has no content provider", route=source.route
            )

        try:
            route = Route.parse(source.route)
        except ModelError as err:
            raise FileConversionError(
                f"File {source.route!r} has an invalid route: {err}", route=source.route
            ) from err

        if route.is_root:
            raise FileConversionError("File route must not be empty", route=source.route)

        return cls(
            route=route,
            name=route.name,
            extension=PurePosixPath(route.name).suffix.lower(),
            is_binary=is_binary_extension(route.name),
            content_provider=source.content_provider,
        )

    def to_dict(self) -> dict:
        return {
            "route": self.route.value,
            "name": self.name,
            "extension": self.extension,
            "is_binary": self.is_binary,
        }
