"""Hierarchical route identity for items and files."""

from dataclasses import dataclass

from contentparse.errors import ModelError


@dataclass(frozen=True)
class Route:
    """A normalized, slash separated path such as ``docs/guide/install``.

    The empty route is the root of a content tree.
    """

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str) -> "Route":
        """Build a route from a path string.

        Both ``/`` and ``\\`` are accepted as separators. Empty segments are
        dropped, so ``"/a//b/"`` and ``"a/b"`` are the same route.

        Raises:
            ModelError: if the value is not a string or contains ``.``,
                ``..`` or NUL characters.
        """
        if not isinstance(value, str):
            raise ModelError(f"Route must be a string, got {type(value).__name__}")

        parts = [part for part in value.replace("\\", "/").split("/") if part]
        for part in parts:
            if part in (".", ".."):
                raise ModelError(f"Relative segment {part!r} in route {value!r}")
            if "\x00" in part:
                raise ModelError(f"NUL character in route {value!r}")

        return cls(tuple(parts))

    @property
    def value(self) -> str:
        return "/".join(self.segments)

    @property
    def name(self) -> str:
        """Last segment of the route ("" for the root)."""
        return self.segments[-1] if self.segments else ""

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def parent(self) -> "Route":
        """Parent route; the root is its own parent."""
        return Route(self.segments[:-1])

    def is_ancestor_of(self, other: "Route") -> bool:
        """Check whether ``other`` lies strictly below this route."""
        depth = len(self.segments)
        return len(other.segments) > depth and other.segments[:depth] == self.segments

    def __str__(self) -> str:
        return self.value
