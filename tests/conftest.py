from datetime import datetime, timezone

import pytest

from contentparse.models import Item, ItemType, Route, SourceFile, SourceItem
from contentparse.parsing import cleanup, get_lines
from contentparse.providers import MemoryContentProvider

MODIFIED = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


class FailingProvider:
    """Content provider whose reads always fail."""

    def data(self) -> bytes:
        raise OSError("disk unplugged")

    def last_modified(self) -> datetime:
        raise OSError("disk unplugged")


@pytest.fixture
def make_source():
    def _make(text="", route="docs/hello", files=None):
        return SourceItem(
            route=route,
            content_provider=MemoryContentProvider(text, MODIFIED),
            files=list(files or []),
        )

    return _make


@pytest.fixture
def make_file():
    def _make(route):
        return SourceFile(route=route, content_provider=MemoryContentProvider(b"\x89PNG"))

    return _make


@pytest.fixture
def typed_item():
    """Build an item with the given type, as the classifier would."""

    def _make(item_type, route="docs/hello"):
        item = Item.new(Route.parse(route), [])
        item.assign_type(ItemType(item_type))
        return item

    return _make


def clean(text: str) -> list[str]:
    return cleanup(get_lines(text.encode("utf-8")))


CONTENT_TREE = {
    "index.md": "# Home\n\nWelcome.\n\n---\ntype: repository\n",
    "guide/guide.md": "# Guide\n\nText.\n",
    "guide/files/diagram.png": b"\x89PNG\r\n",
    "guide/files/sub/notes.txt": "notes",
    "guide/files/.hidden": "secret",
    "talk/slides.md": "# Talk\n\n---\n\n## Two\n",
    "empty/readme.txt": "no content file here",
    ".git/config.md": "# Not content",
}


@pytest.fixture
def content_tree(tmp_path):
    """Write CONTENT_TREE below a temporary directory and return its root."""
    root = tmp_path / "content"
    for name, data in CONTENT_TREE.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, bytes):
            path.write_bytes(data)
        else:
            path.write_text(data, encoding="utf-8")
    return root


@pytest.fixture
def content_zip(tmp_path):
    """Write CONTENT_TREE into a ZIP archive and return its path."""
    import zipfile

    archive = tmp_path / "content.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        for name, data in CONTENT_TREE.items():
            zf.writestr(name, data)
    return archive
