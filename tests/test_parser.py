import logging

import pytest

from conftest import MODIFIED, FailingProvider
from contentparse.errors import (
    ContentReadError,
    ModelError,
    StructureError,
    UnknownTypeError,
)
from contentparse.models import (
    DocumentContent,
    ItemType,
    MessageContent,
    PresentationContent,
    SourceFile,
    SourceItem,
)
from contentparse.parsing import DEFAULT_PARSERS, Parser
from contentparse.providers import MemoryContentProvider


def test_document_end_to_end(make_source):
    item = Parser().parse(make_source("# Hello\n\nWorld."))

    assert item.type is ItemType.DOCUMENT
    assert item.title == "Hello"
    assert item.description == "World."
    assert isinstance(item.content, DocumentContent)
    assert "World." in item.content.text
    assert item.last_modified_date == MODIFIED


def test_windows_line_endings(make_source):
    item = Parser().parse(make_source("#Hello  \r\n\r\n\r\nWorld.\r\n"))
    assert item.title == "Hello"
    assert item.content.text == "World."


def test_empty_content_is_a_document(make_source):
    item = Parser().parse(make_source(""))
    assert item.type is ItemType.DOCUMENT
    assert item.title == "hello"


def test_presentation_end_to_end(make_source):
    item = Parser().parse(make_source("# Talk\n\nHi\n\n***\n\n## Next\n"))
    assert item.type is ItemType.PRESENTATION
    assert isinstance(item.content, PresentationContent)
    assert [s.title for s in item.content.slides] == ["Talk", "Next"]


def test_message_end_to_end(make_source):
    item = Parser().parse(make_source("Back online.\n\n---\ntags: status\n"))
    assert item.type is ItemType.MESSAGE
    assert item.content == MessageContent(text="Back online.")
    assert item.meta_data.tags == ["status"]


def test_location_with_slides_stays_a_location(make_source):
    text = "# Berlin\n\nCapital.\n\n---\n\nMore\n\n---\ntype: location\n"
    item = Parser().parse(make_source(text))
    assert item.type is ItemType.LOCATION
    assert item.title == "Berlin"
    assert isinstance(item.content, DocumentContent)


def test_content_read_error(make_source):
    source = SourceItem(route="docs/broken", content_provider=FailingProvider())

    with pytest.raises(ContentReadError) as excinfo:
        Parser().parse(source)

    assert excinfo.value.route == "docs/broken"
    assert "docs/broken" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_malformed_file_is_skipped(make_source, make_file, caplog):
    source = make_source(
        "# Hello\n\nWorld.",
        files=[
            SourceFile("docs/../evil.png", MemoryContentProvider(b"")),
            make_file("docs/hello/files/photo.png"),
        ],
    )

    with caplog.at_level(logging.WARNING):
        item = Parser().parse(source)

    assert [f.name for f in item.files] == ["photo.png"]
    assert any(r.levelno == logging.WARNING for r in caplog.records)



def test_duplicate_file_routes_keep_the_first(make_source, make_file, caplog):
    source = make_source(
        "# Hello\n\nWorld.",
        files=[make_file("a/x.png"), make_file("a//x.png")],
    )

    with caplog.at_level(logging.WARNING):
        item = Parser().parse(source)

    assert [f.route.value for f in item.files] == ["a/x.png"]
    assert any("a//x.png" in r.getMessage() for r in caplog.records)

def test_injected_logger_receives_messages(make_source, caplog):
    log = logging.getLogger("tests.parser")
    source = make_source("# Hello", files=[SourceFile("", None)])

    with caplog.at_level(logging.DEBUG, logger="tests.parser"):
        Parser(logger=log).parse(source)

    levels = [r.levelno for r in caplog.records if r.name == "tests.parser"]
    assert logging.DEBUG in levels
    assert logging.WARNING in levels


def test_invalid_route(make_source):
    with pytest.raises(ModelError) as excinfo:
        Parser().parse(make_source("# Hello", route="docs/../secret"))
    assert excinfo.value.route == "docs/../secret"


def test_presentation_without_slides_fails(make_source):
    source = make_source("# Deck\n\nOnly slide\n\n---\ntype: presentation\n")

    with pytest.raises(StructureError) as excinfo:
        Parser().parse(source)

    assert excinfo.value.item_type == "presentation"
    assert excinfo.value.route == "docs/hello"
    assert "presentation" in str(excinfo.value)


def test_unregistered_type(make_source):
    parser = Parser()
    parser.unregister(ItemType.MESSAGE)

    with pytest.raises(UnknownTypeError) as excinfo:
        parser.parse(make_source("just text"))

    assert excinfo.value.item_type == "message"
    assert ItemType.MESSAGE not in parser.registered_types


def test_unregister_does_not_touch_other_parsers(make_source):
    Parser().unregister(ItemType.MESSAGE)
    assert Parser().parse(make_source("just text")).type is ItemType.MESSAGE
    assert ItemType.MESSAGE in DEFAULT_PARSERS


def test_every_type_has_a_default_parser():
    assert set(DEFAULT_PARSERS) == set(ItemType)


def test_register_replaces_a_parser(make_source):
    def shout(item, last_modified, lines):
        item.title = "CUSTOM"

    parser = Parser()
    parser.register(ItemType.DOCUMENT, shout)
    assert parser.parse(make_source("# Hello")).title == "CUSTOM"


def test_each_call_builds_a_new_item(make_source):
    parser = Parser()
    source = make_source("# Hello")
    first, second = parser.parse(source), parser.parse(source)
    assert first is not second
    assert first == second
