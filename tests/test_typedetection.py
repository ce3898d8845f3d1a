import itertools

import pytest

from contentparse.models import ItemType
from contentparse.parsing.cleanup import cleanup
from contentparse.parsing.typedetection import PRECEDENCE, detect_type


def test_empty_input_is_a_document():
    assert detect_type([]) is ItemType.DOCUMENT


def test_heading_and_text_is_a_document():
    assert detect_type(["# Hello", "", "World."]) is ItemType.DOCUMENT


def test_text_without_heading_is_a_message():
    assert detect_type(["Just a note."]) is ItemType.MESSAGE


def test_slide_boundary_is_a_presentation():
    lines = ["# Slides", "", "---", "", "## Two"]
    assert detect_type(lines) is ItemType.PRESENTATION


def test_fenced_boundary_is_not_a_slide():
    assert detect_type(["# Code", "", "```", "---", "```"]) is ItemType.DOCUMENT


def test_metadata_separator_is_not_a_slide():
    lines = ["# Title", "", "Text", "", "---", "tags: a, b"]
    assert detect_type(lines) is ItemType.DOCUMENT


@pytest.mark.parametrize(
    "declared, expected",
    [
        ("repository", ItemType.REPOSITORY),
        ("location", ItemType.LOCATION),
        ("Presentation", ItemType.PRESENTATION),
        ("document", ItemType.DOCUMENT),
    ],
)
def test_declared_type(declared, expected):
    assert detect_type(["# Title", "", "---", f"type: {declared}"]) is expected


def test_unknown_declared_type_is_ignored():
    assert detect_type(["# T", "", "---", "type: banana"]) is ItemType.DOCUMENT


def test_container_beats_presentation():
    lines = ["# Place", "", "Intro", "", "---", "", "More", "", "---", "type: location"]
    assert detect_type(lines) is ItemType.LOCATION


def test_repository_beats_message():
    assert detect_type(["Plain text", "", "---", "type: repository"]) is ItemType.REPOSITORY


def test_presentation_beats_message():
    lines = ["first slide", "", "---", "", "second slide"]
    assert detect_type(lines) is ItemType.PRESENTATION


def test_message_beats_declared_document():
    assert detect_type(["note", "", "---", "type: document"]) is ItemType.MESSAGE


def test_precedence_lists_every_type_once():
    assert sorted(PRECEDENCE) == sorted(ItemType)
    assert len(PRECEDENCE) == len(set(PRECEDENCE))


def test_detection_is_total_and_deterministic():
    alphabet = ["", "x", "# x", "---", "```", "type: location", "type: message", "tags: a"]
    for length in range(5):
        for combo in itertools.product(alphabet, repeat=length):
            lines = cleanup(list(combo))
            first = detect_type(lines)
            assert isinstance(first, ItemType)
            assert detect_type(list(lines)) is first
