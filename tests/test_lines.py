from contentparse.parsing.lines import get_lines


def test_empty_input_yields_no_lines():
    assert get_lines(b"") == []


def test_line_endings_are_normalized():
    assert get_lines(b"a\r\nb\rc\nd") == ["a", "b", "c", "d"]


def test_trailing_terminator_adds_no_line():
    assert get_lines(b"a\nb\n") == ["a", "b"]
    assert get_lines(b"\n") == [""]


def test_blank_lines_are_kept():
    assert get_lines(b"a\n\n\nb") == ["a", "", "", "b"]


def test_byte_order_mark_is_removed():
    assert get_lines("\ufeff# Title\n".encode("utf-8")) == ["# Title"]


def test_invalid_utf8_is_replaced():
    assert get_lines(b"caf\xe9") == ["caf\ufffd"]


def test_no_terminator_characters_survive():
    lines = get_lines(b"one\r\n\r\ntwo\r\rthree")
    assert lines == ["one", "", "two", "", "three"]
    assert not any("\r" in line or "\n" in line for line in lines)
