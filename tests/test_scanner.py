import pytest

from tomlast.errors import ParserError, Range
from tomlast.scanner import (
    is_unquoted_key_char,
    scan_basic_string,
    scan_comment,
    scan_follows,
    scan_literal_string,
    scan_multiline_basic_string,
    scan_multiline_literal_string,
    scan_unquoted_key,
    scan_whitespace,
    scan_windows_newline,
    utf8_valid_next,
)


def test_utf8_valid_next_ascii_and_multibyte():
    assert utf8_valid_next(b"a", 0) == len(b"a")
    assert utf8_valid_next(b"\t", 0) == len(b"\t")
    japanese = "日".encode()
    assert utf8_valid_next(japanese + b"x", 0) == len(japanese)
    emoji = "\U0001F600".encode()
    assert utf8_valid_next(emoji, 0) == len(emoji)


@pytest.mark.parametrize(
    "data",
    [b"\x00", b"\x7f", b"\x1f", b"\xff", b"\xed\xa0\x80", b"\xe6\x97", b"\xc0\xaf", b""],
)
def test_utf8_valid_next_rejects(data):
    assert utf8_valid_next(data, 0) == 0


def test_scan_follows():
    assert scan_follows(b"x = true", 4, b"true")
    assert not scan_follows(b"x = tru", 4, b"true")


def test_unquoted_key():
    doc = b"my-key_1 = 3"
    end = scan_unquoted_key(doc, 0)
    assert doc[:end] == b"my-key_1"
    assert scan_unquoted_key(b"abc", 0) == len(b"abc")
    assert is_unquoted_key_char(ord("_"))
    assert not is_unquoted_key_char(ord("."))


def test_whitespace():
    doc = b"a \t \tb"
    end = scan_whitespace(doc, 1)
    assert doc[end:] == b"b"
    assert scan_whitespace(b"  ", 0) == len(b"  ")


def test_literal_string():
    doc = b"k = 'C:\\path' # c"
    start = doc.index(b"'")
    end = scan_literal_string(doc, start)
    assert doc[start:end] == b"'C:\\path'"


def test_literal_string_errors():
    with pytest.raises(ParserError, match="cannot have new lines") as info:
        scan_literal_string(b"'a\nb'", 0)
    assert info.value.highlight == Range(b"'a\nb'".index(b"\n"), 1)
    doc = b"'abc"
    with pytest.raises(ParserError, match="unterminated literal string") as info:
        scan_literal_string(doc, 0)
    assert info.value.highlight == Range(len(doc), 0)
    with pytest.raises(ParserError, match="invalid character"):
        scan_literal_string(b"'a\x01'", 0)


def test_multiline_literal_string_eager_quotes():
    doc = b"'''ab''''' rest"
    end = scan_multiline_literal_string(doc, 0)
    assert doc[:end] == b"'''ab'''''"
    doc = b"'''line\r\nnext''' x"
    end = scan_multiline_literal_string(doc, 0)
    assert doc[end:] == b" x"


def test_multiline_literal_string_errors():
    with pytest.raises(ParserError, match="''' not allowed"):
        scan_multiline_literal_string(b"'''a''''''", 0)
    with pytest.raises(ParserError, match=r"need a \\n after \\r"):
        scan_multiline_literal_string(b"'''a\rb'''", 0)
    with pytest.raises(ParserError, match="not terminated by '''"):
        scan_multiline_literal_string(b"'''abc''", 0)


def test_windows_newline():
    doc = b"\r\nx"
    assert doc[scan_windows_newline(doc, 0) :] == b"x"
    with pytest.raises(ParserError, match="windows new line expected"):
        scan_windows_newline(b"\r", 0)
    with pytest.raises(ParserError, match="should be"):
        scan_windows_newline(b"\rx", 0)


def test_comment():
    doc = b"# hello\nnext"
    end = scan_comment(doc, 0)
    assert doc[:end] == b"# hello"
    doc = b"# hi\r\nx"
    end = scan_comment(doc, 0)
    assert doc[:end] == b"# hi\r"
    doc = b"# until the end"
    assert scan_comment(doc, 0) == len(doc)


def test_comment_errors():
    doc = b"# a\rb"
    with pytest.raises(ParserError, match="invalid character in comment") as info:
        scan_comment(doc, 0)
    assert info.value.highlight == Range(doc.index(b"\r"), 1)
    with pytest.raises(ParserError, match="invalid character in comment"):
        scan_comment(b"# \x01", 0)


def test_basic_string():
    doc = b'"plain" tail'
    end, escaped = scan_basic_string(doc, 0)
    assert (doc[:end], escaped) == (b'"plain"', False)
    doc = b'"a\\"b" tail'
    end, escaped = scan_basic_string(doc, 0)
    assert (doc[:end], escaped) == (b'"a\\"b"', True)


def test_basic_string_errors():
    doc = b'"abc'
    with pytest.raises(ParserError, match='not terminated by "') as info:
        scan_basic_string(doc, 0)
    assert info.value.highlight == Range(len(doc), 0)
    with pytest.raises(ParserError, match="cannot have new lines"):
        scan_basic_string(b'"a\nb"', 0)
    doc = b'"ab\\'
    with pytest.raises(ParserError, match="need a character after") as info:
        scan_basic_string(doc, 0)
    assert info.value.highlight == Range(doc.index(b"\\"), 1)


def test_multiline_basic_string():
    doc = b'"""ab""""" x'
    end, escaped = scan_multiline_basic_string(doc, 0)
    assert (doc[:end], escaped) == (b'"""ab"""""', False)
    doc = b'"""a\\nb\r\nc""" x'
    end, escaped = scan_multiline_basic_string(doc, 0)
    assert (doc[end:], escaped) == (b" x", True)


def test_multiline_basic_string_errors():
    with pytest.raises(ParserError, match='""" not allowed'):
        scan_multiline_basic_string(b'"""a""""""', 0)
    doc = b'"""a\rb"""'
    with pytest.raises(ParserError, match=r"need a \\n after \\r") as info:
        scan_multiline_basic_string(doc, 0)
    assert info.value.highlight == Range(doc.index(b"\r"), 2)
    doc = b'"""abc'
    with pytest.raises(ParserError, match='not terminated by """') as info:
        scan_multiline_basic_string(doc, 0)
    assert info.value.highlight == Range(len(doc), 0)