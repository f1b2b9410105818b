"""Decoding of TOML string tokens into their values.

Each parser takes the whole document and the offset of the opening quote.
It returns the range of the raw token, the decoded bytes and the offset
just past the token.
"""

from __future__ import annotations

from tomlast.errors import ParserError, Range
from tomlast.scanner import (
    scan_basic_string,
    scan_literal_string,
    scan_multiline_basic_string,
    scan_multiline_literal_string,
    utf8_valid_next,
)

_BACKSLASH = ord("\\")
_LF = ord("\n")
_CR = ord("\r")
_SPACE = ord(" ")
_TAB = ord("\t")

_MAX_CODE_POINT = 0x10FFFF

_SIMPLE_ESCAPES = {
    ord('"'): b'"',
    ord("\\"): b"\\",
    ord("b"): b"\b",
    ord("f"): b"\f",
    ord("n"): b"\n",
    ord("r"): b"\r",
    ord("t"): b"\t",
    ord("e"): b"\x1b",
}

_UNICODE_ESCAPES = {ord("u"): 4, ord("U"): 8}


def _describe(c: int) -> str:
    text = f"U+{c:04X}"
    ch = chr(c)
    if ch.isprintable():
        text += f" '{ch}'"
    return text


def hex_to_rune(data: bytes, start: int, end: int, length: int) -> int:
    """Decode ``length`` hex digits at ``start`` into a Unicode code point.

    ``end`` bounds the bytes available for the digits.
    """
    available = end - start
    if available < length:
        raise ParserError(
            f"unicode point needs {length} character, not {available}",
            Range(start, max(available, 0)),
        )
    value = 0
    for offset, c in enumerate(data[start : start + length]):
        try:
            digit = int(chr(c), 16)
        except ValueError:
            raise ParserError("non-hex character", Range(start + offset, 1)) from None
        value = value * 16 + digit
    if value > _MAX_CODE_POINT or 0xD800 <= value < 0xE000:
        raise ParserError(
            "escape sequence is invalid Unicode code point", Range(start, length)
        )
    return value


def _validate_unescaped(data: bytes, start: int, stop: int) -> bytes:
    i = start
    while i < stop:
        size = utf8_valid_next(data, i)
        if size == 0 or i + size > stop:
            raise ParserError("invalid UTF-8", Range(i, 1))
        i += size
    return data[start:stop]


def _skip_leading_newline(data: bytes, i: int) -> int:
    if data[i] == _LF:
        return i + 1
    if data[i] == _CR and i + 1 < len(data) and data[i + 1] == _LF:
        return i + 2
    return i


def _decode_escape(data: bytes, i: int, limit: int, out: bytearray) -> int:
    """Decode the escape whose letter is at ``i``; return the next offset."""
    c = data[i]
    simple = _SIMPLE_ESCAPES.get(c)
    if simple is not None:
        out += simple
        return i + 1
    length = _UNICODE_ESCAPES.get(c)
    if length is not None:
        code = hex_to_rune(data, i + 1, min(i + 1 + length, limit), length)
        out += chr(code).encode("utf-8")
        return i + 1 + length
    raise ParserError(f"invalid escaped character {_describe(c)}", Range(i, 1))


def _copy_char(data: bytes, i: int, out: bytearray) -> int:
    size = utf8_valid_next(data, i)
    if size == 0:
        raise ParserError(f"invalid character {_describe(data[i])}", Range(i, 1))
    out += data[i : i + size]
    return i + size


def parse_literal_string(data: bytes, pos: int) -> tuple[Range, bytes, int]:
    """Parse a single-quoted string starting at ``pos``."""
    end = scan_literal_string(data, pos)
    return Range(pos, end - pos), data[pos + 1 : end - 1], end


def parse_multiline_literal_string(data: bytes, pos: int) -> tuple[Range, bytes, int]:
    """Parse a triple-single-quoted string starting at ``pos``."""
    end = scan_multiline_literal_string(data, pos)
    start = _skip_leading_newline(data, pos + 3)
    return Range(pos, end - pos), data[start : end - 3], end


def parse_basic_string(data: bytes, pos: int) -> tuple[Range, bytes, int]:
    """Parse a double-quoted string starting at ``pos``, decoding escapes."""
    end, escaped = scan_basic_string(data, pos)
    raw = Range(pos, end - pos)
    start = pos + 1
    limit = end - 1

    if not escaped:
        return raw, _validate_unescaped(data, start, limit), end

    out = bytearray()
    i = start
    while i < limit:
        if data[i] == _BACKSLASH:
            i = _decode_escape(data, i + 1, limit, out)
        else:
            i = _copy_char(data, i, out)
    return raw, bytes(out), end


def _trims_line(data: bytes, i: int, limit: int) -> int:
    """Offset after a line-ending backslash at ``i``, or 0 if it is an escape."""
    j = i + 1
    while j < limit:
        c = data[j]
        if c in (_SPACE, _TAB):
            j += 1
            continue
        if c == _CR and j + 1 < len(data) and data[j + 1] == _LF:
            j += 1
            continue
        if c == _LF:
            while j < limit and data[j] in (_LF, _CR, _SPACE, _TAB):
                j += 1
            return j
        break
    return 0


def parse_multiline_basic_string(data: bytes, pos: int) -> tuple[Range, bytes, int]:
    """Parse a triple-double-quoted string starting at ``pos``, decoding escapes.

    A backslash that is the last non-whitespace character of a line removes
    itself and all whitespace and newlines up to the next other character.
    """
    end, escaped = scan_multiline_basic_string(data, pos)
    raw = Range(pos, end - pos)
    start = _skip_leading_newline(data, pos + 3)
    limit = end - 3

    if not escaped:
        return raw, _validate_unescaped(data, start, limit), end

    out = bytearray()
    i = start
    while i < limit:
        if data[i] == _BACKSLASH:
            resume = _trims_line(data, i, limit)
            if resume:
                i = resume
                continue
            i = _decode_escape(data, i + 1, end, out)
        else:
            i = _copy_char(data, i, out)
    return raw, bytes(out), end