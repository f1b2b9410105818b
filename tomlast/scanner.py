"""Low-level scanning of TOML tokens.

Every function works on the whole document and an offset into it, and
returns the offset just past the token it recognised.
"""

from __future__ import annotations

from tomlast.errors import ParserError, Range

_SQUOTE = ord("'")
_DQUOTE = ord('"')
_BACKSLASH = ord("\\")
_LF = ord("\n")
_CR = ord("\r")
_SPACE = ord(" ")
_TAB = ord("\t")

_INVALID_ASCII = frozenset([*range(0x00, 0x09), 0x0B, 0x0C, *range(0x0E, 0x20), 0x7F])


def utf8_valid_next(data: bytes, pos: int) -> int:
    """Size of the valid TOML character starting at ``pos``, or 0."""
    if pos >= len(data):
        return 0
    lead = data[pos]
    if lead < 0x80:
        return 0 if lead in _INVALID_ASCII else 1
    if 0xC2 <= lead <= 0xDF:
        size = 2
    elif 0xE0 <= lead <= 0xEF:
        size = 3
    elif 0xF0 <= lead <= 0xF4:
        size = 4
    else:
        return 0
    chunk = data[pos : pos + size]
    if len(chunk) < size:
        return 0
    try:
        chunk.decode("utf-8")
    except UnicodeDecodeError:
        return 0
    return size


def scan_follows(data: bytes, pos: int, pattern: bytes) -> bool:
    """True when ``pattern`` appears at ``pos``."""
    return data.startswith(pattern, pos)


def is_unquoted_key_char(c: int) -> bool:
    """True for bytes allowed in a bare key: A-Z a-z 0-9 - _."""
    return (
        ord("A") <= c <= ord("Z")
        or ord("a") <= c <= ord("z")
        or ord("0") <= c <= ord("9")
        or c in (ord("-"), ord("_"))
    )


def scan_unquoted_key(data: bytes, pos: int) -> int:
    """End of the bare key starting at ``pos``."""
    end = pos
    while end < len(data) and is_unquoted_key_char(data[end]):
        end += 1
    return end


def _check_char(data: bytes, i: int, message: str) -> int:
    size = utf8_valid_next(data, i)
    if size == 0:
        raise ParserError(message, Range(i, 1))
    return size


def scan_literal_string(data: bytes, pos: int) -> int:
    """End of the single-quoted string starting at ``pos``."""
    n = len(data)
    i = pos + 1
    while i < n:
        c = data[i]
        if c == _SQUOTE:
            return i + 1
        if c in (_LF, _CR):
            raise ParserError("literal strings cannot have new lines", Range(i, 1))
        i += _check_char(data, i, "invalid character")
    raise ParserError("unterminated literal string", Range(n, 0))


def scan_multiline_literal_string(data: bytes, pos: int) -> int:
    """End of the triple-single-quoted string starting at ``pos``."""
    n = len(data)
    i = pos + 3
    while i < n:
        c = data[i]
        if c == _SQUOTE and scan_follows(data, i, b"'''"):
            # Up to two extra apostrophes may close the string.
            i += 3
            if i >= n or data[i] != _SQUOTE:
                return i
            i += 1
            if i >= n or data[i] != _SQUOTE:
                return i
            i += 1
            if i < n and data[i] == _SQUOTE:
                raise ParserError(
                    "''' not allowed in multiline literal string", Range(i - 3, 4)
                )
            return i
        if c == _CR:
            if n < i + 2:
                raise ParserError(r"need a \n after \r", Range(n, 0))
            if data[i + 1] != _LF:
                raise ParserError(r"need a \n after \r", Range(i, 2))
            i += 2
            continue
        i += _check_char(data, i, "invalid character")
    raise ParserError("multiline literal string not terminated by '''", Range(n, 0))


def scan_windows_newline(data: bytes, pos: int) -> int:
    """End of the CRLF sequence starting at ``pos``."""
    rest = Range(pos, len(data) - pos)
    if len(data) - pos < 2:
        raise ParserError("windows new line expected", rest)
    if data[pos + 1] != _LF:
        raise ParserError(r"windows new line should be \r\n", rest)
    return pos + 2


def scan_whitespace(data: bytes, pos: int) -> int:
    """End of the run of spaces and tabs starting at ``pos``."""
    end = pos
    while end < len(data) and data[end] in (_SPACE, _TAB):
        end += 1
    return end


def scan_comment(data: bytes, pos: int) -> int:
    """End of the comment starting at ``pos``.

    When the line ends with CRLF, the carriage return is part of the comment.
    """
    n = len(data)
    i = pos + 1
    while i < n:
        c = data[i]
        if c == _LF:
            return i
        if c == _CR:
            if i + 1 < n and data[i + 1] == _LF:
                return i + 1
            raise ParserError("invalid character in comment", Range(i, 1))
        i += _check_char(data, i, "invalid character in comment")
    return n


def scan_basic_string(data: bytes, pos: int) -> tuple[int, bool]:
    """End of the double-quoted string at ``pos`` and whether it has escapes."""
    n = len(data)
    escaped = False
    i = pos + 1
    while i < n:
        c = data[i]
        if c == _DQUOTE:
            return i + 1, escaped
        if c in (_LF, _CR):
            raise ParserError("basic strings cannot have new lines", Range(i, 1))
        if c == _BACKSLASH:
            if n < i + 2:
                raise ParserError("need a character after \\", Range(i, 1))
            escaped = True
            i += 1
        i += 1
    raise ParserError('basic string not terminated by "', Range(n, 0))


def scan_multiline_basic_string(data: bytes, pos: int) -> tuple[int, bool]:
    """End of the triple-double-quoted string at ``pos`` and whether it has escapes."""
    n = len(data)
    escaped = False
    i = pos + 3
    while i < n:
        c = data[i]
        if c == _DQUOTE and scan_follows(data, i, b'"""'):
            # Up to two extra quotes may close the string.
            i += 3
            if i >= n or data[i] != _DQUOTE:
                return i, escaped
            i += 1
            if i >= n or data[i] != _DQUOTE:
                return i, escaped
            i += 1
            if i < n and data[i] == _DQUOTE:
                raise ParserError(
                    '""" not allowed in multiline basic string', Range(i - 3, 4)
                )
            return i, escaped
        if c == _BACKSLASH:
            if n < i + 2:
                raise ParserError("need a character after \\", Range(n, 0))
            escaped = True
            i += 1
        elif c == _CR:
            if n < i + 2:
                raise ParserError(r"need a \n after \r", Range(n, 0))
            if data[i + 1] != _LF:
                raise ParserError(r"need a \n after \r", Range(i, 2))
            i += 1
        i += 1
    raise ParserError('multiline basic string not terminated by """', Range(n, 0))