"""Parser for ``.properties`` style key/value text.

Supports the parts of the format that about files rely on:

* ``#`` and ``!`` comment lines and blank lines;
* ``key=value``, ``key: value`` and ``key value`` separators;
* backslash line continuation (leading whitespace of the next line dropped);
* ``\\t``, ``\\n``, ``\\r``, ``\\f``, ``\\uXXXX`` and escaped separators.

As with ``java.util.Properties`` the last occurrence of a key wins.
"""

from __future__ import annotations

import re
from typing import Iterator

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_HEX4 = re.compile(r"[0-9a-fA-F]{4}")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertiesSyntaxError(ValueError):
    """Raised for malformed escape sequences."""


def parse_properties(text: str) -> dict[str, str]:
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        entries[_unescape(key)] = _unescape(value)
    return entries


def _logical_lines(text: str) -> Iterator[str]:
    pending: list[str] = []
    for natural in _LINE_BREAK.split(text):
        line = natural.lstrip(_WHITESPACE)
        if not pending and (not line or line[0] in _COMMENT_MARKERS):
            continue
        if _ends_with_escape(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield "".join(pending)
        pending = []
    if pending:
        yield "".join(pending)


def _ends_with_escape(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value
    out: list[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue
        index += 1
        if index >= len(value):
            break
        code = value[index]
        if code == "u":
            digits = value[index + 1 : index + 5]
            if not _HEX4.fullmatch(digits):
                raise PropertiesSyntaxError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            index += 5
            continue
        out.append(_ESCAPES.get(code, code))
        index += 1
    return "".join(out)


__all__ = ["PropertiesSyntaxError", "parse_properties"]
