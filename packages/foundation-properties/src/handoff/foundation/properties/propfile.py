"""Property-file text format.

Reads and writes the classic ``key=value`` property-file line syntax:

- ``#`` and ``!`` start comment lines; blank lines are ignored.
- A line ending in an odd number of backslashes continues on the next line,
  whose leading whitespace is dropped.
- The key ends at the first unescaped ``=``, ``:`` or whitespace; the
  separator and surrounding whitespace are not part of the value.
- Escapes: ``\\t \\n \\r \\f \\uXXXX``; any other escaped character stands
  for itself.

:func:`dump_properties` escapes every character outside printable ASCII as
``\\uXXXX``, so its output survives an ISO-8859-1 byte round trip unchanged.
"""

from __future__ import annotations

import re
from string import hexdigits
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

__all__ = [
    "PROPERTIES_ENCODING",
    "PropertyFileSyntaxError",
    "dump_properties",
    "load_properties",
    "load_properties_bytes",
]

PROPERTIES_ENCODING: str = "iso-8859-1"

_WHITESPACE = " \t\f"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_LOAD_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_DUMP_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "=": "\\=",
    ":": "\\:",
    "#": "\\#",
    "!": "\\!",
}


class PropertyFileSyntaxError(ValueError):
    """Raised when property-file text contains a malformed escape."""


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    buffer: str | None = None
    for natural in _LINE_BREAK.split(text):
        line = natural.lstrip(_WHITESPACE)
        if buffer is None:
            if not line or line[0] in "#!":
                continue
            buffer = ""
        if _continues(line):
            buffer += line[:-1]
            continue
        yield buffer + line
        buffer = None
    if buffer:
        yield buffer


def _split_entry(line: str) -> tuple[str, str]:
    n = len(line)
    end = 0
    while end < n:
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in "=:" or char in _WHITESPACE:
            break
        end += 1
    end = min(end, n)

    start = end
    while start < n and line[start] in _WHITESPACE:
        start += 1
    if start < n and line[start] in "=:":
        start += 1
        while start < n and line[start] in _WHITESPACE:
            start += 1
    return line[:end], line[start:]


def _unescape(raw: str) -> str:
    chars: list[str] = []
    i = 0
    n = len(raw)
    while i < n:
        char = raw[i]
        i += 1
        if char != "\\":
            chars.append(char)
            continue
        if i >= n:
            break
        char = raw[i]
        i += 1
        if char == "u":
            digits = raw[i : i + 4]
            if len(digits) != 4 or any(d not in hexdigits for d in digits):
                msg = f"Malformed \\uxxxx encoding: \\u{digits}"
                raise PropertyFileSyntaxError(msg)
            chars.append(chr(int(digits, 16)))
            i += 4
        else:
            chars.append(_LOAD_ESCAPES.get(char, char))
    # Recombine surrogate pairs written as two \u escapes.
    return "".join(chars).encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _escape(text: str, *, escape_space: bool) -> str:
    out: list[str] = []
    for index, char in enumerate(text):
        if char == " ":
            out.append("\\ " if index == 0 or escape_space else " ")
        elif char in _DUMP_ESCAPES:
            out.append(_DUMP_ESCAPES[char])
        elif 0x20 <= ord(char) <= 0x7E:
            out.append(char)
        else:
            units = char.encode("utf-16-be", "surrogatepass")
            for pos in range(0, len(units), 2):
                out.append(f"\\u{units[pos]:02X}{units[pos + 1]:02X}")
    return "".join(out)


def load_properties(text: str) -> dict[str, str]:
    """Parse property-file text into a dict.

    Later definitions of the same key win.

    Args:
        text: Property-file text.

    Returns:
        Mapping of unescaped keys to unescaped values, in file order.

    Raises:
        PropertyFileSyntaxError: If a ``\\u`` escape is malformed.
    """
    result: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        result[_unescape(raw_key)] = _unescape(raw_value)
    return result


def load_properties_bytes(data: bytes) -> dict[str, str]:
    """Parse ISO-8859-1 encoded property-file bytes."""
    return load_properties(data.decode(PROPERTIES_ENCODING))


def dump_properties(properties: Mapping[str, str]) -> str:
    """Render a mapping as property-file text.

    Args:
        properties: Keys and values to write.

    Returns:
        ASCII-only text, one ``key=value`` line per entry.
    """
    lines = [
        f"{_escape(key, escape_space=True)}={_escape(value, escape_space=False)}\n"
        for key, value in properties.items()
    ]
    return "".join(lines)
