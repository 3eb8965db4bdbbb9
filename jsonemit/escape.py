"""Escaping of string contents for JSON output."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "EscapeKind",
    "CharEscape",
    "format_escaped_str",
    "format_escaped_str_contents",
]

_HEX_DIGITS = "0123456789abcdef"

# Characters that must never appear unescaped inside a JSON string.
_NEEDS_ESCAPE = re.compile(r'["\\\x00-\x1f]')


class EscapeKind(Enum):
    """The kinds of escape sequence a JSON string may contain."""

    QUOTE = "quote"
    REVERSE_SOLIDUS = "reverse_solidus"
    SOLIDUS = "solidus"
    BACKSPACE = "backspace"
    FORM_FEED = "form_feed"
    LINE_FEED = "line_feed"
    CARRIAGE_RETURN = "carriage_return"
    TAB = "tab"
    ASCII_CONTROL = "ascii_control"


_SHORT_ESCAPES = {
    EscapeKind.QUOTE: '\\"',
    EscapeKind.REVERSE_SOLIDUS: "\\\\",
    EscapeKind.SOLIDUS: "\\/",
    EscapeKind.BACKSPACE: "\\b",
    EscapeKind.FORM_FEED: "\\f",
    EscapeKind.LINE_FEED: "\\n",
    EscapeKind.CARRIAGE_RETURN: "\\r",
    EscapeKind.TAB: "\\t",
}

_BYTE_KINDS = {
    0x08: EscapeKind.BACKSPACE,
    0x09: EscapeKind.TAB,
    0x0A: EscapeKind.LINE_FEED,
    0x0C: EscapeKind.FORM_FEED,
    0x0D: EscapeKind.CARRIAGE_RETURN,
    0x22: EscapeKind.QUOTE,
    0x5C: EscapeKind.REVERSE_SOLIDUS,
}


@dataclass(frozen=True)
class CharEscape:
    """One character escape; ``byte`` is meaningful for ASCII control escapes."""

    kind: EscapeKind
    byte: int = 0

    @classmethod
    def from_byte(cls, byte: int) -> CharEscape:
        """Return the escape used for ``byte``; raise ValueError if it needs none."""
        kind = _BYTE_KINDS.get(byte)
        if kind is not None:
            return cls(kind)
        if 0 <= byte < 0x20:
            return cls(EscapeKind.ASCII_CONTROL, byte)
        raise ValueError(f"byte {byte:#04x} does not need escaping")

    def encode(self) -> str:
        """Return the escape sequence as it appears inside a JSON string."""
        if self.kind is EscapeKind.ASCII_CONTROL:
            return "\\u00" + _HEX_DIGITS[self.byte >> 4] + _HEX_DIGITS[self.byte & 0xF]
        return _SHORT_ESCAPES[self.kind]


def format_escaped_str(writer: Any, formatter: Any, value: str) -> None:
    """Write ``value`` as a quoted, escaped JSON string through ``formatter``."""
    formatter.begin_string(writer)
    format_escaped_str_contents(writer, formatter, value)
    formatter.end_string(writer)


def format_escaped_str_contents(writer: Any, formatter: Any, value: str) -> None:
    """Write the escaped contents of ``value`` without the surrounding quotes."""
    start = 0
    for match in _NEEDS_ESCAPE.finditer(value):
        index = match.start()
        if start < index:
            formatter.write_string_fragment(writer, value[start:index])
        formatter.write_char_escape(writer, CharEscape.from_byte(ord(match.group())))
        start = index + 1
    if start < len(value):
        formatter.write_string_fragment(writer, value[start:])