"""Formatters that decide how JSON tokens and whitespace are written."""

from __future__ import annotations

import math
from typing import Iterable, Protocol

from .escape import CharEscape

__all__ = [
    "Writer",
    "Formatter",
    "CompactFormatter",
    "PrettyFormatter",
    "format_float",
]


class Writer(Protocol):
    """Anything with a text ``write`` method, such as ``io.StringIO``."""

    def write(self, text: str) -> object:  # pragma: no cover - protocol
        ...


def _shortest_digits(value: float) -> tuple[str, int]:
    """Split a positive finite float into shortest digits and a decimal exponent.

    The result satisfies ``value == int(digits) * 10 ** exponent`` when read back.
    """
    mantissa, _, exp_text = repr(value).partition("e")
    exponent = int(exp_text) if exp_text else 0
    whole, _, fraction = mantissa.partition(".")
    digits = (whole + fraction).lstrip("0")
    exponent -= len(fraction)
    trimmed = digits.rstrip("0")
    exponent += len(digits) - len(trimmed)
    return trimmed, exponent


def format_float(value: float) -> str:
    """Render a finite float in the shortest form that reads back exactly.

    Values with up to 16 significant integer digits are written in plain
    decimal notation (always with a fractional part); others use an
    exponent, such as ``1.2e41`` or ``1e-7``.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite float {value!r}")
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0.0:
        return sign + "0.0"

    digits, k = _shortest_digits(abs(value))
    length = len(digits)
    kk = length + k  # 10**(kk-1) <= |value| < 10**kk

    if 0 <= k and kk <= 16:
        body = digits + "0" * k + ".0"
    elif 0 < kk <= 16:
        body = digits[:kk] + "." + digits[kk:]
    elif -5 < kk <= 0:
        body = "0." + "0" * -kk + digits
    elif length == 1:
        body = f"{digits}e{kk - 1}"
    else:
        body = f"{digits[0]}.{digits[1:]}e{kk - 1}"
    return sign + body


class Formatter:
    """Writes JSON tokens with no extra whitespace.

    Subclasses override the hooks around arrays and objects to change layout.
    """

    #: Text written right after an object key; the colon itself is written
    #: by ``begin_object_value``, so this is empty by default.
    key_suffix = ""

    def write_null(self, writer: Writer) -> None:
        """Write ``null``."""
        writer.write("null")

    def write_bool(self, writer: Writer, value: bool) -> None:
        """Write ``true`` or ``false``."""
        writer.write("true" if value else "false")

    def write_int(self, writer: Writer, value: int) -> None:
        """Write an integer such as ``-123``."""
        writer.write(format(int(value), "d"))

    def write_float(self, writer: Writer, value: float) -> None:
        """Write a finite float such as ``-31.26e12``; raises ValueError otherwise."""
        writer.write(format_float(value))

    def write_number_str(self, writer: Writer, value: str) -> None:
        """Write a number that has already been rendered to text."""
        writer.write(value)

    def begin_string(self, writer: Writer) -> None:
        """Write the opening quote of a string."""
        writer.write('"')

    def end_string(self, writer: Writer) -> None:
        """Write the closing quote of a string."""
        writer.write('"')

    def write_string_fragment(self, writer: Writer, fragment: str) -> None:
        """Write part of a string that needs no escaping."""
        writer.write(fragment)

    def write_char_escape(self, writer: Writer, char_escape: CharEscape) -> None:
        """Write one escape sequence."""
        writer.write(char_escape.encode())

    def write_byte_array(self, writer: Writer, value: Iterable[int]) -> None:
        """Write bytes as a JSON array of integers."""
        self.begin_array(writer)
        first = True
        for byte in value:
            self.begin_array_value(writer, first)
            self.write_int(writer, byte)
            self.end_array_value(writer)
            first = False
        self.end_array(writer)

    def begin_array(self, writer: Writer) -> None:
        """Open an array."""
        writer.write("[")

    def end_array(self, writer: Writer) -> None:
        """Close an array."""
        writer.write("]")

    def begin_array_value(self, writer: Writer, first: bool) -> None:
        """Write the separator before an array element, if one is needed."""
        if not first:
            writer.write(",")

    def end_array_value(self, writer: Writer) -> None:
        """Hook called after each array element."""

    def begin_object(self, writer: Writer) -> None:
        """Open an object."""
        writer.write("{")

    def end_object(self, writer: Writer) -> None:
        """Close an object."""
        writer.write("}")

    def begin_object_key(self, writer: Writer, first: bool) -> None:
        """Write the separator before an object key, if one is needed."""
        if not first:
            writer.write(",")

    def end_object_key(self, writer: Writer) -> None:
        """Write ``key_suffix`` after an object key, if it is set."""
        if self.key_suffix:
            writer.write(self.key_suffix)

    def begin_object_value(self, writer: Writer) -> None:
        """Write the colon between a key and its value."""
        writer.write(":")

    def end_object_value(self, writer: Writer) -> None:
        """Hook called after each object value."""

    def write_raw_fragment(self, writer: Writer, fragment: str) -> None:
        """Write a raw JSON fragment unchanged."""
        writer.write(fragment)


class CompactFormatter(Formatter):
    """Writes JSON with no extra whitespace."""


class PrettyFormatter(Formatter):
    """Writes JSON with one element per line, indented by nesting depth."""

    def __init__(self, indent: str | bytes = "  ") -> None:
        self.indent = indent.decode("utf-8") if isinstance(indent, bytes) else indent
        self.current_indent = 0
        self.has_value = False

    def _newline_and_indent(self, writer: Writer, prefix: str) -> None:
        writer.write(prefix + self.indent * self.current_indent)

    def begin_array(self, writer: Writer) -> None:
        self.current_indent += 1
        self.has_value = False
        writer.write("[")

    def end_array(self, writer: Writer) -> None:
        self.current_indent -= 1
        if self.has_value:
            self._newline_and_indent(writer, "\n")
        writer.write("]")

    def begin_array_value(self, writer: Writer, first: bool) -> None:
        self._newline_and_indent(writer, "\n" if first else ",\n")

    def end_array_value(self, writer: Writer) -> None:
        self.has_value = True

    def begin_object(self, writer: Writer) -> None:
        self.current_indent += 1
        self.has_value = False
        writer.write("{")

    def end_object(self, writer: Writer) -> None:
        self.current_indent -= 1
        if self.has_value:
            self._newline_and_indent(writer, "\n")
        writer.write("}")

    def begin_object_key(self, writer: Writer, first: bool) -> None:
        self._newline_and_indent(writer, "\n" if first else ",\n")

    def begin_object_value(self, writer: Writer) -> None:
        writer.write(": ")

    def end_object_value(self, writer: Writer) -> None:
        self.has_value = True