"""Serialization of Python values into JSON text."""

from __future__ import annotations

import dataclasses
import io
import math
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from .errors import (
    ErrorCode,
    SerializeError,
    float_key_must_be_finite,
    key_must_be_a_string,
)
from .escape import format_escaped_str
from .formatter import CompactFormatter, Formatter, PrettyFormatter, Writer

__all__ = [
    "Serializer",
    "to_writer",
    "to_writer_pretty",
    "to_bytes",
    "to_bytes_pretty",
    "to_string",
    "to_string_pretty",
]


class Serializer:
    """Writes Python values as JSON to a text writer through a formatter.

    Supported values: ``None``, booleans, integers, floats (NaN and
    infinities become ``null``), strings, bytes-like objects (written as
    arrays of integers), enum members (written as their name), lists,
    tuples, mappings and dataclass instances (written as objects).
    """

    def __init__(self, writer: Writer, formatter: Formatter | None = None) -> None:
        self.writer = writer
        self.formatter = CompactFormatter() if formatter is None else formatter

    @classmethod
    def pretty(cls, writer: Writer) -> Serializer:
        """Create a serializer that indents its output by two spaces."""
        return cls(writer, PrettyFormatter())

    def into_inner(self) -> Writer:
        """Return the underlying writer."""
        return self.writer

    def serialize(self, value: Any) -> None:
        """Write ``value`` as JSON; raise SerializeError if it cannot be written."""
        fmt, out = self.formatter, self.writer
        if value is None:
            fmt.write_null(out)
        elif isinstance(value, Enum):
            format_escaped_str(out, fmt, value.name)
        elif isinstance(value, bool):
            fmt.write_bool(out, value)
        elif isinstance(value, int):
            fmt.write_int(out, value)
        elif isinstance(value, float):
            if math.isfinite(value):
                fmt.write_float(out, value)
            else:
                fmt.write_null(out)
        elif isinstance(value, str):
            format_escaped_str(out, fmt, value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            fmt.write_byte_array(out, bytes(value))
        elif isinstance(value, Mapping):
            self._serialize_entries(value.items())
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            self._serialize_entries(
                (field.name, getattr(value, field.name))
                for field in dataclasses.fields(value)
            )
        elif isinstance(value, (list, tuple)):
            self._serialize_sequence(value)
        else:
            raise SerializeError(
                ErrorCode.CUSTOM,
                f"cannot serialize value of type {type(value).__name__}",
            )

    def _serialize_sequence(self, items: Iterable[Any]) -> None:
        fmt, out = self.formatter, self.writer
        fmt.begin_array(out)
        first = True
        for item in items:
            fmt.begin_array_value(out, first)
            first = False
            self.serialize(item)
            fmt.end_array_value(out)
        fmt.end_array(out)

    def _serialize_entries(self, entries: Iterable[tuple[Any, Any]]) -> None:
        fmt, out = self.formatter, self.writer
        fmt.begin_object(out)
        first = True
        for key, item in entries:
            fmt.begin_object_key(out, first)
            first = False
            self._serialize_key(key)
            fmt.end_object_key(out)
            fmt.begin_object_value(out)
            self.serialize(item)
            fmt.end_object_value(out)
        fmt.end_object(out)

    def _serialize_key(self, key: Any) -> None:
        fmt, out = self.formatter, self.writer
        if isinstance(key, Enum):
            format_escaped_str(out, fmt, key.name)
        elif isinstance(key, str):
            format_escaped_str(out, fmt, key)
        elif isinstance(key, bool):
            fmt.begin_string(out)
            fmt.write_bool(out, key)
            fmt.end_string(out)
        elif isinstance(key, int):
            fmt.begin_string(out)
            fmt.write_int(out, key)
            fmt.end_string(out)
        elif isinstance(key, float):
            if not math.isfinite(key):
                raise float_key_must_be_finite()
            fmt.begin_string(out)
            fmt.write_float(out, key)
            fmt.end_string(out)
        else:
            raise key_must_be_a_string()


def to_writer(writer: Writer, value: Any) -> None:
    """Write ``value`` as compact JSON to ``writer``."""
    Serializer(writer).serialize(value)


def to_writer_pretty(writer: Writer, value: Any) -> None:
    """Write ``value`` as pretty-printed JSON to ``writer``."""
    Serializer.pretty(writer).serialize(value)


def to_string(value: Any) -> str:
    """Return ``value`` as compact JSON text."""
    buffer = io.StringIO()
    to_writer(buffer, value)
    return buffer.getvalue()


def to_string_pretty(value: Any) -> str:
    """Return ``value`` as pretty-printed JSON text."""
    buffer = io.StringIO()
    to_writer_pretty(buffer, value)
    return buffer.getvalue()


def to_bytes(value: Any) -> bytes:
    """Return ``value`` as compact JSON encoded in UTF-8."""
    return to_string(value).encode("utf-8")


def to_bytes_pretty(value: Any) -> bytes:
    """Return ``value`` as pretty-printed JSON encoded in UTF-8."""
    return to_string_pretty(value).encode("utf-8")