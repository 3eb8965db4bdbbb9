import dataclasses
import io
import json
from enum import Enum

import pytest

from jsonemit.errors import ErrorCode, SerializeError
from jsonemit.formatter import PrettyFormatter
from jsonemit.serializer import (
    Serializer,
    to_bytes,
    to_bytes_pretty,
    to_string,
    to_string_pretty,
    to_writer,
    to_writer_pretty,
)


class Color(Enum):
    RED = 1
    GREEN = 2


@dataclasses.dataclass
class Point:
    x: int
    y: int
    label: str


def compact(value):
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


SAMPLES = [
    None,
    True,
    False,
    0,
    -123,
    2**70,
    1.5,
    -0.25,
    "plain",
    'quote " and \\ slash',
    "control \x00\x01\x1f\b\f\n\r\t",
    "unicode é ☃",
    [],
    {},
    [1, [2, [3, []]], {}],
    {"a": [1, 2], "b": {"c": None, "d": {}}, "e": []},
]


@pytest.mark.parametrize("value", SAMPLES)
def test_compact_matches_reference(value):
    assert to_string(value) == compact(value)


@pytest.mark.parametrize("value", SAMPLES)
def test_pretty_matches_reference(value):
    assert to_string_pretty(value) == json.dumps(value, indent=2, ensure_ascii=False)


@pytest.mark.parametrize("value", SAMPLES)
def test_round_trip(value):
    assert json.loads(to_string(value)) == value
    assert json.loads(to_string_pretty(value)) == value


def test_literals():
    assert to_string(None) == "null"
    assert to_string(True) == "true"
    assert to_string(False) == "false"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_float_is_null(value):
    assert to_string(value) == "null"


def test_tuple_is_array():
    assert to_string((1, "a", None)) == compact([1, "a", None])


def test_bytes_are_integer_arrays():
    assert to_string(b"\x01\x02\xff") == compact([1, 2, 255])
    assert to_string(bytearray(b"")) == "[]"


def test_enum_is_its_name():
    assert to_string(Color.RED) == '"RED"'
    assert json.loads(to_string([Color.GREEN])) == ["GREEN"]


def test_dataclass_is_object_in_field_order():
    point = Point(1, 2, "p")
    assert to_string(point) == compact({"x": 1, "y": 2, "label": "p"})


def test_non_string_keys_are_quoted():
    value = {1: "a", True: "b", 1.5: "c"}
    assert to_string(value) == compact(value)


def test_enum_key():
    assert json.loads(to_string({Color.RED: 1})) == {"RED": 1}


@pytest.mark.parametrize("key", [None, (1, 2), b"x"])
def test_invalid_key(key):
    with pytest.raises(SerializeError) as info:
        to_string({key: 1})
    assert info.value.code is ErrorCode.KEY_MUST_BE_A_STRING
    assert str(info.value) == "key must be a string"


@pytest.mark.parametrize("key", [float("nan"), float("inf")])
def test_non_finite_float_key(key):
    with pytest.raises(SerializeError) as info:
        to_string({key: 1})
    assert info.value.code is ErrorCode.FLOAT_KEY_MUST_BE_FINITE
    assert str(info.value) == "float key must be finite"


def test_unsupported_type():
    with pytest.raises(SerializeError) as info:
        to_string({"a": {1, 2}})
    assert info.value.code is ErrorCode.CUSTOM


def test_to_writer_and_into_inner():
    buffer = io.StringIO()
    to_writer(buffer, {"k": [1, 2]})
    assert buffer.getvalue() == to_string({"k": [1, 2]})

    ser = Serializer(io.StringIO())
    ser.serialize([True, None])
    assert ser.into_inner().getvalue() == to_string([True, None])


def test_to_writer_pretty_and_pretty_constructor():
    value = {"a": [1, {"b": 2}]}
    buffer = io.StringIO()
    to_writer_pretty(buffer, value)
    ser = Serializer.pretty(io.StringIO())
    ser.serialize(value)
    assert buffer.getvalue() == ser.into_inner().getvalue() == to_string_pretty(value)


def test_custom_indent():
    value = {"a": [1, 2], "b": {"c": 3}}
    ser = Serializer(io.StringIO(), PrettyFormatter("\t"))
    ser.serialize(value)
    assert ser.into_inner().getvalue() == json.dumps(value, indent="\t")


def test_bytes_outputs_are_utf8():
    value = {"name": "é☃", "n": [1]}
    assert to_bytes(value) == compact(value).encode("utf-8")
    assert to_bytes_pretty(value) == to_string_pretty(value).encode("utf-8")
    assert json.loads(to_bytes_pretty(value)) == value