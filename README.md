# jsonemit

A small JSON serializer that writes Python values to a text stream through a
pluggable formatter. Two formatters come with it: a compact one with no
whitespace and a pretty one that puts each element on its own line and
indents by nesting depth.

## Installing

```
pip install jsonemit
```

## Quick use

```python
from jsonemit.serializer import to_string, to_string_pretty

to_string({"a": [1, 2.5, None, True]})
# '{"a":[1,2.5,null,true]}'

print(to_string_pretty({"a": [1, 2]}))
# {
#   "a": [
#     1,
#     2
#   ]
# }
```

- `to_string` / `to_string_pretty` return `str`.
- `to_bytes` / `to_bytes_pretty` return the same text encoded as UTF-8.
- `to_writer` / `to_writer_pretty` write into any object with a text
  `write` method, such as `io.StringIO` or a file opened in text mode.

## What can be serialized

| Python value                               | JSON                         |
|--------------------------------------------|------------------------------|
| `None`                                     | `null`                       |
| `True` / `False`                           | `true` / `false`             |
| `int`                                      | integer                      |
| finite `float`                             | number, always with a fraction or exponent (`1.0`, `1.2e41`) |
| NaN or infinite `float`                    | `null`                       |
| `str`                                      | escaped string               |
| `bytes`, `bytearray`, `memoryview`         | array of integers            |
| `enum.Enum` member                         | string holding the member's name |
| `list`, `tuple`                            | array                        |
| any `Mapping`, dataclass instance          | object (dataclass fields in declaration order) |

Any other type raises `jsonemit.errors.SerializeError` with code
`ErrorCode.CUSTOM`.

Object keys may be strings, enum members, booleans, integers or finite floats;
non-string keys are written inside quotes (`{1: "x"}` becomes `{"1":"x"}`).
Any other key raises `SerializeError` with code
`ErrorCode.KEY_MUST_BE_A_STRING`; a NaN or infinite float key raises it with
`ErrorCode.FLOAT_KEY_MUST_BE_FINITE`. `SerializeError` is a subclass of
`ValueError`.

## Strings and numbers

Strings escape `"`, `\` and the control characters U+0000 to U+001F, using
`\b`, `\t`, `\n`, `\f`, `\r` where they exist and `\u00XX` otherwise.
Everything else is written unchanged. The escaping lives in
`jsonemit.escape` (`CharEscape`, `EscapeKind`, `format_escaped_str`,
`format_escaped_str_contents`).

`jsonemit.formatter.format_float` renders a finite float in the shortest form
that reads back exactly: plain decimal for values with up to 16 integer digits
(`100.0`, `0.0001`), an exponent otherwise (`1e20`, `1e-7`). It raises
`ValueError` for NaN and infinities.

## Custom formatting

A `Serializer` pairs a writer with a formatter:

```python
import io
from jsonemit.formatter import PrettyFormatter
from jsonemit.serializer import Serializer

buf = io.StringIO()
Serializer(buf, PrettyFormatter("\t")).serialize([1, {"k": "v"}])
buf.getvalue()
# '[\n\t1,\n\t{\n\t\t"k": "v"\n\t}\n]'
```

`Serializer(writer)` uses `CompactFormatter`; `Serializer.pretty(writer)` uses
`PrettyFormatter` with two-space indentation. `PrettyFormatter` also accepts
its indent as UTF-8 `bytes`. `into_inner()` returns the writer.

Subclass `jsonemit.formatter.Formatter` and override its hooks
(`write_null`, `write_int`, `write_float`, `begin_array`, `begin_array_value`,
`begin_object_key`, `begin_object_value`, `write_char_escape`,
`write_byte_array`, ...) to change how each piece of the output is written.

## What it does not do

This package only writes JSON. It has no parser, no command-line tool and
no way to read JSON back into Python values.

## Running the tests

```
pip install -e .[test]
pytest
```