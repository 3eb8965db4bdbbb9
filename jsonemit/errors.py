"""Errors raised while writing JSON."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Kinds of failure a serializer can report, with their default messages."""

    IO = "io error"
    CUSTOM = "custom error"
    KEY_MUST_BE_A_STRING = "key must be a string"
    FLOAT_KEY_MUST_BE_FINITE = "float key must be finite"
    INVALID_NUMBER = "invalid number"
    EXPECTED_SOME_VALUE = "expected value"


class SerializeError(ValueError):
    """Raised when a value cannot be written as JSON."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        self.message = code.value if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"SerializeError({self.code.name}, {self.message!r})"


def key_must_be_a_string() -> SerializeError:
    """Error for a map key that cannot be written as a JSON string."""
    return SerializeError(ErrorCode.KEY_MUST_BE_A_STRING)


def float_key_must_be_finite() -> SerializeError:
    """Error for a map key that is a NaN or infinite float."""
    return SerializeError(ErrorCode.FLOAT_KEY_MUST_BE_FINITE)