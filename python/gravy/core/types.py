"""Wire-level leaf types for the Gravy serializer.

NumericKind names the width class of a numeric field so that encoding
never silently truncates or wraps:
    - BOOL
    - INT8, INT16, INT32, INT64 (signed)
    - UINT8, UINT16, UINT32, UINT64 (unsigned)
    - FLOAT32, FLOAT64

Fields opt into a width through Annotated metadata:

    class Reading(Serializable):
        channel: UInt8
        value: Float32

Bare ``int`` is INT64, bare ``float`` is FLOAT64.

Timestamps and binary data have one canonical string form each:
    datetime → "2013-01-31T09:30:00Z" (UTC, ".ffffff" added before "Z"
               only when the value has microseconds)
    bytes    → standard base64
"""

from __future__ import annotations

import base64
import binascii
import math
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any

from gravy.exceptions import (
    MalformedBinary,
    MalformedTimestamp,
    NumericRangeError,
    UnsupportedNumericKind,
)


class NumericKind(str, Enum):
    """Signedness and width class of a numeric field."""

    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def is_float(self) -> bool:
        return self in (NumericKind.FLOAT32, NumericKind.FLOAT64)


INTEGER_BOUNDS: dict[NumericKind, tuple[int, int]] = {
    NumericKind.INT8: (-(2**7), 2**7 - 1),
    NumericKind.INT16: (-(2**15), 2**15 - 1),
    NumericKind.INT32: (-(2**31), 2**31 - 1),
    NumericKind.INT64: (-(2**63), 2**63 - 1),
    NumericKind.UINT8: (0, 2**8 - 1),
    NumericKind.UINT16: (0, 2**16 - 1),
    NumericKind.UINT32: (0, 2**32 - 1),
    NumericKind.UINT64: (0, 2**64 - 1),
}

# Span accepted for integers with no declared width.
_UNDECLARED_INT_BOUNDS = (-(2**63), 2**64 - 1)

FLOAT32_MAX = 3.4028234663852886e38

# Largest integer a float64 holds exactly.
_MAX_EXACT_FLOAT_INT = 2**53

Int8 = Annotated[int, NumericKind.INT8]
Int16 = Annotated[int, NumericKind.INT16]
Int32 = Annotated[int, NumericKind.INT32]
Int64 = Annotated[int, NumericKind.INT64]
UInt8 = Annotated[int, NumericKind.UINT8]
UInt16 = Annotated[int, NumericKind.UINT16]
UInt32 = Annotated[int, NumericKind.UINT32]
UInt64 = Annotated[int, NumericKind.UINT64]
Float32 = Annotated[float, NumericKind.FLOAT32]
Float64 = Annotated[float, NumericKind.FLOAT64]

DEFAULT_NUMERIC_KINDS: dict[type, NumericKind] = {
    bool: NumericKind.BOOL,
    int: NumericKind.INT64,
    float: NumericKind.FLOAT64,
}


def normalize_number(value: Any, kind: NumericKind | None = None) -> Any:
    """Return the narrowest faithful wire form of ``value``.

    Raises UnsupportedNumericKind for numbers with no wire kind (complex)
    and NumericRangeError for values outside ``kind``'s width.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if kind is not None and kind.is_float:
            return value
        low, high = INTEGER_BOUNDS.get(kind, _UNDECLARED_INT_BOUNDS)  # type: ignore[arg-type]
        if not low <= value <= high:
            label = kind.value if kind is not None else "integer"
            raise NumericRangeError(f"{value} does not fit in {label}")
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise NumericRangeError(f"{value} has no JSON representation")
        if kind is NumericKind.FLOAT32 and abs(value) > FLOAT32_MAX:
            raise NumericRangeError(f"{value} does not fit in float32")
        if kind in INTEGER_BOUNDS:
            if not value.is_integer():
                raise NumericRangeError(f"{value} is not integral ({kind.value})")  # type: ignore[union-attr]
            return normalize_number(int(value), kind)
        if value.is_integer() and abs(value) <= _MAX_EXACT_FLOAT_INT:
            return int(value)
        return value
    raise UnsupportedNumericKind(
        f"Cannot serialize {type(value).__name__} {value!r}: only bool, "
        "signed/unsigned integers and floats have a wire representation"
    )


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_FRACTIONAL_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?Z")


def format_timestamp(value: datetime) -> str:
    """Format a datetime in the canonical UTC wire format.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    if value.microsecond:
        return value.strftime(_FRACTIONAL_TIMESTAMP_FORMAT)
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: Any) -> datetime:
    """Parse a canonical wire timestamp into an aware UTC datetime."""
    if not isinstance(text, str):
        raise MalformedTimestamp(f"Expected a timestamp string, got {type(text).__name__}")
    match = _TIMESTAMP_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedTimestamp(
            f"{text!r} does not match the canonical format {TIMESTAMP_FORMAT!r}"
        )
    fmt = _FRACTIONAL_TIMESTAMP_FORMAT if match.group(1) else TIMESTAMP_FORMAT
    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError as exc:
        raise MalformedTimestamp(f"{text!r} is not a valid timestamp: {exc}") from exc
    return parsed.replace(tzinfo=timezone.utc)


def encode_binary(value: bytes | bytearray | memoryview) -> str:
    return base64.b64encode(bytes(value)).decode("ascii")


def decode_binary(text: Any) -> bytes:
    if not isinstance(text, str):
        raise MalformedBinary(f"Expected a base64 string, got {type(text).__name__}")
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise MalformedBinary(f"{text!r} is not valid base64: {exc}") from exc


__all__ = [
    "NumericKind",
    "INTEGER_BOUNDS",
    "FLOAT32_MAX",
    "DEFAULT_NUMERIC_KINDS",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Float32",
    "Float64",
    "normalize_number",
    "TIMESTAMP_FORMAT",
    "format_timestamp",
    "parse_timestamp",
    "encode_binary",
    "decode_binary",
]
