"""Wire-level leaf types: numeric kinds, timestamps and binary data."""

from .types import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    NumericKind,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    "NumericKind",
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
]
