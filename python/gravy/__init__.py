"""Gravy: type-directed object/JSON serialization for pydantic models.

    from gravy import CaseMode, ConversionOptions, Object, Serializable, decode, encode

    class User(Object):
        name: str

    class Recipe(Serializable):
        title: str
        prep_time: int
        author: User | None = None

    encode(recipe, ConversionOptions(case=CaseMode.TO_CAMEL))
    >> {"title": "Pasta", "prepTime": 10, "author": {"identifier": "..."}}

    decode({"users": [{"name": "John"}]}, Object)
    >> {"users": [User(name="John")]}
"""

from gravy.core.types import (
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
from gravy.exceptions import (
    AmbiguousOrUnknownKey,
    GravyError,
    MalformedBinary,
    MalformedTimestamp,
    MalformedValue,
    MissingConverter,
    MissingIdentityStore,
    NumericRangeError,
    SerializationError,
    UnresolvableReference,
    UnsupportedNumericKind,
)
from gravy.models import Object, Serializable, TypeDescriptor, describe
from gravy.serialization import (
    CaseMode,
    ConversionOptions,
    ConverterRegistry,
    decode,
    encode,
    from_json,
    from_msgpack,
    register_converter,
    resolve,
    to_camel,
    to_json,
    to_msgpack,
    to_snake,
)
from gravy.stores import IdentityStore, MemoryStore

__all__ = [
    # models
    "Serializable",
    "Object",
    "TypeDescriptor",
    "describe",
    # numeric kinds
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
    # conversion
    "ConversionOptions",
    "CaseMode",
    "encode",
    "decode",
    "to_json",
    "from_json",
    "to_msgpack",
    "from_msgpack",
    "to_snake",
    "to_camel",
    "resolve",
    "ConverterRegistry",
    "register_converter",
    # stores
    "IdentityStore",
    "MemoryStore",
    # errors
    "GravyError",
    "SerializationError",
    "UnsupportedNumericKind",
    "NumericRangeError",
    "MalformedValue",
    "MalformedTimestamp",
    "MalformedBinary",
    "AmbiguousOrUnknownKey",
    "UnresolvableReference",
    "MissingIdentityStore",
    "MissingConverter",
]
