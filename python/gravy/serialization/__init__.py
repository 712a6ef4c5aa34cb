"""Conversion between typed object graphs and JSON-safe wire values."""

from .case import CaseMode, from_wire, to_camel, to_snake, to_wire
from .converters import (
    Converter,
    ConverterRegistry,
    default_converters,
    lookup_converter,
    register_converter,
)
from .engine import decode, encode
from .options import ConversionOptions
from .resolver import pluralized_candidates, resolve, singularized_candidates
from .wire import from_json, from_msgpack, to_json, to_msgpack

__all__ = [
    "CaseMode",
    "to_snake",
    "to_camel",
    "to_wire",
    "from_wire",
    "Converter",
    "ConverterRegistry",
    "default_converters",
    "register_converter",
    "lookup_converter",
    "ConversionOptions",
    "encode",
    "decode",
    "resolve",
    "singularized_candidates",
    "pluralized_candidates",
    "to_json",
    "from_json",
    "to_msgpack",
    "from_msgpack",
]
