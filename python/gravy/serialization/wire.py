"""Text and binary wire formats for encoded values.

    to_json(recipe, options)           →  '{"title": "Pasta", "prep": 10}'
    from_json(text, Recipe, options)   →  Recipe(title="Pasta", prep=10)

    to_msgpack(recipe, options)        →  b"\\x82\\xa5title..."
    from_msgpack(data, Recipe, options)

Both formats carry the same wire form produced by encode(); timestamps
and binary fields travel as strings in either.
"""

from __future__ import annotations

import json
from typing import Any

import msgpack

from gravy.serialization.engine import decode, encode
from gravy.serialization.options import ConversionOptions


def to_json(value: Any, options: ConversionOptions | None = None, **dumps_kwargs: Any) -> str:
    """Encode a value and serialize it as JSON text."""
    return json.dumps(encode(value, options), **dumps_kwargs)


def from_json(
    text: str | bytes,
    destination: Any = None,
    options: ConversionOptions | None = None,
) -> Any:
    """Parse JSON text and decode it into ``destination``."""
    return decode(json.loads(text), destination, options)


def to_msgpack(value: Any, options: ConversionOptions | None = None) -> bytes:
    """Encode a value and pack it as MessagePack."""
    return msgpack.packb(encode(value, options), use_bin_type=True)


def from_msgpack(
    data: bytes,
    destination: Any = None,
    options: ConversionOptions | None = None,
) -> Any:
    """Unpack MessagePack data and decode it into ``destination``."""
    return decode(msgpack.unpackb(data, raw=False), destination, options)


__all__ = ["to_json", "from_json", "to_msgpack", "from_msgpack"]
