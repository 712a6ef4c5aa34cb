"""Type-directed conversion between object graphs and their wire form.

encode(value, options) walks a value and returns a JSON-safe structure:

    Registered type     →  converter.encode(value)
    Serializable        →  dict of its descriptor fields (or its
                           UniqueIndex, when it is a field of another
                           model and relationships are not recursive)
    list/tuple/set      →  list, element by element
    dict                →  dict with case-converted keys
    bytes               →  base64 str
    datetime            →  canonical UTC str
    class object        →  class name
    bool/int/float      →  narrowest faithful number
    None/str            →  unchanged
    anything else       →  unchanged (logged at DEBUG)

decode(value, destination, options) walks a wire value against a
destination type hint:

    decode(data, Recipe)              →  Recipe
    decode(data, list[Recipe])        →  [Recipe, ...]
    decode(data, Object)              →  {"key": Model | [Model, ...]}
                                         (payload: class inferred per key)
    decode(data)                      →  plain dicts/lists, keys re-cased

Models met in property position (as the value of another model's field)
are resolved from their UniqueIndex through ConversionOptions.store
unless recursive_relationships is set.

Each call is a terminating recursion over its input. Encoding a graph
with reference cycles requires recursive_relationships=False.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from gravy.core.types import (
    decode_binary,
    encode_binary,
    format_timestamp,
    normalize_number,
    parse_timestamp,
)
from gravy.exceptions import (
    AmbiguousOrUnknownKey,
    MissingConverter,
    SerializationError,
    UnsupportedNumericKind,
)
from gravy.models.base import Serializable
from gravy.models.descriptor import ANY_KIND, FieldKind, Kind, classify, describe
from gravy.models.registry import iter_models
from gravy.serialization.case import CaseMode, from_wire, to_wire
from gravy.serialization.options import DEFAULT_OPTIONS, ConversionOptions
from gravy.serialization.resolver import resolve

logger = logging.getLogger(__name__)

# Kinds whose destination type may carry a registered converter.
_LEAF_KINDS = frozenset(
    {
        Kind.PRIMITIVE,
        Kind.TEXT,
        Kind.BINARY,
        Kind.TIMESTAMP,
        Kind.NESTED,
        Kind.PAYLOAD,
        Kind.CONVERTED,
    }
)


def encode(value: Any, options: ConversionOptions | None = None) -> Any:
    """Convert a value into its JSON-safe wire form."""
    return _encode(value, options or DEFAULT_OPTIONS, None, in_property=False)


def decode(
    value: Any,
    destination: Any = None,
    options: ConversionOptions | None = None,
) -> Any:
    """Convert a wire value into an instance of ``destination``.

    ``destination`` is any type hint (a model, ``list[Model]``, ``bytes``
    ...). An abstract model decodes a payload; None keeps plain
    containers.
    """
    kind = classify(destination)
    if kind is None:
        raise TypeError(f"Cannot decode into callable type {destination!r}")
    return _decode(value, kind, options or DEFAULT_OPTIONS, in_property=False)


# =============================================================================
# Object → wire
# =============================================================================


def _encode(
    value: Any,
    options: ConversionOptions,
    kind: FieldKind | None,
    in_property: bool,
) -> Any:
    if value is None:
        return None

    converter = options.converter_registry.lookup(type(value))
    if converter is not None:
        return converter.encode(value)

    if isinstance(value, Serializable):
        return _encode_object(value, options, in_property)
    if isinstance(value, (list, tuple, set, frozenset)):
        element = kind.element if kind is not None and kind.kind is Kind.COLLECTION else None
        return [_encode(item, options, element, in_property) for item in value]
    if isinstance(value, Mapping):
        element = kind.element if kind is not None and kind.kind is Kind.MAPPING else None
        return _encode_mapping(value, options, element, in_property)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return encode_binary(value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, type):
        return value.__name__
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float, complex)):
        numeric = kind.numeric if kind is not None and kind.kind is Kind.PRIMITIVE else None
        return normalize_number(value, numeric)

    logger.debug("Passing through unclassified %s value", type(value).__name__)
    return value


def _encode_mapping(
    mapping: Mapping[Any, Any],
    options: ConversionOptions,
    element: FieldKind | None,
    in_property: bool,
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, item in mapping.items():
        if not isinstance(key, str):
            raise SerializationError(
                f"Mapping keys must be strings to serialize, got {key!r}"
            )
        result[to_wire(key, options.case)] = _encode(item, options, element, in_property)
    return result


def _encode_object(
    obj: Serializable,
    options: ConversionOptions,
    in_property: bool,
) -> dict[str, Any]:
    context = options.context

    if in_property and not options.recursive_relationships:
        index = obj.unique_index(context)
        if index is not None:
            return _encode_mapping(index, options, None, in_property=False)

    representation: dict[str, Any] = {}
    for name, kind in describe(type(obj)).fields.items():
        if not obj.serialization_should_include(name, context):
            continue
        value = getattr(obj, name)
        if value is None and not options.include_null_fields:
            continue
        key = obj.serialization_key_for_field(name, context)
        representation[key] = _encode(value, options, kind, in_property=True)

    encoded = dict(representation)
    representation = obj.serialization_will_serialize(representation, context)

    result: dict[str, Any] = {}
    for key, value in representation.items():
        if not (key in encoded and encoded[key] is value):
            # Added, replaced or moved by the amendment hook. Wire values
            # re-encode to themselves, so a moved value comes out unchanged.
            value = _encode(value, options, None, in_property=True)
        result[to_wire(key, options.case)] = value
    return result


# =============================================================================
# Wire → object
# =============================================================================


def _decode(
    value: Any,
    kind: FieldKind,
    options: ConversionOptions,
    in_property: bool,
) -> Any:
    if value is None:
        return None

    if kind.kind in _LEAF_KINDS:
        converter = options.converter_registry.lookup(kind.python_type)
        if converter is not None:
            return converter.decode(value)

    if kind.kind is Kind.CONVERTED:
        if isinstance(value, kind.python_type):
            return value
        raise MissingConverter(
            f"No converter registered for {kind.python_type.__name__}; "
            "register one with register_converter()"
        )

    if kind.kind is Kind.PAYLOAD:
        if not isinstance(value, Mapping):
            raise SerializationError(
                f"A {kind.python_type.__name__} payload must be a mapping, "
                f"got {type(value).__name__}"
            )
        return _decode_payload(value, kind.python_type, options)

    if kind.kind is Kind.NESTED:
        if isinstance(value, kind.python_type):
            return value
        if isinstance(value, Mapping):
            return _decode_object(value, kind.python_type, options, in_property)
        if isinstance(value, list):
            return [_decode(item, kind, options, in_property) for item in value]
        return value

    if kind.kind is Kind.COLLECTION:
        if not isinstance(value, (list, tuple)):
            return value
        element = kind.element or ANY_KIND
        items = [_decode(item, element, options, in_property) for item in value]
        return items if kind.python_type is list else kind.python_type(items)

    if kind.kind is Kind.MAPPING:
        if not isinstance(value, Mapping):
            return value
        return _decode_mapping(value, kind.element or ANY_KIND, options, in_property)

    if kind.kind is Kind.TIMESTAMP:
        if isinstance(value, datetime):
            return value
        return parse_timestamp(value)

    if kind.kind is Kind.BINARY:
        if isinstance(value, (bytes, bytearray)):
            return value
        data = decode_binary(value)
        return bytearray(data) if kind.python_type is bytearray else data

    if kind.kind is Kind.PRIMITIVE:
        if kind.numeric is None:
            raise UnsupportedNumericKind(
                f"{kind.python_type.__name__} fields have no wire numeric kind"
            )
        if isinstance(value, (int, float)):
            normalize_number(value, kind.numeric)
        return value

    if kind.kind is Kind.TEXT:
        return value

    # ANY: follow the value's own shape.
    if isinstance(value, list):
        return [_decode(item, ANY_KIND, options, in_property) for item in value]
    if isinstance(value, Mapping):
        return _decode_mapping(value, ANY_KIND, options, in_property)
    return value


def _decode_mapping(
    mapping: Mapping[str, Any],
    element: FieldKind,
    options: ConversionOptions,
    in_property: bool,
) -> dict[str, Any]:
    return {
        from_wire(key, options.case): _decode(item, element, options, in_property)
        for key, item in mapping.items()
    }


@functools.lru_cache(maxsize=None)
def _wire_names(model: type[Serializable], case: CaseMode) -> dict[str, str]:
    """Wire spelling → field name for every descriptor field."""
    return {to_wire(name, case): name for name in describe(model).fields}


def _field_for_key(
    key: str,
    model: type[Serializable],
    options: ConversionOptions,
) -> str | None:
    fields = describe(model).fields
    name = _wire_names(model, options.case).get(key)
    if name is not None:
        return name
    native = from_wire(key, options.case)
    if native in fields:
        return native
    if key in fields:
        return key
    name = model.field_for_corresponding_key(native, options.context)
    if name is not None and name not in fields:
        logger.debug("%s maps %r to unknown field %r", model.__name__, key, name)
        return None
    return name


def _decode_object(
    data: Mapping[str, Any],
    model: type[Serializable],
    options: ConversionOptions,
    in_property: bool,
) -> Any:
    context = options.context
    descriptor = describe(model)

    fields: dict[str, Any] = {}
    for key, item in data.items():
        name = _field_for_key(key, model, options)
        if name is None:
            logger.debug("Dropping unrecognized key %r for %s", key, model.__name__)
            continue
        fields[name] = item

    if in_property and not options.recursive_relationships and model.supports_unique_index():
        return model.from_unique_index(fields, context, options.store)

    representation = {
        name: _decode(item, descriptor.fields[name], options, in_property=True)
        for name, item in fields.items()
    }
    return model.from_representation(representation, context)


def _decode_payload(
    payload: Mapping[str, Any],
    root: type[Serializable],
    options: ConversionOptions,
) -> dict[str, Any]:
    if options.candidates is not None:
        candidates = list(options.candidates)
    else:
        candidates = [model for model in iter_models() if issubclass(model, root)]

    decoded: dict[str, Any] = {}
    unresolved: list[str] = []
    for key, item in payload.items():
        native = from_wire(key, options.case)
        try:
            model = resolve(native, candidates, options.context)
        except AmbiguousOrUnknownKey:
            logger.warning("Could not infer a class for payload key %r", key)
            unresolved.append(key)
            continue
        if not isinstance(item, (Mapping, list)):
            raise SerializationError(
                f"Payload key {key!r} must hold a mapping or a list, "
                f"got {type(item).__name__}"
            )
        decoded[native] = _decode(item, FieldKind(Kind.NESTED, model), options, in_property=False)

    if unresolved:
        raise AmbiguousOrUnknownKey(
            f"No class could be inferred for payload key(s) {', '.join(map(repr, unresolved))}",
            keys=tuple(unresolved),
            decoded=decoded,
        )
    return decoded


__all__ = ["encode", "decode"]
