"""Type metadata for serializable models.

describe(model) walks a model's pydantic fields (inherited fields
included, a subclass redeclaration wins) and classifies each one into a
FieldKind. The result is a frozen TypeDescriptor, computed once per class
and cached for the life of the process.

Field kinds:
    PRIMITIVE   bool / int / float, with a NumericKind width
    TEXT        str
    BINARY      bytes, bytearray
    TIMESTAMP   datetime
    NESTED      a concrete Serializable model
    PAYLOAD     an abstract Serializable model (infer class per key)
    COLLECTION  list / tuple / set / frozenset of an element kind
    MAPPING     dict of str to an element kind
    CONVERTED   any other class; handled by the converter registry
    ANY         Any, object, multi-type unions; converted by value shape

Callable-valued fields are left out of the descriptor entirely: they are
never serialized and never raise.

    class Post(Object):
        text: str
        views: UInt32 = 0
        author: User | None = None
        tags: list[str] = []

    describe(Post).fields["views"]   →  FieldKind(PRIMITIVE, int, UINT32)
    describe(Post).fields["author"]  →  FieldKind(NESTED, User, nullable=True)
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, MutableSequence, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType, UnionType
from typing import Any, Literal, Union, get_args, get_origin

from pydantic.fields import FieldInfo

from gravy.core.types import DEFAULT_NUMERIC_KINDS, NumericKind
from gravy.models.base import Serializable
from gravy.models.utils import (
    _extract_numeric_kind,
    _is_callable_hint,
    _unpack_annotated,
    _unwrap_optional,
)

logger = logging.getLogger(__name__)


class Kind(str, Enum):
    PRIMITIVE = "primitive"
    TEXT = "text"
    BINARY = "binary"
    TIMESTAMP = "timestamp"
    NESTED = "nested"
    PAYLOAD = "payload"
    COLLECTION = "collection"
    MAPPING = "mapping"
    CONVERTED = "converted"
    ANY = "any"


@dataclass(frozen=True, slots=True)
class FieldKind:
    """Semantic type of one field (or of a decode destination)."""

    kind: Kind
    python_type: Any = None  # model class, container class or leaf type
    numeric: NumericKind | None = None  # PRIMITIVE only; None = no wire kind
    element: FieldKind | None = None  # COLLECTION / MAPPING element kind
    nullable: bool = False

    @property
    def descriptor(self) -> TypeDescriptor:
        """TypeDescriptor of a NESTED field's model."""
        if self.kind is not Kind.NESTED:
            raise TypeError(f"{self.kind.value} field kinds have no descriptor")
        return describe(self.python_type)


ANY_KIND = FieldKind(Kind.ANY)


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Ordered field name → FieldKind mapping for one model class."""

    model: type[Serializable]
    fields: Mapping[str, FieldKind]

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self.fields)

    def __contains__(self, name: object) -> bool:
        return name in self.fields


_COLLECTION_ORIGINS: dict[Any, type] = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    Sequence: list,
    MutableSequence: list,
    AbstractSet: set,
}

_DESCRIPTORS: dict[type, TypeDescriptor] = {}


def _classify_class(base: type, metadata: tuple[Any, ...], nullable: bool) -> FieldKind:
    if issubclass(base, Serializable):
        kind = Kind.PAYLOAD if base.__abstract__ else Kind.NESTED
        return FieldKind(kind, base, nullable=nullable)
    if base in _COLLECTION_ORIGINS:
        return FieldKind(Kind.COLLECTION, _COLLECTION_ORIGINS[base], element=ANY_KIND, nullable=nullable)
    if base is dict or base is Mapping:
        return FieldKind(Kind.MAPPING, dict, element=ANY_KIND, nullable=nullable)
    if issubclass(base, (bool, int, float)):
        numeric = _extract_numeric_kind(metadata)
        if numeric is None:
            numeric = next(
                kind for python_type, kind in DEFAULT_NUMERIC_KINDS.items()
                if issubclass(base, python_type)
            )
        return FieldKind(Kind.PRIMITIVE, base, numeric=numeric, nullable=nullable)
    if issubclass(base, complex):
        return FieldKind(Kind.PRIMITIVE, base, nullable=nullable)
    if issubclass(base, str):
        return FieldKind(Kind.TEXT, base, nullable=nullable)
    if issubclass(base, (bytes, bytearray)):
        return FieldKind(Kind.BINARY, base, nullable=nullable)
    if issubclass(base, datetime):
        return FieldKind(Kind.TIMESTAMP, base, nullable=nullable)
    if base is object:
        return FieldKind(Kind.ANY, nullable=nullable)
    return FieldKind(Kind.CONVERTED, base, nullable=nullable)


def classify(hint: Any) -> FieldKind | None:
    """Classify a type hint. Returns None for callable hints.

    Handles Annotated metadata, Optional[T], generic containers and
    serializable models. Bare None means "no type": ANY.
    """
    if hint is None or hint is Any:
        return ANY_KIND
    base, metadata = _unpack_annotated(hint)
    base, nullable = _unwrap_optional(base)
    base, inner_metadata = _unpack_annotated(base)
    metadata += inner_metadata

    if _is_callable_hint(base):
        return None

    origin = get_origin(base)
    if origin is not None:
        args = get_args(base)
        if origin in _COLLECTION_ORIGINS:
            element = classify(args[0]) if args else ANY_KIND
            return FieldKind(
                Kind.COLLECTION,
                _COLLECTION_ORIGINS[origin],
                element=element or ANY_KIND,
                nullable=nullable,
            )
        if origin is dict or origin is Mapping:
            element = classify(args[1]) if len(args) == 2 else ANY_KIND
            return FieldKind(Kind.MAPPING, dict, element=element or ANY_KIND, nullable=nullable)
        if origin in (Union, UnionType, Literal):
            return FieldKind(Kind.ANY, nullable=nullable)
        if isinstance(origin, type):
            return _classify_class(origin, metadata, nullable)
        return FieldKind(Kind.ANY, nullable=nullable)

    if isinstance(base, type):
        return _classify_class(base, metadata, nullable)
    return FieldKind(Kind.ANY, nullable=nullable)


def _classify_field(field_info: FieldInfo) -> FieldKind | None:
    kind = classify(field_info.annotation)
    if kind is None or kind.kind is not Kind.PRIMITIVE:
        return kind
    # pydantic moves top-level Annotated metadata onto FieldInfo.metadata
    numeric = _extract_numeric_kind(field_info.metadata)
    if numeric is not None and kind.numeric is not None:
        return dataclasses.replace(kind, numeric=numeric)
    return kind


def describe(model: type[Serializable]) -> TypeDescriptor:
    """Return the cached TypeDescriptor of a serializable model class."""
    descriptor = _DESCRIPTORS.get(model)
    if descriptor is not None:
        return descriptor
    if not (isinstance(model, type) and issubclass(model, Serializable)):
        raise TypeError(f"{model!r} is not a Serializable model class")

    fields: dict[str, FieldKind] = {}
    for name, field_info in model.model_fields.items():
        kind = _classify_field(field_info)
        if kind is None:
            logger.debug("Skipping callable field %s.%s", model.__name__, name)
            continue
        fields[name] = kind

    descriptor = TypeDescriptor(model=model, fields=MappingProxyType(fields))
    # Concurrent first calls may both compute; either result is equivalent.
    _DESCRIPTORS[model] = descriptor
    return descriptor


__all__ = [
    "Kind",
    "FieldKind",
    "ANY_KIND",
    "TypeDescriptor",
    "classify",
    "describe",
]
