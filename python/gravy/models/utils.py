"""Type introspection utilities for model field classification.

This module provides helper functions for extracting type information
from Python type hints. Used when building TypeDescriptors.

Functions:
    _unpack_annotated(hint) -> (base_type, metadata_tuple):
        Extract base type from Annotated[T, ...].
        Returns (hint, ()) if not Annotated.

        Annotated[int, NumericKind.INT32]  →  (int, (NumericKind.INT32,))

    _unwrap_optional(hint) -> (inner_type, is_optional):
        Check if type is Optional[T] or T | None.
        Returns (T, True) if nullable, (hint, False) otherwise.

        int | None  →  (int, True)
        str         →  (str, False)

    _is_callable_hint(hint) -> bool:
        True for Callable / Callable[..., T] hints. Such fields are never
        serialized.

    _extract_numeric_kind(metadata) -> NumericKind | None:
        First NumericKind found in Annotated metadata.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from gravy.core.types import NumericKind


def _unpack_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    """Extract base type and metadata from Annotated type hint."""
    if get_origin(hint) is Annotated:
        args = get_args(hint)
        if args:
            return args[0], tuple(args[1:])
    return hint, ()


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    """Check if type is Optional/Union with None and extract base type."""
    origin = get_origin(hint)
    if origin in (Union, UnionType):
        args = []
        nullable = False
        for arg in get_args(hint):
            if arg is NoneType:
                nullable = True
            else:
                args.append(arg)
        if nullable and len(args) == 1:
            return args[0], True
    return hint, False


def _is_callable_hint(hint: Any) -> bool:
    """Check if a hint describes a function-valued field."""
    return hint is Callable or get_origin(hint) is Callable


def _extract_numeric_kind(metadata: Iterable[Any]) -> NumericKind | None:
    """Extract the declared numeric width from Annotated metadata."""
    for meta in metadata:
        if isinstance(meta, NumericKind):
            return meta
    return None


__all__ = [
    "_unpack_annotated",
    "_unwrap_optional",
    "_is_callable_hint",
    "_extract_numeric_kind",
]
