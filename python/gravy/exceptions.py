"""Exception hierarchy for Gravy.

All Gravy exceptions inherit from GravyError, allowing catch-all handling:

    try:
        recipe = decode(payload, Recipe)
    except GravyError as e:
        print(f"Serialization error: {e}")

Exception hierarchy:
    GravyError (base)
    └── SerializationError         - Any encode/decode failure
        ├── UnsupportedNumericKind - Number with no wire numeric kind (e.g. complex)
        │   └── NumericRangeError  - Number outside its declared width
        ├── MalformedValue         - Wire string that cannot be parsed back
        │   ├── MalformedTimestamp
        │   └── MalformedBinary
        ├── AmbiguousOrUnknownKey  - Payload key with no inferable class
        ├── UnresolvableReference  - UniqueIndex with no matching instance
        │   └── MissingIdentityStore - UniqueIndex but no store configured
        └── MissingConverter       - Converter-kind type never registered
"""

from __future__ import annotations

from typing import Any


class GravyError(Exception):
    """Base exception for all Gravy-related errors."""


class SerializationError(GravyError):
    """Raised when a value cannot be converted to or from its wire form."""


class UnsupportedNumericKind(SerializationError):
    """Raised when a number has no mapping to the engine's numeric kinds."""


class NumericRangeError(UnsupportedNumericKind):
    """Raised when a number cannot be represented in its declared width."""


class MalformedValue(SerializationError):
    """Raised when a wire string does not parse back into its field type."""


class MalformedTimestamp(MalformedValue):
    """Raised when a timestamp string does not match the canonical format."""


class MalformedBinary(MalformedValue):
    """Raised when a binary field's string is not valid base64."""


class AmbiguousOrUnknownKey(SerializationError):
    """Raised when no candidate class corresponds to a payload key.

    When raised from a payload decode, ``keys`` holds every key that could
    not be resolved and ``decoded`` holds the sibling entries that were.
    """

    def __init__(
        self,
        message: str,
        *,
        keys: tuple[str, ...] = (),
        decoded: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.keys = keys
        self.decoded = decoded if decoded is not None else {}


class UnresolvableReference(SerializationError):
    """Raised when a UniqueIndex does not resolve to a stored instance."""


class MissingIdentityStore(UnresolvableReference):
    """Raised when a UniqueIndex must be resolved but no store is configured."""


class MissingConverter(SerializationError):
    """Raised when a converter-kind type has no registered converter."""


__all__ = [
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
