"""Key case conversion between camelCase and snake_case.

Builds on pydantic's alias generators and adds one convention: the word
"id" in snake_case corresponds to "identifier" in camelCase.

    to_snake("postDate")        →  "post_date"
    to_snake("userIdentifier")  →  "user_id"
    to_camel("user_id")         →  "userIdentifier"
    to_camel("id")              →  "identifier"

Both functions are idempotent, and to_camel(to_snake(key)) == key for
canonical camelCase keys. Only mapping keys are ever converted.

CaseMode names the spelling used on the wire. Encoding converts keys to
it (to_wire); decoding converts wire keys back (from_wire).
"""

from __future__ import annotations

from enum import Enum

from pydantic.alias_generators import to_camel as _to_camel
from pydantic.alias_generators import to_snake as _to_snake

SNAKE_IDENTITY_WORD = "id"
CAMEL_IDENTITY_WORD = "identifier"


class CaseMode(str, Enum):
    AS_IS = "as_is"
    TO_SNAKE = "snake"
    TO_CAMEL = "camel"


def to_snake(key: str) -> str:
    """Convert a camelCase key to snake_case."""
    words = _to_snake(key).split("_")
    return "_".join(
        SNAKE_IDENTITY_WORD if word == CAMEL_IDENTITY_WORD else word for word in words
    )


def to_camel(key: str) -> str:
    """Convert a snake_case key to camelCase."""
    words = key.split("_")
    if len(words) == 1:
        return CAMEL_IDENTITY_WORD if key == SNAKE_IDENTITY_WORD else key
    return _to_camel(
        "_".join(CAMEL_IDENTITY_WORD if word == SNAKE_IDENTITY_WORD else word for word in words)
    )


def to_wire(key: str, mode: CaseMode) -> str:
    """Spell a native key the way the wire expects."""
    if mode is CaseMode.TO_SNAKE:
        return to_snake(key)
    if mode is CaseMode.TO_CAMEL:
        return to_camel(key)
    return key


def from_wire(key: str, mode: CaseMode) -> str:
    """Spell a wire key the way native code expects."""
    if mode is CaseMode.TO_SNAKE:
        return to_camel(key)
    if mode is CaseMode.TO_CAMEL:
        return to_snake(key)
    return key


__all__ = ["CaseMode", "to_snake", "to_camel", "to_wire", "from_wire"]
