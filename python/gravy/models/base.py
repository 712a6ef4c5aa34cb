"""Serializable model base classes.

Classes:
    Serializable: pydantic model implementing the serializable contract.
        Every hook has a default, so a subclass only overrides what it
        needs:

        Object → wire:
            serialization_should_include(field, context) -> bool
            serialization_key_for_field(field, context) -> str
            serialization_will_serialize(representation, context) -> dict
            unique_index(context) -> dict | None

        Wire → object:
            from_representation(representation, context)     (classmethod)
            from_unique_index(index, context, store)          (classmethod)
            field_for_corresponding_key(key, context)         (classmethod)
            corresponds_to_key(key, context)                  (classmethod)

    Object: Serializable with identity metadata (identifier, creation and
        update timestamps). Relationships to Objects are encoded as a
        UniqueIndex ({"identifier": ...}) unless recursive encoding is
        requested, and resolved back through an identity store.

Meta options:
    abstract: the class is a payload root. It is not registered as a
        candidate for class inference, and decoding a mapping against it
        infers a concrete class for each key.

    class Blog(Object):
        class Meta:
            abstract = True

    class Post(Blog):
        text: str

    decode({"posts": [{"text": "Hi"}]}, Blog)  →  {"posts": [Post(text="Hi")]}
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, ClassVar
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from gravy.exceptions import MissingIdentityStore, UnresolvableReference
from gravy.models.registry import register_model

if TYPE_CHECKING:
    from gravy.stores import IdentityStore


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Serializable(BaseModel):
    """Base class for models the engine converts field by field."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    __abstract__: ClassVar[bool] = True

    # Field holding the identity used for UniqueIndex; None disables it.
    identity_field: ClassVar[str | None] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        meta = cls.__dict__.get("Meta")
        cls.__abstract__ = bool(getattr(meta, "abstract", False))
        if not cls.__abstract__:
            register_model(cls, overwrite=True)

    # -- Object → wire -------------------------------------------------

    def serialization_should_include(self, field: str, context: str | None) -> bool:
        return True

    def serialization_key_for_field(self, field: str, context: str | None) -> str:
        return field

    def serialization_will_serialize(
        self, representation: dict[str, Any], context: str | None
    ) -> dict[str, Any]:
        """Amend the built representation before it is returned."""
        return representation

    def unique_index(self, context: str | None) -> dict[str, Any] | None:
        """Minimal mapping that re-identifies this instance, if any."""
        field = type(self).identity_field
        if field is None:
            return None
        return {field: getattr(self, field)}

    # -- Wire → object -------------------------------------------------

    @classmethod
    def supports_unique_index(cls) -> bool:
        return cls.identity_field is not None

    @classmethod
    def from_representation(cls, representation: dict[str, Any], context: str | None):
        """Build an instance from decoded field values."""
        return cls.model_validate(representation)

    @classmethod
    def from_unique_index(
        cls,
        index: dict[str, Any],
        context: str | None,
        store: IdentityStore | None,
    ):
        """Return the existing instance a UniqueIndex refers to."""
        if store is None:
            raise MissingIdentityStore(
                f"Cannot resolve {cls.__name__} reference {index!r}: "
                "no identity store configured"
            )
        instance = store.fetch(cls, index, context)
        if instance is None:
            raise UnresolvableReference(f"No {cls.__name__} matches {index!r}")
        return instance

    @classmethod
    def field_for_corresponding_key(cls, key: str, context: str | None) -> str | None:
        """Field an unrecognized key maps to, or None to drop the key."""
        return None

    @classmethod
    def corresponds_to_key(cls, key: str, context: str | None) -> bool:
        """Whether payloads use ``key`` (or its plural) for this class."""
        return False


class Object(Serializable):
    """Serializable model with identity metadata."""

    identity_field: ClassVar[str | None] = "identifier"

    identifier: str = Field(default_factory=lambda: str(uuid4()).upper())
    creation_date: datetime = Field(default_factory=_utcnow)
    update_date: datetime = Field(default_factory=_utcnow)

    class Meta:
        abstract = True

    def __str__(self) -> str:
        values = ", ".join(
            f"{name}={value!r}"
            for name, value in self
            if name != "identifier"
        )
        return f"{type(self).__name__} ({self.identifier}): {values}"


__all__ = ["Serializable", "Object"]
