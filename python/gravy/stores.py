"""Identity-based object stores.

The engine never constructs a new instance for a UniqueIndex met in
property position; it asks an IdentityStore for the instance the index
identifies. Any object with a matching ``fetch`` method can be passed as
``ConversionOptions.store``.

MemoryStore keeps registered instances per model class, keyed by each
model's ``identity_field``:

    store = MemoryStore()
    store.add(user)
    decode({"title": "Pasta", "author": {"identifier": user.identifier}},
           Recipe, ConversionOptions(store=store))
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from gravy.models.base import Serializable

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Serializable)


@runtime_checkable
class IdentityStore(Protocol):
    """Fetches existing instances by their UniqueIndex."""

    def fetch(
        self, model: type[M], index: Mapping[str, Any], context: str | None
    ) -> M | None: ...


class MemoryStore:
    """In-memory IdentityStore holding instances by model and identity."""

    def __init__(self) -> None:
        self._objects: dict[type[Serializable], dict[Any, Serializable]] = {}

    @staticmethod
    def _identity_field(model: type[Serializable]) -> str:
        field = model.identity_field
        if field is None:
            raise TypeError(f"{model.__name__} has no identity field")
        return field

    def add(self, *instances: Serializable) -> None:
        for instance in instances:
            model = type(instance)
            identity = getattr(instance, self._identity_field(model))
            self._objects.setdefault(model, {})[identity] = instance

    def remove(self, instance: Serializable) -> None:
        model = type(instance)
        identity = getattr(instance, self._identity_field(model))
        self._objects.get(model, {}).pop(identity, None)

    def objects(self, model: type[M]) -> list[M]:
        """Instances of ``model`` and its subclasses, in insertion order."""
        return list(self._iter_objects(model))

    def _iter_objects(self, model: type[M]) -> Iterator[M]:
        for stored_model, instances in self._objects.items():
            if issubclass(stored_model, model):
                yield from instances.values()  # type: ignore[misc]

    def get(self, model: type[M], identity: Any) -> M | None:
        for stored_model, instances in self._objects.items():
            if issubclass(stored_model, model) and identity in instances:
                return instances[identity]  # type: ignore[return-value]
        return None

    def fetch(
        self, model: type[M], index: Mapping[str, Any], context: str | None
    ) -> M | None:
        field = self._identity_field(model)
        if field not in index:
            logger.debug("Index %r for %s lacks %r", index, model.__name__, field)
            return None
        return self.get(model, index[field])

    def clear(self) -> None:
        self._objects.clear()

    def __len__(self) -> int:
        return sum(len(instances) for instances in self._objects.values())


__all__ = ["IdentityStore", "MemoryStore"]
