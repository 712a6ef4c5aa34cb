"""Serializable model definitions and type metadata.

This module provides the model layer the serializer works with, built on
Pydantic v2:

Classes:
    Serializable: Base class for serializable models. Provides:
        - Automatic registration as a class-inference candidate
        - Optional hooks customizing inclusion, key naming, amendment
          of the built representation and key correspondence
        - Construction from decoded field values

    Object: Serializable with identity metadata:
        - identifier: unique string, used as the UniqueIndex
        - creation_date / update_date: UTC timestamps

    TypeDescriptor / FieldKind: Field metadata derived from a model class.

Model Registry:
    register_model(): Register model in global registry.
    unregister_model(): Remove model from registry.
    registered_models(): Get dict of all registered models.
    iter_models(): Iterate over registered models.
    clear_registry(): Remove all registered models.

Example:
    from gravy import Object, UInt32

    class Post(Object):
        text: str
        views: UInt32 = 0
        author: User | None = None
"""

from .base import Object, Serializable
from .descriptor import ANY_KIND, FieldKind, Kind, TypeDescriptor, classify, describe
from .registry import (
    clear_registry,
    iter_models,
    register_model,
    registered_models,
    unregister_model,
)

__all__ = [
    "Serializable",
    "Object",
    "TypeDescriptor",
    "FieldKind",
    "Kind",
    "ANY_KIND",
    "classify",
    "describe",
    "register_model",
    "unregister_model",
    "registered_models",
    "iter_models",
    "clear_registry",
]
