"""Global registry of serializable model classes.

This module maintains a global dict mapping model keys to model classes.
Concrete models are auto-registered when their class is defined; models
whose own Meta sets ``abstract = True`` are not.

Model Key Format:
    "{module}.{qualname}" e.g., "myapp.models.User"

This ensures unique identification even for models with same class names
in different modules.

Functions:
    register_model(model, overwrite=False):
        Add model to registry. Raises ValueError if another class is
        already registered under the same key and overwrite=False.

    unregister_model(model):
        Remove model from registry (no-op if not registered).

    registered_models() -> dict[str, type[Serializable]]:
        Return copy of registry.

    iter_models() -> tuple[type[Serializable], ...]:
        Return registered model classes in declaration order.

    clear_registry():
        Remove all models (used in tests for cleanup).

Class Inference:
    The payload decoder uses iter_models() as the ordered candidate list
    when inferring a class from a payload key. Declaration order is the
    tie-break between candidates that match the same key.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gravy.models.base import Serializable

logger = logging.getLogger(__name__)

_MODELS: dict[str, type[Serializable]] = {}


def _model_key(model: type[Serializable]) -> str:
    return f"{model.__module__}.{model.__qualname__}"


def register_model(model: type[Serializable], *, overwrite: bool = False) -> None:
    """Register a concrete serializable model."""
    key = _model_key(model)
    existing = _MODELS.get(key)
    if existing is model:
        return
    if existing is not None:
        if not overwrite:
            raise ValueError(f"Model '{key}' is already registered")
        # A re-declared class moves to the end, like a fresh declaration.
        del _MODELS[key]
    _MODELS[key] = model
    logger.debug("Registered serializable model %s", key)


def unregister_model(model: type[Serializable]) -> None:
    """Remove a model from the registry if present."""
    _MODELS.pop(_model_key(model), None)


def registered_models() -> dict[str, type[Serializable]]:
    """Return a copy of the registered model mapping."""
    return dict(_MODELS)


def iter_models() -> tuple[type[Serializable], ...]:
    """Return tuple of registered model classes."""
    return tuple(_MODELS.values())


def clear_registry() -> None:
    """Reset the registry (intended for tests)."""
    _MODELS.clear()


__all__ = [
    "register_model",
    "unregister_model",
    "registered_models",
    "iter_models",
    "clear_registry",
]
