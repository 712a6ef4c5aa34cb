"""Class inference for payload keys.

A payload is a mapping decoded without a concrete destination class:

    {"author": {"name": "John"}, "posts": [{"text": "Hi"}]}

Each key names the class of its value. resolve() picks that class from an
ordered list of candidates:

    1. Explicit correspondence: the first candidate whose
       corresponds_to_key() accepts the key or one of its plurals.
    2. Name match: the first candidate whose class name contains one of
       the key's singulars (case-insensitive).
    3. Otherwise AmbiguousOrUnknownKey.

Plurals and singulars come from a small fixed table of suffix rewrites,
not a linguistic pluralizer. Each rule chops a number of characters off
the end and appends a suffix; every rule is applied to the original key
independently.

    Fish → Fish        Cat → Cats          Box → Boxes
    Category → Categories                  Wife → Wives
    Dwarf → Dwarves    Man → Men           Person → People
    Child → Children   Diagnosis → Diagnoses
    Matrix → Matrices  Index → Indices     Quiz → Quizzes
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gravy.exceptions import AmbiguousOrUnknownKey
from gravy.models.base import Serializable

logger = logging.getLogger(__name__)

# (characters to chop, suffix to append)
SINGULARIZATION_RULES: tuple[tuple[int, str], ...] = (
    (0, ""),  # Fish
    (1, ""),  # Cats
    (2, ""),  # Boxes
    (3, "y"),  # Categories
    (3, "fe"),  # Wives
    (3, "f"),  # Dwarves
    (2, "an"),  # Men
    (6, "Person"),  # People
    (8, "Child"),  # Children
    (2, "is"),  # Diagnoses
    (4, "ix"),  # Matrices
    (4, "ex"),  # Indices
    (3, ""),  # Quizzes
)

PLURALIZATION_RULES: tuple[tuple[int, str], ...] = (
    (0, ""),  # Fish
    (0, "s"),  # Cat
    (0, "es"),  # Box
    (1, "ies"),  # Category
    (2, "ves"),  # Wife
    (1, "ves"),  # Dwarf
    (2, "en"),  # Man
    (6, "People"),  # Person
    (5, "Children"),  # Child
    (2, "es"),  # Diagnosis
    (2, "ices"),  # Matrix, Index
    (0, "zes"),  # Quiz
)


def _candidates(key: str, rules: Sequence[tuple[int, str]]) -> list[str]:
    candidates = []
    for chop, suffix in rules:
        if len(key) < chop:
            continue
        candidates.append(key[: len(key) - chop] + suffix)
    return candidates


def singularized_candidates(key: str) -> list[str]:
    """Every spelling ``key`` could have in the singular."""
    return _candidates(key, SINGULARIZATION_RULES)


def pluralized_candidates(key: str) -> list[str]:
    """Every spelling ``key`` could have in the plural."""
    return _candidates(key, PLURALIZATION_RULES)


def resolve(
    key: str,
    candidates: Sequence[type[Serializable]],
    context: str | None = None,
) -> type[Serializable]:
    """Infer the class a payload key stands for."""
    plurals = pluralized_candidates(key)
    for model in candidates:
        for variant in plurals:
            if model.corresponds_to_key(variant, context):
                logger.debug("Payload key %r corresponds to %s", key, model.__name__)
                return model

    singulars = [variant.lower() for variant in singularized_candidates(key) if variant]
    for model in candidates:
        name = model.__name__.lower()
        for variant in singulars:
            if variant in name:
                logger.debug(
                    "Payload key %r matched %s by name (%r)", key, model.__name__, variant
                )
                return model

    raise AmbiguousOrUnknownKey(
        f"No class could be inferred from payload key {key!r}. Rename the key "
        "or override corresponds_to_key() on the model it stands for.",
        keys=(key,),
    )


__all__ = [
    "SINGULARIZATION_RULES",
    "PLURALIZATION_RULES",
    "singularized_candidates",
    "pluralized_candidates",
    "resolve",
]
