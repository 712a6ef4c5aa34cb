"""Converter registry for types with no structural representation.

A converter is a pair of functions keyed by exact type:
    encode: instance → wire value (str, number, list, dict ...)
    decode: wire value → instance

Registering a type again replaces its converter. Registrations are
expected to happen at start-up, before concurrent encode/decode calls.

    register_converter(
        Rule,
        lambda rule: rule.expression,
        lambda text: Rule.parse(text),
    )

default_converters ships with converters for UUID, Decimal, date, time
and timedelta. Engine calls use it unless ConversionOptions.converters
names another registry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, time, timedelta
from decimal import Decimal
from typing import Any, NamedTuple
from uuid import UUID

logger = logging.getLogger(__name__)


class Converter(NamedTuple):
    encode: Callable[[Any], Any]
    decode: Callable[[Any], Any]


class ConverterRegistry:
    """Type → Converter table."""

    def __init__(self, converters: dict[type, Converter] | None = None):
        self._converters: dict[type, Converter] = dict(converters or {})

    def register(
        self,
        python_type: type,
        encode: Callable[[Any], Any],
        decode: Callable[[Any], Any],
    ) -> None:
        if python_type in self._converters:
            logger.debug("Replacing converter for %s", python_type.__name__)
        self._converters[python_type] = Converter(encode, decode)

    def lookup(self, python_type: type) -> Converter | None:
        return self._converters.get(python_type)

    def copy(self) -> ConverterRegistry:
        return ConverterRegistry(self._converters)

    def __contains__(self, python_type: object) -> bool:
        return python_type in self._converters

    def __len__(self) -> int:
        return len(self._converters)


BUILTIN_CONVERTERS: dict[type, Converter] = {
    UUID: Converter(str, UUID),
    Decimal: Converter(str, Decimal),
    date: Converter(lambda v: v.isoformat(), date.fromisoformat),
    time: Converter(lambda v: v.isoformat(), time.fromisoformat),
    timedelta: Converter(lambda v: v.total_seconds(), lambda v: timedelta(seconds=v)),
}

default_converters = ConverterRegistry(BUILTIN_CONVERTERS)


def register_converter(
    python_type: type,
    encode: Callable[[Any], Any],
    decode: Callable[[Any], Any],
) -> None:
    """Register a converter on the process-wide registry."""
    default_converters.register(python_type, encode, decode)


def lookup_converter(python_type: type) -> Converter | None:
    return default_converters.lookup(python_type)


__all__ = [
    "Converter",
    "ConverterRegistry",
    "BUILTIN_CONVERTERS",
    "default_converters",
    "register_converter",
    "lookup_converter",
]
