"""Per-call conversion options."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gravy.serialization.case import CaseMode
from gravy.serialization.converters import ConverterRegistry, default_converters

if TYPE_CHECKING:
    from gravy.models.base import Serializable
    from gravy.stores import IdentityStore


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """Options for one top-level encode or decode call.

    include_null_fields: emit None-valued fields as null instead of
        leaving them out.
    recursive_relationships: encode related models in full instead of
        as their UniqueIndex, and build them in full when decoding.
    case: spelling of mapping keys on the wire.
    context: free-form purpose tag passed to every model hook
        (e.g. "network", "disk").
    converters: converter registry; the process-wide one when None.
    store: identity store for UniqueIndex resolution.
    candidates: classes tried for payload keys, in order; the registered
        subclasses of the payload root when None.
    """

    include_null_fields: bool = False
    recursive_relationships: bool = False
    case: CaseMode = CaseMode.AS_IS
    context: str | None = None
    converters: ConverterRegistry | None = None
    store: IdentityStore | None = None
    candidates: Sequence[type[Serializable]] | None = None

    @property
    def converter_registry(self) -> ConverterRegistry:
        return self.converters if self.converters is not None else default_converters


DEFAULT_OPTIONS = ConversionOptions()

__all__ = ["ConversionOptions", "DEFAULT_OPTIONS"]
