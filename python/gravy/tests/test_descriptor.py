"""Tests for TypeDescriptor construction and field classification."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import Any
from uuid import UUID

import pytest

from gravy import Int8, Int32, Object, Serializable, UInt32
from gravy.core.types import NumericKind
from gravy.models.descriptor import ANY_KIND, Kind, classify, describe


class Address(Serializable):
    street: str
    city: str | None = None


class Sample(Serializable):
    name: str
    count: int
    ratio: float
    flag: bool
    small: Int8
    maybe_medium: Int32 | None = None
    data: bytes = b""
    when: datetime | None = None
    address: Address | None = None
    tags: list[str] = []
    scores: dict[str, float] = {}
    ident: UUID | None = None
    callback: Callable[[int], int] | None = None
    signal: complex = 0j
    anything: Any = None


class Vehicle(Serializable):
    wheels: int
    frame: int
    engine: str = ""


class Bicycle(Vehicle):
    frame: str
    bell: bool = True


class Member(Object):
    nickname: str


class TestFieldClassification:
    """Test the kind assigned to each field."""

    def test_field_order_excludes_callables(self):
        """Test fields keep declaration order and callables are dropped."""
        assert describe(Sample).field_names == (
            "name",
            "count",
            "ratio",
            "flag",
            "small",
            "maybe_medium",
            "data",
            "when",
            "address",
            "tags",
            "scores",
            "ident",
            "signal",
            "anything",
        )
        assert "callback" not in describe(Sample)

    def test_primitive_kinds(self):
        """Test numeric fields carry their default width class."""
        fields = describe(Sample).fields
        assert fields["count"].kind is Kind.PRIMITIVE
        assert fields["count"].numeric is NumericKind.INT64
        assert fields["ratio"].numeric is NumericKind.FLOAT64
        assert fields["flag"].numeric is NumericKind.BOOL

    def test_declared_width(self):
        """Test Annotated widths are picked up, also inside Optional."""
        fields = describe(Sample).fields
        assert fields["small"].numeric is NumericKind.INT8
        assert fields["maybe_medium"].numeric is NumericKind.INT32
        assert fields["maybe_medium"].nullable is True

    def test_complex_has_no_numeric_kind(self):
        """Test complex fields are primitives with no wire numeric kind."""
        signal = describe(Sample).fields["signal"]
        assert signal.kind is Kind.PRIMITIVE
        assert signal.numeric is None

    def test_leaf_kinds(self):
        """Test text, binary, timestamp and converted kinds."""
        fields = describe(Sample).fields
        assert fields["name"].kind is Kind.TEXT
        assert fields["data"].kind is Kind.BINARY
        assert fields["when"].kind is Kind.TIMESTAMP
        assert fields["ident"].kind is Kind.CONVERTED
        assert fields["ident"].python_type is UUID
        assert fields["anything"].kind is Kind.ANY

    def test_nested_kind(self):
        """Test model-valued fields are nested with a lazy descriptor."""
        address = describe(Sample).fields["address"]
        assert address.kind is Kind.NESTED
        assert address.python_type is Address
        assert address.descriptor is describe(Address)

    def test_container_kinds(self):
        """Test list and dict fields record their element kinds."""
        fields = describe(Sample).fields
        assert fields["tags"].kind is Kind.COLLECTION
        assert fields["tags"].python_type is list
        assert fields["tags"].element.kind is Kind.TEXT
        assert fields["scores"].kind is Kind.MAPPING
        assert fields["scores"].element.numeric is NumericKind.FLOAT64

    def test_descriptor_only_for_nested(self):
        """Test non-nested kinds have no descriptor."""
        with pytest.raises(TypeError):
            describe(Sample).fields["name"].descriptor


class TestInheritance:
    """Test inherited fields."""

    def test_inherited_fields_included(self):
        """Test subclass descriptors include ancestor fields first."""
        assert describe(Bicycle).field_names == ("wheels", "frame", "engine", "bell")

    def test_subclass_field_wins(self):
        """Test a redeclared field takes the subclass type."""
        assert describe(Vehicle).fields["frame"].kind is Kind.PRIMITIVE
        assert describe(Bicycle).fields["frame"].kind is Kind.TEXT

    def test_object_metadata_fields(self):
        """Test Object subclasses carry identity metadata."""
        fields = describe(Member).fields
        assert list(fields)[:3] == ["identifier", "creation_date", "update_date"]
        assert fields["creation_date"].kind is Kind.TIMESTAMP
        assert fields["nickname"].kind is Kind.TEXT


class TestDescribe:
    """Test describe() caching and validation."""

    def test_cached(self):
        """Test descriptors are computed once per class."""
        assert describe(Address) is describe(Address)

    def test_descriptor_is_read_only(self):
        """Test descriptor field mappings cannot be modified."""
        with pytest.raises(TypeError):
            describe(Address).fields["street"] = ANY_KIND  # type: ignore[index]

    def test_rejects_non_models(self):
        """Test describe() only accepts Serializable classes."""
        with pytest.raises(TypeError):
            describe(dict)  # type: ignore[arg-type]


class TestClassify:
    """Test classification of bare type hints."""

    def test_none_is_any(self):
        """Test a missing hint classifies as ANY."""
        assert classify(None) is ANY_KIND

    def test_abstract_model_is_payload(self):
        """Test abstract models classify as payload roots."""
        assert classify(Object).kind is Kind.PAYLOAD
        assert classify(Serializable).kind is Kind.PAYLOAD
        assert classify(Member).kind is Kind.NESTED

    def test_generic_collections(self):
        """Test generic collections classify their elements."""
        kind = classify(list[Address])
        assert kind.kind is Kind.COLLECTION
        assert kind.element.kind is Kind.NESTED
        assert classify(tuple[int, ...]).python_type is tuple
        assert classify(set[str]).python_type is set

    def test_bare_containers(self):
        """Test unparameterized containers hold ANY elements."""
        assert classify(list).element is ANY_KIND
        assert classify(dict).kind is Kind.MAPPING

    def test_callable_is_none(self):
        """Test callables classify as None."""
        assert classify(Callable[[int], int]) is None

    def test_date_is_converted(self):
        """Test date (not datetime) goes through the converter registry."""
        assert classify(date).kind is Kind.CONVERTED
        assert classify(datetime).kind is Kind.TIMESTAMP

    def test_unsigned_alias(self):
        """Test exported aliases classify with their width."""
        assert classify(UInt32).numeric is NumericKind.UINT32
