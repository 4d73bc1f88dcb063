# topmark:header:start
#
#   project      : UrlParams
#   file         : test_fields.py
#   file_relpath : tests/core/test_fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the dataclass decorators and per-field options."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import pytest

from urlparams import query_field, transparent, variant
from urlparams.core.fields import (
    DEFAULT_FIELD_OPTIONS,
    FieldOptions,
    encoded_fields,
    field_options,
    is_transparent,
    iter_struct_fields,
    variant_union_name,
)
from urlparams.core.shapes import StructField


@dataclass
class Search:
    query: str
    page_size: int = query_field(rename="page-size", default=20)
    cache_key: str = query_field(skip=True, default="")
    tags: list[str] = query_field(default_factory=list, metadata={"doc": "labels"})


def test_query_field_stores_options_in_metadata() -> None:
    """It should attach a `FieldOptions` to the dataclass field."""
    by_name = {f.name: f for f in dataclasses.fields(Search)}
    assert field_options(by_name["page_size"]) == FieldOptions(rename="page-size")
    assert field_options(by_name["cache_key"]).skip is True
    assert field_options(by_name["query"]) is DEFAULT_FIELD_OPTIONS


def test_query_field_keeps_user_metadata() -> None:
    """It should merge its options into caller-supplied metadata."""
    tags = next(f for f in dataclasses.fields(Search) if f.name == "tags")
    assert tags.metadata["doc"] == "labels"
    assert Search("x").tags == []


def test_encoded_fields_drop_skipped() -> None:
    """It should leave skipped fields out of the encoded field list."""
    assert [f.name for f in encoded_fields(Search)] == ["query", "page_size", "tags"]


def test_iter_struct_fields_applies_rename() -> None:
    """It should emit the renamed key and read the current attribute value."""
    fields = list(iter_struct_fields(Search("rust", page_size=50, tags=["a"])))
    assert fields == [
        StructField("query", "rust"),
        StructField("page-size", 50),
        StructField("tags", ["a"]),
    ]


def test_transparent_marks_class() -> None:
    """It should mark a single-field dataclass and return it unchanged."""

    @transparent
    @dataclass
    class Id:
        value: int

    assert is_transparent(Id)
    assert Id(3).value == 3


def test_transparent_counts_only_encoded_fields() -> None:
    """It should ignore skipped fields when counting."""

    @transparent
    @dataclass
    class Tagged:
        value: str
        note: str = query_field(skip=True, default="")

    assert is_transparent(Tagged)


def test_transparent_rejects_multiple_fields() -> None:
    """It should refuse a dataclass with more than one encoded field."""
    with pytest.raises(TypeError, match="exactly one field, Pair has 2"):

        @transparent
        @dataclass
        class Pair:
            a: int
            b: int


def test_decorators_require_a_dataclass() -> None:
    """It should refuse plain classes (decorator placed below @dataclass)."""

    class Plain:
        pass

    with pytest.raises(TypeError, match="@variant must be applied to a dataclass"):
        variant(Plain)
    with pytest.raises(TypeError, match="@transparent must be applied to a dataclass"):
        transparent(Plain)


def test_variant_default_union_name() -> None:
    """It should name the union after the first base class, or the class itself."""

    class Shape:
        pass

    @variant
    @dataclass
    class Circle(Shape):
        radius: float

    @variant
    @dataclass
    class Standalone:
        pass

    assert variant_union_name(Circle) == "Shape"
    assert variant_union_name(Standalone) == "Standalone"


def test_variant_explicit_union_name() -> None:
    """It should use the name passed as ``enum=``."""

    @variant(enum="Auth")
    @dataclass
    class Token:
        token: str

    assert variant_union_name(Token) == "Auth"


def test_markers_are_not_inherited() -> None:
    """It should not treat subclasses of marked classes as marked."""

    @transparent
    @dataclass
    class Base:
        value: int

    @dataclass
    class Child(Base):
        pass

    assert is_transparent(Base)
    assert not is_transparent(Child)
    assert variant_union_name(Child) is None
