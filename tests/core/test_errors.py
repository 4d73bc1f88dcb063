# topmark:header:start
#
#   project      : UrlParams
#   file         : test_errors.py
#   file_relpath : tests/core/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the serialization error hierarchy and its messages."""

from __future__ import annotations

from tests.conftest import parametrize
from urlparams import (
    CustomError,
    ExternError,
    QueryParamsError,
    UnsupportedAtTopLevelError,
    UnsupportedNestedStructError,
)
from urlparams.core.shapes import ShapeKind


@parametrize(
    "kind, label",
    [
        (ShapeKind.SEQUENCE, "sequence"),
        (ShapeKind.UNIT_VARIANT, "unit variant"),
        (ShapeKind.TUPLE_STRUCT, "tuple struct"),
    ],
)
def test_top_level_message(kind: ShapeKind, label: str) -> None:
    """It should name the offending shape in the top-level message."""
    err = UnsupportedAtTopLevelError(kind)
    assert str(err) == (
        f"Tried to serialize a {label} at the top level. "
        "Only key-value shapes are supported at the top level of a query parameter."
    )
    assert err.kind is kind


def test_nested_message() -> None:
    """It should name the offending shape in the nested-value message."""
    err = UnsupportedNestedStructError(ShapeKind.STRUCT)
    assert str(err) == (
        "Tried to serialize a struct in place of a value. "
        "Only simple values are supported on the right-hand side of a parameter."
    )


def test_custom_factory() -> None:
    """It should build a `CustomError` from any printable message."""
    err = QueryParamsError.custom(404)
    assert isinstance(err, CustomError)
    assert err.message == "404"
    assert str(err) == "404"


def test_extern_keeps_cause() -> None:
    """It should keep the wrapped exception and reuse its text."""
    cause = OSError("disk full")
    err = ExternError(cause)
    assert err.cause is cause
    assert str(err) == "disk full"


def test_hierarchy() -> None:
    """It should derive every error from `QueryParamsError`."""
    for cls in (
        UnsupportedAtTopLevelError,
        UnsupportedNestedStructError,
        CustomError,
        ExternError,
    ):
        assert issubclass(cls, QueryParamsError)


def test_shape_kind_str_is_label() -> None:
    """It should render shape kinds as their human label."""
    assert str(ShapeKind.STRUCT_VARIANT) == "struct variant"
