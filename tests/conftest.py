# topmark:header:start
#
#   project      : UrlParams
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the UrlParams test suite.

This file provides typed wrappers around pytest decorators, a recording
`Serializer` used to observe shape dispatch, and the sample models shared by
several test modules.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple, TypeVar, cast

import pytest

from urlparams import Serializer, query_field, transparent, variant
from urlparams.constants import LOG_LEVEL_ENV_VAR
from urlparams.core.shapes import ShapeKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlparams.core.shapes import StructField

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_urlparams_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


# --- Recording serializer -----------------------------------------------------


class RecordingSerializer(Serializer):
    """Serializer that records which shape method was called, and with what.

    Optional values and newtypes keep the default pass-through behaviour, so
    ``calls`` only ever holds the innermost shape.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[ShapeKind, tuple[object, ...]]] = []

    @property
    def kind(self) -> ShapeKind:
        """Shape of the single recorded call."""
        assert len(self.calls) == 1, self.calls
        return self.calls[0][0]

    @property
    def args(self) -> tuple[object, ...]:
        """Arguments of the single recorded call (iterables materialized)."""
        assert len(self.calls) == 1, self.calls
        return self.calls[0][1]

    def _record(self, kind: ShapeKind, *args: object) -> None:
        self.calls.append((kind, args))

    def serialize_bool(self, v: bool) -> None:
        self._record(ShapeKind.BOOL, v)

    def serialize_int(self, v: int) -> None:
        self._record(ShapeKind.INT, v)

    def serialize_float(self, v: float) -> None:
        self._record(ShapeKind.FLOAT, v)

    def serialize_char(self, v: str) -> None:
        self._record(ShapeKind.CHAR, v)

    def serialize_str(self, v: str) -> None:
        self._record(ShapeKind.STR, v)

    def serialize_bytes(self, v: bytes) -> None:
        self._record(ShapeKind.BYTES, v)

    def serialize_none(self) -> None:
        self._record(ShapeKind.NONE)

    def serialize_unit(self) -> None:
        self._record(ShapeKind.UNIT)

    def serialize_unit_struct(self, name: str) -> None:
        self._record(ShapeKind.UNIT_STRUCT, name)

    def serialize_unit_variant(self, name: str, variant: str) -> None:
        self._record(ShapeKind.UNIT_VARIANT, name, variant)

    def serialize_seq(self, items: Iterable[object]) -> None:
        self._record(ShapeKind.SEQUENCE, list(items))

    def serialize_tuple(self, items: Iterable[object]) -> None:
        self._record(ShapeKind.TUPLE, list(items))

    def serialize_tuple_struct(self, name: str, items: Iterable[object]) -> None:
        self._record(ShapeKind.TUPLE_STRUCT, name, list(items))

    def serialize_tuple_variant(self, name: str, variant: str, items: Iterable[object]) -> None:
        self._record(ShapeKind.TUPLE_VARIANT, name, variant, list(items))

    def serialize_map(self, entries: Iterable[tuple[object, object]]) -> None:
        self._record(ShapeKind.MAP, list(entries))

    def serialize_struct(self, name: str, fields: Iterable[StructField]) -> None:
        self._record(ShapeKind.STRUCT, name, list(fields))

    def serialize_struct_variant(
        self, name: str, variant: str, fields: Iterable[StructField]
    ) -> None:
        self._record(ShapeKind.STRUCT_VARIANT, name, variant, list(fields))


# --- Sample models ------------------------------------------------------------


class Selection(Enum):
    """Fieldless enum; members encode by name."""

    A = 1
    B = 2


@dataclass
class Complex:
    """Two-field record used for flattening tests."""

    real: float
    imag: float


@dataclass
class Account:
    """Single-field record."""

    username: str


@dataclass
class Params:
    """Record with a nested (non-flattened) record field."""

    field: Account


@dataclass
class FlattenedParams:
    """Record with one flattened optional record."""

    x: int
    z: Complex | None = query_field(flatten=True, default=None)


@transparent
@dataclass
class Wrapper:
    """Transparent single-field wrapper around a list."""

    transparent: list[int]


@dataclass
class TopLevel:
    """Record holding a transparent wrapper."""

    transparent: Wrapper
    hello: bool


@variant
@dataclass
class Login:
    """Struct variant of the `Auth` union."""

    username: str


@variant(enum="Auth")
@dataclass
class Anonymous:
    """Unit variant of the `Auth` union."""


@dataclass
class Empty:
    """Record without fields."""


class Point(NamedTuple):
    """Named tuple (a tuple struct)."""

    x: int
    y: int
