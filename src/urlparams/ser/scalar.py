# topmark:header:start
#
#   project      : UrlParams
#   file         : scalar.py
#   file_relpath : src/urlparams/ser/scalar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar encoder: renders one simple value as a token.

Modes (`ScalarMode`):
    - ``FIELD``: writes ``key=token`` through an ``open_pair`` callback supplied by
      the aggregate encoder; sequences are allowed and render comma-joined.
    - ``KEY``: writes a bare token for a map key; sequences are allowed.
    - ``ELEMENT``: writes a bare token inside a sequence; nested sequences are rejected.

In every mode, key-value shapes (map, struct, struct variant) and named tuples
fail with `UnsupportedNestedStructError`: this is where nesting beyond a
sequence of scalars is refused. ``None`` and ``()`` render as an empty token,
so a field holding them is written as ``key=``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from urlparams.core.errors import UnsupportedNestedStructError
from urlparams.core.shapes import ShapeKind
from urlparams.core.visitor import Serializer
from urlparams.ser.sequence import SequenceEncoder
from urlparams.ser.text import format_bool, format_float, format_int, form_urlencode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from urlparams.core.shapes import StructField
    from urlparams.ser.sink import OutputSink


class ScalarMode(Enum):
    """Structural position a `ScalarSerializer` renders for."""

    FIELD = "field"
    KEY = "key"
    ELEMENT = "element"


class ScalarSerializer(Serializer):
    """Render scalars (and, outside ``ELEMENT`` mode, flat sequences).

    Args:
        out (OutputSink): Shared output sink.
        mode (ScalarMode): Structural position.
        open_pair (Callable[[], None] | None): ``FIELD`` mode only: writes the pair
            separator, the key and ``=``. Called right before the first byte of the value.
    """

    __slots__ = ("_mode", "_open_pair", "_out")

    def __init__(
        self,
        out: OutputSink,
        mode: ScalarMode,
        open_pair: Callable[[], None] | None = None,
    ) -> None:
        if (mode is ScalarMode.FIELD) != (open_pair is not None):
            raise ValueError("open_pair is required in FIELD mode and only there")
        self._out: OutputSink = out
        self._mode: ScalarMode = mode
        self._open_pair: Callable[[], None] | None = open_pair

    @classmethod
    def field(cls, out: OutputSink, open_pair: Callable[[], None]) -> ScalarSerializer:
        """Serializer for the value of a ``key=value`` pair."""
        return cls(out, ScalarMode.FIELD, open_pair)

    @classmethod
    def key(cls, out: OutputSink) -> ScalarSerializer:
        """Serializer for a map key."""
        return cls(out, ScalarMode.KEY)

    @classmethod
    def element(cls, out: OutputSink) -> ScalarSerializer:
        """Serializer for one sequence element."""
        return cls(out, ScalarMode.ELEMENT)

    @property
    def sequence_allowed(self) -> bool:
        """Whether a sequence may appear at this position."""
        return self._mode is not ScalarMode.ELEMENT

    def _emit(self, token: str) -> None:
        if self._open_pair is not None:
            self._open_pair()
        self._out.write(token)

    def _sequence(self, kind: ShapeKind, items: Iterable[object]) -> None:
        if not self.sequence_allowed:
            raise UnsupportedNestedStructError(kind)
        if self._open_pair is not None:
            self._open_pair()
        SequenceEncoder(self._out).encode_all(items)

    # --- scalars ---

    def serialize_bool(self, v: bool) -> None:
        self._emit(format_bool(v))

    def serialize_int(self, v: int) -> None:
        self._emit(format_int(v))

    def serialize_float(self, v: float) -> None:
        self._emit(format_float(v))

    def serialize_char(self, v: str) -> None:
        self._emit(form_urlencode(v))

    def serialize_str(self, v: str) -> None:
        self._emit(form_urlencode(v))

    def serialize_bytes(self, v: bytes) -> None:
        # Raw bytes are a sequence of small integers.
        self._sequence(ShapeKind.BYTES, v)

    def serialize_none(self) -> None:
        self._emit("")

    def serialize_unit(self) -> None:
        self._emit("")

    def serialize_unit_struct(self, name: str) -> None:
        raise UnsupportedNestedStructError(ShapeKind.UNIT_STRUCT)

    def serialize_unit_variant(self, name: str, variant: str) -> None:
        self.serialize_str(variant)

    # --- sequences ---

    def serialize_seq(self, items: Iterable[object]) -> None:
        self._sequence(ShapeKind.SEQUENCE, items)

    def serialize_tuple(self, items: Iterable[object]) -> None:
        self._sequence(ShapeKind.TUPLE, items)

    def serialize_tuple_struct(self, name: str, items: Iterable[object]) -> None:
        raise UnsupportedNestedStructError(ShapeKind.TUPLE_STRUCT)

    def serialize_tuple_variant(self, name: str, variant: str, items: Iterable[object]) -> None:
        raise UnsupportedNestedStructError(ShapeKind.TUPLE_VARIANT)

    # --- key-value shapes ---

    def serialize_map(self, entries: Iterable[tuple[object, object]]) -> None:
        raise UnsupportedNestedStructError(ShapeKind.MAP)

    def serialize_struct(self, name: str, fields: Iterable[StructField]) -> None:
        raise UnsupportedNestedStructError(ShapeKind.STRUCT)

    def serialize_struct_variant(
        self, name: str, variant: str, fields: Iterable[StructField]
    ) -> None:
        raise UnsupportedNestedStructError(ShapeKind.STRUCT_VARIANT)
