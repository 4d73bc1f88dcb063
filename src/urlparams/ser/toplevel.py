# topmark:header:start
#
#   project      : UrlParams
#   file         : toplevel.py
#   file_relpath : src/urlparams/ser/toplevel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level dispatcher: the serializer every encode call starts with.

Only key-value shapes (map, struct, struct variant) produce output; ``None``
and ``()`` produce the empty string; optional values and newtypes are
unwrapped. Everything else fails with `UnsupportedAtTopLevelError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from urlparams.core.errors import UnsupportedAtTopLevelError
from urlparams.core.shapes import ShapeKind
from urlparams.core.visitor import Serializer
from urlparams.ser.aggregate import AggregateEncoder, Depth, PairWriter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlparams.core.shapes import StructField
    from urlparams.ser.sink import OutputSink


class TopLevelSerializer(Serializer):
    """Entry point of the visitation walk for one output sink."""

    __slots__ = ("_out",)

    def __init__(self, out: OutputSink) -> None:
        self._out: OutputSink = out

    def _aggregate(self) -> AggregateEncoder:
        return AggregateEncoder(self._out, PairWriter(self._out), Depth.ROOT)

    def serialize_bool(self, v: bool) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.BOOL)

    def serialize_int(self, v: int) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.INT)

    def serialize_float(self, v: float) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.FLOAT)

    def serialize_char(self, v: str) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.CHAR)

    def serialize_str(self, v: str) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.STR)

    def serialize_bytes(self, v: bytes) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.BYTES)

    def serialize_none(self) -> None:
        pass

    def serialize_unit(self) -> None:
        pass

    def serialize_unit_struct(self, name: str) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.UNIT_STRUCT)

    def serialize_unit_variant(self, name: str, variant: str) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.UNIT_VARIANT)

    def serialize_seq(self, items: Iterable[object]) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.SEQUENCE)

    def serialize_tuple(self, items: Iterable[object]) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.TUPLE)

    def serialize_tuple_struct(self, name: str, items: Iterable[object]) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.TUPLE_STRUCT)

    def serialize_tuple_variant(self, name: str, variant: str, items: Iterable[object]) -> None:
        raise UnsupportedAtTopLevelError(ShapeKind.TUPLE_VARIANT)

    def serialize_map(self, entries: Iterable[tuple[object, object]]) -> None:
        self._aggregate().encode_entries(entries)

    def serialize_struct(self, name: str, fields: Iterable[StructField]) -> None:
        self._aggregate().encode_fields(fields)

    def serialize_struct_variant(
        self, name: str, variant: str, fields: Iterable[StructField]
    ) -> None:
        # The variant tag is not emitted.
        self._aggregate().encode_fields(fields)
