# topmark:header:start
#
#   project      : UrlParams
#   file         : aggregate.py
#   file_relpath : src/urlparams/ser/aggregate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Aggregate encoder: records, struct variants and maps as ``&``-joined pairs.

Separator bookkeeping lives in one `PairWriter` per query string. The leading
``?`` (root context) or ``&`` is written lazily, right before the first byte of a
pair, so a field that contributes nothing (a flattened ``None``) never leaves a
dangling separator, and an aggregate without pairs renders as the empty string.

Flattening is limited to one level, tracked with an explicit `Depth` tag:

- at ``Depth.ROOT`` a flattened field (``query_field(flatten=True)`` or a
  `Flatten` map value) splices its own fields into the current pair list through
  a nested `AggregateEncoder` at ``Depth.NESTED`` sharing the same `PairWriter`;
- at ``Depth.NESTED`` a further flattened aggregate fails with
  `UnsupportedNestedStructError`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from urlparams.config.logging import get_logger
from urlparams.constants import KEY_VALUE_SEPARATOR, PAIR_SEPARATOR, QUERY_START
from urlparams.core import dispatch
from urlparams.core.errors import CustomError, UnsupportedNestedStructError
from urlparams.core.shapes import Flatten, ShapeKind
from urlparams.core.visitor import Serializer
from urlparams.ser.scalar import ScalarSerializer
from urlparams.ser.text import form_urlencode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from urlparams.config.logging import UrlParamsLogger
    from urlparams.core.shapes import StructField
    from urlparams.ser.sink import OutputSink

logger: UrlParamsLogger = get_logger(__name__)


class Depth(Enum):
    """Nesting level of an aggregate context."""

    ROOT = "root"
    NESTED = "nested"


class PairWriter:
    """Separator state shared by a root aggregate and its flattened child.

    Attributes:
        first (bool): True until the first pair has been opened; never reset.
    """

    __slots__ = ("_lead", "_out", "first")

    def __init__(self, out: OutputSink, *, lead: str = QUERY_START) -> None:
        self._out: OutputSink = out
        self._lead: str = lead
        self.first: bool = True

    def open_pair(self, write_key: Callable[[], None]) -> None:
        """Write the separator (``?`` first, ``&`` afterwards), the key and ``=``."""
        self._out.write(self._lead if self.first else PAIR_SEPARATOR)
        self.first = False
        write_key()
        self._out.write(KEY_VALUE_SEPARATOR)


class AggregateEncoder:
    """Encode the fields or entries of one key-value shape.

    Args:
        out (OutputSink): Shared output sink.
        pairs (PairWriter): Separator state of the enclosing query string.
        depth (Depth): ``ROOT`` for the top-level value, ``NESTED`` for a flattened one.
    """

    __slots__ = ("_depth", "_out", "_pairs")

    def __init__(self, out: OutputSink, pairs: PairWriter, depth: Depth = Depth.ROOT) -> None:
        self._out: OutputSink = out
        self._pairs: PairWriter = pairs
        self._depth: Depth = depth

    @property
    def depth(self) -> Depth:
        """Nesting level of this context."""
        return self._depth

    def encode_fields(self, fields: Iterable[StructField]) -> None:
        """Encode record fields in declaration order."""
        for fld in fields:
            logger.trace("field %r (flatten=%s, depth=%s)", fld.name, fld.flatten, self._depth.value)
            if fld.flatten:
                self._splice(fld.value)
            else:
                self._encode_pair(self._field_key_writer(fld.name), fld.value)

    def encode_entries(self, entries: Iterable[tuple[object, object]]) -> None:
        """Encode map entries in iteration order; `Flatten` values are spliced."""
        for key, value in entries:
            logger.trace("entry %r (depth=%s)", key, self._depth.value)
            if isinstance(value, Flatten):
                self._splice(value.value)
            else:
                self._encode_pair(self._map_key_writer(key), value)

    def _encode_pair(self, write_key: Callable[[], None], value: object) -> None:
        pairs: PairWriter = self._pairs

        def _open() -> None:
            pairs.open_pair(write_key)

        dispatch.serialize(value, ScalarSerializer.field(self._out, _open))

    def _splice(self, value: object) -> None:
        dispatch.serialize(value, FlattenSerializer(self._out, self._pairs, self._depth))

    def _field_key_writer(self, name: str) -> Callable[[], None]:
        out: OutputSink = self._out

        def _write() -> None:
            out.write(form_urlencode(name))

        return _write

    def _map_key_writer(self, key: object) -> Callable[[], None]:
        out: OutputSink = self._out

        def _write() -> None:
            dispatch.serialize(key, ScalarSerializer.key(out))

        return _write


class FlattenSerializer(Serializer):
    """Serializer for the value of a flattened field.

    Key-value shapes are spliced into the parent's pairs (at ``Depth.ROOT`` only);
    ``None`` and ``()`` contribute nothing. Any other shape cannot be flattened.

    Args:
        out (OutputSink): Shared output sink.
        pairs (PairWriter): Separator state of the parent.
        parent_depth (Depth): Depth of the aggregate owning the flattened field.
    """

    __slots__ = ("_out", "_pairs", "_parent_depth")

    def __init__(self, out: OutputSink, pairs: PairWriter, parent_depth: Depth) -> None:
        self._out: OutputSink = out
        self._pairs: PairWriter = pairs
        self._parent_depth: Depth = parent_depth

    def _nested(self, kind: ShapeKind) -> AggregateEncoder:
        if self._parent_depth is not Depth.ROOT:
            raise UnsupportedNestedStructError(kind)
        return AggregateEncoder(self._out, self._pairs, Depth.NESTED)

    def _unsupported(self, kind: ShapeKind) -> CustomError:
        return CustomError(f"can only flatten structs and maps (got a {kind.value})")

    def serialize_bool(self, v: bool) -> None:
        raise self._unsupported(ShapeKind.BOOL)

    def serialize_int(self, v: int) -> None:
        raise self._unsupported(ShapeKind.INT)

    def serialize_float(self, v: float) -> None:
        raise self._unsupported(ShapeKind.FLOAT)

    def serialize_char(self, v: str) -> None:
        raise self._unsupported(ShapeKind.CHAR)

    def serialize_str(self, v: str) -> None:
        raise self._unsupported(ShapeKind.STR)

    def serialize_bytes(self, v: bytes) -> None:
        raise self._unsupported(ShapeKind.BYTES)

    def serialize_none(self) -> None:
        pass

    def serialize_unit(self) -> None:
        pass

    def serialize_unit_struct(self, name: str) -> None:
        pass

    def serialize_unit_variant(self, name: str, variant: str) -> None:
        raise self._unsupported(ShapeKind.UNIT_VARIANT)

    def serialize_seq(self, items: Iterable[object]) -> None:
        raise self._unsupported(ShapeKind.SEQUENCE)

    def serialize_tuple(self, items: Iterable[object]) -> None:
        raise self._unsupported(ShapeKind.TUPLE)

    def serialize_tuple_struct(self, name: str, items: Iterable[object]) -> None:
        raise self._unsupported(ShapeKind.TUPLE_STRUCT)

    def serialize_tuple_variant(self, name: str, variant: str, items: Iterable[object]) -> None:
        raise self._unsupported(ShapeKind.TUPLE_VARIANT)

    def serialize_map(self, entries: Iterable[tuple[object, object]]) -> None:
        self._nested(ShapeKind.MAP).encode_entries(entries)

    def serialize_struct(self, name: str, fields: Iterable[StructField]) -> None:
        self._nested(ShapeKind.STRUCT).encode_fields(fields)

    def serialize_struct_variant(
        self, name: str, variant: str, fields: Iterable[StructField]
    ) -> None:
        self._nested(ShapeKind.STRUCT_VARIANT).encode_fields(fields)
