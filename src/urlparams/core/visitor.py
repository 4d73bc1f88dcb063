# topmark:header:start
#
#   project      : UrlParams
#   file         : visitor.py
#   file_relpath : src/urlparams/core/visitor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Serializer` capability interface.

A `Serializer` has exactly one method per shape kind (see
[`ShapeKind`][urlparams.core.shapes.ShapeKind]). A value is encoded by calling the
single method matching its shape; compound shapes pass their children as lazy
iterables so the serializer drives the walk and writes output left to right.

Each encoder of `urlparams.ser` implements this interface for one structural
position (top level, field value, sequence element, map key, flattened field) and
decides there whether a shape is permitted.

Values pick the method themselves through
[`urlparams.core.dispatch.serialize`][urlparams.core.dispatch.serialize], or, for
custom shapes, by defining ``__query_serialize__(self, serializer)``:

```python
class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def __query_serialize__(self, serializer: Serializer) -> None:
        serializer.serialize_struct(
            "Point", [StructField("x", self.x), StructField("y", self.y)]
        )
```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from urlparams.core import dispatch

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlparams.core.shapes import StructField


class Serializer(ABC):
    """Visitor with one method per shape kind.

    Optional values, newtype structs and newtype variants are transparent: the
    default implementations re-dispatch the wrapped value to ``self``.
    """

    # --- scalars ---

    @abstractmethod
    def serialize_bool(self, v: bool) -> None:
        """Serialize a boolean."""

    @abstractmethod
    def serialize_int(self, v: int) -> None:
        """Serialize an integer of any width or signedness."""

    @abstractmethod
    def serialize_float(self, v: float) -> None:
        """Serialize a floating point number."""

    @abstractmethod
    def serialize_char(self, v: str) -> None:
        """Serialize a single character."""

    @abstractmethod
    def serialize_str(self, v: str) -> None:
        """Serialize a text string."""

    @abstractmethod
    def serialize_bytes(self, v: bytes) -> None:
        """Serialize raw bytes (rendered as a sequence of small integers)."""

    @abstractmethod
    def serialize_none(self) -> None:
        """Serialize an absent optional value."""

    def serialize_some(self, value: object) -> None:
        """Serialize a present optional value."""
        dispatch.serialize(value, self)

    @abstractmethod
    def serialize_unit(self) -> None:
        """Serialize the unit value ``()``."""

    @abstractmethod
    def serialize_unit_struct(self, name: str) -> None:
        """Serialize a struct without fields."""

    @abstractmethod
    def serialize_unit_variant(self, name: str, variant: str) -> None:
        """Serialize an enum variant without fields."""

    def serialize_newtype_struct(self, name: str, value: object) -> None:
        """Serialize a single-field wrapper struct."""
        dispatch.serialize(value, self)

    def serialize_newtype_variant(self, name: str, variant: str, value: object) -> None:
        """Serialize an enum variant wrapping a single unnamed value."""
        dispatch.serialize(value, self)

    # --- sequences ---

    @abstractmethod
    def serialize_seq(self, items: Iterable[object]) -> None:
        """Serialize a homogeneous sequence."""

    @abstractmethod
    def serialize_tuple(self, items: Iterable[object]) -> None:
        """Serialize an anonymous tuple."""

    @abstractmethod
    def serialize_tuple_struct(self, name: str, items: Iterable[object]) -> None:
        """Serialize a named tuple."""

    @abstractmethod
    def serialize_tuple_variant(self, name: str, variant: str, items: Iterable[object]) -> None:
        """Serialize an enum variant carrying unnamed fields."""

    # --- key-value shapes ---

    @abstractmethod
    def serialize_map(self, entries: Iterable[tuple[object, object]]) -> None:
        """Serialize a keyed mapping, entries in insertion order."""

    @abstractmethod
    def serialize_struct(self, name: str, fields: Iterable[StructField]) -> None:
        """Serialize a record, fields in declaration order."""

    @abstractmethod
    def serialize_struct_variant(
        self, name: str, variant: str, fields: Iterable[StructField]
    ) -> None:
        """Serialize an enum variant carrying named fields."""
