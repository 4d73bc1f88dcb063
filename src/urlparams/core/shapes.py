# topmark:header:start
#
#   project      : UrlParams
#   file         : shapes.py
#   file_relpath : src/urlparams/core/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shape kinds and field descriptors exchanged through the `Serializer` interface.

`ShapeKind` names every shape a value can take. Its ``.value`` is the human label
used in error messages (e.g. ``"struct variant"``).

`StructField` is what a struct-like value hands to
[`Serializer.serialize_struct`][urlparams.core.visitor.Serializer.serialize_struct]:
one named value plus its ``flatten`` flag.

`Flatten` marks a *map* value whose own entries are spliced into the parent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ShapeKind(str, Enum):
    """Shape of a value as seen by the encoders."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    CHAR = "char"
    STR = "str"
    BYTES = "bytes"
    NONE = "none"
    OPTION = "option"
    UNIT = "unit"
    UNIT_STRUCT = "unit struct"
    UNIT_VARIANT = "unit variant"
    NEWTYPE_STRUCT = "newtype struct"
    NEWTYPE_VARIANT = "newtype variant"
    SEQUENCE = "sequence"
    TUPLE = "tuple"
    TUPLE_STRUCT = "tuple struct"
    TUPLE_VARIANT = "tuple variant"
    MAP = "map"
    STRUCT = "struct"
    STRUCT_VARIANT = "struct variant"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class StructField:
    """One named field of a struct or struct variant.

    Attributes:
        name: Key written on the left of ``=``.
        value: Field value; dispatched through `urlparams.core.dispatch.serialize`.
        flatten: If True, the value's own fields are spliced into the parent.
    """

    name: str
    value: object
    flatten: bool = False


@dataclass(frozen=True, slots=True)
class Flatten:
    """Wrap a mapping or record so its entries are spliced into the enclosing map.

    Example:
        ```python
        serialize_to_string({"x": 1, "z": Flatten({"real": 0.0, "imag": 1.0})})
        # -> "?x=1&real=0&imag=1"
        ```
    """

    value: object
