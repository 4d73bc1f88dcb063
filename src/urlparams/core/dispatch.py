# topmark:header:start
#
#   project      : UrlParams
#   file         : dispatch.py
#   file_relpath : src/urlparams/core/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classify Python values and route them to one `Serializer` method.

Classification rules (first match wins):
- objects defining ``__query_serialize__`` -> the hook drives the serializer
- `None` -> ``serialize_none``; ``()`` -> ``serialize_unit``
- `bool` -> ``serialize_bool`` (checked before `int`)
- `Enum` members -> ``serialize_unit_variant`` (member *name*)
- `int` / `float` / `str` -> matching scalar method
- `bytes` / `bytearray` / `memoryview` -> ``serialize_bytes``
- dataclass instances -> struct, struct variant (`@variant`), newtype struct
  (`@transparent`); a fieldless `@variant` is a unit variant, a fieldless
  record an empty struct
- `NamedTuple` instances -> ``serialize_tuple_struct``; other tuples -> ``serialize_tuple``
- `Mapping` -> ``serialize_map``; other iterables -> ``serialize_seq``

Anything else raises `CustomError`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from urlparams.constants import SERIALIZE_HOOK
from urlparams.core.errors import CustomError
from urlparams.core.fields import (
    encoded_fields,
    is_transparent,
    iter_struct_fields,
    variant_union_name,
)
from urlparams.core.shapes import Flatten

if TYPE_CHECKING:
    from urlparams.core.visitor import Serializer


def serialize(value: object, serializer: Serializer) -> None:
    """Dispatch ``value`` to the one ``serializer`` method matching its shape.

    Args:
        value (object): Value to encode.
        serializer (Serializer): Encoder for the current structural position.

    Raises:
        CustomError: If ``value`` has no query-string shape (e.g. an arbitrary object),
            or a `Flatten` wrapper appears outside a map value.
    """
    hook = getattr(type(value), SERIALIZE_HOOK, None)
    if hook is not None:
        hook(value, serializer)
        return
    if value is None:
        serializer.serialize_none()
    elif isinstance(value, bool):
        serializer.serialize_bool(value)
    elif isinstance(value, Enum):
        serializer.serialize_unit_variant(type(value).__name__, value.name)
    elif isinstance(value, int):
        serializer.serialize_int(value)
    elif isinstance(value, float):
        serializer.serialize_float(value)
    elif isinstance(value, str):
        serializer.serialize_str(value)
    elif isinstance(value, (bytes, bytearray, memoryview)):
        serializer.serialize_bytes(bytes(value))
    elif isinstance(value, Flatten):
        raise CustomError("Flatten(...) is only supported as the value of a map entry")
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        _serialize_dataclass(value, serializer)
    elif isinstance(value, tuple):
        _serialize_tuple(value, serializer)
    elif isinstance(value, Mapping):
        serializer.serialize_map(iter(value.items()))
    elif isinstance(value, Iterable):
        serializer.serialize_seq(value)
    else:
        raise CustomError(f"cannot serialize value of type {type(value).__qualname__}")


def _serialize_dataclass(value: Any, serializer: Serializer) -> None:
    cls: type = type(value)
    name: str = cls.__name__
    union: str | None = variant_union_name(cls)
    if is_transparent(cls):
        (only,) = encoded_fields(value)
        inner: object = getattr(value, only.name)
        if union is not None:
            serializer.serialize_newtype_variant(union, name, inner)
        else:
            serializer.serialize_newtype_struct(name, inner)
        return
    if union is None:
        # A fieldless record is an empty struct; unit structs come from hooks only.
        serializer.serialize_struct(name, iter_struct_fields(value))
    elif dataclasses.fields(value):
        serializer.serialize_struct_variant(union, name, iter_struct_fields(value))
    else:
        serializer.serialize_unit_variant(union, name)


def _serialize_tuple(value: tuple[object, ...], serializer: Serializer) -> None:
    if not value:
        serializer.serialize_unit()
    elif hasattr(type(value), "_fields"):
        # NamedTuple
        serializer.serialize_tuple_struct(type(value).__name__, value)
    else:
        serializer.serialize_tuple(value)
