# topmark:header:start
#
#   project      : UrlParams
#   file         : __init__.py
#   file_relpath : src/urlparams/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlParams package.

UrlParams serializes structured Python values (dataclasses, mappings, enums,
sequences and scalars) into a URL query-parameter string such as
``?id=some_id&filter=a,b``. Only key-value shapes are accepted at the top level;
field values must be scalars or flat sequences of scalars.

Example:
    ```python
    from dataclasses import dataclass

    import urlparams


    @dataclass
    class Request:
        id: str
        filter: list[str]


    assert urlparams.serialize_to_string(Request("x", ["a", "b"])) == "?id=x&filter=a,b"
    ```
"""

from __future__ import annotations

from urlparams.api import serialize_to_bytes, serialize_to_sink, serialize_to_string
from urlparams.core.errors import (
    CustomError,
    ExternError,
    QueryParamsError,
    UnsupportedAtTopLevelError,
    UnsupportedNestedStructError,
)
from urlparams.core.fields import query_field, transparent, variant
from urlparams.core.shapes import Flatten, ShapeKind, StructField
from urlparams.core.visitor import Serializer

__all__ = [
    "CustomError",
    "ExternError",
    "Flatten",
    "QueryParamsError",
    "Serializer",
    "ShapeKind",
    "StructField",
    "UnsupportedAtTopLevelError",
    "UnsupportedNestedStructError",
    "query_field",
    "serialize_to_bytes",
    "serialize_to_sink",
    "serialize_to_string",
    "transparent",
    "variant",
]
