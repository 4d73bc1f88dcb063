# topmark:header:start
#
#   project      : UrlParams
#   file         : api.py
#   file_relpath : src/urlparams/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public one-shot serialization functions.

All three functions accept any value understood by
[`urlparams.core.dispatch.serialize`][urlparams.core.dispatch.serialize] and
produce either ``""`` or ``?k1=v1&k2=v2...``.

Errors:
    Every function raises a `urlparams.core.errors.QueryParamsError` subclass on
    failure. `serialize_to_sink` may already have written part of the output when
    it raises; discard it.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from urlparams.config.logging import get_logger
from urlparams.core import dispatch
from urlparams.core.errors import ExternError
from urlparams.ser.sink import OutputSink
from urlparams.ser.toplevel import TopLevelSerializer

if TYPE_CHECKING:
    from urlparams.config.logging import UrlParamsLogger
    from urlparams.ser.sink import BinaryWriter

logger: UrlParamsLogger = get_logger(__name__)


def serialize_to_sink(sink: BinaryWriter, value: object) -> None:
    """Serialize ``value`` as URL parameters into a binary writer.

    Args:
        sink (BinaryWriter): Destination; receives UTF-8 bytes through ``write()``.
        value (object): Value to serialize. Its root must be a key-value shape.

    Raises:
        UnsupportedAtTopLevelError: The root value has no keys.
        UnsupportedNestedStructError: A field value is not a scalar or flat sequence.
        CustomError: A value's own serialization hook failed.
        ExternError: ``sink`` rejected a write.
    """
    logger.debug("serializing %s", type(value).__qualname__)
    dispatch.serialize(value, TopLevelSerializer(OutputSink(sink)))


def serialize_to_bytes(value: object) -> bytes:
    """Serialize ``value`` as URL parameters into a byte string.

    Args:
        value (object): Value to serialize.

    Returns:
        bytes: The encoded query string (empty for unit-like values).
    """
    buffer = io.BytesIO()
    serialize_to_sink(buffer, value)
    return buffer.getvalue()


def serialize_to_string(value: object) -> str:
    """Serialize ``value`` as a URL parameter string.

    Args:
        value (object): Value to serialize.

    Returns:
        str: The encoded query string (empty for unit-like values).

    Raises:
        ExternError: If the produced bytes are not valid UTF-8.
    """
    data: bytes = serialize_to_bytes(value)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ExternError(exc) from exc
