# topmark:header:start
#
#   project      : UrlParams
#   file         : errors.py
#   file_relpath : src/urlparams/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while serializing values into URL parameters.

Usage:
    Every failure aborts the walk and propagates unchanged to the caller. Output
    already written to a sink before the failure is not rolled back, so callers
    must discard it.

Hierarchy:
    - `QueryParamsError`
        - `UnsupportedAtTopLevelError`: root value is not a key-value shape.
        - `UnsupportedNestedStructError`: a nested value is not a scalar or a flat
          sequence of scalars.
        - `CustomError`: raised by a value's own serialization hook.
        - `ExternError`: the sink rejected a write or the output is not valid text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from urlparams.core.shapes import ShapeKind


class QueryParamsError(Exception):
    """Base class for all UrlParams serialization errors."""

    @classmethod
    def custom(cls, message: object) -> CustomError:
        """Build a `CustomError` from any printable message.

        Serialization hooks use this to report domain-specific failures.

        Args:
            message (object): Message; converted with ``str()``.

        Returns:
            CustomError: The error to raise.
        """
        return CustomError(str(message))


class UnsupportedAtTopLevelError(QueryParamsError):
    """Error when the root value has no keys (scalar, sequence, tuple, unit variant, ...)."""

    def __init__(self, kind: ShapeKind) -> None:
        self.kind: ShapeKind = kind
        super().__init__(
            f"Tried to serialize a {kind.value} at the top level. "
            "Only key-value shapes are supported at the top level of a query parameter."
        )


class UnsupportedNestedStructError(QueryParamsError):
    """Error when a key-value shape or a nested sequence appears in place of a simple value."""

    def __init__(self, kind: ShapeKind) -> None:
        self.kind: ShapeKind = kind
        super().__init__(
            f"Tried to serialize a {kind.value} in place of a value. "
            "Only simple values are supported on the right-hand side of a parameter."
        )


class CustomError(QueryParamsError):
    """Error reported by a value's own serialization logic."""

    def __init__(self, message: str) -> None:
        self.message: str = message
        super().__init__(message)


class ExternError(QueryParamsError):
    """Error for failures outside the encoder (sink I/O, UTF-8 validation).

    The original exception is available as ``__cause__`` and ``cause``.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause: BaseException = cause
        super().__init__(str(cause))
