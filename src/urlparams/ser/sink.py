# topmark:header:start
#
#   project      : UrlParams
#   file         : sink.py
#   file_relpath : src/urlparams/ser/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Append-only output sink shared by all encoders of one call."""

from __future__ import annotations

from typing import Protocol

from urlparams.core.errors import ExternError


class BinaryWriter(Protocol):
    """Anything with a ``write(bytes)`` method (files opened in ``"wb"``, `io.BytesIO`, ...)."""

    def write(self, data: bytes, /) -> object:
        """Write ``data``; the return value is ignored."""
        ...


class OutputSink:
    """Wrap a `BinaryWriter`; never read, never rewound.

    Write failures raised by the writer (`OSError`, or `ValueError` for closed
    files) are re-raised as `ExternError`.
    """

    __slots__ = ("_writer",)

    def __init__(self, writer: BinaryWriter) -> None:
        self._writer: BinaryWriter = writer

    def write(self, text: str) -> None:
        """Append ``text`` (UTF-8) to the underlying writer."""
        if not text:
            return
        try:
            self._writer.write(text.encode("utf-8"))
        except (OSError, ValueError) as exc:
            raise ExternError(exc) from exc
